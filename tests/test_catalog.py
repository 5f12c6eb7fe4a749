"""预设目录测试"""

from qrlib.core.login.catalog import PresetCatalog, project_presets


def _catalog() -> PresetCatalog:
    return PresetCatalog.from_catalogs(
        {
            "vip": {"name": "QQ会员", "description": "会员", "appid": "8000201", "daid": "18"},
            "qzone": {"name": "QQ空间", "description": "空间"},
        },
        {
            "farm": {"name": "QQ农场", "description": "农场", "appid": "1112386029"},
            "miniapp": {"name": "QQ小程序", "description": "通用", "appid": "2000000001"},
        },
    )


class TestProjectPresets:
    """测试预设列表投影"""

    def test_order_qr_first(self):
        keys = [item.key for item in project_presets(_catalog(), ["farm"])]
        assert keys == ["vip", "qzone", "farm", "miniapp"]

    def test_types(self):
        types = {item.key: item.type for item in project_presets(_catalog(), ["farm"])}
        assert types == {"vip": "qr", "qzone": "qr", "farm": "mp", "miniapp": "mp"}

    def test_redaction(self):
        projected = {
            item.key: item.model_dump(exclude_none=True)
            for item in project_presets(_catalog(), ["farm"])
        }
        assert "defaultAppId" not in projected["farm"]
        assert projected["miniapp"]["defaultAppId"] == "2000000001"
        # QR 预设即使配置了 appid 也不展示
        assert "defaultAppId" not in projected["vip"]
        assert "defaultAppId" not in projected["qzone"]

    def test_without_redaction(self):
        projected = {item.key: item for item in project_presets(_catalog())}
        assert projected["farm"].defaultAppId == "1112386029"

    def test_catalog_lookup(self):
        catalog = _catalog()
        assert len(catalog) == 4
        assert catalog.get_mini_program("farm").appid == "1112386029"
        assert catalog.get_mini_program("vip") is None
        assert catalog.get_mini_program(None) is None

    def test_same_key_in_both_catalogs(self):
        catalog = PresetCatalog.from_catalogs(
            {"shared": {"name": "扫码", "description": ""}},
            {"shared": {"name": "小程序", "description": "", "appid": "1"}},
        )
        projected = [(item.key, item.type) for item in project_presets(catalog)]
        assert projected == [("shared", "qr"), ("shared", "mp")]
        assert catalog.get_mini_program("shared").appid == "1"
