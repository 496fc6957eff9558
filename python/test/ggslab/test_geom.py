from dataclasses import FrozenInstanceError

import pytest

from ggslab.geom import Geom, GeomPointinterval, GeomSlabinterval, Orientation, derive_geom


class TestGeomPointinterval:
    def test_default_aes_selects_interval_datatype(self):
        assert GeomPointinterval.default_aes["datatype"] == "interval"
        assert GeomSlabinterval.default_aes["datatype"] == "slab"

    def test_default_key_aes_has_no_fill(self):
        assert "fill" in GeomPointinterval.default_key_aes
        assert GeomPointinterval.default_key_aes["fill"] is None
        assert GeomSlabinterval.default_key_aes["fill"] == "#a6a6a6"

    def test_default_params_overrides(self):
        params = GeomPointinterval.default_params
        assert params["side"] == "both"
        assert params["orientation"] is Orientation.AUTO
        assert params["show_slab"] is False

    def test_default_datatype(self):
        assert GeomPointinterval.default_datatype == "interval"

    @pytest.mark.parametrize("table", ["default_aes", "default_key_aes", "default_params"])
    def test_keeps_every_base_key(self, table):
        base = getattr(GeomSlabinterval, table)
        derived = getattr(GeomPointinterval, table)
        assert set(base) <= set(derived)

    def test_base_values_fall_through(self):
        for key in ("interval_size_range", "fatten_point", "show_point", "show_interval", "na_rm"):
            assert GeomPointinterval.default_params[key] == GeomSlabinterval.default_params[key]
        assert GeomPointinterval.default_aes["color"] == GeomSlabinterval.default_aes["color"]
        assert GeomPointinterval.default_key_aes["size"] == GeomSlabinterval.default_key_aes["size"]

    def test_base_is_not_modified(self):
        assert GeomSlabinterval.default_params["side"] == "topright"
        assert GeomSlabinterval.default_params["show_slab"] is True


class TestDeriveGeom:
    @pytest.mark.parametrize("table", ["default_aes", "default_key_aes", "default_params"])
    def test_empty_overrides_reproduce_base(self, table):
        derived = derive_geom(GeomSlabinterval, "GeomCopy")
        assert list(getattr(derived, table).items()) == list(getattr(GeomSlabinterval, table).items())
        assert derived.default_datatype == GeomSlabinterval.default_datatype

    def test_override_keeps_base_order_and_appends_new_keys(self):
        base = Geom("GeomBase", default_params={"a": 1, "b": 2})
        derived = derive_geom(base, "GeomDerived", default_params={"c": 3, "a": 10})
        assert list(derived.default_params.items()) == [("a", 10), ("b", 2), ("c", 3)]

    def test_name(self):
        assert derive_geom(GeomSlabinterval, "GeomNamed").name == "GeomNamed"

    def test_accepts_read_only_table_of_another_geom(self):
        derived = derive_geom(GeomSlabinterval, "GeomReadOnly", default_params=GeomPointinterval.default_params)
        assert derived.default_params["side"] == "both"
        assert derived.default_params["show_slab"] is False

    def test_rejects_non_dict_table(self):
        with pytest.raises(TypeError, match="default_aes"):
            derive_geom(GeomSlabinterval, "GeomBad", default_aes=[("datatype", "interval")])

    def test_rejects_non_geom_base(self):
        with pytest.raises(TypeError, match="base"):
            derive_geom({"default_aes": {}}, "GeomBad")

    def test_rejects_non_string_keys(self):
        with pytest.raises(AssertionError, match="keys must be strings"):
            derive_geom(GeomSlabinterval, "GeomBad", default_params={1: "one"})


class TestGeomImmutability:
    def test_attributes_are_frozen(self):
        with pytest.raises(FrozenInstanceError):
            GeomPointinterval.name = "Other"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            GeomPointinterval.default_params["side"] = "top"

    def test_tables_are_copied_on_construction(self):
        table = {"side": "both"}
        geom = Geom("GeomCopied", default_params=table)
        table["side"] = "top"
        assert geom.default_params["side"] == "both"


class TestOrientation:
    @pytest.mark.parametrize("value, expected", [
        (Orientation.VERTICAL, Orientation.VERTICAL),
        ("horizontal", Orientation.HORIZONTAL),
        ("vertical", Orientation.VERTICAL),
        ("y", Orientation.HORIZONTAL),
        ("x", Orientation.VERTICAL),
        ("auto", Orientation.AUTO),
        (None, Orientation.AUTO),
    ])
    def test_parse(self, value, expected):
        assert Orientation.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unrecognized orientation"):
            Orientation.parse("diagonal")
