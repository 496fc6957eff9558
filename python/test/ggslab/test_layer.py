from ggslab.aes import aes, col
from ggslab.geom import GeomSlabinterval
from ggslab.layer import layer_geom_slabinterval


class TestLayerGeomSlabinterval:
    def test_defaults(self):
        layer = layer_geom_slabinterval()
        assert layer.geom is GeomSlabinterval
        assert layer.mapping == {}
        assert layer.default_mapping == {}
        assert layer.params == {}
        assert layer.show_legend is None
        assert layer.inherit_aes is True

    def test_collects_params(self):
        layer = layer_geom_slabinterval(side="both", datatype="interval", show_legend=False)
        assert layer.params == {"side": "both", "datatype": "interval"}
        assert layer.show_legend is False


class TestComputedMapping:
    def test_layer_mapping_over_default(self):
        layer = layer_geom_slabinterval(mapping=aes(size=col("s")), default_mapping=aes(size=-col(".width"), color="red"))
        mapping = layer.computed_mapping()
        assert mapping["size"] == col("s")
        assert mapping["color"] == aes(color="red")["color"]

    def test_default_over_plot_mapping(self):
        layer = layer_geom_slabinterval(default_mapping=aes(size=-col(".width")))
        mapping = layer.computed_mapping(aes(size=col("s"), y=col("i")))
        assert mapping["size"] == -col(".width")
        assert mapping["y"] == col("i")

    def test_layer_mapping_over_plot_mapping(self):
        layer = layer_geom_slabinterval(mapping=aes(x=col("layer_x")))
        assert layer.computed_mapping(aes(x=col("plot_x")))["x"] == col("layer_x")

    def test_inherit_aes_false_ignores_plot_mapping(self):
        layer = layer_geom_slabinterval(mapping=aes(x=col("x")), inherit_aes=False)
        assert layer.computed_mapping(aes(y=col("y"))) == {"x": col("x")}
