import logging

from ggslab.aes import aes, col, literal
from ggslab.geom import Geom, GeomPointinterval, GeomSlabinterval, Orientation, derive_geom
from ggslab.geoms import geom_pointinterval, geom_slabinterval
from ggslab.ggplot import Labels, Plot, ggplot, ggtitle, show, write_image, xlab, ylab
from ggslab.layer import Layer, layer_geom_slabinterval
from ggslab.position import position_dodge
from ggslab.render import to_plotly

logging.getLogger("ggslab").addHandler(logging.NullHandler())


__all__ = [
    "Geom",
    "GeomPointinterval",
    "GeomSlabinterval",
    "Labels",
    "Layer",
    "Orientation",
    "Plot",
    "aes",
    "col",
    "derive_geom",
    "geom_pointinterval",
    "geom_slabinterval",
    "ggplot",
    "ggtitle",
    "layer_geom_slabinterval",
    "literal",
    "position_dodge",
    "show",
    "to_plotly",
    "write_image",
    "xlab",
    "ylab",
]
