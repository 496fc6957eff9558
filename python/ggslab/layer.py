from collections.abc import Mapping as MappingABC
from typing import Any, Optional, Union

import pandas as pd

from ggslab.aes import Aesthetic
from ggslab.geom import Geom, GeomSlabinterval
from ggslab.position import Position
from ggslab.stat import Stat
from ggslab.utils import defaults, frozen_dataclass


ShowLegend = Union[None, bool, dict[str, Optional[bool]]]


@frozen_dataclass
class Layer:
    data: Optional[pd.DataFrame]
    mapping: Aesthetic
    default_mapping: Aesthetic
    geom: Geom
    stat: Union[str, Stat]
    position: Union[str, Position]
    params: dict[str, Any]
    show_legend: ShowLegend = None
    inherit_aes: bool = True

    def computed_mapping(self, plot_mapping: Optional[Aesthetic] = None) -> Aesthetic:
        """The mapping used at draw time.

        The default mapping only gives way to the layer's own mapping; the plot's
        mapping sits underneath both.
        """
        layer_mapping = defaults(self.mapping, self.default_mapping)
        return {**(plot_mapping or {}), **layer_mapping} if self.inherit_aes else layer_mapping


def layer_geom_slabinterval(
    data=None,
    mapping=None,
    default_mapping=None,
    stat="identity",
    geom=GeomSlabinterval,
    position="identity",
    *,
    show_legend=None,
    inherit_aes=True,
    **params,
) -> Layer:
    return Layer(
        data=data,
        mapping=dict(mapping or {}),
        default_mapping=dict(default_mapping or {}),
        geom=geom,
        stat=stat,
        position=position,
        params=params,
        show_legend=dict(show_legend) if isinstance(show_legend, MappingABC) else show_legend,
        inherit_aes=inherit_aes,
    )
