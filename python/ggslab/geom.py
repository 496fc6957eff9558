from dataclasses import field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ggslab.typecheck import typecheck
from ggslab.utils import defaults, frozen_dataclass


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: Any) -> "Orientation":
        if isinstance(value, Orientation):
            return value
        if value is None:
            return cls.AUTO
        # ggplot2 names orientation after the axis the intervals run along
        aliases = {"y": cls.HORIZONTAL, "x": cls.VERTICAL}
        if value in aliases:
            return aliases[value]
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unrecognized orientation {value!r}, expected one of 'horizontal', 'vertical', 'x', 'y' or None") from None


def _frozen_table(table: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(table))


@frozen_dataclass
class Geom:
    """Default configuration of one geometry variant.

    A ``Geom`` draws nothing itself. The renderer reads its tables: ``default_aes``
    fills aesthetics the layer leaves unmapped, ``default_key_aes`` styles the
    legend glyph, and ``default_params`` supplies parameters the layer does not set.
    """
    name: str
    default_aes: Mapping[str, Any] = field(default_factory=dict)
    default_key_aes: Mapping[str, Any] = field(default_factory=dict)
    default_params: Mapping[str, Any] = field(default_factory=dict)
    default_datatype: str = "slab"

    def __post_init__(self):
        for table_name in ("default_aes", "default_key_aes", "default_params"):
            table = getattr(self, table_name)
            assert all(isinstance(key, str) for key in table), f"{self.name}: {table_name} keys must be strings, got {list(table)}"
            object.__setattr__(self, table_name, _frozen_table(table))

    def __repr__(self) -> str:
        return f"<Geom {self.name}>"


@typecheck
def derive_geom(
    base: Geom,
    name: str,
    default_aes: Optional[Mapping] = None,
    default_key_aes: Optional[Mapping] = None,
    default_params: Optional[Mapping] = None,
    default_datatype: Optional[str] = None,
) -> Geom:
    return Geom(
        name,
        default_aes=defaults(default_aes or {}, base.default_aes),
        default_key_aes=defaults(default_key_aes or {}, base.default_key_aes),
        default_params=defaults(default_params or {}, base.default_params),
        default_datatype=base.default_datatype if default_datatype is None else default_datatype,
    )


GeomSlabinterval = Geom(
    "GeomSlabinterval",
    default_aes={
        "shape": "circle",
        "color": "black",
        "fill": "#a6a6a6",
        "alpha": 1.0,
        "size": None,
        "linetype": "solid",
        "thickness": None,
        "datatype": "slab",
    },
    default_key_aes={
        "color": "black",
        "fill": "#a6a6a6",
        "alpha": 1.0,
        "size": 1,
    },
    default_params={
        "side": "topright",
        "scale": 0.9,
        "orientation": Orientation.AUTO,
        "normalize": "all",
        "interval_size_domain": (1, 6),
        "interval_size_range": (0.6, 1.4),
        "fatten_point": 1.8,
        "show_slab": True,
        "show_point": True,
        "show_interval": True,
        "na_rm": False,
    },
    default_datatype="slab",
)


GeomPointinterval = derive_geom(
    GeomSlabinterval,
    "GeomPointinterval",
    default_aes={
        "datatype": "interval",
    },
    default_key_aes={
        "fill": None,
    },
    default_params={
        "side": "both",
        "orientation": Orientation.AUTO,
        "show_slab": False,
    },
    default_datatype="interval",
)
