from ggslab.aes import aes, col
from ggslab.geom import GeomPointinterval, GeomSlabinterval, Orientation
from ggslab.layer import Layer, layer_geom_slabinterval


def geom_slabinterval(
    mapping=None,
    data=None,
    stat="identity",
    position="identity",
    *,
    orientation=Orientation.AUTO,
    show_legend=None,
    **kwargs,
) -> Layer:
    return layer_geom_slabinterval(
        data=data,
        mapping=mapping,
        stat=stat,
        geom=GeomSlabinterval,
        position=position,
        **kwargs,
        orientation=orientation,
        show_legend=show_legend,
    )


def geom_pointinterval(
    mapping=None,
    data=None,
    stat="identity",
    position="identity",
    *,
    side="both",
    orientation=Orientation.AUTO,
    show_slab=False,
    show_legend={"size": False},
    **kwargs,
) -> Layer:
    """Point + multiple uncertainty interval layer.

    Meant for rows that already carry ``.lower``, ``.upper`` and ``.width``
    columns, one row per interval. Acts as if its default mapping were
    ``aes(size=-col(".width"))``, so wider (less certain) intervals are drawn
    thinner and peek out from behind the narrower ones.

    Orientation is detected at draw time: binding ``xmin``/``xmax`` gives
    horizontal intervals, binding ``ymin``/``ymax`` gives vertical ones.

    Parameters
    ----------
    mapping : dict, optional
        Aesthetic mapping, usually built with :func:`aes`.
    data : pandas.DataFrame, optional
        Data for this layer. Inherits the plot's data when omitted.
    stat : str or Stat
        Defaults to ``"identity"``, this geom does no statistical transformation.
    position : str or Position
        ``"dodge"`` separates overlapping intervals.
    side : str
        Which side(s) of the point the slab would be drawn on.
    orientation : Orientation or str
        Left at ``Orientation.AUTO`` to detect from the mapping.
    show_slab : bool
        Defaults to ``False``.
    show_legend : bool, dict or None
        ``False`` hides all legends, ``True`` shows all, ``None`` shows the mapped
        aesthetics. Defaults to ``{"size": False}``.
    **kwargs
        Passed on to :func:`layer_geom_slabinterval` as layer parameters.

    Returns
    -------
    :class:`Layer`
    """
    return layer_geom_slabinterval(
        data=data,
        mapping=mapping,
        default_mapping=aes(size=-col(".width")),
        stat=stat,
        geom=GeomPointinterval,
        position=position,
        **kwargs,
        side=side,
        orientation=orientation,
        show_slab=show_slab,
        datatype="interval",
        show_legend=show_legend,
    )
