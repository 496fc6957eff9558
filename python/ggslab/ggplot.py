from dataclasses import field
from typing import Any, Optional

import pandas as pd

from ggslab.aes import Aesthetic, aes
from ggslab.layer import Layer
from ggslab.render import to_plotly
from ggslab.utils import add_fields, frozen_dataclass


@frozen_dataclass
class Labels:
    title: Optional[str] = None
    xlabel: Optional[str] = None
    ylabel: Optional[str] = None


def add_to_plot(plot, other):
    if isinstance(other, (list, tuple)):
        for item in other:
            plot = add_to_plot(plot, item)
        return plot

    fields = None
    for typ, get_kwargs in [
        (dict, lambda plot, other: {"aes": {**plot.aes, **aes(**other)}}),
        (Layer, lambda plot, other: {"layers": (*plot.layers, other)}),
        (Labels, lambda plot, other: {"labels": add_fields(plot.labels, other)}),
    ]:
        if isinstance(other, typ):
            fields = get_kwargs(plot, other)
            break
    if fields is None:
        raise ValueError(f"Cannot add object of type '{type(other).__name__}' to a plot")
    return add_fields(plot, fields)


@frozen_dataclass
class Plot:
    data: Optional[pd.DataFrame]
    aes: Aesthetic = field(default_factory=dict)
    layers: tuple[Layer, ...] = ()
    labels: Labels = Labels()

    __add__ = add_to_plot

    def _repr_html_(self) -> str:
        return to_plotly(self)._repr_html_()


def ggplot(data=None, mapping: Optional[dict[str, Any]] = None) -> Plot:
    return Plot(data, aes(**(mapping or {})))


def ggtitle(label):
    return Labels(title=label)


def xlab(label):
    return Labels(xlabel=label)


def ylab(label):
    return Labels(ylabel=label)


def show(plot):
    to_plotly(plot).show()


def write_image(plot, path):
    to_plotly(plot).write_image(path)
