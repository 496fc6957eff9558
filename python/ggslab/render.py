import logging
from typing import Any, Optional

import numpy as np
import pandas as pd
import plotly.express as px
from plotly.subplots import make_subplots

from ggslab.aes import Aesthetic, is_mapped, label_of
from ggslab.geom import Orientation
from ggslab.position import resolve_position
from ggslab.stat import resolve_stat
from ggslab.utils import defaults, warning


logger = logging.getLogger(__name__)

# interval_size_range is in millimetres, plotly line widths and marker sizes are in pixels
MM_TO_PX = 96 / 25.4

UPPER_SIDES = {"topright", "top", "right"}
LOWER_SIDES = {"bottomleft", "bottom", "left"}


def detect_orientation(frame: pd.DataFrame) -> Orientation:
    """Resolves ``Orientation.AUTO`` from the aesthetics bound in ``frame``."""
    if "xmin" in frame.columns or "xmax" in frame.columns:
        return Orientation.HORIZONTAL
    if "ymin" in frame.columns or "ymax" in frame.columns:
        return Orientation.VERTICAL
    if "y" in frame.columns and not pd.api.types.is_numeric_dtype(frame["y"]):
        return Orientation.HORIZONTAL
    return Orientation.VERTICAL


def legend_enabled(show_legend, aesthetic: str, mapping: Aesthetic) -> bool:
    if isinstance(show_legend, dict):
        value = show_legend.get(aesthetic)
        if value is not None and not isinstance(value, (bool, np.bool_)):
            raise ValueError(f"show_legend values must be True, False or None, got {value!r} for '{aesthetic}'")
    elif show_legend is None or isinstance(show_legend, (bool, np.bool_)):
        value = show_legend
    else:
        raise ValueError(f"show_legend must be True, False, None or a dict of aesthetic names, got {show_legend!r}")
    mapped = aesthetic in mapping and is_mapped(mapping[aesthetic])
    if value is None:
        return mapped
    return bool(value) and mapped


def color_palette(values: pd.Series) -> dict:
    categories = list(pd.unique(values))
    if not categories:
        return {}
    if pd.api.types.is_numeric_dtype(values):
        low, high = min(categories), max(categories)
        span = (high - low) or 1
        return {
            value: px.colors.sample_colorscale(px.colors.sequential.Viridis, [(value - low) / span])[0]
            for value in categories
        }
    step = 1.0 / len(categories)
    colors = px.colors.sample_colorscale(px.colors.get_colorscale("HSV"), [step * i for i in range(len(categories))])
    return dict(zip(categories, colors))


def interval_linewidths(size: pd.Series, mapped: bool, domain, size_range) -> np.ndarray:
    """Maps the ``size`` aesthetic onto line widths in pixels.

    Mapped sizes are first rescaled from their data range into ``domain``;
    constant sizes are read as already being in ``domain`` units.
    """
    values = size.to_numpy(dtype=np.float64)
    if mapped and values.size:
        low, high = np.nanmin(values), np.nanmax(values)
        if high > low:
            values = domain[0] + (values - low) / (high - low) * (domain[1] - domain[0])
        else:
            values = np.full_like(values, (domain[0] + domain[1]) / 2)
    millimetres = size_range[0] + (values - domain[0]) / (domain[1] - domain[0]) * (size_range[1] - size_range[0])
    return millimetres * MM_TO_PX


def _slab_extent(side: str, orientation: Orientation, height: np.ndarray):
    if side == "topleft":
        side = "top" if orientation is Orientation.HORIZONTAL else "left"
    elif side == "bottomright":
        side = "bottom" if orientation is Orientation.HORIZONTAL else "right"

    if side in UPPER_SIDES:
        return np.zeros_like(height), height
    elif side in LOWER_SIDES:
        return -height, np.zeros_like(height)
    elif side == "both":
        return -height / 2, height / 2
    raise ValueError(f"Unrecognized side {side!r}")


def _layer_frame(layer, mapping: Aesthetic, data: pd.DataFrame, params: dict) -> pd.DataFrame:
    frame = pd.DataFrame(index=data.index)
    for aesthetic, expr in mapping.items():
        frame[aesthetic] = expr.evaluate(data)
    for aesthetic, value in layer.geom.default_aes.items():
        if aesthetic not in frame.columns and value is not None:
            frame[aesthetic] = value
    if "datatype" in params:
        frame["datatype"] = params["datatype"]
    elif "datatype" not in frame.columns:
        frame["datatype"] = layer.geom.default_datatype
    return frame


def _required_aesthetics(frame: pd.DataFrame, params: dict, orientation: Orientation) -> list[str]:
    value_axis, position_axis = ("x", "y") if orientation is Orientation.HORIZONTAL else ("y", "x")
    interval_rows = frame["datatype"] == "interval"
    required = [position_axis]
    if interval_rows.any():
        if params["show_point"]:
            required.append(value_axis)
        if params["show_interval"]:
            required += [f"{value_axis}min", f"{value_axis}max"]
    if params["show_slab"] and (~interval_rows).any():
        required += [value_axis, "thickness"]
    return list(dict.fromkeys(required))


def _draw_slabs(fig, frame, params, orientation):
    value_axis, position_axis = ("x", "y") if orientation is Orientation.HORIZONTAL else ("y", "x")
    slabs = frame[frame["datatype"] != "interval"]
    if slabs.empty:
        return
    thickness = slabs["thickness"].to_numpy(dtype=np.float64)
    if params["normalize"] == "all":
        thickness = thickness / (np.nanmax(thickness) or 1)
    slabs = slabs.assign(_height=thickness * params["scale"])

    group_columns = [position_axis] + [name for name in ("group", "fill") if name in slabs.columns]
    for _, slab in slabs.groupby(group_columns, sort=False):
        slab = slab.sort_values(value_axis)
        low, high = _slab_extent(params["side"], orientation, slab["_height"].to_numpy())
        position = slab[position_axis].to_numpy(dtype=np.float64)
        values = slab[value_axis].to_numpy()
        outline_values = np.concatenate([values, values[::-1]])
        outline_positions = np.concatenate([position + high, (position + low)[::-1]])
        xs, ys = (outline_values, outline_positions) if orientation is Orientation.HORIZONTAL else (outline_positions, outline_values)
        fig.add_scatter(
            x=xs,
            y=ys,
            mode="lines",
            fill="toself",
            fillcolor=slab["_fill"].iloc[0],
            line_width=0,
            opacity=float(slab["alpha"].iloc[0]),
            showlegend=False,
            hoverinfo="skip",
        )


def _draw_intervals(fig, frame, orientation):
    value_axis, position_axis = ("x", "y") if orientation is Orientation.HORIZONTAL else ("y", "x")
    for (linewidth, color, alpha), rows in frame.groupby(["_linewidth", "_color", "alpha"], sort=True):
        values, positions = [], []
        for lower, upper, position in zip(rows[f"{value_axis}min"], rows[f"{value_axis}max"], rows[position_axis]):
            values += [lower, upper, None]
            positions += [position, position, None]
        xs, ys = (values, positions) if orientation is Orientation.HORIZONTAL else (positions, values)
        fig.add_scatter(
            x=xs,
            y=ys,
            mode="lines",
            line_color=color,
            line_width=linewidth,
            opacity=float(alpha),
            showlegend=False,
        )


def _draw_points(fig, frame, params, orientation):
    value_axis, position_axis = ("x", "y") if orientation is Orientation.HORIZONTAL else ("y", "x")
    xs, ys = (frame[value_axis], frame[position_axis]) if orientation is Orientation.HORIZONTAL else (frame[position_axis], frame[value_axis])
    fig.add_scatter(
        x=xs,
        y=ys,
        mode="markers",
        marker_color=frame["_color"],
        marker_size=frame["_linewidth"] * params["fatten_point"],
        marker_symbol=frame["shape"],
        marker_opacity=frame["alpha"],
        marker_line_width=0,
        showlegend=False,
    )


def _add_legends(fig, layer, frame, mapping, params, palette, legend_cache):
    key_aes = layer.geom.default_key_aes
    key_linewidth = interval_linewidths(pd.Series([key_aes.get("size", 1)]), False, params["interval_size_domain"], params["interval_size_range"])[0]
    key_fill = key_aes.get("fill")

    def add_key(aesthetic, value, line_color, line_width):
        if (aesthetic, value) in legend_cache:
            return
        legend_cache.add((aesthetic, value))
        fig.add_scatter(
            x=[None],
            y=[None],
            mode="lines+markers",
            name=str(value),
            legendgroup=aesthetic,
            legendgrouptitle_text=label_of(mapping[aesthetic]),
            line_color=line_color,
            line_width=line_width,
            marker_color=line_color if key_fill is None else key_fill,
            marker_symbol="circle" if key_fill is None else "square",
            marker_size=line_width * params["fatten_point"],
            showlegend=True,
        )

    if legend_enabled(layer.show_legend, "color", mapping):
        for value in pd.unique(frame["color"]):
            add_key("color", value, palette[value], key_linewidth)
    if legend_enabled(layer.show_legend, "size", mapping):
        keys = frame[["size", "_linewidth"]].drop_duplicates("size").sort_values("size")
        for value, linewidth in zip(keys["size"], keys["_linewidth"]):
            add_key("size", value, key_aes.get("color", "black"), linewidth)


def _draw_layer(fig, plot, layer, layer_idx, legend_cache) -> tuple[dict, Optional[tuple[str, dict]]]:
    geom = layer.geom
    data = layer.data if layer.data is not None else plot.data
    if data is None:
        raise ValueError(f"Layer {layer_idx} ({geom.name}) has no data: pass data to ggplot() or to the geom")

    mapping = layer.computed_mapping(plot.aes)
    params = defaults(layer.params, geom.default_params)
    unknown = [name for name in layer.params if name not in geom.default_params and name != "datatype"]
    if unknown:
        warning(f"{geom.name}: Ignoring unknown parameters: {', '.join(unknown)}")

    frame = _layer_frame(layer, mapping, data, params)
    orientation = Orientation.parse(params["orientation"])
    if orientation is Orientation.AUTO:
        orientation = detect_orientation(frame)
    logger.debug("%s: drawing layer %d with %s orientation", geom.name, layer_idx, orientation.value)

    required = _required_aesthetics(frame, params, orientation)
    missing = [aesthetic for aesthetic in required if aesthetic not in frame.columns]
    if missing:
        raise ValueError(f"{geom.name} requires the following missing aesthetics: {', '.join(missing)}")
    complete = frame[required].notna().all(axis=1)
    if not complete.all():
        if not params["na_rm"]:
            warning(f"{geom.name}: Removed {int((~complete).sum())} rows containing missing values")
        frame = frame[complete]

    position_axis = "y" if orientation is Orientation.HORIZONTAL else "x"
    ticks = None
    if not pd.api.types.is_numeric_dtype(frame[position_axis]):
        categories = list(pd.unique(frame[position_axis]))
        frame = frame.assign(**{position_axis: frame[position_axis].map({c: idx for idx, c in enumerate(categories)})})
        ticks = {"tickvals": list(range(len(categories))), "ticktext": [str(c) for c in categories]}

    frame = resolve_stat(layer.stat).compute(frame)
    frame = resolve_position(layer.position).adjust(frame, orientation)

    color_mapped = "color" in mapping and is_mapped(mapping["color"])
    palette = color_palette(frame["color"]) if color_mapped else {}
    colors = frame["color"].map(palette) if color_mapped else frame["color"]
    fill_mapped = "fill" in mapping and is_mapped(mapping["fill"])
    fills = frame["fill"].map(color_palette(frame["fill"])) if fill_mapped else frame.get("fill")

    size = frame["size"] if "size" in frame.columns else pd.Series(np.mean(params["interval_size_domain"]), index=frame.index)
    size_mapped = "size" in mapping and is_mapped(mapping["size"])
    frame = frame.assign(
        _color=colors,
        _fill=fills,
        _linewidth=interval_linewidths(size, size_mapped, params["interval_size_domain"], params["interval_size_range"]),
    ).sort_values("_linewidth", kind="stable")

    if params["show_slab"]:
        _draw_slabs(fig, frame, params, orientation)
    intervals = frame[frame["datatype"] == "interval"]
    if params["show_interval"] and not intervals.empty:
        _draw_intervals(fig, intervals, orientation)
    if params["show_point"] and not intervals.empty:
        _draw_points(fig, intervals, params, orientation)
    _add_legends(fig, layer, frame, mapping, params, palette, legend_cache)

    value_aesthetics = ["x", "xmin"] if orientation is Orientation.HORIZONTAL else ["y", "ymin"]
    value_label = next((label_of(mapping[name]) for name in value_aesthetics if name in mapping), None)
    position_label = label_of(mapping[position_axis]) if position_axis in mapping else None
    axis_titles = {"x": value_label, "y": position_label} if orientation is Orientation.HORIZONTAL else {"x": position_label, "y": value_label}
    return axis_titles, None if ticks is None else (position_axis, ticks)


def to_plotly(plot) -> Any:
    fig = make_subplots(rows=1, cols=1)
    # legend entries already drawn, so layers sharing an aesthetic do not repeat them
    legend_cache = set()
    axis_titles = {"x": None, "y": None}
    for layer_idx, layer in enumerate(plot.layers):
        layer_titles, ticks = _draw_layer(fig, plot, layer, layer_idx, legend_cache)
        axis_titles = {axis: axis_titles[axis] or layer_titles[axis] for axis in axis_titles}
        if ticks is not None:
            axis, tick_args = ticks
            (fig.update_xaxes if axis == "x" else fig.update_yaxes)(**tick_args)

    # Important to update axes after labels, explicit labels take precedence.
    fig.update_xaxes(title_text=plot.labels.xlabel or axis_titles["x"])
    fig.update_yaxes(title_text=plot.labels.ylabel or axis_titles["y"])
    if plot.labels.title is not None:
        fig.update_layout(title_text=plot.labels.title)

    fig = fig.update_xaxes(title_font_size=18, ticks="outside")
    fig = fig.update_yaxes(title_font_size=18, ticks="outside")
    fig.update_layout(
        plot_bgcolor="white",
        xaxis=dict(linecolor="black"),
        yaxis=dict(linecolor="black"),
        font_family='Arial, "Open Sans", verdana, sans-serif',
        title_font_size=26
    )
    return fig
