import abc
from typing import Union

import numpy as np
import pandas as pd

from ggslab.geom import Orientation


class Position:
    @abc.abstractmethod
    def adjust(self, frame: pd.DataFrame, orientation: Orientation) -> pd.DataFrame:
        pass


class PositionIdentity(Position):
    def adjust(self, frame, orientation):
        return frame

    def __repr__(self) -> str:
        return "PositionIdentity()"


class PositionDodge(Position):
    """Spreads groups that share a position side by side across the non-value axis."""

    def __init__(self, width: float = 0.9):
        self.width = width

    def adjust(self, frame, orientation):
        axis = "y" if orientation is Orientation.HORIZONTAL else "x"
        group_column = next((name for name in ("group", "color") if name in frame.columns), None)
        if group_column is None or axis not in frame.columns:
            return frame

        groups = list(pd.unique(frame[group_column]))
        n_groups = len(groups)
        if n_groups < 2:
            return frame
        slot = frame[group_column].map({group: idx for idx, group in enumerate(groups)}).to_numpy()
        offsets = (slot - (n_groups - 1) / 2) * self.width / n_groups
        return frame.assign(**{axis: frame[axis].to_numpy(dtype=np.float64) + offsets})

    def __eq__(self, other):
        return isinstance(other, PositionDodge) and other.width == self.width

    def __repr__(self) -> str:
        return f"PositionDodge(width={self.width})"


def position_dodge(width: float = 0.9) -> PositionDodge:
    return PositionDodge(width)


def resolve_position(position: Union[str, Position]) -> Position:
    if isinstance(position, Position):
        return position
    elif position == "identity":
        return PositionIdentity()
    elif position in {"dodge", "dodgejust"}:
        return PositionDodge()
    raise ValueError(f"Unrecognized position {position!r}, expected 'identity', 'dodge', 'dodgejust' or a Position")
