import abc
from typing import Union

import pandas as pd


class Stat:
    @abc.abstractmethod
    def compute(self, frame: pd.DataFrame) -> pd.DataFrame:
        pass


class StatIdentity(Stat):
    def compute(self, frame: pd.DataFrame) -> pd.DataFrame:
        return frame

    def __repr__(self) -> str:
        return "StatIdentity()"


def resolve_stat(stat: Union[str, Stat]) -> Stat:
    if isinstance(stat, Stat):
        return stat
    if stat == "identity":
        return StatIdentity()
    raise ValueError(f"Unrecognized stat {stat!r}")
