import abc
from typing import Any

import pandas as pd

from ggslab.utils import frozen_dataclass


class Expr:
    """A value bound to an aesthetic: evaluated against a layer's data at draw time."""

    @abc.abstractmethod
    def evaluate(self, data: pd.DataFrame) -> Any:
        pass

    def __neg__(self) -> "Negate":
        return Negate(self)


@frozen_dataclass
class Column(Expr):
    name: str

    def evaluate(self, data: pd.DataFrame) -> pd.Series:
        if self.name not in data.columns:
            raise ValueError(f"Column '{self.name}' not found in data, available columns are {list(data.columns)}")
        return data[self.name]


@frozen_dataclass
class Literal(Expr):
    value: Any

    def evaluate(self, data: pd.DataFrame) -> Any:
        return self.value


@frozen_dataclass
class Negate(Expr):
    operand: Expr

    def evaluate(self, data: pd.DataFrame) -> Any:
        return -self.operand.evaluate(data)


Aesthetic = dict[str, Expr]


def col(name: str) -> Column:
    return Column(name)


def literal(value: Any) -> Literal:
    return Literal(value)


def aes(x: Any = None, y: Any = None, **kwargs: Any) -> Aesthetic:
    return {
        **({"x": x if isinstance(x, Expr) else literal(x)} if x is not None else {}),
        **({"y": y if isinstance(y, Expr) else literal(y)} if y is not None else {}),
        **{k: v if isinstance(v, Expr) else literal(v) for k, v in kwargs.items()}
    }


def label_of(expr: Expr) -> str:
    if isinstance(expr, Column):
        return expr.name
    elif isinstance(expr, Negate):
        return f"-{label_of(expr.operand)}"
    elif isinstance(expr, Literal):
        return str(expr.value)
    return repr(expr)


def is_mapped(expr: Expr) -> bool:
    """True when ``expr`` depends on data rather than being a constant."""
    if isinstance(expr, Negate):
        return is_mapped(expr.operand)
    return not isinstance(expr, Literal)
