import logging
from dataclasses import asdict, dataclass
from typing import Any, Mapping


frozen_dataclass = dataclass(frozen=True)

logger = logging.getLogger("ggslab")


def warning(msg: str) -> None:
    logger.warning(msg)


def as_nonempty_dict(data: Any) -> dict:
    return asdict(data, dict_factory=lambda x: {k: v for (k, v) in x if v is not None})


def add_fields(base, fields):
    return base.__class__(**{**base.__dict__, **(fields if isinstance(fields, dict) else as_nonempty_dict(fields))})


def defaults(override: Mapping, base: Mapping) -> dict:
    """Layers ``override`` on top of ``base``.

    Keys already in ``base`` keep their position and take the overriding value;
    keys only in ``override`` are appended. Nothing is ever removed.
    """
    return {**base, **override}
