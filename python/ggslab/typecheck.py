from functools import wraps
from inspect import getfullargspec
from typing import Union, get_args, get_origin


def _as_classes(annotation):
    origin = get_origin(annotation)
    if origin is None:
        return (annotation,)
    if origin is Union:
        return tuple(cls for arg in get_args(annotation) for cls in _as_classes(arg))
    return (origin,)


def typecheck(func):
    """Checks every annotated argument of ``func`` with ``isinstance`` before calling it.

    Unannotated arguments, and arguments left at their defaults, are not checked.
    """
    arg_names = getfullargspec(func).args

    @wraps(func)
    def wrapper(*args, **kwargs):
        for kw, arg in ({k: v for k, v in zip(arg_names, args)} | kwargs).items():
            if kw not in func.__annotations__:
                continue
            arg_types = _as_classes(func.__annotations__[kw])
            if not isinstance(arg, arg_types):
                expected = " or ".join(t.__name__ for t in arg_types)
                raise TypeError(f"{func.__name__}: Argument '{kw}' is of type '{expected}', but got value '{arg}' of type '{type(arg).__name__}'.")
        return func(*args, **kwargs)
    return wrapper
