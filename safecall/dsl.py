from __future__ import annotations
"""Small helpers for building chains without lambdas.

Example::

    city_of = pipe(attr("address"), attr("city"))
    city_of = prepare(Person) >> attr("address") >> attr("city")
"""
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Hashable

from safecall.core.prepared import PreparedSafeCallChain, prepare

__all__ = ["pipe", "attr", "item"]


def pipe(*fns: Callable[[Any], Any], input_type: type | None = None) -> PreparedSafeCallChain[Any, Any]:  # noqa: D401
    """Return a prepared chain running *fns* in order."""
    chain = prepare(input_type)
    for fn in fns:
        chain = chain.step(fn)
    return chain


def attr(name: str) -> Callable[[Any], Any]:  # noqa: D401
    """Return a step reading attribute *name*.

    Only a missing attribute yields None; an ``AttributeError`` raised inside
    a property body propagates like any other step error.
    """

    def _get(obj: Any) -> Any:
        if not (hasattr(type(obj), name) or name in getattr(obj, "__dict__", {})):
            return None
        return getattr(obj, name)

    _get.__name__ = f"attr({name})"
    return _get


def item(key: Hashable) -> Callable[[Any], Any]:  # noqa: D401
    """Return a step reading ``obj[key]``.

    A key missing from a ``Mapping`` or an integer index outside a
    ``Sequence`` yields None. Any other lookup is a plain ``obj[key]`` and
    its errors propagate.
    """

    def _get(obj: Any) -> Any:
        if isinstance(obj, Mapping):
            return obj[key] if key in obj else None
        if isinstance(obj, Sequence) and isinstance(key, int) and not isinstance(key, bool):
            return obj[key] if -len(obj) <= key < len(obj) else None
        return obj[key]

    _get.__name__ = f"item({key!r})"
    return _get
