from __future__ import annotations

"""Single-shot safe call chain.

Example::

    city = start_single(person).step(lambda p: p.address).step(lambda a: a.city).get()

Each ``step`` returns a new chain; once a link is ``None`` the remaining
functions are never invoked.
"""

from logging import DEBUG
from typing import Any, Callable, Generic, Optional, TypeVar

from safecall.core.option import NOTHING, Option
from safecall.core.step import step_name
from safecall.utils.logging import log

T = TypeVar("T")
R = TypeVar("R")
D = TypeVar("D")

__all__ = ["SafeCallChain", "start_single", "of"]


class SafeCallChain(Generic[T]):
    """A chain of safe calls bound to one value."""

    __slots__ = ("_option",)

    def __init__(self, value: Optional[T] | Option[T] = None) -> None:
        self._option: Option[T] = Option.of(value)

    def __repr__(self) -> str:
        return f"SafeCallChain({self._option!r})"

    # ------------------------------------------------------------------ #

    def step(self, fn: Callable[[T], Optional[R] | Option[R]]) -> "SafeCallChain[R]":
        """Apply *fn* to the held value and return a new chain.

        When the held value is absent *fn* is not called and the new chain
        stays absent. Exceptions raised by *fn* propagate to the caller.
        """
        if not callable(fn):
            raise TypeError(f"step expects a callable, got {type(fn).__name__}")
        if self._option.is_absent():
            if log.isEnabledFor(DEBUG):
                log.debug("safecall: skipping %s on absent value", step_name(fn))
            return SafeCallChain(NOTHING)
        return SafeCallChain(fn(self._option.get()))

    call = step

    def __rshift__(self, fn: Callable[[T], Any]) -> "SafeCallChain[Any]":
        return self.step(fn)

    # Terminal extraction ---------------------------------------------- #

    def get(self) -> Optional[T]:
        """Return the last value of the chain, or None if any link was absent."""
        return self._option.or_none()

    def get_or_default(self, default: D) -> T | D:
        """Return the last value of the chain, or *default* when absent."""
        return self._option.get_or_default(default)

    def get_optional(self) -> Option[T]:
        """Return the last value of the chain as an :class:`Option`."""
        return self._option


# Convenience helpers ------------------------------------------------------- #

def start_single(value: Optional[T]) -> SafeCallChain[T]:  # noqa: D401
    """Return a :class:`SafeCallChain` wrapping *value* (which may be None)."""
    return SafeCallChain(value)


# Short alias used throughout the docs
of = start_single
