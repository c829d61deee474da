from __future__ import annotations
"""Result of applying a prepared chain to one input.

Results are consumed, never extended: there is no ``step`` here.
"""
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from safecall.core.option import NOTHING, Option

T = TypeVar("T")
D = TypeVar("D")

__all__ = ["Result"]


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):  # noqa: D101
    option: Option[T] = field(default=NOTHING)

    # ------------------------------------------------------------------ #
    @property
    def is_present(self) -> bool:  # noqa: D401
        """Return True when the chain produced a value."""
        return self.option.is_present()

    # Terminal extraction ---------------------------------------------- #
    def get(self) -> Optional[T]:
        """Return the last value of the chain, or None if any link was absent."""
        return self.option.or_none()

    def get_or_default(self, default: D) -> T | D:
        """Return the last value of the chain, or *default* when absent."""
        return self.option.get_or_default(default)

    def get_optional(self) -> Option[T]:
        """Return the outcome as an :class:`Option`."""
        return self.option
