from __future__ import annotations
"""Explicit present/absent container used by every chain.

``None`` is the only absent value callers ever see; internally the chains
carry an :class:`Option` so absence is a state, not a sentinel check.
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["Option", "Some", "NOTHING", "AbsentValueError"]


class AbsentValueError(LookupError):
    """Raised when the value of an absent :class:`Option` is requested."""


class Option(Generic[T]):  # noqa: D101
    __slots__ = ()

    # Convenience constructor ------------------------------------------ #
    @staticmethod
    def of(value: Optional[T]) -> "Option[T]":  # noqa: D401
        """Return ``NOTHING`` for ``None`` and ``Some(value)`` otherwise."""
        if isinstance(value, Option):
            return value
        return NOTHING if value is None else Some(value)

    # ------------------------------------------------------------------ #
    def is_present(self) -> bool:
        raise NotImplementedError

    def is_absent(self) -> bool:
        return not self.is_present()

    def __bool__(self) -> bool:
        return self.is_present()

    def get(self) -> T:
        """Return the value or raise :class:`AbsentValueError`."""
        if not self.is_present():
            raise AbsentValueError("no value present")
        return self.value  # type: ignore[attr-defined]

    def get_or_default(self, default: U) -> T | U:
        return self.value if self.is_present() else default  # type: ignore[attr-defined]

    def or_none(self) -> Optional[T]:
        return self.get_or_default(None)

    def map(self, fn: Callable[[T], Any]) -> "Option[Any]":
        if not self.is_present():
            return NOTHING
        return Option.of(fn(self.value))  # type: ignore[attr-defined]

    def flat_map(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        if not self.is_present():
            return NOTHING
        return fn(self.value)  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self.value  # type: ignore[attr-defined]


@dataclass(frozen=True, slots=True)
class Some(Option[T]):  # noqa: D101
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Some() cannot wrap None, use Option.of() instead")

    def is_present(self) -> bool:
        return True


class _Nothing(Option[Any]):
    __slots__ = ()
    _instance: Optional["_Nothing"] = None

    def __new__(cls) -> "_Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self):
        return (_Nothing, ())

    def is_present(self) -> bool:
        return False


NOTHING: Option[Any] = _Nothing()
