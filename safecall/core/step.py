from __future__ import annotations

"""Safecall Step implementation.

A *Step* is one single-argument transformation inside a prepared chain.
It optionally declares the shape it expects and returns; those declarations
are only used by :mod:`safecall.utils.validate` and the DAG renderer.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from safecall.core.option import Option

__all__ = ["Step", "step_name"]


def step_name(fn: Callable[..., Any]) -> str:  # noqa: D401
    """Return a readable identifier for *fn*."""
    return getattr(fn, "__name__", None) or repr(fn)


@dataclass(frozen=True, slots=True)
class Step:  # noqa: D101
    fn: Callable[[Any], Any]
    name: str = ""
    input_type: Optional[Any] = None
    output_type: Optional[Any] = None

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise TypeError(f"step expects a callable, got {type(self.fn).__name__}")
        if not self.name:
            object.__setattr__(self, "name", step_name(self.fn))

    # ------------------------------------------------------------------ #
    def run(self, value: Any) -> Option[Any]:
        """Invoke *fn* on a present *value* and normalise the outcome."""
        return Option.of(self.fn(value))
