from __future__ import annotations

"""Prepared safe call chains.

A prepared chain is built once and applied to many inputs::

    city_of = prepare(Person).step(get_address).step(get_city)
    cities = list(map(city_of.as_function("Unknown"), people))

Steps are stored as an ordered tuple and evaluated in a loop that stops at
the first absent intermediate value. Building a longer chain never mutates
the shorter one, so prefixes can be shared between threads and callers.
"""

from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from safecall.core.option import NOTHING, Option
from safecall.core.result import Result
from safecall.core.step import Step
from safecall.utils.logging import log

T = TypeVar("T")
R = TypeVar("R")
V = TypeVar("V")

__all__ = ["PreparedSafeCallChain", "prepare"]

_UNSET: Any = object()


class PreparedSafeCallChain(Generic[T, R]):
    """Reusable pipeline of steps from an input of type ``T`` to ``R``."""

    __slots__ = ("_steps", "_input_type")

    def __init__(self, steps: Tuple[Step, ...] = (), *, input_type: Optional[type] = None) -> None:
        self._steps: Tuple[Step, ...] = tuple(steps)
        self._input_type = input_type

    @property
    def input_type(self) -> Optional[type]:
        return self._input_type

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        names = " >> ".join(s.name for s in self._steps) or "identity"
        return f"PreparedSafeCallChain({names})"

    # ------------------------------------------------------------------ #

    def step(
        self,
        fn: Callable[[R], Optional[V] | Option[V]],
        *,
        name: str | None = None,
        input_type: Optional[Any] = None,
        output_type: Optional[Any] = None,
    ) -> "PreparedSafeCallChain[T, V]":
        """Return a new chain with *fn* appended to the steps.

        The step tuple is copied, so each call costs O(len(self)) and building
        an n-step chain costs O(n**2). Chains are built once and applied many
        times; applying one costs O(len(self)).
        """
        new_step = Step(fn=fn, name=name or "", input_type=input_type, output_type=output_type)
        return PreparedSafeCallChain(self._steps + (new_step,), input_type=self._input_type)

    call = step

    def __rshift__(self, fn: Callable[[R], Any]) -> "PreparedSafeCallChain[T, Any]":
        return self.step(fn)

    # ------------------------------------------------------------------ #

    def _evaluate(self, value: Optional[T]) -> Option[R]:
        current: Option[Any] = Option.of(value)
        if current.is_absent():
            log.debug("safecall: absent input, %d step(s) skipped", len(self._steps))
            return NOTHING
        for idx, st in enumerate(self._steps):
            current = st.run(current.get())
            if current.is_absent():
                log.debug(
                    "safecall: step %d (%s) produced no value, %d step(s) skipped",
                    idx,
                    st.name,
                    len(self._steps) - idx - 1,
                )
                return NOTHING
        return current

    def on(self, value: Optional[T]) -> Result[R]:
        """Apply the chain to *value* and return a :class:`Result`.

        A ``None`` input yields an absent result without calling any step.
        Exceptions raised by a step propagate unchanged.
        """
        return Result(self._evaluate(value))

    apply = on

    def __call__(self, value: Optional[T]) -> Optional[R]:
        return self._evaluate(value).or_none()

    # Export as reusable functions -------------------------------------- #

    def as_function(self, default: Any = _UNSET) -> Callable[[Optional[T]], Any]:
        """Return ``value -> result`` for use with ``map`` and friends.

        Without *default* the function returns None for absent results;
        with it, absent results are replaced by *default*.
        """
        if default is _UNSET:
            def _fn(value: Optional[T]) -> Optional[R]:
                return self._evaluate(value).or_none()
        else:
            def _fn(value: Optional[T]) -> Any:
                return self._evaluate(value).get_or_default(default)
        return _fn

    def as_function_optional(self) -> Callable[[Optional[T]], Option[R]]:
        """Return ``value -> Option`` for use with ``map`` and friends."""
        return self._evaluate


# Convenience helpers ------------------------------------------------------- #

def prepare(input_type: Optional[type[T]] = None) -> PreparedSafeCallChain[T, T]:  # noqa: D401
    """Return an empty :class:`PreparedSafeCallChain` (the identity).

    *input_type* only documents the expected input; it is used by the
    validator and the DAG renderer, never at run time.
    """
    return PreparedSafeCallChain(input_type=input_type)
