from __future__ import annotations
"""Static validator for prepared chains (declared step I/O compatibility)."""
from typing import Any, List, Optional, Tuple

from safecall.core.prepared import PreparedSafeCallChain

__all__ = ["validate_chain_io", "Incompat"]

Incompat = Tuple[str, Any, Any]


def _compatible(produced: Any, expected: Any) -> bool:
    if isinstance(produced, type) and isinstance(expected, type):
        return issubclass(produced, expected)
    return produced == expected


def validate_chain_io(chain: PreparedSafeCallChain) -> List[Incompat]:  # noqa: D401
    """Return list of (step_name, expected, actual) mismatches in *chain*.

    *expected* is the type flowing out of the previous step (or the chain's
    ``input_type``); *actual* is what the step declares it accepts. Steps
    without declarations are skipped and reset the tracked type.
    """
    mismatches: List[Incompat] = []
    prev_out: Optional[Any] = chain.input_type

    for st in chain.steps:
        if prev_out is not None and st.input_type is not None and not _compatible(prev_out, st.input_type):
            mismatches.append((st.name, prev_out, st.input_type))
        prev_out = st.output_type

    return mismatches
