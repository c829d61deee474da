"""Safecall: tiny, type-friendly None-safe call chains.

Main components:
* `start_single` / `of`: chain calls on a single object
* `prepare`: build a reusable chain applied to many objects
* `Result`: outcome of applying a prepared chain
* `Option`: explicit present/absent wrapper returned by `get_optional`
"""

# Version info
__version__ = "0.1.0"

# Core components
from safecall.core.option import Option, Some, NOTHING, AbsentValueError
from safecall.core.step import Step
from safecall.core.result import Result
from safecall.core.chain import SafeCallChain, start_single, of
from safecall.core.prepared import PreparedSafeCallChain, prepare

# Utility re-exports
from safecall.dsl import pipe, attr, item
from safecall.utils.validate import validate_chain_io

# Export all important symbols
__all__ = [
    # Core classes
    "SafeCallChain",
    "PreparedSafeCallChain",
    "Result",
    "Step",
    "Option",
    "Some",
    "NOTHING",
    "AbsentValueError",

    # Functions
    "start_single",
    "of",
    "prepare",
    "pipe",
    "attr",
    "item",
    "validate_chain_io",
]
