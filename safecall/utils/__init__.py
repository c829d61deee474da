# This file makes the 'utils' directory a Python package.

"""Safecall utilities."""

from .dag import iter_steps, build_rich_tree
from .validate import validate_chain_io

__all__ = [
    "iter_steps",
    "build_rich_tree",
    "validate_chain_io",
]
