from __future__ import annotations

"""Chain rendering helpers (no side-effects).

iter_steps(chain) yields (index, step) in evaluation order.
build_rich_tree(chain) returns a Rich *Tree* ready for printing.
"""
from typing import Any, Iterator, Tuple

from safecall.core.prepared import PreparedSafeCallChain
from safecall.core.step import Step

__all__ = [
    "iter_steps",
    "build_rich_tree",
]


def _type_label(tp: Any) -> str:
    if tp is None:
        return "?"
    return getattr(tp, "__name__", None) or str(tp)


def iter_steps(chain: PreparedSafeCallChain) -> Iterator[Tuple[int, Step]]:  # noqa: D401
    """Yield *(index, step)* for every step in *chain*."""
    yield from enumerate(chain.steps)


def build_rich_tree(chain: PreparedSafeCallChain):  # noqa: D401 – return type is Tree but avoid import
    """Return a *rich.tree.Tree* visualisation of *chain*."""
    from rich.markup import escape
    from rich.tree import Tree  # local import keeps this module lightweight

    tree = Tree(f"[bold]Safe call chain[/] [dim]({escape(_type_label(chain.input_type))})[/]")
    if not chain.steps:
        tree.add("[dim]identity[/]")
        return tree

    for idx, st in iter_steps(chain):
        io = f"{_type_label(st.input_type)} -> {_type_label(st.output_type)}"
        tree.add(f"[cyan]{idx}. {escape(st.name)}[/] [dim]{escape(io)}[/]")
    return tree
