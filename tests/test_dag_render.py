from rich.console import Console

from safecall import attr, prepare
from safecall.utils.dag import build_rich_tree, iter_steps


class Person:
    address = None


chain = prepare(Person).step(attr("address"), output_type=dict).step(len, input_type=dict, output_type=int)


def test_iter_steps_order():
    assert [(i, s.name) for i, s in iter_steps(chain)] == [(0, "attr(address)"), (1, "len")]


def test_tree_render(capsys):
    console = Console(force_terminal=False, width=80)
    console.print(build_rich_tree(chain))
    out = capsys.readouterr().out
    assert "Safe call chain" in out
    assert "(Person)" in out
    assert "0. attr(address)" in out
    assert "dict -> int" in out


def test_empty_chain_render(capsys):
    console = Console(force_terminal=False, width=80)
    console.print(build_rich_tree(prepare()))
    out = capsys.readouterr().out
    assert "identity" in out
