import pytest

from centered_intervaltree.interval_tree import IntervalTree
from centered_intervaltree.render import depth, draw_tree, render_tree


@pytest.fixture
def balanced_tree():
    """
    Example of tree:
        __[0, 8)___
       /           \
    [0, 4)      [4, 8)
    """
    return IntervalTree.from_intervals(0, 8, [(0, 2), (5, 7), (3, 5)])


@pytest.fixture
def left_chain_tree():
    """
    Example of tree:
              __[0, 8)
             /
        __[0, 4)
       /
    [0, 2)
    """
    return IntervalTree.from_intervals(0, 8, [(0, 2), (1, 3)])


@pytest.fixture
def right_chain_tree():
    """
    Example of tree:
    [0, 8)___
             \
          [4, 8)
    """
    return IntervalTree.from_intervals(0, 8, [(6, 8), (5, 7)])


def test_draw_single_node(capsys):
    draw_tree(IntervalTree(0, 8))
    assert capsys.readouterr().out == "[0, 8)\n"


def test_draw_tree(capsys, balanced_tree):
    exp_result = (
        "    __[0, 8)___   \n"
        "   /           \\  \n"
        "[0, 4)      [4, 8)\n"
    )
    draw_tree(balanced_tree)
    assert capsys.readouterr().out == exp_result


def test_draw_tree_with_only_left_children(capsys, left_chain_tree):
    exp_result = (
        "          __[0, 8)\n"
        "         /        \n"
        "    __[0, 4)      \n"
        "   /              \n"
        "[0, 2)            \n"
    )
    draw_tree(left_chain_tree)
    assert capsys.readouterr().out == exp_result


def test_render_tree_with_only_right_child(right_chain_tree):
    exp_result = "[0, 8)___   \n" "         \\  \n" "      [4, 8)"
    assert render_tree(right_chain_tree) == exp_result


@pytest.mark.parametrize(
    "tree_fixture, func, exp_result",
    (
        pytest.param("balanced_tree", max, 2, id="max_of_balanced"),
        pytest.param("balanced_tree", min, 2, id="min_of_balanced"),
        pytest.param("left_chain_tree", max, 3, id="max_of_chain"),
        pytest.param("left_chain_tree", min, 1, id="min_of_chain"),
    ),
)
def test_depth(request, tree_fixture, func, exp_result):
    assert depth(request.getfixturevalue(tree_fixture), func) == exp_result


def test_depth_of_unbuilt_tree():
    tree = IntervalTree(0, 100)
    tree.add_interval(10, 20)
    assert depth(tree) == 1
    assert depth(tree, min) == 1
