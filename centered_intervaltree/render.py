from typing import List, NamedTuple

from centered_intervaltree.interval_tree import IntervalTree


class _Block(NamedTuple):
    lines: List[str]
    width: int
    middle: int  # column of the node label center


def _left_edge(block):
    # '    __'
    return " " * (block.middle + 1) + "_" * (block.width - block.middle - 1)


def _right_edge(block):
    # '___   '
    return "_" * block.middle + " " * (block.width - block.middle)


def _left_arrow(block):
    # '   /  '
    return " " * block.middle + "/" + " " * (block.width - block.middle - 1)


def _right_arrow(block):
    # '   \  '
    return " " * block.middle + "\\" + " " * (block.width - block.middle - 1)


def _layout(node):
    """
    Parameters
    ----------
    node: IntervalTree

    Returns
    -------
    _Block
    """
    label = str(node)
    gap = " " * len(label)

    if node.left is None and node.right is None:
        return _Block([label], len(label), len(label) // 2)

    if node.right is None:
        child = _layout(node.left)
        lines = [_left_edge(child) + label, _left_arrow(child) + gap]
        lines += [line + gap for line in child.lines]
        return _Block(lines, child.width + len(label), child.width + len(label) // 2)

    if node.left is None:
        child = _layout(node.right)
        lines = [label + _right_edge(child), gap + _right_arrow(child)]
        lines += [gap + line for line in child.lines]
        return _Block(lines, child.width + len(label), len(label) // 2)

    left, right = _layout(node.left), _layout(node.right)
    lines = [
        _left_edge(left) + label + _right_edge(right),
        _left_arrow(left) + gap + _right_arrow(right),
    ]
    height = max(len(left.lines), len(right.lines))
    left_lines = left.lines + [" " * left.width] * (height - len(left.lines))
    right_lines = right.lines + [" " * right.width] * (height - len(right.lines))
    lines += [a + gap + b for a, b in zip(left_lines, right_lines)]
    return _Block(
        lines, left.width + len(label) + right.width, left.width + len(label) // 2
    )


def render_tree(tree):
    return "\n".join(_layout(tree).lines)


def draw_tree(tree):
    r"""
    The function draws the node structure of an interval tree,
    every node is labelled by its domain

    >>> tree = IntervalTree.from_intervals(0, 8, [(0, 2), (5, 7), (3, 5)])
    >>> draw_tree(tree)  # doctest: +NORMALIZE_WHITESPACE
        __[0, 8)___
       /           \
    [0, 4)      [4, 8)

    Parameters
    ----------
    tree: IntervalTree

    Returns
    -------
    None
    """
    print(render_tree(tree))


def depth(tree, func=max):
    """
    Number of node levels built so far.

    Parameters
    ----------
    tree: IntervalTree
    func: Callable
        max gives the longest branch, min the shortest one
        (a missing child ends a branch)

    Returns
    -------
    int
    """

    def count_depth(node):
        if node is None:
            return 0
        return func([count_depth(node.left), count_depth(node.right)]) + 1

    return count_depth(tree)
