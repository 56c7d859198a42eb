"""Property-based checks of the tree invariants."""

from __future__ import annotations

from hypothesis import given, strategies as st

from ordered_tree.binary_search_tree import OrderedTree

values = st.lists(st.integers(min_value=-1_000, max_value=1_000), max_size=60)


def _is_strictly_ascending(items: list) -> bool:
    return all(left < right for left, right in zip(items, items[1:]))


@given(values)
def test_build_yields_sorted_distinct_values(xs: list) -> None:
    tree = OrderedTree.build(xs)
    assert list(tree) == sorted(set(xs))
    assert tree.is_balanced()


@given(values, values)
def test_inserts_keep_search_order(initial: list, inserted: list) -> None:
    tree = OrderedTree.build(initial)
    for x in inserted:
        tree.insert(x)
    ordered = list(tree)
    assert _is_strictly_ascending(ordered)
    assert set(ordered) == set(initial) | set(inserted)


@given(values, st.integers(min_value=-1_000, max_value=1_000))
def test_insert_is_idempotent(xs: list, x: int) -> None:
    tree = OrderedTree.build(xs)
    tree.insert(x)
    before = list(tree.iter_pre_order())
    tree.insert(x)
    assert list(tree.iter_pre_order()) == before


@given(values, st.data())
def test_delete_removes_only_the_target(xs: list, data: st.DataObject) -> None:
    tree = OrderedTree.build(xs)
    remaining = set(xs)
    for _ in range(len(remaining)):
        target = data.draw(st.sampled_from(sorted(remaining)))
        tree.delete_item(target)
        remaining.discard(target)
        assert not tree.includes(target)
        assert tree.find(target) is None
        assert list(tree) == sorted(remaining)


@given(st.lists(st.integers(), max_size=40))
def test_rebalance_always_balances(xs: list) -> None:
    tree = OrderedTree()
    for x in sorted(xs):
        tree.insert(x)
    tree.rebalance()
    assert tree.is_balanced()
    assert list(tree) == sorted(set(xs))


@given(values)
def test_child_depth_is_parent_depth_plus_one(xs: list) -> None:
    tree = OrderedTree()
    for x in xs:
        tree.insert(x)
    if tree.root is not None:
        assert tree.depth(tree.root.value) == 0

    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert tree.depth(child.value) == tree.depth(node.value) + 1
                assert tree.height(node.value) >= tree.height(child.value) + 1
                stack.append(child)


@given(values)
def test_every_traversal_visits_each_value_once(xs: list) -> None:
    tree = OrderedTree()
    for x in xs:
        tree.insert(x)
    expected = sorted(set(xs))
    for traverse in (tree.level_order, tree.in_order, tree.pre_order, tree.post_order):
        seen: list = []
        traverse(seen.append)
        assert sorted(seen) == expected
