"""Unit tests for tree reconstruction."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from tourmanager import OrphanedNodeError, reconstruct_tree, walk_tree
from tourmanager.helpers import nest
from tourmanager.schemas.category import ListCategoriesQuery


@dataclass
class Node:
    id: str
    parent_id: Optional[str] = None
    children: List["Node"] = field(default_factory=list)


def test_reconstruct_chain():
    """Test a parent-ordered chain nests into a single branch."""
    roots = reconstruct_tree([Node("A"), Node("B", "A"), Node("C", "B")])

    assert [n.id for n in roots] == ["A"]
    assert [n.id for n in roots[0].children] == ["B"]
    assert [n.id for n in roots[0].children[0].children] == ["C"]
    assert roots[0].children[0].children[0].children == []


def test_reconstruct_keeps_input_order():
    """Test roots and siblings keep their order from the input."""
    flat = [Node("r2"), Node("r1"), Node("b", "r1"), Node("a", "r1")]

    roots = reconstruct_tree(flat)

    assert [n.id for n in roots] == ["r2", "r1"]
    assert [n.id for n in roots[1].children] == ["b", "a"]


def test_reconstruct_resets_stale_children():
    """Test children from an earlier reconstruction are discarded."""
    parent = Node("A", children=[Node("stale")])

    roots = reconstruct_tree([parent, Node("B", "A")])

    assert [n.id for n in roots[0].children] == ["B"]


def test_reconstruct_empty():
    assert reconstruct_tree([]) == []


def test_dangling_parent_is_promoted_to_root(caplog):
    """Test a node whose parent is missing becomes a root and a warning is logged."""
    flat = [Node("A"), Node("X", "missing")]

    with caplog.at_level(logging.WARNING, logger="tourmanager.helpers"):
        roots = reconstruct_tree(flat)

    assert [n.id for n in roots] == ["A", "X"]
    assert roots[1].parent_id == "missing"
    assert roots[0].children == []

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].node_id == "X"
    assert warnings[0].parent_id == "missing"


def test_dangling_parent_keeps_descendants():
    """Test the subtree below a promoted node stays attached to it."""
    roots = reconstruct_tree([Node("A"), Node("X", "missing"), Node("Y", "X")])

    assert [n.id for n in roots] == ["A", "X"]
    assert [n.id for n in roots[1].children] == ["Y"]


def test_dangling_parent_strict_raises():
    """Test strict reconstruction rejects a node whose parent is missing."""
    with pytest.raises(OrphanedNodeError) as exc_info:
        reconstruct_tree([Node("A"), Node("X", "missing")], strict=True)

    assert exc_info.value.node_id == "X"
    assert exc_info.value.parent_id == "missing"
    assert "missing" in str(exc_info.value)


def test_walk_tree_depth_first():
    """Test walking yields every node with its depth, parents first."""
    roots = reconstruct_tree([Node("A"), Node("B", "A"), Node("C", "B"), Node("D", "A"), Node("E")])

    walked = [(node.id, depth) for node, depth in walk_tree(roots)]

    assert walked == [("A", 0), ("B", 1), ("C", 2), ("D", 1), ("E", 0)]


def test_nest_trims_inline_children():
    """Test a page that already carries children is cut down to its top-level nodes."""
    child = Node("B", "A")
    nodes = [Node("A", children=[child]), child]

    roots = nest(nodes)

    assert [n.id for n in roots] == ["A"]
    assert roots[0].children == [child]


def test_nest_inline_children_promotes_dangling_parent(caplog):
    """Test an already nested page applies the same promotion policy as a flat one."""
    child = Node("B", "A")
    nodes = [Node("A", "missing", children=[child]), child]

    with caplog.at_level(logging.WARNING, logger="tourmanager.helpers"):
        roots = nest(nodes)

    assert [n.id for n in roots] == ["A"]
    assert roots[0].children == [child]
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert [(w.node_id, w.parent_id) for w in warnings] == [("A", "missing")]


def test_nest_inline_children_strict_raises():
    child = Node("B", "A")

    with pytest.raises(OrphanedNodeError) as exc_info:
        nest([Node("A", "missing", children=[child]), child], strict=True)

    assert exc_info.value.node_id == "A"


@pytest.mark.asyncio
async def test_category_tree(client, category_tree):
    """Test listing categories as a forest."""
    roots = await client.categories("holiday").tree(ListCategoriesQuery(limit=100))

    assert [c.id for c in roots] == ["regions", "activities"]
    regions = roots[0]
    assert [c.id for c in regions.children] == ["europe", "asia"]
    assert [c.id for c in regions.children[0].children] == ["iceland"]

    walked = [(c.name, depth) for c, depth in walk_tree(roots)]
    assert walked == [
        ("Regions", 0),
        ("Europe", 1),
        ("Iceland", 2),
        ("Asia", 1),
        ("Activities", 0),
    ]


@pytest.mark.asyncio
async def test_category_tree_with_server_children(client, category_tree):
    """Test a page requested with inline children is not nested twice."""
    roots = await client.categories("holiday").tree(ListCategoriesQuery(limit=100, children=True))

    assert [c.id for c in roots] == ["regions", "activities"]
    assert [c.id for c in roots[0].children] == ["europe", "asia"]
    assert [c.id for c in roots[0].children[0].children] == ["iceland"]


@pytest.mark.asyncio
async def test_category_tree_partial_page_promotes(client, category_tree):
    """Test categories whose parent is on another page become roots."""
    roots = await client.categories("holiday").tree(ListCategoriesQuery(page=2, limit=2))

    # Page 2 holds iceland (parent europe on page 1) and asia (parent regions on page 1)
    assert [c.id for c in roots] == ["iceland", "asia"]


@pytest.mark.asyncio
async def test_category_tree_partial_page_strict(client, category_tree):
    with pytest.raises(OrphanedNodeError):
        await client.categories("holiday").tree(ListCategoriesQuery(page=2, limit=2), strict=True)
