"""Helpers for hierarchical resources (categories, locations)."""

import logging
from typing import Iterator, List, Optional, Protocol, Sequence, Tuple, TypeVar

from .core.exceptions import OrphanedNodeError

logger = logging.getLogger(__name__)


class TreeNode(Protocol):
    id: str
    parent_id: Optional[str]
    children: list


NodeT = TypeVar("NodeT", bound=TreeNode)


def reconstruct_tree(flat: Sequence[NodeT], strict: bool = False) -> List[NodeT]:
    """
    Nest a flat node list into a forest by filling in ``children``.

    Every node must appear after its parent; this is not checked. The nodes
    are modified in place and the roots are returned in input order.
    Complexity: Θ(n).

    A node whose ``parent_id`` is not in ``flat`` is promoted to a root and a
    warning is logged, so no node is lost. With ``strict=True`` an
    :class:`OrphanedNodeError` is raised instead.

    Args:
        flat: Parent-ordered node list
        strict: Raise on dangling parent references

    Returns:
        Root nodes
    """
    by_id = {}
    for node in flat:
        by_id[node.id] = node
        node.children = []

    roots: List[NodeT] = []
    for node in flat:
        if node.parent_id is None:
            roots.append(node)
            continue

        parent = by_id.get(node.parent_id)
        if parent is not None:
            parent.children.append(node)
        else:
            _promote(node, strict)
            roots.append(node)

    return roots


def walk_tree(roots: Sequence[NodeT], depth: int = 0) -> Iterator[Tuple[NodeT, int]]:
    """Yield ``(node, depth)`` pairs depth-first, roots at ``depth``."""
    for node in roots:
        yield node, depth
        yield from walk_tree(node.children, depth + 1)


def nest(nodes: Sequence[NodeT], strict: bool = False) -> List[NodeT]:
    """
    Return the roots of a page of nodes.

    Pages requested with inline ``children`` are already nested and are
    only trimmed to their top-level nodes; flat pages are reconstructed.
    Either way a node whose parent is not on the page is promoted, or
    raises with ``strict=True``.
    """
    if not any(node.children for node in nodes):
        return reconstruct_tree(nodes, strict=strict)

    ids = {node.id for node in nodes}
    roots: List[NodeT] = []
    for node in nodes:
        if node.parent_id is None:
            roots.append(node)
        elif node.parent_id not in ids:
            _promote(node, strict)
            roots.append(node)
    return roots


def _promote(node: TreeNode, strict: bool) -> None:
    if strict:
        raise OrphanedNodeError(node.id, node.parent_id)
    logger.warning(
        "Parent not in node list - promoting node to root",
        extra={"node_id": node.id, "parent_id": node.parent_id}
    )
