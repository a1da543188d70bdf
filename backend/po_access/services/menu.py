"""Menu visibility pruning and breadcrumb reconstruction.

All functions take the tree and role explicitly and return new structures; the
source tree is never modified.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Any

from po_access.config.menu import MenuNode
from po_access.utils.patterns import compile_pattern

log = logging.getLogger(__name__)


def is_accessible(node: MenuNode, role: Optional[str]) -> bool:
    """Direct permission on ``node`` alone; children are not consulted."""
    return role is not None and role in node.allowed_roles


def visible_menu(tree: Sequence[MenuNode], role: Optional[str]) -> Tuple[MenuNode, ...]:
    """Prune ``tree`` to the nodes ``role`` may see, keeping sibling order.

    A leaf survives iff the role is allowed on it. A parent survives iff the
    role is allowed on it or at least one pruned child survives; its children
    are replaced by the pruned list, which may be empty.
    """
    out = []
    for node in tree:
        if not node.children:
            if is_accessible(node, role):
                out.append(node)
            continue
        pruned = visible_menu(node.children, role)
        if is_accessible(node, role) or pruned:
            out.append(replace(node, children=pruned))
    return tuple(out)


def sidebar_menu(tree: Sequence[MenuNode], role: Optional[str]) -> Tuple[MenuNode, ...]:
    """``visible_menu`` minus structural (``in_sidebar=False``) nodes and their subtrees."""
    return _drop_structural(visible_menu(tree, role))


def _drop_structural(nodes: Iterable[MenuNode]) -> Tuple[MenuNode, ...]:
    return tuple(
        replace(n, children=_drop_structural(n.children))
        for n in nodes
        if n.in_sidebar
    )


def iter_nodes(tree: Sequence[MenuNode], ancestors: Tuple[MenuNode, ...] = ()) -> Iterator[Tuple[MenuNode, Tuple[MenuNode, ...]]]:
    """Depth-first walk yielding ``(node, chain)`` where chain runs root → node inclusive."""
    for node in tree:
        chain = ancestors + (node,)
        yield node, chain
        if node.children:
            yield from iter_nodes(node.children, chain)


def find_node(tree: Sequence[MenuNode], node_id: str) -> Optional[MenuNode]:
    for node, _chain in iter_nodes(tree):
        if node.id == node_id:
            return node
    return None


def _find_chain(tree: Sequence[MenuNode], target_path: str) -> Tuple[Optional[Tuple[MenuNode, ...]], Optional[str]]:
    # Exact path first, then single-wildcard patterns
    for node, chain in iter_nodes(tree):
        if node.path == target_path:
            return chain, None
    for node, chain in iter_nodes(tree):
        pattern = compile_pattern(node.path)
        if pattern.is_literal:
            continue
        value = pattern.match(target_path)
        if value is not None:
            return chain, value
    return None, None


def breadcrumb(tree: Sequence[MenuNode], target_path: str, role: Optional[str]) -> List[Dict[str, str]]:
    """Root-first ``{title, path}`` trail ending at ``target_path``.

    Empty when no node has the path or when the role is denied on any node of
    the chain; partial trails are never returned. Wildcard segments in the
    trail are filled with the concrete value taken from ``target_path``.
    """
    chain, value = _find_chain(tree, target_path)
    if chain is None:
        log.debug('breadcrumb: no menu node for path %s', target_path)
        return []
    if not all(is_accessible(n, role) for n in chain):
        return []
    trail = []
    for n in chain:
        path = n.path
        if value is not None:
            path = compile_pattern(n.path).fill(value)
        trail.append({'title': n.title, 'path': path})
    # The matched node's own entry must echo the requested path
    trail[-1]['path'] = target_path
    return trail


def menu_to_dict(nodes: Iterable[MenuNode]) -> List[Dict[str, Any]]:
    return [
        {
            'id': n.id,
            'title': n.title,
            'path': n.path,
            'icon': n.icon,
            'description': n.description,
            'in_sidebar': n.in_sidebar,
            'children': menu_to_dict(n.children),
        }
        for n in nodes
    ]


__all__ = ['is_accessible', 'visible_menu', 'sidebar_menu', 'iter_nodes', 'find_node', 'breadcrumb', 'menu_to_dict']
