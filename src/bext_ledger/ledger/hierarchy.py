from __future__ import annotations

from typing import Iterable

from .models import Hierarchy, HierarchyNode


def split_label(token: str) -> tuple[str, str | None]:
    """
    "Food>Snacks" -> ("Food", "Snacks"), "Food" -> ("Food", None).
    Only the first '>' separates parent from child.
    """
    if ">" not in token:
        return token.strip(), None
    parent, child = token.split(">", 1)
    return parent.strip(), child.strip()


def build_hierarchy(tokens: Iterable[str]) -> Hierarchy:
    flat: dict[str, bool] = {}
    children: dict[str, set[str]] = {}

    for token in tokens:
        parent, child = split_label(token)
        if not parent:
            continue
        flat.setdefault(parent, False)
        children.setdefault(parent, set())
        if child:
            children[parent].add(child)
        else:
            flat[parent] = True

    return Hierarchy(
        {
            parent: HierarchyNode(flat=is_flat, children=frozenset(children[parent]))
            for parent, is_flat in flat.items()
        }
    )
