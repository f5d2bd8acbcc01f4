from dataclasses import dataclass, field
from typing import Any, Iterable, List, Literal, Union


@dataclass
class Leaf:
    name: str
    kind: Literal["leaf"] = field(default="leaf", init=False)


@dataclass
class Node:
    name: str
    children: List["Item"] = field(default_factory=list)
    # Distinguish from Leaf without inspecting the Python type at use sites.
    kind: Literal["node"] = field(default="node", init=False)


Item = Union[Leaf, Node]


def count_items(items: Iterable[Item]) -> int:
    """Count every item in the forest, at all depths."""
    total = 0
    for item in items:
        total += 1
        if item.kind == "node":
            total += count_items(item.children)
    return total


def to_plain(items: Iterable[Item]) -> List[Any]:
    """Convert a forest to plain JSON-ready values.

    A leaf becomes its name; a node becomes ``{name: [children...]}``.
    """
    plain: List[Any] = []
    for item in items:
        if item.kind == "node":
            plain.append({item.name: to_plain(item.children)})
        else:
            plain.append(item.name)
    return plain
