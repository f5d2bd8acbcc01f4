from typing import Callable, Iterator, List, Optional

from pyuca import Collator

from item_models import Item


INDENT_UNIT = "  "
LINE_MARKER = "- "

# Default Unicode collation (root locale), the ordering of a plain localeCompare.
_COLLATOR = Collator()


def sort_items(items: List[Item]) -> None:
    """Sort a forest alphabetically by name, in place, at every depth."""
    items.sort(key=lambda item: _COLLATOR.sort_key(item.name))
    for item in items:
        if item.kind == "node":
            sort_items(item.children)


def format_items(items: List[Item], indent: int = 0) -> Iterator[str]:
    """Yield one ``"  " * depth + "- name"`` line per item, depth-first."""
    prefix = INDENT_UNIT * indent
    for item in items:
        yield f"{prefix}{LINE_MARKER}{item.name}"
        if item.kind == "node":
            yield from format_items(item.children, indent + 1)


def print_items(
    items: List[Item],
    indent: int = 0,
    write: Optional[Callable[[str], None]] = None,
) -> None:
    if items is None:
        raise ValueError("items must not be None")
    sink = write or print
    for line in format_items(items, indent):
        sink(line)
