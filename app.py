from __future__ import annotations

import os
import sys
from typing import Callable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Tree
from textual.widgets._tree import TextType, TreeNode
from rich.text import Text

from hierarchy import print_items, sort_items
from item_models import Item, count_items
from notation_io import items_to_json, parse_input, to_notation
import activity_log

DEFAULT_INPUT = "(id, name, email, type(id, name, customFields(c1, c2, c3)), externalId)"


def get_default_input() -> str:
    return os.getenv("ITEMTREE_INPUT", DEFAULT_INPUT)


def dump(text: str, write: Callable[[str], None] = print) -> None:
    """Print the raw items array, the hierarchy, then the sorted hierarchy."""
    items = parse_input(text)
    activity_log.log_event("ok", "parse", f"{count_items(items)} items")

    write("")
    write("Raw items array:")
    write("")
    write(items_to_json(items))

    write("")
    write("Items hierarchy:")
    write("")
    print_items(items, write=write)

    write("")
    write("Sorted items hierarchy:")
    write("")
    sort_items(items)
    activity_log.log_event("ok", "sort")
    print_items(items, write=write)


class ItemTree(Tree[Item]):
    """Tree widget specialised for parsed ``Item`` forests."""

    def process_label(self, label: TextType) -> Text:
        if isinstance(label, str):
            return Text(label, justify="left")
        return label


class ItemTreeApp(App[None]):
    """Browse a parsed forest, optionally sorted."""

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("s", "sort", "Sort"),
        Binding("r", "reparse", "Original order"),
        Binding("a", "expand_all", "Expand All"),
    ]

    def __init__(self, text: str | None = None) -> None:
        super().__init__()
        self.title = "itemtree"
        self.source_text = get_default_input() if text is None else text
        self.items: list[Item] = []
        self.is_sorted = False
        self._tree_widget: Optional[ItemTree] = None
        activity_log.reset_log()

    def compose(self) -> ComposeResult:
        yield Header()
        tree = ItemTree("Items", id="item-tree")
        tree.show_root = True
        self._tree_widget = tree
        yield tree
        yield Footer()

    def on_mount(self) -> None:
        self.action_reparse()

    def require_tree(self) -> ItemTree:
        if self._tree_widget is None:
            raise RuntimeError("Tree widget not initialised")
        return self._tree_widget

    def rebuild_tree(self) -> None:
        tree = self.require_tree()
        tree.clear()
        self.populate_tree(tree.root, self.items)
        tree.root.expand_all()
        tree.focus()
        self.show_status()

    def populate_tree(self, tree_node: TreeNode[Item], items: list[Item]) -> None:
        for item in items:
            if item.kind == "node":
                child_tree_node = tree_node.add(Text(item.name, style="bold"), data=item)
                self.populate_tree(child_tree_node, item.children)
            else:
                tree_node.add_leaf(Text(item.name), data=item)

    def show_status(self) -> None:
        order = "sorted" if self.is_sorted else "as parsed"
        self.sub_title = f"{count_items(self.items)} items · {order}"

    def action_reparse(self) -> None:
        self.items = parse_input(self.source_text)
        self.is_sorted = False
        activity_log.log_event("ok", "parse", f"{count_items(self.items)} items")
        self.rebuild_tree()

    def action_sort(self) -> None:
        sort_items(self.items)
        self.is_sorted = True
        activity_log.log_event("ok", "sort")
        self.rebuild_tree()

    def action_expand_all(self) -> None:
        self.require_tree().root.expand_all()


def normalize(text: str) -> str:
    """Rewrite notation in canonical ``a, b(c, d)`` spacing."""
    items = parse_input(text)
    activity_log.log_event("ok", "normalize", f"{count_items(items)} items")
    return to_notation(items)


def main(argv: list[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    flags = {arg for arg in args if arg.startswith("--")}
    args = [arg for arg in args if not arg.startswith("--")]
    text = args[0] if args else get_default_input()
    if "--normalize" in flags:
        print(normalize(text))
    elif "--dump" in flags:
        dump(text)
    else:
        ItemTreeApp(text).run()


if __name__ == "__main__":
    main()
