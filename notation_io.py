import json
from typing import List, Optional

from item_models import Item, Leaf, Node, to_plain


_OPEN = "("
_CLOSE = ")"
_SEPARATOR = ","


def parse_input(text: str) -> List[Item]:
    """Parse comma/parenthesis notation into a forest of items.

    ``"a, b(c, d), e"`` -> ``[Leaf("a"), Node("b", [Leaf("c"), Leaf("d")]), Leaf("e")]``

    Single left-to-right scan with a pending buffer and a depth counter:
    - Only depth-0 delimiters are acted on. Anything inside a group,
      nested parentheses and commas included, stays in the buffer as raw
      text and is parsed by a recursive call once the group closes.
    - Whitespace around names is trimmed; empty entries are dropped.
    - A closed group fills the most recent node placeholder, even when
      leaves were added after it.
    - Malformed input never raises. A group with no node anywhere before
      it replaces everything parsed so far with its own contents, which
      is what makes ``"(a, b)"`` parse like ``"a, b"``.
    """
    items: List[Item] = []
    buffer = ""
    depth = 0

    for char in text:
        if char == _OPEN:
            buffer = buffer.strip()
            if depth == 0 and buffer:
                # Placeholder; children are attached when the group closes.
                items.append(Node(buffer))
                buffer = ""
            buffer += char
            depth += 1
        elif char == _CLOSE:
            depth -= 1
            buffer += char
            if depth == 0:
                children = parse_input(buffer.strip()[1:-1])
                placeholder = _last_node(items)
                if placeholder is not None:
                    placeholder.children = children
                else:
                    items = children
                buffer = ""
        elif char == _SEPARATOR and depth == 0:
            buffer = buffer.strip()
            if buffer:
                items.append(Leaf(buffer))
            buffer = ""
        else:
            buffer += char

    buffer = buffer.strip()
    if buffer:
        items.append(Leaf(buffer))

    return items


def _last_node(items: List[Item]) -> Optional[Node]:
    for item in reversed(items):
        if item.kind == "node":
            return item
    return None


def to_notation(items: List[Item]) -> str:
    """Serialize a forest back to ``a, b(c, d), e`` notation.

    Names are written verbatim; a name containing ``,``, ``(`` or ``)``
    will not parse back to the same structure.
    """
    if items is None:
        raise ValueError("items must not be None")

    parts: List[str] = []
    for item in items:
        if item.kind == "node":
            parts.append(f"{item.name}{_OPEN}{to_notation(item.children)}{_CLOSE}")
        else:
            parts.append(item.name)
    return f"{_SEPARATOR} ".join(parts)


def items_to_json(items: List[Item], indent: Optional[int] = 2) -> str:
    """Render the raw items array as JSON (leaves as strings, nodes as mappings)."""
    if items is None:
        raise ValueError("items must not be None")
    return json.dumps(to_plain(items), indent=indent, ensure_ascii=False)
