"""String-backed classification types loaded from YAML at run time."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from os import PathLike
from typing import Any, Optional, TextIO, Union

import yaml

_NULL_TAG = "tag:yaml.org,2002:null"

_DEBUG_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _debug_quote(text: str) -> str:
    """Quote *text* with escapes for backslashes, quotes and control characters."""
    parts = []
    for char in text:
        if char in _DEBUG_ESCAPES:
            parts.append(_DEBUG_ESCAPES[char])
        elif not char.isprintable():
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


@dataclass(frozen=True, repr=False)
class Type:
    """A classification type loaded from YAML, compared and hashed by its text."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Type value must be str, not {type(self.value).__name__}")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Type({_debug_quote(self.value)})"


def _compose(stream: Union[str, TextIO]) -> Optional[yaml.Node]:
    try:
        return yaml.compose(stream, Loader=yaml.SafeLoader)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML: {exc}") from exc


def _scalar_text(node: Optional[yaml.Node], what: str) -> str:
    if not isinstance(node, yaml.ScalarNode) or node.tag == _NULL_TAG:
        raise ValueError(f"{what} must be a string")
    return node.value


def parse_type(text: str) -> Type:
    """Read a single YAML scalar document as a Type."""
    return Type(_scalar_text(_compose(text), "type"))


def load_types_from_yaml(path: Union[str, PathLike]) -> set[Type]:
    """Load the variants listed under the first key (in sorted order) of a YAML mapping."""
    with open(path, encoding="utf-8") as stream:
        root = _compose(stream)
    if not isinstance(root, yaml.MappingNode):
        raise ValueError("YAML document must be a mapping of names to lists of types")

    entries: dict[str, list[str]] = {}
    for key_node, value_node in root.value:
        key = _scalar_text(key_node, "enum name")
        if key in entries:
            raise ValueError(f"duplicate enum name {key!r}")
        if not isinstance(value_node, yaml.SequenceNode):
            raise ValueError(f"types under {key!r} must be a sequence")
        entries[key] = [_scalar_text(item, "type") for item in value_node.value]

    if not entries:
        raise ValueError("No enum key found in YAML")
    first = min(entries)
    return {Type(name) for name in entries[first]}


def match_type(
    value: Any,
    cases: Mapping[str, Callable[[], Any]],
    default: Optional[Callable[[], Any]] = None,
) -> Any:
    """Run the action whose key equals the text of *value*, or *default*.

    Raises ValueError when nothing matches and no default is given.
    """
    key = str(value)
    if key in cases:
        return cases[key]()
    if default is None:
        raise ValueError(f"no case matches {key!r}")
    return default()