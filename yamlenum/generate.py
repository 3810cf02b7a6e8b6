"""Turn a one-key YAML definition into a string-valued enum class or module source."""

from __future__ import annotations

import json
import keyword
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Union

import yaml

_SHAPE_ERROR = "YAML must have a single key (enum name) mapping to a sequence of variants"
_DELIMITERS = re.compile(r"[_\- ]+")
_DIGITS = frozenset("0123456789")

_TEMPLATE = '''\
"""{class_name} types generated from a YAML definition."""

from enum import Enum


class {class_name}(Enum):
    """A closed set of classification types."""

{members}
    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        """Return the member spelled *text*, or raise ValueError."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError("Unknown type")


{constant_name} = ({values})
'''


@dataclass(frozen=True)
class EnumSpec:
    """An enum name and its variant strings, in definition order."""

    name: str
    variants: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "variants", tuple(self.variants))


def _is_boundary(prev: str, char: str, following: str) -> bool:
    prev_digit = prev in _DIGITS
    char_digit = char in _DIGITS
    return (
        (prev.islower() and char.isupper())
        or (prev.isupper() and char_digit)
        or (prev_digit and char.isupper())
        or (prev_digit and char.islower())
        or (prev.islower() and char_digit)
        or (prev.isupper() and char.isupper() and following.islower())
    )


def _split_piece(piece: str) -> list[str]:
    words = []
    current = piece[0]
    followers = list(piece[2:]) + [""]
    for prev, char, following in zip(piece, piece[1:], followers):
        if _is_boundary(prev, char, following):
            words.append(current)
            current = char
        else:
            current += char
    words.append(current)
    return words


def _words(name: str) -> list[str]:
    words: list[str] = []
    for piece in _DELIMITERS.split(name):
        if piece:
            words.extend(_split_piece(piece))
    return words


def to_pascal_case(name: str) -> str:
    """Join the words of *name* capitalised, with no separator."""
    return "".join(word[:1].upper() + word[1:].lower() for word in _words(name))


def to_upper_snake_case(name: str) -> str:
    """Join the words of *name* upper-cased, separated by underscores."""
    return "_".join(word.upper() for word in _words(name))


def _check_identifier(identifier: str, source: str) -> str:
    if not identifier.isidentifier() or keyword.iskeyword(identifier):
        raise ValueError(f"{source!r} does not give a valid name ({identifier!r})")
    return identifier


def _class_name(spec: EnumSpec) -> str:
    return _check_identifier(to_pascal_case(spec.name), spec.name)


def _member_names(variants: Iterable[str]) -> list[tuple[str, str]]:
    members = []
    seen: set[str] = set()
    for variant in variants:
        member = _check_identifier(to_upper_snake_case(variant), variant)
        if member in seen:
            raise ValueError(f"variant {variant!r} repeats the name {member}")
        seen.add(member)
        members.append((member, variant))
    return members


def read_enum_spec(path: Union[str, PathLike]) -> EnumSpec:
    """Read the first key of a YAML mapping and its list of string variants."""
    with open(path, encoding="utf-8") as stream:
        try:
            document = yaml.safe_load(stream)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(document, dict) or not document:
        raise ValueError(_SHAPE_ERROR)
    name, variants = next(iter(document.items()))
    if not isinstance(name, str) or not isinstance(variants, list):
        raise ValueError(_SHAPE_ERROR)
    if not all(isinstance(variant, str) for variant in variants):
        raise ValueError("Variant must be a string")
    return EnumSpec(name, tuple(variants))


class _GeneratedEnum(Enum):
    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "_GeneratedEnum":
        """Return the member spelled *text*, or raise ValueError."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError("Unknown type")


def build_enum(spec: EnumSpec) -> type[Enum]:
    """Create an enum class at run time whose members carry the variant strings."""
    return _GeneratedEnum(_class_name(spec), _member_names(spec.variants), module=__name__)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def generate_source(spec: EnumSpec) -> str:
    """Render Python module source defining the enum and a tuple of all its strings."""
    class_name = _class_name(spec)
    members = "".join(
        f"    {member} = {_quote(variant)}\n" for member, variant in _member_names(spec.variants)
    )
    values = ", ".join(_quote(variant) for variant in spec.variants)
    if len(spec.variants) == 1:
        values += ","
    return _TEMPLATE.format(
        class_name=class_name,
        members=members,
        constant_name=f"ALL_{to_upper_snake_case(spec.name)}",
        values=values,
    )


def write_generated(yaml_path: Union[str, PathLike], out_path: Union[str, PathLike]) -> EnumSpec:
    """Generate a module from *yaml_path* into *out_path* and return the spec used."""
    spec = read_enum_spec(yaml_path)
    Path(out_path).write_text(generate_source(spec), encoding="utf-8")
    return spec