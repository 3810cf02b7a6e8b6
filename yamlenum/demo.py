"""Demonstration of dynamic and static classification types."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from typing import Optional, Sequence, Union

from .information import ALL_INFORMATION, Information
from .types import Type, load_types_from_yaml, match_type

_ACTIONS = {
    Information.EMAIL: "Action: Handle email!",
    Information.PHONE_NUMBER: "Action: Handle phone!",
    Information.DATE: "Action: Handle date!",
    Information.CREDENTIAL: "Action: Handle credential!",
}

_IDENTITIES = {
    Information.EMAIL: "It's an email!",
    Information.PHONE_NUMBER: "It's a phone!",
    Information.DATE: "It's a date!",
    Information.CREDENTIAL: "It's a credential!",
}


def describe_dynamic(value: Type) -> str:
    """Describe a dynamically loaded type."""
    return match_type(
        value,
        {
            "email": lambda: "Email! (dynamic)",
            "phone": lambda: "Phone! (dynamic)",
        },
        lambda: f"Other: {value} (dynamic)",
    )


def handle_information(info: Information) -> str:
    """Return the action taken for a static information type."""
    return _ACTIONS[info]


def run_dynamic(path: Union[str, PathLike]) -> list[str]:
    """Load types from *path* and describe each, in sorted order."""
    types = load_types_from_yaml(path)
    lines = ["Dynamic mode (String-backed):"]
    lines.extend(describe_dynamic(value) for value in sorted(types, key=str))
    return lines


def run_static() -> list[str]:
    """Walk every static information type, then parse one from text."""
    lines = ["All static types:"]
    for text in ALL_INFORMATION:
        info = Information.parse(text)
        lines.append(f"Type: {info} (variant: {info.name})")
        lines.append(handle_information(info))

    try:
        info = Information.parse("phone_number")
    except ValueError as exc:
        lines.append(f"Unknown type: {exc}")
    else:
        lines.append(f"Parsed: {info}")
        lines.append(_IDENTITIES[info])
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yamlenum-demo", description="Show classification types from YAML."
    )
    parser.add_argument(
        "--static", action="store_true", help="use the built-in Information types"
    )
    parser.add_argument(
        "--types", default="types.yaml", help="YAML file for dynamic mode (default: types.yaml)"
    )
    args = parser.parse_args(argv)

    if args.static:
        lines = run_static()
    else:
        try:
            lines = run_dynamic(args.types)
        except (OSError, ValueError) as exc:
            print(f"Failed to load {args.types}: {exc}", file=sys.stderr)
            return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())