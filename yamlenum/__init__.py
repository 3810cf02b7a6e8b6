"""Enum-like classification types defined in YAML: runtime types, enum generation, and a demo."""

__version__ = "0.1.0"

__all__ = ["types", "generate", "information", "demo"]