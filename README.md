# yamlenum

Enum-like classification types whose values are listed in a YAML file.

A types file maps a key, which names the enum, to a list of variant names:

```yaml
information:
  - email
  - phone_number
  - credential
  - date
```

yamlenum gives you two ways to use such a file: string-backed types loaded
at runtime, and a real `enum.Enum` generated from the file.

## Dynamic types (`yamlenum.types`)

```python
from yamlenum.types import Type, load_types_from_yaml, match_type, parse_type

types = load_types_from_yaml("types.yaml")   # set of Type
email = parse_type("email")                   # a single YAML scalar as a Type
```

- `Type` is a frozen dataclass wrapping a string (`Type("email")`). Two
  types with the same text are equal and hash alike; `str()` gives the text
  and `repr()` gives `Type("email")`. Building a `Type` from anything but a
  `str` raises `TypeError`.
- `load_types_from_yaml(path)` reads a YAML mapping of names to lists of
  strings and returns the variants under the first key in sorted order, as a
  set of `Type`. It raises `ValueError` for invalid YAML, a document that is
  not a mapping, a value that is not a list, a non-string entry, a repeated
  key, or an empty mapping ("No enum key found in YAML").
- `parse_type(text)` reads one YAML scalar document as a `Type`; anything
  else (including null) raises `ValueError`.
- `match_type(value, cases, default=None)` looks up `str(value)` in the
  `cases` mapping of names to zero-argument callables and returns the
  result of calling the match. With no match it calls `default`, or raises
  `ValueError` if no default was given.

```python
kind = match_type(
    email,
    {"email": lambda: "an e-mail address", "phone": lambda: "a phone number"},
    lambda: "something else",
)
```

## Generated enums (`yamlenum.generate`)

```python
from yamlenum.generate import (
    EnumSpec, build_enum, generate_source, read_enum_spec, write_generated,
)

spec = read_enum_spec("types.yaml")      # EnumSpec(name, variants)
Information = build_enum(spec)           # an Enum class built in memory
source = generate_source(spec)           # the same enum as module source text
write_generated("types.yaml", "my_types.py")
```

- `read_enum_spec(path)` takes the first key of the YAML mapping (in file
  order) and its list of variants. A document that is not a non-empty
  mapping whose first key is a string mapped to a list raises `ValueError`;
  so does a variant that is not a string.
- The enum's class name is the key in PascalCase (`information` →
  `Information`). Each member is named by its variant in UPPER_SNAKE_CASE
  and has the variant string as its value (`PHONE_NUMBER = "phone_number"`).
  Names that are not valid identifiers, or variants that collapse to the
  same member name, raise `ValueError`.
- Generated enums print as their value and have a `parse(text)` class method
  that returns the member with that value or raises `ValueError("Unknown type")`.
- `generate_source` also defines a tuple of every variant string named
  `ALL_` plus the key in UPPER_SNAKE_CASE (`ALL_INFORMATION`).
- `write_generated(yaml_path, out_path)` writes that source to `out_path`
  and returns the `EnumSpec` it used.
- `to_pascal_case(name)` and `to_upper_snake_case(name)` are the case
  conversions used above; words are split on `_`, `-`, spaces, case changes
  and letter/digit boundaries.

Generation is run by calling these functions; nothing is generated when the
package is installed.

## The bundled `Information` enum (`yamlenum.information`)

The enum generated from the example file above, with members `EMAIL`,
`PHONE_NUMBER`, `CREDENTIAL` and `DATE`, and the tuple `ALL_INFORMATION`.

```python
from yamlenum.information import ALL_INFORMATION, Information

info = Information.parse("phone_number")
print(info)   # phone_number
```

## Demo

```
yamlenum-demo                    # load ./types.yaml and describe each type
yamlenum-demo --types other.yaml # load a different file
yamlenum-demo --static           # walk the bundled Information enum
```

In dynamic mode each loaded type is described in sorted order (`email` and
`phone` have their own message, anything else is reported as "Other"). If
the file cannot be read or is invalid, the command prints an error to
standard error and exits with status 1. The same steps are available as
`describe_dynamic`, `run_dynamic`, `handle_information` and `run_static` in
`yamlenum.demo`, which return the lines instead of printing them.

## Tests

```
pip install -e .[test]
pytest
```