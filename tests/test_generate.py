import pytest

from yamlenum.generate import (
    EnumSpec,
    build_enum,
    generate_source,
    read_enum_spec,
    to_pascal_case,
    to_upper_snake_case,
    write_generated,
)

SAMPLE = EnumSpec("information", ("email", "phone_number", "credential", "date"))


def test_pascal_case_of_source_names():
    assert to_pascal_case("information") == "Information"
    assert to_pascal_case("phone_number") == "PhoneNumber"


def test_pascal_case_is_idempotent():
    for name in ("phone_number", "information", "some-kind of_name"):
        once = to_pascal_case(name)
        assert to_pascal_case(once) == once


def test_upper_snake_round_trips_through_lower():
    assert to_upper_snake_case("phone_number").lower() == "phone_number"
    assert to_upper_snake_case("PhoneNumber") == to_upper_snake_case("phone_number")


def test_acronym_boundary():
    assert to_pascal_case("HTMLParser") == "HtmlParser"


def test_spec_variants_become_tuple():
    spec = EnumSpec("information", ["email", "date"])
    assert spec.variants == ("email", "date")


def test_read_enum_spec(tmp_path):
    path = tmp_path / "types.yaml"
    path.write_text("information:\n  - email\n  - phone_number\n", encoding="utf-8")
    assert read_enum_spec(path) == EnumSpec("information", ("email", "phone_number"))


def test_read_enum_spec_takes_first_key_in_document_order(tmp_path):
    path = tmp_path / "types.yaml"
    path.write_text("zeta: [email]\nalpha: [date]\n", encoding="utf-8")
    assert read_enum_spec(path).name == "zeta"


def test_read_enum_spec_rejects_sequence_root(tmp_path):
    path = tmp_path / "types.yaml"
    path.write_text("- email\n", encoding="utf-8")
    with pytest.raises(ValueError, match="single key"):
        read_enum_spec(path)


def test_read_enum_spec_rejects_non_string_variant(tmp_path):
    path = tmp_path / "types.yaml"
    path.write_text("information: [email, 12]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Variant must be a string"):
        read_enum_spec(path)


def test_build_enum_members_and_parse():
    cls = build_enum(SAMPLE)
    assert cls.__name__ == "Information"
    assert [member.value for member in cls] == list(SAMPLE.variants)
    member = cls.parse("phone_number")
    assert member is cls.PHONE_NUMBER
    assert str(member) == "phone_number"
    assert f"{member}" == "phone_number"


def test_build_enum_unknown_raises():
    cls = build_enum(SAMPLE)
    with pytest.raises(ValueError, match="Unknown type"):
        cls.parse("fax")


def test_build_enum_rejects_clashing_variants():
    with pytest.raises(ValueError):
        build_enum(EnumSpec("information", ("phone_number", "phone-number")))


def test_build_enum_rejects_invalid_name():
    with pytest.raises(ValueError):
        build_enum(EnumSpec("information", ("2fa",)))


def test_generate_source_contents():
    source = generate_source(SAMPLE)
    assert "class Information(Enum):" in source
    assert '    PHONE_NUMBER = "phone_number"\n' in source
    assert 'ALL_INFORMATION = ("email", "phone_number", "credential", "date")' in source


def test_generate_source_single_variant_tuple():
    source = generate_source(EnumSpec("information", ("email",)))
    assert source.rstrip().endswith('ALL_INFORMATION = ("email",)')


def test_write_generated(tmp_path):
    yaml_path = tmp_path / "types.yaml"
    out_path = tmp_path / "generated.py"
    yaml_path.write_text("information:\n  - email\n  - date\n", encoding="utf-8")
    spec = write_generated(yaml_path, out_path)
    assert spec == EnumSpec("information", ("email", "date"))
    assert out_path.read_text(encoding="utf-8") == generate_source(spec)