from enum import Enum

import pytest

from apple_bundle.codec import (
    check_unique_keys,
    declared_keys,
    decode,
    deprecated_fields,
    deprecated_variants,
    encode,
    fields,
    flattened,
    plist_field,
    record,
    unknown_keys,
    variant_deprecation,
)
from apple_bundle.errors import (
    DecodeError,
    DuplicateExternalKey,
    MissingRequiredField,
    TypeMismatch,
    UnknownVariant,
)


@deprecated_variants(OLD="v1-v2")
class Color(Enum):
    RED = "Red"
    BLUE = "Blue"
    OLD = "Old"


@record
class Item:
    name: str = plist_field("Name", required=True)
    count: int | None = plist_field("Count")


@record
class Widget:
    title: str | None = plist_field("Title")
    enabled: bool | None = plist_field("Enabled")
    size: float | None = plist_field("Size")
    color: Color | None = plist_field("Color")
    tags: list[str] | None = plist_field("Tags")
    items: list[Item] | None = plist_field("Items")
    extra: dict[str, int] | None = plist_field("Extra")
    legacy: str | None = plist_field("Legacy", deprecated="v1-v3", note="Use Title instead.")


@record
class Sizes:
    width: int | None = plist_field("Width")


@record
class Panel:
    widget: Widget = flattened(Widget)
    sizes: Sizes = flattened(Sizes)


def test_encode_omits_absent_fields() -> None:
    assert encode(Widget()) == {}
    assert encode(Widget(title="a")) == {"Title": "a"}


def test_encode_keeps_declaration_order() -> None:
    w = Widget(legacy="x", color=Color.RED, title="t")
    assert list(encode(w)) == ["Title", "Color", "Legacy"]


def test_empty_list_is_not_absent() -> None:
    assert encode(Widget(tags=[])) == {"Tags": []}
    assert decode(Widget, {"Tags": []}).tags == []
    assert decode(Widget, {}).tags is None


def test_enum_encodes_literal_and_rejects_unknown() -> None:
    assert encode(Widget(color=Color.BLUE)) == {"Color": "Blue"}
    assert decode(Widget, {"Color": "Red"}).color is Color.RED

    with pytest.raises(UnknownVariant) as e:
        decode(Widget, {"Color": "red"})
    assert e.value.key == "Color"
    assert e.value.literal == "red"


def test_enum_requires_string() -> None:
    with pytest.raises(TypeMismatch) as e:
        decode(Widget, {"Color": 1})
    assert e.value.expected == "string"
    assert e.value.actual == "integer"


def test_unknown_keys_are_ignored() -> None:
    w = decode(Widget, {"Title": "a", "Whatever": 1})
    assert w == Widget(title="a")
    assert unknown_keys(Widget, {"Title": "a", "Whatever": 1, "Other": True}) == [
        "Whatever",
        "Other",
    ]


def test_bool_is_not_an_integer() -> None:
    with pytest.raises(TypeMismatch) as e:
        decode(Item, {"Name": "a", "Count": True})
    assert e.value.expected == "integer"
    assert e.value.actual == "boolean"


def test_real_accepts_integer() -> None:
    w = decode(Widget, {"Size": 3})
    assert w.size == 3.0
    assert isinstance(w.size, float)
    assert isinstance(encode(Widget(size=3))["Size"], float)

    with pytest.raises(TypeMismatch):
        decode(Widget, {"Size": False})


def test_string_field_rejects_other_types() -> None:
    with pytest.raises(TypeMismatch) as e:
        decode(Widget, {"Title": ["a"]})
    assert e.value.key == "Title"
    assert "expected string, got array" in str(e.value)


def test_record_input_must_be_dictionary() -> None:
    with pytest.raises(TypeMismatch) as e:
        decode(Widget, ["Title"])
    assert e.value.key == ""
    assert str(e.value).startswith("(root): expected dictionary, got array")


def test_nested_error_reports_key_path() -> None:
    doc = {"Items": [{"Name": "a"}, {"Name": "b", "Count": "3"}]}
    with pytest.raises(TypeMismatch) as e:
        decode(Widget, doc)
    assert e.value.key == "Items:1:Count"
    assert e.value.record == "Item"
    assert e.value.field == "count"


def test_nested_missing_required_field() -> None:
    with pytest.raises(MissingRequiredField) as e:
        decode(Widget, {"Items": [{}]})
    assert e.value.key == "Items:0:Name"
    assert isinstance(e.value, DecodeError)
    assert isinstance(e.value, ValueError)


def test_dict_values_are_decoded() -> None:
    w = decode(Widget, {"Extra": {"a": 1, "b": 2}})
    assert w.extra == {"a": 1, "b": 2}

    with pytest.raises(TypeMismatch) as e:
        decode(Widget, {"Extra": {"a": "1"}})
    assert e.value.key == "Extra:a"


def test_round_trip() -> None:
    w = Widget(
        title="t",
        enabled=False,
        size=1.5,
        color=Color.RED,
        tags=["x", "y"],
        items=[Item(name="a", count=2)],
        extra={"k": 1},
    )
    assert decode(Widget, encode(w)) == w


def test_flattened_members_share_namespace() -> None:
    p = decode(Panel, {"Title": "a", "Width": 3})
    assert p.widget.title == "a"
    assert p.sizes.width == 3
    assert encode(p) == {"Title": "a", "Width": 3}
    assert encode(Panel()) == {}


def test_flattened_error_names_member() -> None:
    with pytest.raises(TypeMismatch) as e:
        decode(Panel, {"Width": "3"})
    assert e.value.member == "sizes"
    assert e.value.record == "Sizes"
    assert "(member: sizes)" in str(e.value)


def test_duplicate_key_fails_at_definition() -> None:
    with pytest.raises(DuplicateExternalKey) as e:

        @record
        class Clash:
            widget: Widget = flattened(Widget)
            title: str | None = plist_field("Title")

    assert e.value.key == "Title"
    assert e.value.record_a == "Widget.title"
    assert e.value.record_b == "Clash.title"


def test_declared_keys_walks_flattened_members() -> None:
    keys = [key for key, _rec, _attr in declared_keys(Panel)]
    assert keys[0] == "Title"
    assert keys[-1] == "Width"
    check_unique_keys(Panel)


def test_field_table_resolves_types() -> None:
    specs = {spec.name: spec for spec in fields(Item)}
    assert specs["name"].key == "Name"
    assert specs["name"].required is True
    assert specs["count"].required is False


def test_plist_field_validation() -> None:
    with pytest.raises(ValueError):
        plist_field("")
    with pytest.raises(ValueError):
        plist_field("Key", note="orphan note")


def test_record_requires_declared_fields() -> None:
    with pytest.raises(TypeError):

        @record
        class Bare:
            value: str = "x"


def test_deprecated_field_round_trips_and_is_reported() -> None:
    w = decode(Widget, {"Legacy": "x", "Color": "Old"})
    assert w.legacy == "x"
    assert encode(w) == {"Color": "Old", "Legacy": "x"}

    found = dict(deprecated_fields(w))
    assert found["Legacy"].since == "v1-v3"
    assert found["Legacy"].note == "Use Title instead."
    assert found["Color=Old"].since == "v1-v2"


def test_variant_deprecation_lookup() -> None:
    assert variant_deprecation(Color.OLD).since == "v1-v2"
    assert variant_deprecation(Color.RED) is None
