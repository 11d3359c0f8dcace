import pytest

from apple_bundle import inspect as inspect_mod
from apple_bundle.entitlements.aggregate import Entitlements
from apple_bundle.errors import MissingRequiredField
from apple_bundle.inspect import detect_kind, format_value, inspect_document, key_table


def test_detect_kind_by_key_hits() -> None:
    assert detect_kind({"CFBundleIdentifier": "a", "CFBundleName": "b"}) == "info-plist"
    assert detect_kind({"aps-environment": "development", "Whatever": 1}) == "entitlements"


def test_detect_kind_tie_or_no_hits() -> None:
    with pytest.raises(ValueError):
        detect_kind({})
    with pytest.raises(ValueError):
        detect_kind({"CFBundleIdentifier": "a", "aps-environment": "development"})


def test_inspect_document_summary() -> None:
    doc = {
        "CFBundleIdentifier": "com.demo.app",
        "CFBundleVersion": "1",
        "UILaunchImages": [{"default": "Default.png"}],
        "Custom": True,
    }
    info, value = inspect_document("/tmp/Info.plist", doc, "info-plist")

    assert value.identification.bundle_identifier == "com.demo.app"
    assert info.kind == "info-plist"
    assert info.key_count == 3
    assert info.members == ["identification", "bundle_version", "deprecated_keys"]
    assert info.unknown_keys == ["Custom"]
    assert info.deprecated_keys == ["UILaunchImages"]


def test_inspect_document_propagates_decode_errors() -> None:
    with pytest.raises(MissingRequiredField):
        inspect_document("/tmp/Info.plist", {"CFBundleName": "x"}, "info-plist")


def test_key_table_lists_every_declared_key() -> None:
    table = key_table(Entitlements)
    owners = {key: owner for key, owner, _dep in table}

    assert owners["com.apple.developer.game-center"] == "Games.game_center"
    deprecated = {key for key, _owner, dep in table if dep is not None}
    assert "com.apple.vm.hypervisor" in deprecated
    assert "com.apple.developer.game-center" not in deprecated


def test_format_value() -> None:
    assert format_value(True) == "true"
    assert format_value(3) == "3"
    assert format_value("demo") == "demo"
    text = format_value(["a", "b"])
    assert text.startswith("<?xml")
    assert text.endswith("</plist>")


def test_print_document_info(capsys) -> None:
    info = inspect_mod.DocumentInfo(
        path="/tmp/app.entitlements",
        kind="entitlements",
        key_count=0,
        members=[],
        unknown_keys=[],
        deprecated_keys=[],
    )
    inspect_mod.print_document_info(info)

    out = capsys.readouterr().out
    assert out.startswith("Plist Info:\n")
    assert "Members        : -" in out
    assert "Deprecated     : -" in out
