import plistlib
from pathlib import Path

import pytest

from apple_bundle import cli


def _write_plist(path: Path, obj: dict, *, binary: bool = False) -> None:
    fmt = plistlib.FMT_BINARY if binary else plistlib.FMT_XML
    path.write_bytes(plistlib.dumps(obj, fmt=fmt))


def _info_doc() -> dict:
    return {
        "CFBundleIdentifier": "com.demo.app",
        "CFBundleName": "Demo",
        "CFBundleURLTypes": [{"CFBundleURLName": "demo", "CFBundleURLSchemes": ["demo"]}],
        "UIRequiresFullScreen": False,
    }


def test_main_validates_info_plist_with_auto_kind(tmp_path, capsys) -> None:
    path = tmp_path / "Info.plist"
    _write_plist(path, _info_doc())

    assert cli.main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "Kind           : info-plist" in out
    assert "Declared Keys  : 4" in out
    assert "identification" in out
    assert "url_schemes" in out


def test_main_detects_entitlements(tmp_path, capsys) -> None:
    path = tmp_path / "app.entitlements"
    _write_plist(path, {"aps-environment": "production", "com.apple.developer.game-center": True})

    assert cli.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Kind           : entitlements" in out
    assert "games, push_notifications" in out


def test_main_rejects_ambiguous_kind(tmp_path) -> None:
    path = tmp_path / "unknown.plist"
    _write_plist(path, {"SomethingElse": 1})

    with pytest.raises(SystemExit) as e:
        cli.main([str(path)])
    assert "cannot tell the document kind" in str(e.value)
    assert "-k entitlements" in str(e.value)


def test_main_reports_decode_error(tmp_path) -> None:
    path = tmp_path / "app.entitlements"
    _write_plist(path, {"aps-environment": "staging"})

    with pytest.raises(SystemExit) as e:
        cli.main(["-k", "entitlements", str(path)])
    msg = str(e.value)
    assert msg.startswith("Error: invalid entitlements document")
    assert "aps-environment: unknown variant 'staging'" in msg
    assert "(member: push_notifications)" in msg


def test_main_reports_missing_bundle_identifier(tmp_path) -> None:
    path = tmp_path / "Info.plist"
    _write_plist(path, {"CFBundleName": "Demo"})

    with pytest.raises(SystemExit) as e:
        cli.main(["--kind", "info-plist", str(path)])
    assert "CFBundleIdentifier: missing required key" in str(e.value)


def test_main_missing_file(tmp_path) -> None:
    with pytest.raises(SystemExit) as e:
        cli.main([str(tmp_path / "nope.plist")])
    assert "Error: plist not found" in str(e.value)


def test_main_unreadable_plist(tmp_path) -> None:
    path = tmp_path / "Info.plist"
    path.write_bytes(b"garbage")

    with pytest.raises(SystemExit) as e:
        cli.main([str(path)])
    assert "Error: failed to read plist" in str(e.value)


def test_main_requires_plist_argument() -> None:
    with pytest.raises(SystemExit) as e:
        cli.main([])
    assert "missing PLIST path" in str(e.value)


def test_main_strict_rejects_undeclared_keys(tmp_path) -> None:
    path = tmp_path / "Info.plist"
    doc = _info_doc()
    doc["MyCustomKey"] = "x"
    _write_plist(path, doc)

    assert cli.main([str(path)]) == 0
    with pytest.raises(SystemExit) as e:
        cli.main(["--strict", str(path)])
    assert "undeclared keys in info-plist document: MyCustomKey" in str(e.value)


def test_main_verbose_lists_diagnostics(tmp_path, capsys) -> None:
    path = tmp_path / "Info.plist"
    doc = _info_doc()
    doc["MyCustomKey"] = "x"
    doc["UIStatusBarStyle"] = "UIStatusBarStyleBlackTranslucent"
    _write_plist(path, doc)

    assert cli.main(["--verbose", str(path)]) == 0
    out = capsys.readouterr().out
    assert "[apple-bundle] Auto kind: info-plist" in out
    assert "[apple-bundle] Ignoring undeclared key: MyCustomKey" in out
    assert (
        "[apple-bundle] Deprecated key present: "
        "UIStatusBarStyle=UIStatusBarStyleBlackTranslucent"
    ) in out


def test_main_get_value(tmp_path, capsys) -> None:
    path = tmp_path / "Info.plist"
    _write_plist(path, _info_doc())

    assert cli.main(["--get", "CFBundleURLTypes:0:CFBundleURLSchemes:0", str(path)]) == 0
    assert capsys.readouterr().out == "demo\n"

    assert cli.main(["--get", "UIRequiresFullScreen", str(path)]) == 0
    assert capsys.readouterr().out == "false\n"


def test_main_get_skips_undeclared_keys(tmp_path) -> None:
    path = tmp_path / "Info.plist"
    doc = _info_doc()
    doc["MyCustomKey"] = "x"
    _write_plist(path, doc)

    with pytest.raises(SystemExit) as e:
        cli.main(["--get", "MyCustomKey", str(path)])
    assert "key path not found: MyCustomKey" in str(e.value)


def test_main_writes_normalized_output(tmp_path) -> None:
    src = tmp_path / "Info.plist"
    doc = _info_doc()
    doc["MyCustomKey"] = "x"
    _write_plist(src, doc, binary=True)

    xml_out = tmp_path / "out.plist"
    assert cli.main(["-o", str(xml_out), str(src)]) == 0
    assert xml_out.read_bytes().startswith(b"<?xml")
    assert plistlib.loads(xml_out.read_bytes()) == _info_doc()

    bin_out = tmp_path / "out.bin.plist"
    assert cli.main(["-o", str(bin_out), "--binary", str(src)]) == 0
    assert bin_out.read_bytes().startswith(b"bplist00")


def test_main_binary_requires_output(tmp_path) -> None:
    path = tmp_path / "Info.plist"
    _write_plist(path, _info_doc())

    with pytest.raises(SystemExit) as e:
        cli.main(["--binary", str(path)])
    assert "--binary requires -o/--output" in str(e.value)


def test_main_lists_declared_keys(capsys) -> None:
    assert cli.main(["--keys", "-k", "entitlements"]) == 0
    out = capsys.readouterr().out
    assert "aps-environment  PushNotifications.aps_environment" in out
    assert (
        "com.apple.vm.hypervisor  Hypervisor.vm_hypervisor  (deprecated: macOS 10.10-11.0)"
    ) in out


def test_main_keys_requires_kind() -> None:
    with pytest.raises(SystemExit) as e:
        cli.main(["--keys"])
    assert "--keys needs an explicit -k/--kind" in str(e.value)


def test_main_rejects_unknown_kind() -> None:
    with pytest.raises(SystemExit) as e:
        cli.main(["-k", "provisioning", "x.plist"])
    assert e.value.code == 2
