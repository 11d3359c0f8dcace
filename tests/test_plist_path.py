import pytest

from apple_bundle.plist_path import format_key_path, get_value, parse_key_path


def test_parse_key_path_with_indices() -> None:
    assert parse_key_path("CFBundleURLTypes:0:CFBundleURLSchemes:1") == [
        "CFBundleURLTypes",
        0,
        "CFBundleURLSchemes",
        1,
    ]


def test_parse_key_path_leading_colon() -> None:
    assert parse_key_path(":NSAppTransportSecurity:NSAllowsArbitraryLoads") == [
        "NSAppTransportSecurity",
        "NSAllowsArbitraryLoads",
    ]


@pytest.mark.parametrize("bad", ["", ":", "A::B"])
def test_parse_key_path_rejects_empty_parts(bad: str) -> None:
    with pytest.raises(ValueError):
        parse_key_path(bad)


def test_format_key_path_inverts_parse() -> None:
    path = ["CFBundleURLTypes", 0, "CFBundleURLName"]
    assert format_key_path(path) == "CFBundleURLTypes:0:CFBundleURLName"
    assert parse_key_path(format_key_path(path)) == path


def test_get_value() -> None:
    doc = {"CFBundleURLTypes": [{"CFBundleURLSchemes": ["demo", "demo2"]}]}
    assert get_value(doc, "CFBundleURLTypes:0:CFBundleURLSchemes:1") == "demo2"
    assert get_value(doc, "CFBundleURLTypes:0") == {"CFBundleURLSchemes": ["demo", "demo2"]}


@pytest.mark.parametrize(
    "key_path",
    ["Missing", "CFBundleURLTypes:1", "CFBundleURLTypes:Name", "CFBundleURLTypes:0:X:0"],
)
def test_get_value_missing_path(key_path: str) -> None:
    doc = {"CFBundleURLTypes": [{"CFBundleURLSchemes": ["demo"]}]}
    with pytest.raises(KeyError):
        get_value(doc, key_path)


def test_get_value_reaches_numeric_dictionary_keys() -> None:
    doc = {"NSAppTransportSecurity": {"NSExceptionDomains": {"0": {"NSIncludesSubdomains": True}}}}
    key_path = format_key_path(
        ["NSAppTransportSecurity", "NSExceptionDomains", "0", "NSIncludesSubdomains"]
    )

    # 数字段解析为整数，但在字典上按字符串键查找。
    assert parse_key_path(key_path)[2] == 0
    assert get_value(doc, key_path) is True
    with pytest.raises(KeyError):
        get_value(doc, "NSAppTransportSecurity:NSExceptionDomains:1")
