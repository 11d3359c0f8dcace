import importlib
import pkgutil
import plistlib
import types
import typing
from collections import Counter
from enum import Enum

import pytest

import apple_bundle.entitlements as entitlements_pkg
import apple_bundle.info_plist as info_plist_pkg
from apple_bundle.codec import (
    declared_keys,
    decode,
    encode,
    fields,
    is_record,
    plist_field,
    record,
)
from apple_bundle.entitlements.aggregate import Entitlements
from apple_bundle.errors import UnknownVariant
from apple_bundle.info_plist.aggregate import InfoPlist


@pytest.mark.parametrize("aggregate", [Entitlements, InfoPlist])
def test_external_keys_are_unique(aggregate) -> None:
    counts = Counter(key for key, _rec, _attr in declared_keys(aggregate))
    dupes = sorted(key for key, n in counts.items() if n > 1)
    assert dupes == []


@pytest.mark.parametrize("aggregate", [Entitlements, InfoPlist])
def test_aggregates_are_made_of_flattened_members(aggregate) -> None:
    specs = fields(aggregate)
    assert specs
    assert all(spec.flatten for spec in specs)


def test_member_counts() -> None:
    assert len(fields(Entitlements)) == 21
    assert len(fields(InfoPlist)) == 71


def test_keys_are_literal_not_derived() -> None:
    keys = {key for key, _rec, _attr in declared_keys(Entitlements)}
    assert "aps-environment" in keys
    assert "com.apple.developer.icloud-services" in keys
    # 属性名看起来是 CarPlay，但外部键是通讯录备注权限。
    assert ("com.apple.developer.contacts.notes", "Contacts", "carplay_audio") in declared_keys(
        Entitlements
    )

    info_keys = {key for key, _rec, _attr in declared_keys(InfoPlist)}
    assert {"CFBundleIdentifier", "UIRequiresFullScreen", "IOKitPersonalities"} <= info_keys


def test_entitlements_and_info_plist_stay_separate() -> None:
    ent_keys = {key for key, _rec, _attr in declared_keys(Entitlements)}
    info_keys = {key for key, _rec, _attr in declared_keys(InfoPlist)}
    assert "CFBundleIdentifier" not in ent_keys
    assert "aps-environment" not in info_keys


def _sample(tp, stack: frozenset):
    """按类型构造一个所有字段都有值的样例；遇到递归引用的记录时返回 `None`。"""
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        (tp,) = [a for a in typing.get_args(tp) if a is not type(None)]
        return _sample(tp, stack)
    if origin is list:
        (elem,) = typing.get_args(tp)
        value = _sample(elem, stack)
        return [] if value is None else [value]
    if origin is dict:
        _, vt = typing.get_args(tp)
        value = _sample(vt, stack)
        return {} if value is None else {"entry": value}
    if isinstance(tp, type) and issubclass(tp, Enum):
        return list(tp)[-1]
    if is_record(tp):
        if tp in stack:
            return None
        inner = stack | {tp}
        return tp(**{spec.name: _sample(spec.type, inner) for spec in fields(tp)})
    return {bool: True, int: 42, float: 2.5, str: "value"}[tp]


def _records(cls, seen: dict | None = None) -> dict:
    """收集从 `cls` 可达的全部记录类型。"""
    seen = {} if seen is None else seen
    if cls in seen.values():
        return seen
    seen[f"{cls.__module__}.{cls.__qualname__}"] = cls
    for spec in fields(cls):
        stack = [spec.type]
        while stack:
            tp = stack.pop()
            stack.extend(typing.get_args(tp))
            if is_record(tp):
                _records(tp, seen)
    return seen


def _schema_enums() -> list[type[Enum]]:
    out: list[type[Enum]] = []
    for pkg in (entitlements_pkg, info_plist_pkg):
        for mod_info in pkgutil.iter_modules(pkg.__path__, prefix=f"{pkg.__name__}."):
            mod = importlib.import_module(mod_info.name)
            for obj in vars(mod).values():
                if not (isinstance(obj, type) and issubclass(obj, Enum)):
                    continue
                # 跳过从其它模块导入的枚举，避免重复。
                if obj.__module__ == mod.__name__:
                    out.append(obj)
    return out


ALL_RECORDS = {**_records(Entitlements), **_records(InfoPlist)}
ALL_ENUMS = _schema_enums()


@pytest.mark.parametrize("aggregate", [Entitlements, InfoPlist])
def test_fully_populated_aggregate_round_trips(aggregate) -> None:
    value = _sample(aggregate, frozenset())
    doc = plistlib.loads(plistlib.dumps(encode(value), sort_keys=False))

    assert len(doc) == len(declared_keys(aggregate))
    assert decode(aggregate, doc) == value


@pytest.mark.parametrize("cls", list(ALL_RECORDS.values()), ids=list(ALL_RECORDS))
def test_every_record_round_trips(cls) -> None:
    value = _sample(cls, frozenset())
    data = plistlib.dumps(encode(value), fmt=plistlib.FMT_BINARY)
    assert decode(cls, plistlib.loads(data)) == value


def test_schema_enums_are_collected() -> None:
    names = {e.__name__ for e in ALL_ENUMS}
    assert {"APSEnvironment", "InterfaceOrientation", "StatusBarStyle"} <= names


def _enum_holder(enum_cls: type[Enum]) -> type:
    ns = {"__annotations__": {"value": enum_cls | None}, "value": plist_field("Value")}
    return record(type(f"{enum_cls.__name__}Holder", (), ns))


@pytest.mark.parametrize("enum_cls", ALL_ENUMS, ids=lambda e: f"{e.__module__}.{e.__name__}")
def test_every_enum_is_closed(enum_cls) -> None:
    holder = _enum_holder(enum_cls)
    for variant in enum_cls:
        assert decode(holder, {"Value": variant.value}).value is variant
        assert encode(holder(value=variant)) == {"Value": variant.value}

    with pytest.raises(UnknownVariant) as e:
        decode(holder, {"Value": "not-a-variant"})
    assert e.value.key == "Value"
    assert e.value.literal == "not-a-variant"
