"""
plist 记录的声明方式与统一编解码规则。

记录（record）是用 `@record` 修饰的数据类，字段通过 `plist_field` 绑定一个固定的外部键；
通过 `flattened` 声明的成员把自身的键并入父记录的扁平命名空间（聚合即由此组成）。

编码规则：
- 值为 `None` 的字段视为缺省，直接省略，不输出空占位。
- 枚举输出其固定字面量（`Enum.value`）；空列表照常输出，与缺省区分。

解码规则：
- 缺失的可选键解码为 `None`；缺失的必填键抛出 `MissingRequiredField`。
- 值形状不符抛出 `TypeMismatch`；枚举字面量不在取值表中抛出 `UnknownVariant`。
- 未声明的键一律忽略。
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import functools
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from .errors import (
    DecodeError,
    DuplicateExternalKey,
    MissingRequiredField,
    TypeMismatch,
    UnknownVariant,
)
from .plist_path import PathElem, format_key_path

T = TypeVar("T")
E = TypeVar("E", bound=enum.Enum)

_META_KEY = "apple_bundle"
_RECORD_ATTR = "__plist_record__"
_VARIANTS_ATTR = "__deprecated_variants__"


@dataclass(frozen=True)
class Deprecation:
    """弃用说明，仅作为元数据，不改变编解码行为。"""

    since: str
    note: str | None = None


@dataclass(frozen=True)
class _FieldMeta:
    key: str | None
    required: bool = False
    member: type | None = None
    deprecated: Deprecation | None = None


@dataclass(frozen=True)
class FieldSpec:
    """记录中单个字段的完整描述（类型注解已解析）。"""

    name: str
    key: str | None
    type: Any
    required: bool = False
    flatten: bool = False
    deprecated: Deprecation | None = None


def plist_field(
    key: str,
    *,
    required: bool = False,
    default: Any = dataclasses.MISSING,
    default_factory: Callable[[], Any] | Any = dataclasses.MISSING,
    deprecated: str | None = None,
    note: str | None = None,
) -> Any:
    """声明一个绑定外部键的字段；非必填且未给默认值时默认为 `None`。"""
    if not key:
        raise ValueError("external key must be a non-empty string")
    if note is not None and deprecated is None:
        raise ValueError(f"{key}: note given without deprecated")
    dep = Deprecation(deprecated, note) if deprecated is not None else None
    if not required and default is dataclasses.MISSING and default_factory is dataclasses.MISSING:
        default = None
    meta = _FieldMeta(key=key, required=required, deprecated=dep)
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={_META_KEY: meta},
    )


def flattened(member: type) -> Any:
    """声明一个扁平成员：其字段直接并入父记录的命名空间。"""
    if not is_record(member):
        raise TypeError(f"{member!r} is not a plist record")
    return dataclasses.field(
        default_factory=member,
        metadata={_META_KEY: _FieldMeta(key=None, member=member)},
    )


def record(cls: type[T]) -> type[T]:
    """把类转换为仅限关键字构造的数据类，并在定义时检查外部键是否重复。"""
    cls = dataclasses.dataclass(kw_only=True)(cls)
    for f in dataclasses.fields(cls):
        if _META_KEY not in f.metadata:
            raise TypeError(
                f"{cls.__name__}.{f.name} must be declared with plist_field() or flattened()"
            )
    setattr(cls, _RECORD_ATTR, True)
    check_unique_keys(cls)
    return cls


def deprecated_variants(**notes: str) -> Callable[[type[E]], type[E]]:
    """为枚举成员附加弃用说明，例如 `@deprecated_variants(BLACK_OPAQUE="iOS 2.0-7.0")`。"""

    def wrap(enum_cls: type[E]) -> type[E]:
        table: dict[enum.Enum, Deprecation] = {}
        for name, since in notes.items():
            # 成员名拼错时在导入阶段直接报 KeyError。
            table[enum_cls[name]] = Deprecation(since)
        setattr(enum_cls, _VARIANTS_ATTR, table)
        return enum_cls

    return wrap


def variant_deprecation(value: enum.Enum) -> Deprecation | None:
    """返回枚举成员的弃用说明；未弃用时返回 `None`。"""
    return getattr(type(value), _VARIANTS_ATTR, {}).get(value)


def is_record(obj: Any) -> bool:
    """判断对象（或类）是否为 `@record` 声明的记录。"""
    cls = obj if isinstance(obj, type) else type(obj)
    return bool(cls.__dict__.get(_RECORD_ATTR, False))


@functools.cache
def fields(cls: type) -> tuple[FieldSpec, ...]:
    """返回记录的字段表；类型注解在首次访问时解析，以允许前向引用。"""
    if not is_record(cls):
        raise TypeError(f"{cls!r} is not a plist record")
    hints = typing.get_type_hints(cls)
    out: list[FieldSpec] = []
    for f in dataclasses.fields(cls):
        meta: _FieldMeta = f.metadata[_META_KEY]
        out.append(
            FieldSpec(
                name=f.name,
                key=meta.key,
                type=hints[f.name],
                required=meta.required,
                flatten=meta.member is not None,
                deprecated=meta.deprecated,
            )
        )
    return tuple(out)


def declared_keys(cls: type) -> list[tuple[str, str, str]]:
    """列出记录扁平命名空间内的全部 `(外部键, 记录名, 字段名)`，递归展开扁平成员。"""
    out: list[tuple[str, str, str]] = []
    for f in dataclasses.fields(cls):
        meta: _FieldMeta = f.metadata[_META_KEY]
        if meta.member is not None:
            out.extend(declared_keys(meta.member))
        else:
            out.append((meta.key, cls.__name__, f.name))
    return out


def check_unique_keys(cls: type) -> None:
    """同一扁平命名空间内出现重复外部键时抛出 `DuplicateExternalKey`。"""
    seen: dict[str, str] = {}
    for key, rec, attr in declared_keys(cls):
        owner = f"{rec}.{attr}"
        if key in seen:
            raise DuplicateExternalKey(key, seen[key], owner)
        seen[key] = owner


def plist_type_name(value: Any) -> str:
    """以 plist 的类型名描述一个 Python 值，用于错误信息。"""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "real"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "dictionary"
    if isinstance(value, (bytes, bytearray)):
        return "data"
    if isinstance(value, datetime.datetime):
        return "date"
    return type(value).__name__


def _unwrap_optional(tp: Any) -> Any:
    """`X | None` -> `X`；其它注解原样返回。"""
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) != 1:
            raise TypeError(f"unsupported union annotation: {tp!r}")
        return args[0]
    return tp


def encode(obj: Any) -> dict[str, Any]:
    """把记录编码为 plist 字典；键顺序与字段声明顺序一致。"""
    if not is_record(obj):
        raise TypeError(f"{type(obj).__name__} is not a plist record")
    out: dict[str, Any] = {}
    _encode_into(obj, out)
    return out


def _encode_into(obj: Any, out: dict[str, Any]) -> None:
    for spec in fields(type(obj)):
        value = getattr(obj, spec.name)
        if value is None:
            continue
        if spec.flatten:
            _encode_into(value, out)
            continue
        out[spec.key] = _encode_value(_unwrap_optional(spec.type), value)


def _encode_value(tp: Any, value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if is_record(value):
        return encode(value)
    origin = typing.get_origin(tp)
    if origin is list:
        (elem,) = typing.get_args(tp)
        return [_encode_value(elem, v) for v in value]
    if origin is dict:
        _, vt = typing.get_args(tp)
        return {k: _encode_value(vt, v) for k, v in value.items()}
    if tp is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


def decode(cls: type[T], doc: Any) -> T:
    """把 plist 字典解码为记录；任何错误都会中止整个解码，不返回部分结果。"""
    if not is_record(cls):
        raise TypeError(f"{cls!r} is not a plist record")
    return _decode_record(cls, doc, ())


def _decode_record(cls: type[T], doc: Any, path: tuple[PathElem, ...]) -> T:
    if not isinstance(doc, dict):
        raise TypeMismatch(format_key_path(path), "dictionary", plist_type_name(doc))

    kwargs: dict[str, Any] = {}
    for spec in fields(cls):
        if spec.flatten:
            try:
                kwargs[spec.name] = _decode_record(spec.type, doc, path)
            except DecodeError as e:
                # 逐层覆盖，最终保留最外层聚合的成员名。
                e.member = spec.name
                raise
            continue

        sub = (*path, spec.key)
        if spec.key not in doc:
            if spec.required:
                err = MissingRequiredField(format_key_path(sub))
                err.record, err.field = cls.__name__, spec.name
                raise err
            kwargs[spec.name] = None
            continue

        try:
            kwargs[spec.name] = _decode_value(_unwrap_optional(spec.type), doc[spec.key], sub)
        except DecodeError as e:
            if e.record is None:
                e.record, e.field = cls.__name__, spec.name
            raise
    return cls(**kwargs)


def _decode_value(tp: Any, value: Any, path: tuple[PathElem, ...]) -> Any:
    if tp is Any:
        return value

    origin = typing.get_origin(tp)
    if origin is list:
        if not isinstance(value, list):
            raise TypeMismatch(format_key_path(path), "array", plist_type_name(value))
        (elem,) = typing.get_args(tp)
        return [_decode_value(elem, v, (*path, i)) for i, v in enumerate(value)]
    if origin is dict:
        if not isinstance(value, dict):
            raise TypeMismatch(format_key_path(path), "dictionary", plist_type_name(value))
        _, vt = typing.get_args(tp)
        return {k: _decode_value(vt, v, (*path, k)) for k, v in value.items()}

    if isinstance(tp, type) and issubclass(tp, enum.Enum):
        if not isinstance(value, str):
            raise TypeMismatch(format_key_path(path), "string", plist_type_name(value))
        try:
            return tp(value)
        except ValueError:
            raise UnknownVariant(format_key_path(path), value) from None

    if is_record(tp):
        return _decode_record(tp, value, path)

    if tp is bool:
        if not isinstance(value, bool):
            raise TypeMismatch(format_key_path(path), "boolean", plist_type_name(value))
        return value
    if tp is int:
        # plist 中 <true/> 不是整数。
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeMismatch(format_key_path(path), "integer", plist_type_name(value))
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeMismatch(format_key_path(path), "real", plist_type_name(value))
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise TypeMismatch(format_key_path(path), "string", plist_type_name(value))
        return value

    raise TypeError(f"unsupported field type: {tp!r}")


def unknown_keys(cls: type, doc: dict[str, Any]) -> list[str]:
    """返回文档顶层中未被记录声明的键（保持文档顺序）。"""
    declared = {key for key, _rec, _attr in declared_keys(cls)}
    return [k for k in doc if k not in declared]


def deprecated_fields(obj: Any) -> list[tuple[str, Deprecation]]:
    """列出值中实际出现的已弃用字段与枚举成员，键以 key path 表示。"""
    out: list[tuple[str, Deprecation]] = []
    _collect_deprecated(obj, (), out)
    return out


def _collect_deprecated(obj: Any, path: tuple[PathElem, ...], out: list) -> None:
    for spec in fields(type(obj)):
        value = getattr(obj, spec.name)
        if value is None:
            continue
        if spec.flatten:
            _collect_deprecated(value, path, out)
            continue
        sub = (*path, spec.key)
        if spec.deprecated is not None:
            out.append((format_key_path(sub), spec.deprecated))
        _collect_deprecated_value(value, sub, out)


def _collect_deprecated_value(value: Any, path: tuple[PathElem, ...], out: list) -> None:
    if isinstance(value, enum.Enum):
        dep = variant_deprecation(value)
        if dep is not None:
            out.append((f"{format_key_path(path)}={value.value}", dep))
    elif is_record(value):
        _collect_deprecated(value, path, out)
    elif isinstance(value, list):
        for i, v in enumerate(value):
            _collect_deprecated_value(v, (*path, i), out)
    elif isinstance(value, dict):
        for k, v in value.items():
            _collect_deprecated_value(v, (*path, k), out)
