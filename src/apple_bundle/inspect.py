"""
plist 文档只读检查模块。

用于在不修改文件的情况下，判断文档类型、按 schema 解码并汇总关键信息。
"""

from __future__ import annotations

import plistlib
from dataclasses import dataclass
from typing import Any

from .codec import (
    Deprecation,
    declared_keys,
    decode,
    deprecated_fields,
    encode,
    fields,
    unknown_keys,
)
from .entitlements.aggregate import Entitlements
from .info_plist.aggregate import InfoPlist

# `-k/--kind` 可选值与对应的聚合记录。
SCHEMAS: dict[str, type] = {
    "entitlements": Entitlements,
    "info-plist": InfoPlist,
}


@dataclass(frozen=True)
class DocumentInfo:
    """单个 plist 文档的检查结果。"""

    path: str
    kind: str
    key_count: int
    members: list[str]
    unknown_keys: list[str]
    deprecated_keys: list[str]


def detect_kind(doc: dict[str, Any]) -> str:
    """按顶层键的命中数判断文档类型；无法区分时抛出 `ValueError`。"""
    scores: dict[str, int] = {}
    for kind, cls in SCHEMAS.items():
        known = {key for key, _rec, _attr in declared_keys(cls)}
        scores[kind] = sum(1 for k in doc if k in known)

    ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
    (best, best_score), (_other, other_score) = ranked[0], ranked[1]
    if best_score == 0:
        raise ValueError("no known Entitlements or Info.plist keys found")
    if best_score == other_score:
        raise ValueError(f"document matches {best_score} keys of every schema")
    return best


def key_table(cls: type) -> list[tuple[str, str, Deprecation | None]]:
    """列出记录扁平命名空间的全部键：`(外部键, Record.attr, 弃用说明)`。"""
    out: list[tuple[str, str, Deprecation | None]] = []
    for spec in fields(cls):
        if spec.flatten:
            out.extend(key_table(spec.type))
        else:
            out.append((spec.key, f"{cls.__name__}.{spec.name}", spec.deprecated))
    return out


def inspect_document(path: str, doc: dict[str, Any], kind: str) -> tuple[DocumentInfo, Any]:
    """按指定类型解码文档，返回检查结果与解码后的记录。"""
    cls = SCHEMAS[kind]
    value = decode(cls, doc)
    members = [spec.name for spec in fields(cls) if encode(getattr(value, spec.name))]
    info = DocumentInfo(
        path=path,
        kind=kind,
        key_count=len(encode(value)),
        members=members,
        unknown_keys=unknown_keys(cls, doc),
        deprecated_keys=[key for key, _dep in deprecated_fields(value)],
    )
    return info, value


def format_value(value: Any) -> str:
    """按 PlistBuddy 的习惯输出标量；字典与数组输出为 XML plist 片段。"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return plistlib.dumps(value, sort_keys=False).decode("utf-8").rstrip("\n")
    return str(value)


def print_key_table(kind: str) -> None:
    for key, owner, dep in key_table(SCHEMAS[kind]):
        line = f"{key}  {owner}"
        if dep is not None:
            line += f"  (deprecated: {dep.since})"
        print(line)


def print_document_info(info: DocumentInfo) -> None:
    """打印文档检查结果。"""
    print("Plist Info:")
    print(f"  Input          : {info.path}")
    print(f"  Kind           : {info.kind}")
    print(f"  Declared Keys  : {info.key_count}")
    print(f"  Members        : {', '.join(info.members) if info.members else '-'}")
    print(f"  Undeclared Keys: {len(info.unknown_keys)}")
    if info.deprecated_keys:
        print(f"  Deprecated     : {', '.join(info.deprecated_keys)}")
    else:
        print("  Deprecated     : -")
