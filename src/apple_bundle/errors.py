"""
schema 编解码过程中的错误类型。

解码错误（`DecodeError` 及其子类）都是 `ValueError`，携带出错键的完整路径，
以及最内层记录名、字段名；跨越聚合（aggregate）边界时还会补充成员名。
`DuplicateExternalKey` 只会在定义记录类时出现，不会由输入数据触发。
"""

from __future__ import annotations


class SchemaError(Exception):
    """所有 schema 相关错误的基类。"""


class DecodeError(SchemaError, ValueError):
    """plist 文档无法解码为目标记录。"""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(key, message)
        self.key = key
        self.message = message
        # 以下上下文由 codec 在错误向外传播时补齐。
        self.record: str | None = None
        self.field: str | None = None
        self.member: str | None = None

    def __str__(self) -> str:
        where = self.key or "(root)"
        parts = [f"{where}: {self.message}"]
        if self.record:
            target = f"{self.record}.{self.field}" if self.field else self.record
            parts.append(f"in {target}")
        if self.member:
            parts.append(f"(member: {self.member})")
        return " ".join(parts)


class MissingRequiredField(DecodeError):
    """必填字段的键在输入文档中缺失。"""

    def __init__(self, key: str) -> None:
        super().__init__(key, "missing required key")


class TypeMismatch(DecodeError):
    """键对应的值与字段声明的形状不一致。"""

    def __init__(self, key: str, expected: str, actual: str) -> None:
        super().__init__(key, f"expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class UnknownVariant(DecodeError):
    """枚举字段的字面量不在其封闭取值表中。"""

    def __init__(self, key: str, literal: str) -> None:
        super().__init__(key, f"unknown variant {literal!r}")
        self.literal = literal


class DuplicateExternalKey(SchemaError):
    """同一扁平命名空间内两个声明使用了相同的外部键。"""

    def __init__(self, key: str, record_a: str, record_b: str) -> None:
        super().__init__(f"external key {key!r} declared by both {record_a} and {record_b}")
        self.key = key
        self.record_a = record_a
        self.record_b = record_b


class PlistFormatError(ValueError):
    """输入字节不是合法的 plist（XML 或二进制）。"""
