from __future__ import annotations

from collections.abc import Sequence
from typing import Any

PathElem = str | int


def parse_key_path(key_path: str) -> list[PathElem]:
    """
    将 PlistBuddy 风格路径解析为字典键/数组索引序列。

    语法说明：
    - `A:B:C` 表示字典键 `A -> B -> C`。
    - `CFBundleURLTypes:0:CFBundleURLSchemes:0` 支持数组索引。
    - 允许以前导 `:` 开头，兼容 PlistBuddy 习惯。
    """
    s = key_path.strip()
    if s.startswith(":"):
        s = s[1:]
    if not s:
        raise ValueError("empty key path")
    parts = s.split(":")
    out: list[PathElem] = []
    for p in parts:
        if p == "":
            raise ValueError(f"invalid key path: {key_path}")
        if p.isdigit():
            out.append(int(p))
        else:
            out.append(p)
    return out


def format_key_path(path: Sequence[PathElem]) -> str:
    """
    把字典键/数组索引序列拼成 key path，用于在错误信息中定位嵌套值。

    注意：纯数字的字典键（如名为 `0` 的 `NSExceptionDomains` 条目）拼接后与数组索引
    无法区分，`parse_key_path` 会把它读回为整数；`get_value` 在字典上会按字符串键回退查找。
    """
    return ":".join(str(p) for p in path)


def get_value(root: Any, key_path: str) -> Any:
    """按 key path 读取值；路径不存在或容器类型不符时抛出 `KeyError`。"""
    cur = root
    for elem in parse_key_path(key_path):
        if isinstance(elem, int) and isinstance(cur, dict):
            # 字典中的纯数字键。
            elem = str(elem)
        if isinstance(elem, int):
            if not isinstance(cur, list) or elem >= len(cur):
                raise KeyError(key_path)
        elif not isinstance(cur, dict) or elem not in cur:
            raise KeyError(key_path)
        cur = cur[elem]
    return cur
