"""
Entitlements 与 Info.plist 记录共享的轻量值类型。
"""

from __future__ import annotations

from .codec import plist_field, record


@record
class DefaultDictionary:
    """只包含 `default` 一个字符串键的字典值。"""

    # `default` 必填：用于 `LSEnvironment`、`NSMenuItem`、IOKit 匹配字典等。
    default: str = plist_field("default", required=True)
