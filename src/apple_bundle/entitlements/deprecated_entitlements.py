"""
已弃用、但仍需能读写的签名权限。

弃用只是元数据：这些字段的编解码与其它字段完全一致。
"""

from __future__ import annotations

from ..codec import plist_field, record


@record
class DeprecatedEntitlements:
    """已被 Apple 弃用、仅为兼容旧工程保留的权限。"""

    # A Boolean value that indicates whether the app may provide directions beyond what Maps
    # supports, such as subway routes, hiking trails, and bike paths.
    # Available: macOS 10.9-10.11
    maps: bool | None = plist_field(
        "com.apple.developer.maps",
        deprecated="macOS 10.9-10.11",
        note="Using Maps no longer requires an entitlement.",
    )

    # A Boolean value that indicates whether the app may exchange audio with other Inter-App
    # Audio-enabled apps.
    # Available: iOS 2.2-13.0
    inter_app_audio: bool | None = plist_field(
        "inter-app-audio",
        deprecated="iOS 2.2-13.0",
        note=(
            "Inter-App Audio is deprecated in iOS 13 and is unavailable when running iPad apps in "
            "macOS."
        ),
    )
