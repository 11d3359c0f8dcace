"""
推送通知环境（`aps-environment`）相关签名权限。

`aps-environment` 用于 iOS/tvOS/watchOS，macOS 使用 `com.apple.developer.aps-environment`。
"""

from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record


@record
class PushNotifications:
    """远程推送使用的 APNs 环境。"""

    # The environment for push notifications.
    # Available: iOS 10.0+, tvOS 10.0+, watchOS 3.0+
    aps_environment: APSEnvironment | None = plist_field("aps-environment")

    # The environment for push notifications in macOS apps.
    # Available: macOS 10.14+
    aps_environment_macos: APSEnvironment | None = plist_field(
        "com.apple.developer.aps-environment"
    )

    # Enable receiving notifications without displaying the notification to the user.
    # Available: iOS 13.3+, macOS 11.0+
    usernotifications_filtering: bool | None = plist_field(
        "com.apple.developer.usernotifications.filtering"
    )


class APSEnvironment(Enum):
    """`aps-environment` 的取值。"""

    # The APNs development environment.
    DEVELOPMENT = "development"
    # The APNs production environment.
    PRODUCTION = "production"
