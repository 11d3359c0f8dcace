from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record


@record
class Tv:
    # The entitlement for distinguishing between multiple user accounts on Apple TV.
    # Available: tvOS 13.0+
    user_management: list[UserManagement] | None = plist_field(
        "com.apple.developer.user-management"
    )

    # Available: iOS 10.0+, macOS 10.14+, tvOS 10.0+
    video_subscriber_single_sign_on: bool | None = plist_field(
        "com.apple.developer.video-subscriber-single-sign-on"
    )

    # Available: iOS 10.0+, macOS 10.14+, tvOS 10.0+
    smoot_subscriptionservice: bool | None = plist_field("com.apple.smoot.subscriptionservice")


class UserManagement(Enum):
    # The value that grants access to TVUserManager, so you can map your own profiles to users in
    # the system.
    GET_CURRENT_USER = "get-current-user"
    # The value that grants access to a separate set of data for your app for each user from
    # GameCenter, iCloud, and local storage. Available in tvOS 14 or later.
    RUNS_AS_CURRENT_USER = "runs-as-current-user"
