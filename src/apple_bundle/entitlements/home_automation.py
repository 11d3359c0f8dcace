from __future__ import annotations

from ..codec import plist_field, record


@record
class HomeAutomation:
    # A Boolean value that indicates whether users of the app may manage HomeKit-compatible
    # accessories.
    # Available: iOS 8.0+, tvOS 10.0+, watchOS 2.0+
    homekit: bool | None = plist_field("com.apple.developer.homekit")
