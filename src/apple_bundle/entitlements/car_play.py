from __future__ import annotations

from ..codec import plist_field, record


@record
class CarPlay:
    # Available: iOS 14.0+
    carplay_audio: bool | None = plist_field("com.apple.developer.carplay-audio")

    # Available: iOS 14.0+
    carplay_charging: bool | None = plist_field("com.apple.developer.carplay-charging")

    # Available: iOS 14.0+
    carplay_communication: bool | None = plist_field("com.apple.developer.carplay-communication")

    # Available: iOS 12.0+
    carplay_maps: bool | None = plist_field("com.apple.developer.carplay-maps")

    # Available: iOS 14.0+
    carplay_parking: bool | None = plist_field("com.apple.developer.carplay-parking")

    # Available: iOS 14.0+
    carplay_quick_ordering: bool | None = plist_field("com.apple.developer.carplay-quick-ordering")

    # Available: iOS 12.0-14.0
    carplay_messaging: bool | None = plist_field(
        "com.apple.developer.carplay-messaging", deprecated="iOS 12.0-14.0"
    )

    # Available: iOS 12.0-14.0
    playable_content: bool | None = plist_field(
        "com.apple.developer.playable-content", deprecated="iOS 12.0-14.0"
    )
