from __future__ import annotations

from ..codec import plist_field, record


@record
class Siri:
    # A Boolean value that indicates whether the app handles Siri requests.
    # Available: iOS 10.0+, watchOS 3.2+
    siri: bool | None = plist_field("com.apple.developer.siri")
