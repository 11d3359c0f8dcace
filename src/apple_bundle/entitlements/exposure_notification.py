from __future__ import annotations

from ..codec import plist_field, record


@record
class ExposureNotification:
    # A Boolean value that indicates whether the app may use exposure notification.
    # Available: iOS 13.5+
    exposure_notification: bool | None = plist_field("com.apple.developer.exposure-notification")
