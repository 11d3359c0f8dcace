from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record


@record
class Health:
    # A Boolean value that indicates whether the app may request user authorization to access
    # health and activity data that appears in the Health app.
    # Available: iOS 8.0+
    healthkit: bool | None = plist_field("com.apple.developer.healthkit")

    # Health data types that require additional permission.
    # Available: iOS 8.0+
    healthkit_access: list[HealthKitCapabilities] | None = plist_field(
        "com.apple.developer.healthkit.access"
    )


class HealthKitCapabilities(Enum):
    # The app can request access to FHIR-backed clinical records.
    HEALTH_RECORDS = "health-records"
