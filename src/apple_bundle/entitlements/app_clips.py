from __future__ import annotations

from ..codec import plist_field, record


@record
class AppClips:
    # A list of parent application identifiers for an App Clip with exactly one entry.
    # Available: iOS 14.0+
    parent_application_identifiers: list[str] | None = plist_field(
        "com.apple.developer.parent-application-identifiers"
    )

    # A Boolean value that indicates whether a bundle represents an App Clip.
    # Available: iOS 14.0+
    on_demand_install_capable: bool | None = plist_field(
        "com.apple.developer.on-demand-install-capable"
    )
