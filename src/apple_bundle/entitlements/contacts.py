from __future__ import annotations

from ..codec import plist_field, record


@record
class Contacts:
    """通讯录相关权限。"""

    # A Boolean value that indicates whether the app may access the notes stored in contacts.
    # NOTE: the attribute name reads like a CarPlay field but the key is the contacts notes
    # entitlement; both are kept as-is for compatibility.
    # Available: iOS 13.0+
    carplay_audio: bool | None = plist_field("com.apple.developer.contacts.notes")
