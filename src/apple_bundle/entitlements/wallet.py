from __future__ import annotations

from ..codec import plist_field, record


@record
class Wallet:
    # A list of identifiers that specify pass types that your app can access in Wallet.
    # Available: iOS 6.0+, watchOS 2.0+
    pass_type_ids: list[str] | None = plist_field("com.apple.developer.pass-type-identifiers")

    # A list of merchant IDs your app uses for Apple Pay support.
    # Available: iOS 6.0+, watchOS 2.0+
    merchant_ids: list[str] | None = plist_field("com.apple.developer.in-app-payments")
