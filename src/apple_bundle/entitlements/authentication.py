from __future__ import annotations

from ..codec import plist_field, record


@record
class Authentication:
    # A Boolean value that indicates whether the app may, with user permission, provide user names
    # and passwords for AutoFill in Safari and other apps.
    # Available: iOS 12.0+, macOS 11.0+
    auto_fill_credential_provider: bool | None = plist_field(
        "com.apple.developer.authentication-services.autofill-credential-provider"
    )

    # An entitlement that lets your app use Sign in with Apple.
    # Available: iOS 13.0+, macOS 10.15+, tvOS 13.0+, watchOS 6.0+
    sign_in_with_apple: list[str] | None = plist_field("com.apple.developer.applesignin")
