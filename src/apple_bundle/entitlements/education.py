from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record


@record
class Education:
    # The ClassKit development or production environment for an education app that works with the
    # Schoolwork app.
    # Available: iOS 11.4+, macOS 11.0+
    classkit_environment: ClassKitEnvironment | None = plist_field(
        "com.apple.developer.ClassKit-environment"
    )

    # A Boolean value that indicates whether an app may create an assessment session.
    # Important: If your app has a deployment target earlier than macOS 11, to use the
    # com.apple.developer.automatic-assessment-configuration entitlement, your app also needs the
    # com.apple.security.temporary-exception.mach-lookup.global-name entitlement. Add this to your
    # app’s entitlements file with a corresponding value that’s an array of strings containing the
    # string com.apple.assessmentagent.
    # Available: iOS 13.4+, macOS 10.15.4+
    automatic_assessment_configuration: bool | None = plist_field(
        "com.apple.developer.automatic-assessment-configuration"
    )


class ClassKitEnvironment(Enum):
    # The environment used to develop and test your app locally, without requiring a Managed Apple
    # ID issued by an educational institution.
    DEVELOPMENT = "development"
    # The environment used by customers of your app who have a Managed Apple ID. This enviroment
    # enables teachers and students to share data through iCloud.
    PRODUCTION = "production"
