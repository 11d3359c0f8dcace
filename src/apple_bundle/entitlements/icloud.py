"""
iCloud 容器与服务签名权限。
"""

from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record


@record
class ICloud:
    """iCloud 容器、服务与键值存储相关权限。"""

    # The container identifiers for the iCloud development environment.
    # Available: iOS 3.0+, macOS 10.7+, tvOS 9.0+, watchOS 2.0+
    icloud_container_development_container_identifiers: list[str] | None = plist_field(
        "com.apple.developer.icloud-container-development-container-identifiers"
    )

    # The development or production environment to use for the iCloud containers.
    # Available: iOS 3.0+, macOS 10.7+, tvOS 9.0+, watchOS 2.0+
    icloud_container_environment: ICloudContainerEnvironment | None = plist_field(
        "com.apple.developer.icloud-container-environment"
    )

    # The container identifiers for the iCloud production environment.
    # Available: iOS 3.0+, macOS 10.7+, tvOS 9.0+, watchOS 2.0+
    icloud_container_identifiers: list[str] | None = plist_field(
        "com.apple.developer.icloud-container-identifiers"
    )

    # The iCloud services used by the app.
    # Available: iOS 3.0+, macOS 10.7+, tvOS 9.0+, watchOS 2.0+
    icloud_services: list[ICloudServices] | None = plist_field(
        "com.apple.developer.icloud-services"
    )

    # The container identifier to use for iCloud key-value storage.
    # Available: iOS 3.0+, macOS 10.7+, tvOS 9.0+, watchOS 2.0+
    icloud_key_value_store: str | None = plist_field(
        "com.apple.developer.ubiquity-kvstore-identifier"
    )


class ICloudContainerEnvironment(Enum):
    DEVELOPMENT = "Development"
    PRODUCTION = "Production"


class ICloudServices(Enum):
    CLOUD_DOCUMENTS = "CloudDocuments"
    CLOUD_KIT = "CloudKit"
