"""
驱动与内核扩展（kext / DriverKit）使用的 Info.plist 键。
"""

from __future__ import annotations

from ..codec import plist_field, record
from ..types import DefaultDictionary


@record
class DriverPersonalities:
    # One or more groups of attributes that tell the system about the devices your driver
    # supports, keyed by personality name.
    # Available: macOS 10.0+
    kit_personalities: dict[str, KitPersonalities] | None = plist_field("IOKitPersonalities")


@record
class KitPersonalities:
    """单个驱动 personality，按名称作为字典键。"""

    # The name of your driver’s main class, which is the entry point for interacting with your
    # driver’s code.
    # Available: macOS 10.14+
    user_class: str | None = plist_field("IOUserClass")

    # The name of the class that your driver expects to provide the implementation for its
    # provider object.
    # Available: macOS 10.0+
    provider_class: str | None = plist_field("IOProviderClass")

    # The name of the class to instantiate from your driver.
    # Available: macOS 10.0+
    class_: str | None = plist_field("IOClass")

    # The name of the class to instantiate when the system requires a client connection to the
    # driver.
    # Available: macOS 10.0+
    user_client_class: str | None = plist_field("IOUserClientClass")

    # The name that the system uses to facilitate communication between your driver and other
    # clients.
    # Available: macOS 10.14+
    user_server_name: str | None = plist_field("IOUserServerName")

    # The device-specific keys the system must match in order to use your driver.
    # Available: macOS 10.0+
    property_match: DefaultDictionary | None = plist_field("IOPropertyMatch")

    # One or more strings that contain the names of possible provider objects in the system
    # registry.
    # Available: macOS 10.0+
    name_match: list[str] | None = plist_field("IONameMatch")

    # One or more system-specific or device-specific resources that your driver requires.
    # Available: macOS 10.0+
    resource_match: str | None = plist_field("IOResourceMatch")

    # Available: macOS 10.0+
    parent_match: DefaultDictionary | None = plist_field("IOParentMatch")

    # Available: macOS 10.0+
    path_match: str | None = plist_field("IOPathMatch")

    # Available: macOS 10.0+
    match_category: str | None = plist_field("IOMatchCategory")


@record
class KextDependencies:
    # Specify a previous version for the current driver, or the driver’s current version. Format
    # this string the same way you format the value of the CFBundleVersion key. The combination of
    # this value and the value in the CFBundleVersion key define the range of versions that offers
    # the same level of compatibility. Dependent drivers use this information to determine if they
    # are compatible with the driver. For example, if the driver’s current version is 10.0, and
    # you set the value of this key to 5.0, a driver that depends on version 7.0 can successfully
    # use the current driver.
    # Available: macOS 10.10+
    bundle_compatible_version: str | None = plist_field("OSBundleCompatibleVersion")

    # The drivers that the system must load before your driver.
    # Available: macOS 10.10+
    bundle_libraries: DefaultDictionary | None = plist_field("OSBundleLibraries")


@record
class ThunderboltCompatibility:
    # A Boolean value that indicates whether your driver supports Thunderbolt devices.
    # Available: macOS 10.10+
    tunnel_compatible: bool | None = plist_field("IOPCITunnelCompatible")
