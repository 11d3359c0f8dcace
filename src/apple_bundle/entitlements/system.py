"""
系统扩展与 DriverKit 签名权限（仅 macOS）。
"""

from __future__ import annotations

from ..codec import plist_field, record
from ..types import DefaultDictionary


@record
class System:
    """在用户空间扩展 macOS 能力（DriverKit、System Extension）。"""

    # A Boolean value that indicates whether your app has permission to activate or deactivate
    # system extensions.
    # Available: macOS 10.15+
    system_extension: bool | None = plist_field("com.apple.developer.system-extension.install")

    # A Boolean value that indicates whether other development teams may distribute a system
    # extension you create.
    # Available: macOS 10.15+
    system_extension_redistributable: bool | None = plist_field(
        "com.apple.developer.system-extension.redistributable"
    )

    # The entitlement required to monitor system events for potentially malicious activity.
    # Available: macOS 10.15+
    endpoint_security_client: bool | None = plist_field(
        "com.apple.developer.endpoint-security.client"
    )

    # A Boolean value that indicates whether your extension has permission to run as a user-space
    # driver.
    # Available: macOS 10.15+
    driverkit: bool | None = plist_field("com.apple.developer.driverkit")

    # A Boolean value indicating whether to match the driver against devices that communicate
    # using networking protocols.
    # Available: macOS 10.15+
    driverkit_family_networking: bool | None = plist_field(
        "com.apple.developer.driverkit.family.networking"
    )

    # A Boolean value that indicates whether to match the driver against devices with SCSI
    # controllers.
    # Available: macOS 11.3+
    driverkit_family_scsi_controller: bool | None = plist_field(
        "com.apple.developer.driverkit.family.scsicontroller"
    )

    # A Boolean value that indicates whether to match the driver against devices with serial
    # communication interfaces.
    # Available: macOS 10.15+
    driverkit_family_serial: bool | None = plist_field(
        "com.apple.developer.driverkit.family.serial"
    )

    # An array of PCI device descriptors that your custom driver supports.
    # Available: macOS 10.15.4+
    driverkit_transport_pci: list[DefaultDictionary] | None = plist_field(
        "com.apple.developer.driverkit.transport.pci"
    )

    # An array of dictionaries that identify the USB devices the driver supports.
    # Available: macOS 10.15+
    driverkit_transport_usb: list[DefaultDictionary] | None = plist_field(
        "com.apple.developer.driverkit.transport.usb"
    )

    # An array of strings that represent driver extensions which may communicate with other
    # DriverKit services.
    # Available: macOS 10.15+
    driverkit_userclient_access: list[str] | None = plist_field(
        "com.apple.developer.driverkit.userclient-access"
    )

    # A Boolean value that indicates whether the driver provides a HID-related service to the
    # system.
    # Available: macOS 10.15+
    driverkit_family_hid_device: bool | None = plist_field(
        "com.apple.developer.driverkit.family.hid.device"
    )

    # A Boolean value that indicates whether the driver provides a HID-related event service to
    # the system.
    # Available: macOS 10.15+
    driverkit_family_hid_eventservice: bool | None = plist_field(
        "com.apple.developer.driverkit.family.hid.eventservice"
    )

    # A Boolean value that indicates whether the driver communicates with human interface devices.
    # Available: macOS 10.15+
    driverkit_transport_hid: bool | None = plist_field(
        "com.apple.developer.driverkit.transport.hid"
    )

    # A Boolean value that indicates whether the driver creates a virtual HID device.
    # Available: macOS 10.15+
    hid_virtual_device: bool | None = plist_field("com.apple.developer.hid.virtual.device")

