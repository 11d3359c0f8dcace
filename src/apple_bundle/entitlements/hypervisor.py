"""
Hypervisor 与虚拟化相关的签名权限（仅 macOS）。
"""

from __future__ import annotations

from ..codec import plist_field, record


@record
class Hypervisor:
    """macOS Hypervisor 框架权限。"""

    # A Boolean value that indicates whether the app creates and manages virtual machines.
    # Important: If your app has a deployment target of macOS 10.15 or earlier, add the
    # com.apple.vm.hypervisor entitlement to your app in addition to this entitlement.
    # Available: macOS 11.0+
    security_hypervisor: bool | None = plist_field("com.apple.security.hypervisor")

    # A Boolean value that indicates whether the app creates and manages virtual machines.
    # Available: macOS 10.10-11.0
    vm_hypervisor: bool | None = plist_field(
        "com.apple.vm.hypervisor",
        deprecated="macOS 10.10-11.0",
        note=(
            "For apps with a deployment target of macOS 11 and later, use "
            "com.apple.security.hypervisor instead. For deployment targets earlier than macOS 11, "
            "add both that and the com.apple.vm.hypervisor entitlement to your app."
        ),
    )

    # A Boolean value that indicates whether the app captures USB devices and uses them in the
    # guest-operating system.
    # Available: macOS 10.10+
    vm_device_access: bool | None = plist_field("com.apple.vm.device-access")

    # A Boolean that indicates whether the app manages virtual network interfaces without
    # escalating privileges to the root user.
    # Available: macOS 10.10+
    vm_networking: bool | None = plist_field("com.apple.vm.networking")

    # A Boolean that indicates whether the app can use the Virtualization framework.
    # Available: macOS 11.0+
    security_virtualization: bool | None = plist_field("com.apple.security.virtualization")
