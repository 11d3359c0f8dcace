from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record


@record
class WirelessInterfaces:
    # A Boolean value indicating whether your app can access information about the connected Wi-Fi
    # network.
    # Available: iOS 12.0+
    access_wifi_information: bool | None = plist_field("com.apple.developer.networking.wifi-info")

    # A Boolean value that indicates whether your app may configure MFi Wi-Fi accessories.
    # Available: iOS 3.0+
    wireless_accessory_configuration: bool | None = plist_field(
        "com.apple.external-accessory.wireless-configuration"
    )

    # A Boolean value indicating whether your app may use Multipath protocols to seamlessly
    # transition between Wi-Fi and cellular networks.
    # Available: iOS 3.0+
    multipath: bool | None = plist_field("com.apple.developer.networking.multipath")

    # A Boolean value indicating whether your app can use the hotspot manager to configure Wi-Fi
    # networks.
    # Available: iOS 11.0+
    hotspot_configuration: bool | None = plist_field(
        "com.apple.developer.networking.HotspotConfiguration"
    )

    # The Near Field Communication data formats an app can read.
    # Available: iOS 11.0+
    near_field_communication_tag_reader_session_formats: (
        list[NearFieldCommunicationTagReaderSessionFormats] | None
    ) = plist_field("com.apple.developer.nfc.readersession.formats")


class NearFieldCommunicationTagReaderSessionFormats(Enum):
    """NFC 读取会话支持的标签格式。"""

    # Allows read and write access to a tag using NFCTagReaderSession.
    TAG = "TAG"
