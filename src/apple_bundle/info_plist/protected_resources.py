"""
Info.plist 中受保护资源的用途说明键（`NS*UsageDescription` 等）。

这些键的值是展示给用户的授权提示文案；缺少对应键时系统会直接拒绝访问。
"""

from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record
from ..types import DefaultDictionary


@record
class Bluetooth:
    # A message that tells the user why the app needs access to Bluetooth.
    # Important: If your app has a deployment target earlier than iOS 13, add the
    # NSBluetoothPeripheralUsageDescription key to your app’s Information Property List file in
    # addition to this key.
    # Available: iOS 13.0+, tvOS 13.0+, watchOS 6.0+
    bluetooth_always_usage_description: str | None = plist_field(
        "NSBluetoothAlwaysUsageDescription"
    )

    # A message that tells the user why the app is requesting the ability to connect to Bluetooth
    # peripherals.
    # Important: This key is required if your app uses APIs that access Bluetooth peripherals and
    # has a deployment target earlier than iOS 13.
    # Available: iOS 6.0-13.0
    bluetooth_peripheral_usage_description: str | None = plist_field(
        "NSBluetoothPeripheralUsageDescription", deprecated="iOS 6.0-13.0"
    )


@record
class CalendarAndReminders:
    # A message that tells the user why the app is requesting access to the user’s calendar data.
    # Important: This key is required if your app uses APIs that access the user’s calendar data.
    # Available: iOS 6.0+, macOS 10.14+
    calendars_usage_description: str | None = plist_field("NSCalendarsUsageDescription")

    # A message that tells the user why the app is requesting access to the user’s reminders.
    # Important: This key is required if your app uses APIs that access the user’s reminders.
    # Available: iOS 6.0+, macOS 10.14+
    reminders_usage_description: str | None = plist_field("NSRemindersUsageDescription")


@record
class CameraAndMicrophone:
    # A message that tells the user why the app is requesting access to the device’s camera.
    # Important: This key is required if your app uses APIs that access the device’s camera.
    # Available: iOS 7.0+, macOS 10.14+
    camera_usage_description: str | None = plist_field("NSCameraUsageDescription")

    # A message that tells the user why the app is requesting access to the device’s microphone.
    # Important: This key is required if your app uses APIs that access the device’s microphone.
    # Available: iOS 7.0+, macOS 10.14+, watchOS 4.0+
    microphone_usage_description: str | None = plist_field("NSMicrophoneUsageDescription")


@record
class Contacts:
    # A message that tells the user why the app is requesting access to the user’s contacts.
    # Important: This key is required if your app uses APIs that access the user’s contacts.
    # Available: iOS 6.0+, macOS 10.8+
    contacts_usage_description: str | None = plist_field("NSContactsUsageDescription")


@record
class FaceID:
    # A message that tells the user why the app is requesting the ability to authenticate with
    # Face ID.
    # Important: This key is required if your app uses APIs that access Face ID.
    # Available: iOS 11.0+
    face_id_usage_description: str | None = plist_field("NSFaceIDUsageDescription")


@record
class FilesAndFolders:
    # A message that tells the user why the app needs access to the user’s Desktop folder.
    # Available: macOS 10.15+
    desktop_folder_usage_description: str | None = plist_field("NSDesktopFolderUsageDescription")

    # A message that tells the user why the app needs access to the user’s Documents folder.
    # Available: macOS 10.15+
    documents_folder_usage_description: str | None = plist_field(
        "NSDocumentsFolderUsageDescription"
    )

    # A message that tells the user why the app needs access to the user’s Documents folder.
    # Available: macOS 10.15+
    downloads_folder_usage_description: str | None = plist_field(
        "NSDownloadsFolderUsageDescription"
    )

    # A message that tells the user why the app needs access to files on a network volume.
    # Available: macOS 10.15+
    network_volumes_usage_description: str | None = plist_field("NSNetworkVolumesUsageDescription")

    # A message that tells the user why the app needs access to files on a removable volume.
    # Available: macOS 10.15+
    removable_volumes_usage_description: str | None = plist_field(
        "NSRemovableVolumesUsageDescription"
    )

    # A message that tells the user why the app needs to be informed when other apps access files
    # that it manages.
    # Available: macOS 10.15+
    file_provider_presence_usage_description: str | None = plist_field(
        "NSFileProviderPresenceUsageDescription"
    )

    # A message that tells the user why the app needs access to files managed by a file provider.
    # Available: macOS 10.15+
    file_provider_domain_usage_description: str | None = plist_field(
        "NSFileProviderDomainUsageDescription"
    )


@record
class GameCenter:
    # A message that tells the user why the app needs access to their Game Center friends list.
    # Available: iOS 14.5+
    friend_list_usage_description: str | None = plist_field("NSGKFriendListUsageDescription")


@record
class Health:
    # A Boolean value that indicates whether the app may request user authorization to access
    # health and activity data that appears in the Health app.
    # Available: iOS 8.0+
    healthkit: bool | None = plist_field("com.apple.developer.healthkit")

    # Health data types that require additional permission.
    # Available: iOS 8.0+
    healthkit_access: list[HealthKitCapabilities] | None = plist_field(
        "com.apple.developer.healthkit.access"
    )

    # A message to the user that explains why the app requested permission to read clinical
    # records.
    # Important: This key is required if your app uses APIs that access the user's clinical
    # records.
    # Available: iOS 12.0+
    health_clinical_health_records_share_usage_description: str | None = plist_field(
        "NSHealthClinicalHealthRecordsShareUsageDescription"
    )

    # A message to the user that explains why the app requested permission to read samples from
    # the HealthKit store.
    # Important: This key is required if your app uses APIs that access the user’s heath data.
    # Available: iOS 8.0+
    health_share_usage_description: str | None = plist_field("NSHealthShareUsageDescription")

    # A message to the user that explains why the app requested permission to save samples to the
    # HealthKit store.
    # Important: This key is required if your app uses APIs that update the user’s health data.
    # Available: iOS 8.0+
    health_update_usage_description: str | None = plist_field("NSHealthUpdateUsageDescription")

    # The clinical record data types that your app must get permission to read.
    # Available: iOS 12.0+
    health_required_read_authorization_type_identifiers: list[str] | None = plist_field(
        "NSHealthRequiredReadAuthorizationTypeIdentifiers"
    )


@record
class Home:
    # A message that tells the user why the app is requesting access to the user’s HomeKit
    # configuration data.
    # Important: This key is required if your app uses APIs that access the user’s HomeKit
    # configuration data.
    # Available: iOS 8.0+, watchOS 2.0+
    home_kit_usage_description: str | None = plist_field("NSHomeKitUsageDescription")


@record
class Location:
    # A message that tells the user why the app is requesting access to the user’s location
    # information at all times.
    # Important: This key is required if your iOS app uses APIs that access the user’s location
    # information at all times.
    # Available: iOS 11.0+
    location_always_and_when_in_use_usage_description: str | None = plist_field(
        "NSLocationAlwaysAndWhenInUseUsageDescription"
    )

    # A message that tells the user why the app is requesting access to the user’s location
    # information.
    # Important: This key is required if your macOS app uses APIs that access the user’s location
    # information.
    # Available: iOS 6.0-8.0, macOS 10.14+
    location_usage_description: str | None = plist_field(
        "NSLocationUsageDescription", deprecated="iOS 6.0-8.0"
    )

    # A message that tells the user why the app is requesting access to the user’s location
    # information while the app is running in the foreground.
    # Important: This key is required if your iOS app uses APIs that access the user’s location
    # information while the app is in use.
    # Available: iOS 11.0+
    location_when_in_use_usage_description: str | None = plist_field(
        "NSLocationWhenInUseUsageDescription"
    )

    # A collection of messages that explain why the app is requesting temporary access to the
    # user’s location.
    # Available: iOS 14.0+, macOS 11.0+
    location_temporary_usage_description_dictionary: DefaultDictionary | None = plist_field(
        "NSLocationTemporaryUsageDescriptionDictionary"
    )

    # A message that tells the user why the app is requesting access to the user's location at all
    # times.
    # Important: This key is required if your iOS app uses APIs that access the user’s location at
    # all times and deploys to targets earlier than iOS 11.
    # Available: iOS 8.0-10.0
    location_always_usage_description: str | None = plist_field(
        "NSLocationAlwaysUsageDescription",
        deprecated="iOS 8.0-10.0",
        note=(
            "For apps deployed to targets in iOS 11 and later, use "
            "NSLocationAlwaysAndWhenInUseUsageDescription instead."
        ),
    )

    # A Boolean value that indicates a widget uses the user’s location information.
    # Available: iOS 14.0+, macOS 11.0+
    widget_wants_location: bool | None = plist_field("NSWidgetWantsLocation")

    # A Boolean value that indicates whether the app requests reduced location accuracy by
    # default.
    # Available: iOS 14.0+, watchOS 7.0+
    location_default_accuracy_reduced: bool | None = plist_field(
        "NSLocationDefaultAccuracyReduced"
    )


@record
class MediaPlayer:
    # A message that tells the user why the app is requesting access to the user’s media library.
    # Important: This key is required if your app uses APIs that access the user’s media library.
    # Available: iOS 2.0+
    apple_music_usage_description: str | None = plist_field("NSAppleMusicUsageDescription")


@record
class Motion:
    # A message that tells the user why the app is requesting access to the device’s motion data.
    # Important: This key is required if your app uses APIs that access the device’s motion data,
    # including CMSensorRecorder, CMPedometer, CMMotionActivityManager, and
    # CMMovementDisorderManager. If you don’t include this key, your app will crash when it
    # attempts to access motion data.
    # Available: iOS 7.0+, macOS 10.15+
    motion_usage_description: str | None = plist_field("NSMotionUsageDescription")

    # A message to the user that explains the app’s request for permission to access fall
    # detection event data.
    # Important: If your app uses the CMFallDetectionManager, the app requires this key.
    # Available: watchOS 7.2+
    fall_detection_usage_description: str | None = plist_field("NSFallDetectionUsageDescription")


@record
class Networking:
    # A message that tells the user why the app is requesting access to the local network.
    # Available: iOS 14.0+, macOS 11.0+, tvOS 14.0+
    local_network_usage_description: str | None = plist_field("NSLocalNetworkUsageDescription")

    # A request for user permission to begin an interaction session with nearby devices.
    # Available: iOS 14.0+
    nearby_interaction_allow_once_usage_description: str | None = plist_field(
        "NSNearbyInteractionAllowOnceUsageDescription"
    )


@record
class Nfc:
    # A message that tells the user why the app is requesting access to the device’s NFC hardware.
    # Important: You’re required to provide this key if your app uses APIs that access the NFC
    # hardware.
    # Available: iOS 11.0+
    nfc_reader_usage_description: str | None = plist_field("NFCReaderUsageDescription")


@record
class Photos:
    # A message that tells the user why the app is requesting add-only access to the user’s photo
    # library.
    # Important: This key is required if your app uses APIs that have write access to the user’s
    # photo library.
    # Available: iOS 11.0+
    photo_library_add_usage_description: str | None = plist_field(
        "NSPhotoLibraryAddUsageDescription"
    )

    # A message that tells the user why the app is requesting access to the user’s photo library.
    # Important: This key is required if your app uses APIs that have read or write access to the
    # user’s photo library.
    # Available: iOS 6.0+, macOS 10.14+
    photo_library_usage_description: str | None = plist_field("NSPhotoLibraryUsageDescription")


@record
class Scripting:
    # A Boolean value indicating whether AppleScript is enabled.
    # Available: macOS 10.0+
    apple_script_enabled: bool | None = plist_field("NSAppleScriptEnabled")


@record
class Security:
    # A message that informs the user why an app is requesting permission to use data for tracking
    # the user or the device.
    # Available: iOS 14.0+, tvOS 14.0+
    user_tracking_usage_description: str | None = plist_field("NSUserTrackingUsageDescription")

    # A message that tells the user why the app is requesting the ability to send Apple events.
    # Important: This key is required if your app uses APIs that send Apple events.
    # Available: macOS 10.14+
    apple_events_usage_description: str | None = plist_field("NSAppleEventsUsageDescription")

    # A message in macOS that tells the user why the app is requesting to manipulate the system
    # configuration.
    # Important: This key is required if your app uses APIs that manipulate the system
    # configuration.
    # Available: macOS 10.14+
    system_administration_usage_description: str | None = plist_field(
        "NSSystemAdministrationUsageDescription"
    )

    # A Boolean value indicating whether the app uses encryption.
    # Available: macOS 10.0+
    app_uses_non_exempt_encryption: bool | None = plist_field("ITSAppUsesNonExemptEncryption")

    # The export compliance code provided by App Store Connect for apps that require it.
    # Available: macOS 10.0+
    encryption_export_compliance_code: str | None = plist_field(
        "ITSEncryptionExportComplianceCode"
    )


@record
class Sensors:
    # Available: iOS 14.0+
    sensor_kit_usage_description: str | None = plist_field("NSSensorKitUsageDescription")

    # Available: iOS 14.0+
    sensor_kit_usage_detail: DefaultDictionary | None = plist_field("NSSensorKitUsageDetail")

    # Available: iOS 14.0+
    sensor_kit_privacy_policy_url: str | None = plist_field("NSSensorKitPrivacyPolicyURL")


@record
class Siri:
    # A message that tells the user why the app is requesting to send user data to Siri.
    # Available: iOS 10.0+
    siri_usage_description: str | None = plist_field("NSSiriUsageDescription")


@record
class Speech:
    # A message that tells the user why the app is requesting to send user data to Apple’s speech
    # recognition servers.
    # Important: This key is required if your app uses APIs that send user data to Apple’s speech
    # recognition servers.
    # Available: iOS 10.0+, macOS 10.15+
    speech_recognition_usage_description: str | None = plist_field(
        "NSSpeechRecognitionUsageDescription"
    )


@record
class TVResource:
    # A message that tells the user why the app is requesting access to the user’s TV provider
    # account.
    # Important: This key is required if your app uses APIs that access the user’s TV provider
    # account.
    # Available: tvOS 12.0+
    video_subscriber_account_usage_description: str | None = plist_field(
        "NSVideoSubscriberAccountUsageDescription"
    )


@record
class WiFi:
    # A Boolean value indicating whether the app requires a Wi-Fi connection.
    # Available: iOS 2.0+
    requires_persistent_wifi: bool | None = plist_field("UIRequiresPersistentWiFi")


class HealthKitCapabilities(Enum):
    # The app can request access to FHIR-backed clinical records.
    HEALTH_RECORDS = "health-records"
