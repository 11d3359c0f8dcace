"""
Info.plist 中与系统服务集成相关的键：CarPlay、Siri Intents、地图、认证、XPC、广告归因等。
"""

from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record
from ..types import DefaultDictionary


@record
class CarPlay:
    # Available: iOS 13.1+
    supports_dashboard_navigation_scene: bool | None = plist_field(
        "CPSupportsDashboardNavigationScene"
    )

    # Available: iOS 13.1+
    template_application_dashboard: list[TemplateApplicationDashboard] | None = plist_field(
        "CPTemplateApplicationDashboardSceneSessionRoleApplication"
    )

    # Available: iOS 13.0+
    template_application_scene_session_role: (
        list[TemplateApplicationSceneSessionRole] | None
    ) = plist_field("CPTemplateApplicationSceneSessionRoleApplication")


@record
class TemplateApplicationDashboard:
    # Available: iOS 13.1+
    scene_class_name: ClassName = plist_field("UISceneClassName", required=True)

    # Available: iOS 13.1+
    scene_configuration_name: str = plist_field("UISceneConfigurationName", required=True)

    # Available: iOS 13.1+
    scene_delegate_class_name: str = plist_field("UISceneDelegateClassName", required=True)


class ClassName(Enum):
    TEMPLATE_APPLICATION_DASHBOARD_SCENE = "CPTemplateApplicationDashboardScene"


@record
class TemplateApplicationSceneSessionRole:
    # Available: iOS 13.0+
    scene_class_name: TemplateApplication = plist_field("UISceneClassName", required=True)

    # Available: iOS 13.1+
    scene_configuration_name: str = plist_field("UISceneConfigurationName", required=True)

    # Available: iOS 13.1+
    scene_delegate_class_name: str = plist_field("UISceneDelegateClassName", required=True)


class TemplateApplication(Enum):
    SCENE = "CPTemplateApplicationScene"


@record
class ExposureNotification:
    # A number that specifies the version of the API to use.
    # Important: This type is available in iOS 12.5, and in iOS 13.7 and later.
    # Available: iOS 13.7+
    version: Version | None = plist_field("ENAPIVersion")

    # A string that specifies the region that the app supports.
    # Important: This type is available in iOS 12.5, and in iOS 13.7 and later.
    # Available: iOS 13.7+
    developer_region: str | None = plist_field("ENDeveloperRegion")


class Version(Enum):
    # Use version 1 of the API.
    ONE = "1"
    # Use version 2 of the API.
    TWO = "2"


@record
class PointerInteractions:
    # A Boolean value indicating that the app generally supports indirect input mechanisms.
    # Important: UIApplicationSupportsIndirectInputEvents is a compatibility affordance to ease the
    # adoption of indirect input for a UIKit application. In a future release, this new behavior
    # will become the default and this key will no longer be consulted.
    # Available: iOS 13.4+
    application_supports_indirect_input_events: bool | None = plist_field(
        "UIApplicationSupportsIndirectInputEvents"
    )


@record
class Games:
    # A Boolean value indicating whether GameKit can add badges to a turn-based game icon.
    # Available: iOS 7.0+
    game_center_badging_disabled: bool | None = plist_field("GKGameCenterBadgingDisabled")

    # A Boolean value that indicates whether GameKit can display challenge banners in a game.
    # Available: iOS 7.0+
    show_challenge_banners: bool | None = plist_field("GKShowChallengeBanners")

    # The types of game controllers allowed or required by the app.
    # Available: iOS 7.0+, macOS 10.9+, tvOS 9.0+
    supported_game_controllers: list[ProfileName] | None = plist_field(
        "GCSupportedGameControllers"
    )

    # A Boolean value indicating whether the app supports a game controller.
    # Available: iOS 7.0+, macOS 10.9+, tvOS 9.0+
    supports_controller_user_interaction: bool | None = plist_field(
        "GCSupportsControllerUserInteraction"
    )

    # A Boolean value indicating whether the physical Apple TV Remote and the Apple TV Remote app
    # operate as separate game controllers.
    # Available: tvOS 9.0+
    supports_multiple_micro_gamepads: bool | None = plist_field("GCSupportsMultipleMicroGamepads")


class ProfileName(Enum):
    EXTENDED_GAMEPAD = "ExtendedGamepad"
    MICRO_GAMEPAD = "MicroGamepad"


@record
class Intents:
    # The names of the intent classes your app handles directly.
    # Available: iOS 14.0+, tvOS 14.0+
    intents_supported: list[str] | None = plist_field("INIntentsSupported")

    # The names of the intent classes your app can’t handle when the user locks the device.
    # Available: iOS 14.0+, tvOS 14.0+
    intents_restricted_while_locked: list[str] | None = plist_field(
        "INIntentsRestrictedWhileLocked"
    )

    # The names of the intent classes your app can’t handle when the user locks the device or the
    # system blocks access to protected data.
    # Available: iOS 14.0+, tvOS 14.0+
    intents_restricted_while_protected_data_unavailable: list[str] | None = plist_field(
        "INIntentsRestrictedWhileProtectedDataUnavailable"
    )

    # Types of media supported by your app’s media-playing intents.
    # Available: iOS 14.0+, tvOS 14.0+
    supported_media_categories: list[SupportedMediaCategories] | None = plist_field(
        "INSupportedMediaCategories"
    )


class SupportedMediaCategories(Enum):
    # Audiobooks.
    AUDIOBOOKS = "INMediaCategoryAudiobooks"
    # Music.
    MUSIC = "INMediaCategoryMusic"
    # General.
    GENERAL = "INMediaCategoryGeneral"
    # Podcasts.
    PODCASTS = "INMediaCategoryPodcasts"
    # Radio.
    RADIO = "INMediaCategoryRadio"


@record
class Maps:
    # The modes of transportation for which the app is capable of giving directions.
    # Available: iOS 6.0+
    directions_application_supported_modes: (
        list[DirectionsApplicationSupportedModes] | None
    ) = plist_field("MKDirectionsApplicationSupportedModes")


class DirectionsApplicationSupportedModes(Enum):
    PLANE = "MKDirectionsModePlane"
    BIKE = "MKDirectionsModeBike"
    BUS = "MKDirectionsModeBus"
    CAR = "MKDirectionsModeCar"
    FERRY = "MKDirectionsModeFerry"
    PEDESTRIAN = "MKDirectionsModePedestrian"
    RIDE_SHARE = "MKDirectionsModeRideShare"
    STREET_CAR = "MKDirectionsModeStreetCar"
    SUBWAY = "MKDirectionsModeSubway"
    TAXI = "MKDirectionsModeTaxi"
    TRAIN = "MKDirectionsModeTrain"
    OTHER = "MKDirectionsModeOther"


@record
class NfcAppServices:
    # A list of FeliCa system codes that the app supports.
    # Available: iOS 13.0+
    nfc_readersession_felica_systemcodes: list[str] | None = plist_field(
        "com.apple.developer.nfc.readersession.felica.systemcodes"
    )

    # A list of application identifiers that the app supports.
    # Available: iOS 13.0+
    nfc_readersession_iso7816_select_identifiers: list[str] | None = plist_field(
        "com.apple.developer.nfc.readersession.iso7816.select-identifiers"
    )


@record
class Authentication:
    # A Boolean value that indicates the system shouldn’t show security recommendation prompts
    # when users sign in using the app.
    # Available: iOS 14.0+
    account_authentication_modification_opt_out_of_security_prompts_on_sign_in: (
        bool | None
    ) = plist_field("ASAccountAuthenticationModificationOptOutOfSecurityPromptsOnSignIn")

    # A collection of keys that a browser app uses to declare its ability to handle authentication
    # requests from other apps.
    # Available: macOS 10.15+
    web_authentication_session_web_browser_support_capabilities: (
        WebAuthenticationSession | None
    ) = plist_field("ASWebAuthenticationSessionWebBrowserSupportCapabilities")


@record
class WebAuthenticationSession:
    # A Boolean that indicates whether the app acts as a browser that supports authentication
    # sessions.
    # Available: macOS 10.15+
    is_supported: bool | None = plist_field("IsSupported")

    # A Boolean that indicates whether the app supports ephemeral browsing when conducting
    # authentication sessions.
    # Available: macOS 10.15+
    ephemeral_browser_session_is_supported: bool | None = plist_field(
        "EphemeralBrowserSessionIsSupported"
    )


@record
class ExternalAccessories:
    # The protocols that the app uses to communicate with external accessory hardware.
    # Available: iOS 3.0+
    supported_external_accessory_protocols: list[str] | None = plist_field(
        "UISupportedExternalAccessoryProtocols"
    )


@record
class ServiceManagement:
    # The Service Management clients authorized to add and remove tools.
    # Available: iOS 12.1+, macOS 10.6+, tvOS 12.1+, watchOS 5.1+
    authorized_clients: list[str] | None = plist_field("SMAuthorizedClients")

    # The Service Management tools owned by the app.
    # Available: iOS 12.1+, macOS 10.6+, tvOS 12.1+, watchOS 5.1+
    privileged_executables: DefaultDictionary | None = plist_field("SMPrivilegedExecutables")


@record
class InterprocessCommunication:
    # Available: iOS 6.0+, macOS 10.8+, tvOS 9.0+, watchOS 2.0+
    service: XpcService | None = plist_field("XPCService")


@record
class XpcService:
    """XPC 服务的运行方式。"""

    environment_variables: DefaultDictionary | None = plist_field("EnvironmentVariables")

    join_existing_session: bool | None = plist_field("JoinExistingSession")

    run_loop_type: RunLoopType | None = plist_field("RunLoopType")

    service_type: ServiceType | None = plist_field("ServiceType")


class RunLoopType(Enum):
    DISPATCH_MAIN = "dispatch_main"
    RUN_LOOP = "NSRunLoop"


class ServiceType(Enum):
    APPLICATION = "Application"


@record
class Store:
    # An array of dictionaries containing a list of ad network identifiers.
    # Important: Ad network identifiers are case-sensitive, and are in lowercase.
    # Available: iOS 11.3+
    ad_network_items: list[AdNetworkItems] | None = plist_field("SKAdNetworkItems")


@record
class AdNetworkItems:
    # A string that contains an ad network identifier.
    # Available: iOS 11.3+
    ad_network_identifier: str | None = plist_field("SKAdNetworkIdentifier")
