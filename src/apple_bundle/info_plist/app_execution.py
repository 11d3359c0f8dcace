"""
Info.plist 中与应用运行相关的键：启动、启动条件、扩展与服务、后台执行、插件、退出。

https://developer.apple.com/documentation/bundleresources/information_property_list/app_execution
"""

from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record
from ..types import DefaultDictionary


@record
class Launch:
    # The name of the bundle’s main executable class.
    # Available: macOS 10.0+
    principal_class: str | None = plist_field("NSPrincipalClass")

    # The name of the class that implements the complication data source protocol.
    # Available: watchOS 2.0+
    complication_principal_class: list[str] | None = plist_field("CLKComplicationPrincipalClass")

    # The name of the bundle’s executable file.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_executable: str | None = plist_field("CFBundleExecutable")

    # Environment variables to set before launching the app.
    # Available: macOS 10.0+
    environment: DefaultDictionary | None = plist_field("LSEnvironment")

    # Application shortcut items.
    # Available: iOS 9.0+
    application_shortcut_items: list[ApplicationShortcutItem] | None = plist_field(
        "UIApplicationShortcutItems"
    )


@record
class ApplicationShortcutItem:
    icon_file: str | None = plist_field("UIApplicationShortcutItemIconFile")

    symbol_name: str | None = plist_field("UIApplicationShortcutItemIconSymbolName")

    icon_type: str | None = plist_field("UIApplicationShortcutItemIconType")

    subtitle: str | None = plist_field("UIApplicationShortcutItemSubtitle")

    title: str = plist_field("UIApplicationShortcutItemTitle", required=True)

    item_type: str = plist_field("UIApplicationShortcutItemType", required=True)

    user_info: dict[str, str] | None = plist_field("UIApplicationShortcutItemUserInfo")


@record
class LaunchConditions:
    # The device-related features that your app requires to run.
    # Available: iOS 3.0+, tvOS 9.0+, watchOS 2.0+
    required_device_capabilities: list[DeviceCapabilities] | None = plist_field(
        "UIRequiredDeviceCapabilities"
    )

    # A Boolean value indicating whether more than one user can launch the app simultaneously.
    # Available: macOS 10.0+
    multiple_instances_prohibited: bool | None = plist_field("LSMultipleInstancesProhibited")

    # An array of the architectures that the app supports, arranged according to their preferred
    # usage.
    # Available: macOS 10.1+
    architecture_priority: ArchitecturePriority | None = plist_field("LSArchitecturePriority")

    # A Boolean value that indicates whether to require the execution of the app’s native
    # architecture when multiple architectures are available.
    # Available: macOS 10.0+
    requires_native_execution: bool | None = plist_field("LSRequiresNativeExecution")

    # A Boolean value indicating whether the user can install and run the watchOS app
    # independently of its iOS companion app.
    # Available: watchOS 6.0+
    runs_independently_of_companion_app: bool | None = plist_field(
        "WKRunsIndependentlyOfCompanionApp"
    )

    # A Boolean value indicating whether the app is a watch-only app.
    # Available: watchOS 6.0+
    watch_only: bool | None = plist_field("WKWatchOnly")

    # A Boolean value that indicates whether a watchOS app should opt out of automatically
    # launching when its companion iOS app starts playing audio content.
    # Available: watchOS 5.0+
    auto_launch_audio_opt_out: bool | None = plist_field("PUICAutoLaunchAudioOptOut")

    # The complication families that the app can provide data for.
    complication_supported_families: list[ComplicationSupportedFamilies] | None = plist_field(
        "CLKComplicationSupportedFamilies",
        deprecated="watchOS 2.0-7.0",
        note=(
            "In watchOS 7 and later, use getComplicationDescriptors(handler:) to define the "
            "supported complication families."
        ),
    )


@record
class ExtensionsAndServices:
    # The properties of an app extension.
    # Available: iOS 8.0+, macOS 10.10+
    extension: Extension | None = plist_field("NSExtension")

    # The services provided by an app.
    # Available: macOS 10.0+
    services: list[Service] | None = plist_field("NSServices")

    # The name of your watchOS app’s extension delegate.
    # Available: watchOS 2.0+
    extension_delegate_class_name: str | None = plist_field("WKExtensionDelegateClassName")

    # The bundle ID of the widget that's available as a Home screen quick action in apps that have
    # more than one widget.
    # Available: iOS 10.0+, tvOS 9.0+, watchOS 2.0+
    application_shortcut_widget: str | None = plist_field("UIApplicationShortcutWidget")


@record
class AppClips:
    # A collection of keys that an App Clip uses to get additional capabilities.
    # Available: iOS 14.0+
    app_clip: AppClip | None = plist_field("NSAppClip")


@record
class BackgroundExecution:
    # Services provided by an app that require it to run in the background.
    # Available: iOS 4.0+, watchOS 4.0+
    ui_background_modes: list[UiBackgroundMode] | None = plist_field("UIBackgroundModes")

    # Specifies the underlying hardware type on which this app is designed to run.
    # Important: Do not insert this key manually into your Info.plist files. Xcode inserts it
    # automatically based on the value in the Targeted Device Family build setting. You should use
    # that build setting to change the value of the key.
    # Available: iOS 3.2+
    ui_device_family: list[int] | None = plist_field("UIDeviceFamily")

    # The services a watchOS app provides that require it to continue running in the background.
    # Available: watchOS 3.0+
    wk_background_modes: list[WkBackgroundMode] | None = plist_field("WKBackgroundModes")

    # An array of strings containing developer-specified task identifiers in reverse URL notation.
    # Available: iOS 13.0+, tvOS 13.0+
    task_scheduler_permitted_identifiers: list[str] | None = plist_field(
        "BGTaskSchedulerPermittedIdentifiers"
    )

    # A Boolean value indicating whether the app runs only in the background.
    # Available: macOS 10.0+
    background_only: bool | None = plist_field("LSBackgroundOnly")


@record
class EndpointSecurity:
    # Available: macOS 10.15+
    endpoint_security_early_boot: bool | None = plist_field("NSEndpointSecurityEarlyBoot")

    # Available: macOS 10.15+
    endpoint_security_reboot_required: bool | None = plist_field(
        "NSEndpointSecurityRebootRequired"
    )


@record
class PluginSupport:
    # The name of the app's plugin bundle.
    # Available: macOS 10.0+
    dock_tile_plugin: str | None = plist_field("NSDockTilePlugIn")


@record
class PluginConfiguration:
    # The function to use when dynamically registering a plugin.
    # Available: macOS 10.0+
    plugin_dynamic_register_function: str | None = plist_field("CFPlugInDynamicRegisterFunction")

    # A Boolean value indicating whether the host loads this plugin.
    # Available: macOS 10.0+
    plugin_dynamic_registration: bool | None = plist_field("CFPlugInDynamicRegistration")

    # The interfaces supported by the plugin for static registration.
    # Available: macOS 10.0+
    plugin_factories: dict[str, str] | None = plist_field("CFPlugInFactories")

    # One or more groups of interfaces supported by the plugin for static registration.
    # Available: macOS 10.0+
    plugin_types: dict[str, str] | None = plist_field("CFPlugInTypes")

    # The name of the function to call to unload the plugin code from memory.
    # Available: macOS 10.0+
    plugin_unload_function: str | None = plist_field("CFPlugInUnloadFunction")


@record
class Termination:
    # A Boolean value indicating whether the app is notified when a child process dies.
    # Available: macOS 10.0+
    get_app_died_events: bool | None = plist_field("LSGetAppDiedEvents")

    # A Boolean value indicating whether the system may terminate the app to log out or shut down
    # more quickly.
    # Available: macOS 10.0+
    supports_sudden_termination: bool | None = plist_field("NSSupportsSuddenTermination")

    # Deprecated: A Boolean value indicating whether the app terminates, rather than moves to the
    # background, when the app quits.
    # Available: iOS 4.0-13.0, tvOS 9.0-13.0, watchOS 2.0-6.0
    application_exits_on_suspend: bool | None = plist_field(
        "UIApplicationExitsOnSuspend",
        deprecated="iOS 4.0-13.0, tvOS 9.0-13.0, watchOS 2.0-6.0",
        note=(
            "The system now automatically suspends apps leaving the foreground when they don't "
            "require background execution. For more information, see About the Background "
            "Execution Sequence."
        ),
    )


class WkBackgroundMode(Enum):
    # Allows an active workout session to run in the background.
    WORKOUT_PROCESSING = "workout-processing"
    # Enables extended runtime sessions for brief activities focusing on health or emotional
    # well-being.
    SELF_CARE = "self-care"
    # Enables extended runtime sessions for silent meditation.
    MINDFULNESS = "mindfulness"
    # Enables extended runtime sessions for stretching, strengthening, or range-of-motion
    # exercises.
    PHYSICAL_THERAPY = "physical-therapy"
    # Enables extended runtime sessions for smart alarms.
    ALARM = "alarm"


class UiBackgroundMode(Enum):
    AUDIO = "audio"
    LOCATION = "location"
    VOIP = "voip"
    EXTERNAL_ACCESSORY = "external-accessory"
    BLUETOOTH_CENTRAL = "bluetooth-central"
    BLUETOOTH_PERIPHERAL = "bluetooth-peripheral"
    FETCH = "fetch"
    REMOTE_NOTIFICATION = "remote-notification"
    PROCESSING = "processing"


@record
class AppClip:
    # A Boolean value that indicates whether an App Clip can schedule or receive notifications for
    # a limited amount of time.
    # Available: iOS 14.0+
    request_ephemeral_user_notification: bool | None = plist_field(
        "NSAppClipRequestEphemeralUserNotification"
    )

    # A Boolean value that indicates whether an App Clip can confirm the user’s location.
    # Available: iOS 14.0+
    request_location_confirmation: bool | None = plist_field(
        "NSAppClipRequestLocationConfirmation"
    )


@record
class Extension:
    """app 扩展（`NSExtension`）的声明。"""

    # The names of the intents that an extension supports.
    # Available: iOS 10.0+
    intents_supported: list[str] | None = plist_field("IntentsSupported")

    # A dictionary that specifies the minimum size of the floating window in which Final Cut Pro
    # hosts the extension view.
    # Available: ProVideo Workflow Extensions 1.0+
    pro_extension_attributes: dict[str, str] | None = plist_field("ProExtensionAttributes")

    # The name of the class with the principal implementation of your extension.
    # Available: ProVideo Workflow Extensions 1.0+, ProVideo Encoder Extensions 1.0+
    pro_extension_principal_class: str | None = plist_field("ProExtensionPrincipalClass")

    # The name of the principal view controller class of your extension.
    # Available: ProVideo Workflow Extensions 1.0+, ProVideo Encoder Extensions 1.0+
    pro_extension_principal_view_controller_class: str | None = plist_field(
        "ProExtensionPrincipalViewControllerClass"
    )

    # A UUID string that uniquely identifies your extension to the Compressor app.
    # Available: ProVideo Workflow Extensions 1.0+, ProVideo Encoder Extensions 1.0+
    pro_extension_uuid: str | None = plist_field("ProExtensionUUID")

    # Account Authentication Modification. The rules the system satisfies when generating a strong
    # password for your extension during an automatic upgrade.
    # Available: iOS 14.0+
    password_generation_requirements: str | None = plist_field(
        "ASAccountAuthenticationModificationPasswordGenerationRequirements"
    )

    # Account Authentication Modification. A Boolean value that indicates whether the extension
    # supports upgrading a user’s password to a strong password.
    # Available: iOS 14.0+
    supports_strong_password_upgrade: bool | None = plist_field(
        "ASAccountAuthenticationModificationSupportsStrongPasswordUpgrade"
    )

    # Account Authentication Modification. A Boolean value that indicates whether the extension
    # supports upgrading from using password authentication to using Sign in with Apple.
    # Available: iOS 14.0+
    supports_upgrade_to_sign_in_with_apple: bool | None = plist_field(
        "ASAccountAuthenticationModificationSupportsUpgradeToSignInWithApple"
    )

    # A Boolean value indicating whether the Action extension is presented in full screen.
    # Available: iOS 8.0+
    extension_action_wants_full_screen_presentation: bool | None = plist_field(
        "NSExtensionActionWantsFullScreenPresentation"
    )

    # Properties of an app extension.
    # Available: iOS 8.0+, macOS 10.10+
    extension_attributes: ExtensionAttributes | None = plist_field("NSExtensionAttributes")

    # The name of the app extension’s main storyboard file.
    # Available: iOS 8.0+, macOS 10.10+
    extension_main_storyboard: str | None = plist_field("NSExtensionMainStoryboard")

    # A Boolean value indicating whether the app extension ignores appearance changes made by the
    # host app.
    # Available: iOS 10.0+
    extension_overrides_host_ui_appearance: bool | None = plist_field(
        "NSExtensionOverridesHostUIAppearance"
    )

    # The extension point that supports an app extension.
    # Available: iOS 8.0+, macOS 10.10+
    extension_point_identifier: ExtensionPointIdentifier | None = plist_field(
        "NSExtensionPointIdentifier"
    )

    # The custom class that implements an app extension’s primary view or functionality.
    # Available: iOS 8.0+, macOS 10.10+
    extension_principal_class: str | None = plist_field("NSExtensionPrincipalClass")

    # The content scripts for a Safari extension.
    # Available: macOS 10.11.5+
    safari_content_script: list[SafariContentScript] | None = plist_field("SFSafariContentScript")

    # The context menu items for a Safari extension.
    # Available: macOS 10.11.5+
    safari_context_menu: list[SafariContextMenu] | None = plist_field("SFSafariContextMenu")

    # The style sheet for a Safari extension.
    # Available: macOS 10.11.5+
    safari_style_sheet: list[SafariStyleSheet] | None = plist_field("SFSafariStyleSheet")

    # The items to add to the toolbar for a Safari extension.
    # Available: macOS 10.11.5+
    safari_toolbar_item: SafariToolbarItem | None = plist_field("SFSafariToolbarItem")

    # The webpages a Safari extension can access.
    # Available: macOS 10.11.5+
    safari_website_access: SafariWebsiteAccess | None = plist_field("SFSafariWebsiteAccess")


@record
class SafariWebsiteAccess:
    # The domains that a Safari extension is allowed access to.
    # Available: macOS 10.11.5+
    allowed_domains: list[str] | None = plist_field("Allowed Domains")

    # The level of a Safari extension’s website access.
    # Available: macOS 10.11.5+
    level: SafariWebsiteAccessLevel | None = plist_field("Level")


class SafariWebsiteAccessLevel(Enum):
    NONE = "None"
    ALL = "All"
    SOME = "Some"


@record
class SafariToolbarItem:
    # The properties of an app extension's toolbar item that's been added to the Safari window.
    # Available: macOS 10.11.5+
    action: str | None = plist_field("Action")

    # The identifier for a Safari extension's toolbar item.
    # Available: macOS 10.11.5+
    identifier: str | None = plist_field("Identifier")

    # An image that represents a Safari extension's toolbar item.
    # Available: macOS 10.11.5+
    image: str | None = plist_field("Image")

    # The label for the Safari extension's toolbar item.
    # Available: macOS 10.11.5+
    label: str | None = plist_field("Label")


@record
class SafariStyleSheet:
    # The webpages that the script can be injected into.
    # Available: macOS 10.11.5+
    allowed_url_patterns: list[str] | None = plist_field("Allowed URL Patterns")

    # The webpages that the script can't be injected into.
    # Available: macOS 10.11.5+
    excluded_url_patterns: list[str] | None = plist_field("Excluded URL Patterns")

    # The path to the style sheet, relative to the Resources folder in the app extension's bundle.
    # Available: macOS 10.11.5+
    style_sheet: str | None = plist_field("Style Sheet")


@record
class SafariContextMenu:
    # The command to send to the app extension when the user selects the context menu item.
    # Available: macOS 10.11.5+
    command: str | None = plist_field("Command")

    # The text to display for the context menu item.
    # Available: macOS 10.11.5+
    text: str | None = plist_field("Text")


@record
class SafariContentScript:
    # The webpages that the script can be injected into.
    # Available: macOS 10.11.5+
    allowed_url_patterns: list[str] | None = plist_field("Allowed URL Patterns")

    # The webpages that the script can't be injected into.
    # Available: macOS 10.11.5+
    excluded_url_patterns: list[str] | None = plist_field("Excluded URL Patterns")

    # The path to the content script, relative to the Resources folder in the app extension's
    # bundle.
    # Available: macOS 10.11.5+
    script: str | None = plist_field("Script")


class ExtensionPointIdentifier(Enum):
    UI_SERVICES = "com.apple.ui-services"
    SERVICES = "com.apple.services"
    KEYBOARD_SERVICE = "com.apple.keyboard-service"
    FILEPROVIDER_NONUI = "com.apple.fileprovider-nonui"
    FILEPROVIDER_ACTIONSUI = "com.apple.fileprovider-actionsui"
    FINDER_SYNC = "com.apple.FinderSync"
    IDENTITY_LOOKUP_MESSAGE_FILTER = "com.apple.identitylookup.message-filter"
    PHOTO_EDITING = "com.apple.photo-editing"
    SHARE_SERVICES = "com.apple.share-services"
    CALLKIT_CALL_DIRECTORY = "com.apple.callkit.call-directory"
    AUTHENTICATION_SERVICES_ACCOUNT_AUTHENTICATION_MODIFICATION_UI = (
        "com.apple.authentication-services-account-authentication-modification-ui"
    )
    AUDIO_UNIT_UI = "com.apple.AudioUnit-UI"
    APP_SSO_IDP_EXTENSION = "com.apple.AppSSO.idp-extension"
    AUTHENTICATION_SERVICES_CREDENTIAL_PROVIDER_UI = (
        "com.apple.authentication-services-credential-provider-ui"
    )
    BROADCAST_SERVICES_SETUPUI = "com.apple.broadcast-services-setupui"
    BROADCAST_SERVICES_UPLOAD = "com.apple.broadcast-services-upload"
    CLASSKIT_CONTEXT_PROVIDER = "com.apple.classkit.context-provider"
    SAFARI_CONTENT_BLOCKER = "com.apple.Safari.content-blocker"
    MESSAGE_PAYLOAD_PROVIDER = "com.apple.message-payload-provider"
    INTENTS_SERVICE = "com.apple.intents-service"
    INTENTS_UI_SERVICE = "com.apple.intents-ui-service"
    NETWORK_EXTENSION_APP_PROXY = "com.apple.networkextension.app-proxy"
    USERNOTIFICATIONS_CONTENT_EXTENSION = "com.apple.usernotifications.content-extension"
    USERNOTIFICATIONS_SERVICE = "com.apple.usernotifications.service"
    CTK_TOKENS = "com.apple.ctk-tokens"
    PHOTO_PROJECT = "com.apple.photo-project"
    QUICKLOOK_PREVIEW = "com.apple.quicklook.preview"
    SAFARI_EXTENSION = "com.apple.Safari.extension"
    SPOTLIGHT_INDEX = "com.apple.spotlight.index"
    QUICKLOOK_THUMBNAIL = "com.apple.quicklook.thumbnail"
    TV_TOP_SHELF = "com.apple.tv-top-shelf"
    CLASSIFICATION_UI = "com.apple.identitylookup.classification-ui"
    WIDGETKIT_EXTENSION = "com.apple.widgetkit-extension"
    EXTENSION_SOURCE_EDITOR = "com.apple.dt.Xcode.extension.source-editor"


@record
class ExtensionAttributes:
    # A Boolean value indicating whether the extension appears in the Finder Preview pane and
    # Quick Actions menu.
    # Available: macOS 10.14+
    allows_finder_preview_item: bool | None = plist_field(
        "NSExtensionServiceAllowsFinderPreviewItem"
    )

    # A Boolean value indicating whether an Action extension displays an item in a window’s
    # toolbar.
    # Available: macOS 10.10+
    allows_toolbar_item: bool | None = plist_field("NSExtensionServiceAllowsToolbarItem")

    # A Boolean value indicating whether the extension appears as a Quick Action in the Touch Bar.
    # Available: macOS 10.14+
    allows_touch_bar_item: bool | None = plist_field("NSExtensionServiceAllowsTouchBarItem")

    # The name of an icon for display when the extension appears in the Finder Preview pane and
    # Quick Actions menu.
    # Available: macOS 10.14+
    finder_preview_icon_name: str | None = plist_field("NSExtensionServiceFinderPreviewIconName")

    # A name for display when the extension appears in the Finder Preview pane and Quick Actions
    # menu.
    # Available: macOS 10.14+
    finder_preview_label: str | None = plist_field("NSExtensionServiceFinderPreviewLabel")

    # The type of task an Action extension performs.
    # Available: macOS 10.10+
    role_type: ExtensionServiceRoleType | None = plist_field("NSExtensionServiceRoleType")

    # The image for an Action extension’s toolbar item.
    # Available: macOS 10.10+
    toolbar_icon_file: str | None = plist_field("NSExtensionServiceToolbarIconFile")

    # The label for an Action extension's toolbar item.
    # Available: macOS 10.10+
    toolbar_palette_label: str | None = plist_field("NSExtensionServiceToolbarPaletteLabel")

    # The color to use for the bezel around the extension when it appears as a Quick Action in the
    # Touch Bar.
    # Available: macOS 10.14+
    touch_bar_bezel_color_name: str | None = plist_field(
        "NSExtensionServiceTouchBarBezelColorName"
    )

    # The name of an icon for display when the extension appears as a Quick Action in the Touch
    # Bar.
    # Available: macOS 10.14+
    touch_bar_icon_name: str | None = plist_field("NSExtensionServiceTouchBarIconName")

    # A name for display when the extension appears as a Quick Action in the Touch Bar.
    # Available: macOS 10.14+
    touch_bar_label: str | None = plist_field("NSExtensionServiceTouchBarLabel")

    # A Boolean value indicating whether the Action extension is presented in full screen.
    # Available: iOS 8.0+
    action_wants_full_screen_presentation: bool | None = plist_field(
        "NSExtensionActionWantsFullScreenPresentation"
    )

    # This key is mutually exclusive with NSExtensionPrincipalClass. If the app extension’s
    # Info.plist file contains both keys, the system won’t load the extension.
    # Available: iOS 8.0+, macOS 10.10+
    main_storyboard: str | None = plist_field("NSExtensionMainStoryboard")

    # A Boolean value indicating whether the app extension ignores appearance changes made by the
    # host app.
    # Available: iOS 10.0+
    overrides_host_ui_appearance: bool | None = plist_field("NSExtensionOverridesHostUIAppearance")

    # The extension point that supports an app extension.
    # Available: iOS 8.0+, macOS 10.10+
    point_identifier: ExtensionPointIdentifier | None = plist_field("NSExtensionPointIdentifier")

    # This key is mutually exclusive with NSExtensionMainStoryboard. If the app extension’s
    # Info.plist file contains both keys, the system won’t load the extension.
    # Available: iOS 8.0+, macOS 10.10+
    principal_class: str | None = plist_field("NSExtensionPrincipalClass")

    # The semantic data types that a Share or Action extension supports.
    # Available: iOS 8.0+, macOS 10.10+
    activation_rule: ActivationRule | None = plist_field("NSExtensionActivationRule")

    # The name of a JavaScript file supplied by a Share or Action extension.
    # Available: iOS 8.0+, macOS 10.10+
    java_script_preprocessing_file: str | None = plist_field(
        "NSExtensionJavaScriptPreprocessingFile"
    )

    # The names of the intents that an extension supports.
    # Available: macOS 10.0+
    intents_supported: list[str] | None = plist_field("IntentsSupported")

    # Types of media supported by an app extension’s media-playing intents.
    # Available: iOS 13.0+
    supported_media_categories: list[MediaCategories] | None = plist_field(
        "SupportedMediaCategories"
    )

    # A Boolean value indicating whether the Photos app gets a list of supported project types
    # from an extension.
    # Available: macOS 10.14+
    project_extension_defines_project_types: bool | None = plist_field(
        "PHProjectExtensionDefinesProjectTypes"
    )

    # The types of assets a Photo Editing extension can edit.
    # Available: iOS 8.0+
    supported_media_types: list[MediaTypes] | None = plist_field("PHSupportedMediaTypes")

    # The server that a Message Filter app extension may defer a query to.
    # Available: iOS 11.0+
    id_message_filter_extension_network_url: str | None = plist_field(
        "IDMessageFilterExtensionNetworkURL"
    )

    # The phone number that receives SMS messages when the user reports an SMS message or a call.
    # Available: iOS 12.0+
    classification_extension_sms_report_destination: str | None = plist_field(
        "ILClassificationExtensionSMSReportDestination"
    )

    # A Boolean value indicating whether a custom keyboard displays standard ASCII characters.
    # Available: iOS 8.0+
    is_ascii_capable: str | None = plist_field("IsASCIICapable")

    # The contexts that an iMessage app or sticker pack supports.
    # Available: iOS 12.0+
    messages_app_presentation_context_messages: list[ContextMessages] | None = plist_field(
        "MSMessagesAppPresentationContextMessages"
    )

    # The custom actions for a File Provider extension.
    # Available: iOS 11.0+
    file_provider_actions: list[FileProviderAction] | None = plist_field(
        "NSExtensionFileProviderActions"
    )

    # The identifier of a shared container that can be accessed by a Document Picker extension and
    # its associated File Provider extension.
    # Available: iOS 8.0+
    file_provider_document_group: str | None = plist_field("NSExtensionFileProviderDocumentGroup")

    # A Boolean value indicating whether a File Provider extension enumerates its content.
    # Available: iOS 11.0+
    file_provider_supports_enumeration: bool | None = plist_field(
        "NSExtensionFileProviderSupportsEnumeration"
    )

    # A Boolean value indicating whether a keyboard extension supports right-to-left languages.
    # Available: iOS 8.0+
    prefers_right_to_left: bool | None = plist_field("PrefersRightToLeft")

    # The primary language for a keyboard extension.
    # Available: iOS 8.0+
    primary_language: str | None = plist_field("PrimaryLanguage")

    # A Boolean value indicating whether a custom keyboard uses a shared container and accesses
    # the network.
    # Available: iOS 8.0+
    requests_open_access: bool | None = plist_field("RequestsOpenAccess")

    # The modes that a Document Picker extension supports.
    # Available: iOS 8.0+
    document_picker_modes: list[DocumentPickerModes] | None = plist_field("UIDocumentPickerModes")

    # The Uniform Type Identifiers that a document picker extension supports.
    # Available: iOS 8.0+
    document_picker_supported_file_types: list[str] | None = plist_field(
        "UIDocumentPickerSupportedFileTypes"
    )

    # The identifier of a category declared by the app extension.
    # Available: iOS 10.0+
    notification_extension_category: str | None = plist_field("UNNotificationExtensionCategory")

    # A Boolean value indicating whether only the app extension's custom view controller is
    # displayed in the notification interface.
    # Available: iOS 10.0+
    notification_extension_default_content_hidden: bool | None = plist_field(
        "UNNotificationExtensionDefaultContentHidden"
    )

    # The initial size of the view controller's view for an app extension, expressed as a ratio of
    # its height to its width.
    # Available: iOS 10.0+
    notification_extension_initial_content_size_ratio: float | None = plist_field(
        "UNNotificationExtensionInitialContentSizeRatio"
    )

    # A Boolean value indicating whether the title of the app extension's view controller is used
    # as the title of the notification.
    # Available: iOS 10.0+
    notification_extension_overrides_default_title: bool | None = plist_field(
        "UNNotificationExtensionOverridesDefaultTitle"
    )

    # A Boolean value indicating whether user interactions in a custom notification are enabled.
    # Available: iOS 12.0+
    notification_extension_user_interaction_enabled: bool | None = plist_field(
        "UNNotificationExtensionUserInteractionEnabled"
    )


class DocumentPickerModes(Enum):
    IMPORT = "UIDocumentPickerModeImport"
    OPEN = "UIDocumentPickerModeOpen"
    EXPORT_TO_SERVICE = "UIDocumentPickerModeExportToService"
    MOVE_TO_SERVICE = "UIDocumentPickerModeMoveToService"


@record
class FileProviderAction:
    # A predicate that determines whether a File Provider extension action appears in the context
    # menu.
    # Available: iOS 11.0+
    activation_rule: str | None = plist_field("NSExtensionFileProviderActionActivationRule")

    # A unique identifier for a File Provider extension action.
    # Available: iOS 11.0+
    identifier: str | None = plist_field("NSExtensionFileProviderActionIdentifier")

    # The localized name for a File Provider extension action that appears in the context menu.
    # Available: iOS 11.0+
    name: str | None = plist_field("NSExtensionFileProviderActionName")


class ContextMessages(Enum):
    MESSAGES = "MSMessagesAppPresentationContextMessages"
    MEDIA = "MSMessagesAppPresentationContextMedia"


class MediaTypes(Enum):
    IMAGE = "Image"
    VIDEO = "Video"


class MediaCategories(Enum):
    AUDIOBOOKS = "INMediaCategoryAudiobooks"
    MUSIC = "INMediaCategoryMusic"
    GENERAL = "INMediaCategoryGeneral"
    PODCASTS = "INMediaCategoryPodcasts"
    RADIO = "INMediaCategoryRadio"


@record
class ActivationRule:
    # The version of the parent extension-activation rule dictionary.
    # Available: iOS 9.0+, macOS 10.11+
    dictionary_version: int | None = plist_field("NSExtensionActivationDictionaryVersion")

    # The maximum number of attachments that the app extension supports.
    # Available: iOS 8.0+, macOS 10.10+
    supports_attachments_with_max_count: int | None = plist_field(
        "NSExtensionActivationSupportsAttachmentsWithMaxCount"
    )

    # The minimum number of attachments that the app extension supports.
    # Available: iOS 8.0+, macOS 10.10+
    supports_attachments_with_min_count: int | None = plist_field(
        "NSExtensionActivationSupportsAttachmentsWithMinCount"
    )

    # The maximum number of all types of files that the app extension supports.
    # Available: iOS 8.0+, macOS 10.10+
    supports_file_with_max_count: int | None = plist_field(
        "NSExtensionActivationSupportsFileWithMaxCount"
    )

    # The maximum number of image files that the app extension supports.
    # Available: iOS 8.0+, macOS 10.10+
    supports_image_with_max_count: int | None = plist_field(
        "NSExtensionActivationSupportsImageWithMaxCount"
    )

    # The maximum number of movie files that the app extension supports.
    # Available: iOS 8.0+, macOS 10.10+
    supports_movie_with_max_count: int | None = plist_field(
        "NSExtensionActivationSupportsMovieWithMaxCount"
    )

    # A Boolean value indicating whether the app extension supports text.
    # Available: iOS 8.0+, macOS 10.10+
    supports_text: bool | None = plist_field("NSExtensionActivationSupportsText")

    # The maximum number of webpages that the app extension supports.
    # Available: iOS 8.0+, macOS 10.10+
    supports_web_page_with_max_count: int | None = plist_field(
        "NSExtensionActivationSupportsWebPageWithMaxCount"
    )

    # The maximum number of HTTP URLs that the app extension supports.
    # Available: iOS 8.0+, macOS 10.10+
    supports_web_url_with_max_count: int | None = plist_field(
        "NSExtensionActivationSupportsWebURLWithMaxCount"
    )

    # A Boolean value indicating whether strict or fuzzy matching is used when determining the
    # asset types an app extension handles.
    # Available: iOS 9.0+, macOS 10.11+
    uses_strict_matching: bool | None = plist_field("NSExtensionActivationUsesStrictMatching")


class ExtensionServiceRoleType(Enum):
    EDITOR = "Editor"
    VIEWER = "Viewer"


@record
class Service:
    # A keyboard shortcut that invokes the service menu command.
    # Available: macOS 10.0+
    key_equivalent: DefaultDictionary | None = plist_field("NSKeyEquivalent")

    # Text for a Services menu item.
    # Available: macOS 10.0+
    menu_item: DefaultDictionary = plist_field("NSMenuItem", required=True)

    # An instance method that invokes the service.
    # Available: macOS 10.0+
    message: str = plist_field("NSMessage", required=True)

    # The port that the service monitors for incoming requests.
    # Available: macOS 10.0+
    port_name: str | None = plist_field("NSPortName")

    # The data types that the service returns.
    # Available: macOS 10.0+
    return_types: list[str] | None = plist_field("NSReturnTypes")

    # The data types that the service can read.
    # Available: macOS 10.0+
    send_types: list[str] | None = plist_field("NSSendTypes")

    # The amount of time, in milliseconds, that the system waits for a response from the service.
    # Available: macOS 10.0+
    timeout: str | None = plist_field("NSTimeout")

    # A service-specific string value.
    # Available: macOS 10.0+
    user_data: dict[str, str] | None = plist_field("NSUserData")


class ComplicationSupportedFamilies(Enum):
    MODULAR_SMALL = "CLKComplicationFamilyModularSmall"
    MODULAR_LARGE = "CLKComplicationFamilyModularLarge"
    UTILITARIAN_SMALL = "CLKComplicationFamilyUtilitarianSmall"
    UTILITARIAN_SMALL_FLAT = "CLKComplicationFamilyUtilitarianSmallFlat"
    UTILITARIAN_LARGE = "CLKComplicationFamilyUtilitarianLarge"
    CIRCULAR_SMALL = "CLKComplicationFamilyCircularSmall"
    EXTRA_LARGE = "CLKComplicationFamilyExtraLarge"
    GRAPHIC_CORNER = "CLKComplicationFamilyGraphicCorner"
    GRAPHIC_BEZEL = "CLKComplicationFamilyGraphicBezel"
    GRAPHIC_CIRCULAR = "CLKComplicationFamilyGraphicCircular"
    GRAPHIC_RECTANGULAR = "CLKComplicationFamilyGraphicRectangular"


class ArchitecturePriority(Enum):
    # The 32-bit Intel architecture.
    I386 = "i386"
    # The 64-bit Intel architecture.
    X86_64 = "x86_64"
    # The 64-bit ARM architecture.
    ARM64 = "arm64"
    # The 64-bit ARM architecture with pointer authentication code support.
    ARM64E = "arm64e"


class DeviceCapabilities(Enum):
    """`UIRequiredDeviceCapabilities` 的取值。"""

    # The presence of accelerometers. Use the Core Motion framework to receive accelerometer
    # events. You don’t need to include this value if your app detects only device orientation
    # changes. Available in iOS 3.0 and later.
    ACCELEROMETER = "accelerometer"
    # Support for ARKit. Available in iOS 11.0 and later.
    ARKIT = "arkit"
    # Compilation for the armv7 instruction set, or as a 32/64-bit universal app. Available in iOS
    # 3.1 and later.
    ARMV7 = "armv7"
    # Compilation for the arm64 instruction set. Include this key for all 64-bit apps and embedded
    # bundles, like extensions and frameworks. Available in iOS 8.0 and later.
    ARM64 = "arm64"
    # Autofocus capabilities in the device’s still camera. You might need to include this value if
    # your app supports macro photography or requires sharper images to perform certain
    # image-processing tasks. Available in iOS 3.0 and later.
    AUTO_FOCUS_CAMERA = "auto-focus-camera"
    # Bluetooth low-energy hardware. Available in iOS 5.0 and later.
    BLUETOOTH_LE = "bluetooth-le"
    # A camera flash. Use the cameraFlashMode property of a UIImagePickerController instance to
    # control the camera’s flash. Available in iOS 3.0 and later.
    CAMERA_FLASH = "camera-flash"
    # A forward-facing camera. Use the cameraDevice property of a UIImagePickerController instance
    # to select the device’s camera. Available in iOS 3.0 and later.
    FRONT_FACING_CAMERA = "front-facing-camera"
    # Access to the Game Center service. Enable the Game Center capability in Xcode to add this
    # value to your app. Available in iOS 4.1 and later.
    GAMEKIT = "gamekit"
    # GPS (or AGPS) hardware for tracking locations. If you include this value, you should also
    # include the location-services value. Require GPS only if your app needs location data more
    # accurate than the cellular or Wi-Fi radios provide. Available in iOS 3.0 and later.
    GPS = "gps"
    # A gyroscope. Use the Core Motion framework to retrieve information from gyroscope hardware.
    # Available in iOS 3.0 and later.
    GYROSCOPE = "gyroscope"
    # Support for HealthKit. Available in iOS 8.0 and later.
    HEALTHKIT = "healthkit"
    # Performance and capabilities of the A12 Bionic and later chips. Available in iOS 12.0 and
    # later.
    IPHONE_IPAD_MINIMUM_PERFORMANCE_A12 = "iphone-ipad-minimum-performance-a12"
    # Access to the device’s current location using the Core Location framework. This value refers
    # to the general location services feature. If you specifically need GPS-level accuracy, also
    # include the gps feature. Available in iOS 3.0 and later.
    LOCATION_SERVICES = "location-services"
    # Magnetometer hardware. Apps use this hardware to receive heading-related events through the
    # Core Location framework. Available in iOS 3.0 and later.
    MAGNETOMETER = "magnetometer"
    METAL = "metal"
    # The built-in microphone or accessories that provide a microphone. Available in iOS 3.0 and
    # later.
    MICROPHONE = "microphone"
    # Near Field Communication (NFC) tag detection and access to messages that contain NFC Data
    # Exchange Format data. Use the Core NFC framework to detect and read NFC tags. Available in
    # iOS 11.0 and later.
    NFC = "nfc"
    # The OpenGL ES 1.1 interface. Available in iOS 3.0 and later.
    OPENGLES_1 = "opengles-1"
    # The OpenGL ES 2.0 interface. Available in iOS 3.0 and later.
    OPENGLES_2 = "opengles-2"
    # The OpenGL ES 3.0 interface. Available in iOS 7.0 and later.
    OPENGLES_3 = "opengles-3"
    # Peer-to-peer connectivity over a Bluetooth network. Available in iOS 3.1 and later.
    PEER_PEER = "peer-peer"
    # The Messages app. You might require this feature if your app opens URLs with the sms scheme.
    # Available in iOS 3.0 and later.
    SMS = "sms"
    # A camera on the device. Use the UIImagePickerController interface to capture images from the
    # device’s still camera. Available in iOS 3.0 and later.
    STILL_CAMERA = "still-camera"
    # The Phone app. You might require this feature if your app opens URLs with the tel scheme.
    # Available in iOS 3.0 and later.
    TELEPHONY = "telephony"
    # A camera with video capabilities on the device. Use the UIImagePickerController interface to
    # capture video from the device’s camera. Available in iOS 3.0 and later.
    VIDEO_CAMERA = "video-camera"
    # Networking features related to Wi-Fi access. Available in iOS 3.0 and later.
    WIFI = "wifi"
