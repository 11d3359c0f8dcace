"""
Info.plist 聚合记录。

`InfoPlist` 把七个主题模块中的记录扁平组合成一个文档：
外部视图是一个扁平字典，内存中每个主题仍是独立的具名成员，
因此既可以整体解码，也可以先 `InfoPlist()` 再逐项赋值后编码。

https://developer.apple.com/documentation/bundleresources/information_property_list
"""

from __future__ import annotations

from ..codec import flattened, record
from .app_execution import (
    AppClips,
    BackgroundExecution,
    EndpointSecurity,
    ExtensionsAndServices,
    Launch,
    LaunchConditions,
    PluginConfiguration,
    PluginSupport,
    Termination,
)
from .app_services import (
    Authentication,
    CarPlay,
    ExposureNotification,
    ExternalAccessories,
    Games,
    Intents,
    InterprocessCommunication,
    Maps,
    NfcAppServices,
    PointerInteractions,
    ServiceManagement,
    Store,
)
from .bundle_configuration import (
    BundleVersion,
    Categorization,
    Help,
    Identification,
    Localization,
    Naming,
    OperatingSystemVersion,
)
from .data_and_storage import (
    CoreMLModels,
    Documents,
    Java,
    Network,
    Storage,
    UniversalTypeIdentifiers,
    URLSchemes,
)
from .kernel_and_drivers import DriverPersonalities, KextDependencies, ThunderboltCompatibility
from .protected_resources import (
    Bluetooth,
    CalendarAndReminders,
    CameraAndMicrophone,
    Contacts,
    FaceID,
    FilesAndFolders,
    GameCenter,
    Health,
    Home,
    Location,
    MediaPlayer,
    Motion,
    Networking,
    Nfc,
    Photos,
    Scripting,
    Security,
    Sensors,
    Siri,
    Speech,
    TVResource,
    WiFi,
)
from .user_interface import (
    DeprecatedKeys,
    Fonts,
    Graphics,
    Icons,
    LaunchInterface,
    MainUserInterface,
    Orientation,
    Preferences,
    QuickLook,
    StatusBar,
    Styling,
)


@record
class InfoPlist:
    """一个完整的 `Info.plist` 文档。"""

    # Bundle configuration
    categorization: Categorization = flattened(Categorization)
    identification: Identification = flattened(Identification)
    naming: Naming = flattened(Naming)
    bundle_version: BundleVersion = flattened(BundleVersion)
    operating_system_version: OperatingSystemVersion = flattened(OperatingSystemVersion)
    localization: Localization = flattened(Localization)
    help: Help = flattened(Help)

    # User interface
    main_user_interface: MainUserInterface = flattened(MainUserInterface)
    launch_interface: LaunchInterface = flattened(LaunchInterface)
    icons: Icons = flattened(Icons)
    orientation: Orientation = flattened(Orientation)
    styling: Styling = flattened(Styling)
    fonts: Fonts = flattened(Fonts)
    status_bar: StatusBar = flattened(StatusBar)
    preferences: Preferences = flattened(Preferences)
    graphics: Graphics = flattened(Graphics)
    quick_look: QuickLook = flattened(QuickLook)
    deprecated_keys: DeprecatedKeys = flattened(DeprecatedKeys)

    # App execution
    launch: Launch = flattened(Launch)
    launch_conditions: LaunchConditions = flattened(LaunchConditions)
    extensions_and_services: ExtensionsAndServices = flattened(ExtensionsAndServices)
    app_clips: AppClips = flattened(AppClips)
    background_execution: BackgroundExecution = flattened(BackgroundExecution)
    endpoint_security: EndpointSecurity = flattened(EndpointSecurity)
    plugin_support: PluginSupport = flattened(PluginSupport)
    plugin_configuration: PluginConfiguration = flattened(PluginConfiguration)
    termination: Termination = flattened(Termination)

    # Protected resources
    bluetooth: Bluetooth = flattened(Bluetooth)
    calendar_and_reminders: CalendarAndReminders = flattened(CalendarAndReminders)
    camera_and_microphone: CameraAndMicrophone = flattened(CameraAndMicrophone)
    contacts: Contacts = flattened(Contacts)
    face_id: FaceID = flattened(FaceID)
    files_and_folders: FilesAndFolders = flattened(FilesAndFolders)
    game_center: GameCenter = flattened(GameCenter)
    health: Health = flattened(Health)
    home: Home = flattened(Home)
    location: Location = flattened(Location)
    media_player: MediaPlayer = flattened(MediaPlayer)
    motion: Motion = flattened(Motion)
    networking: Networking = flattened(Networking)
    nfc: Nfc = flattened(Nfc)
    photos: Photos = flattened(Photos)
    scripting: Scripting = flattened(Scripting)
    security: Security = flattened(Security)
    sensors: Sensors = flattened(Sensors)
    siri: Siri = flattened(Siri)
    speech: Speech = flattened(Speech)
    tv_resource: TVResource = flattened(TVResource)
    wi_fi: WiFi = flattened(WiFi)

    # Data and storage
    documents: Documents = flattened(Documents)
    url_schemes: URLSchemes = flattened(URLSchemes)
    universal_type_identifiers: UniversalTypeIdentifiers = flattened(UniversalTypeIdentifiers)
    network: Network = flattened(Network)
    storage: Storage = flattened(Storage)
    core_ml_models: CoreMLModels = flattened(CoreMLModels)
    java: Java = flattened(Java)

    # App services
    carplay: CarPlay = flattened(CarPlay)
    exposure_notification: ExposureNotification = flattened(ExposureNotification)
    pointer_interactions: PointerInteractions = flattened(PointerInteractions)
    games: Games = flattened(Games)
    intents: Intents = flattened(Intents)
    maps: Maps = flattened(Maps)
    nfc_app_services: NfcAppServices = flattened(NfcAppServices)
    authentication: Authentication = flattened(Authentication)
    external_accessories: ExternalAccessories = flattened(ExternalAccessories)
    service_management: ServiceManagement = flattened(ServiceManagement)
    interprocess_communication: InterprocessCommunication = flattened(InterprocessCommunication)
    store: Store = flattened(Store)

    # Kernel and drivers
    driver_personalities: DriverPersonalities = flattened(DriverPersonalities)
    kext_dependencies: KextDependencies = flattened(KextDependencies)
    thunderbolt_compatibility: ThunderboltCompatibility = flattened(ThunderboltCompatibility)
