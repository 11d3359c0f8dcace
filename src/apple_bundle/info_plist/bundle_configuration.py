"""
Info.plist 中描述 bundle 本身的键：分类、标识、命名、版本、系统版本、本地化、帮助。

https://developer.apple.com/documentation/bundleresources/information_property_list/bundle_configuration
"""

from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record


@record
class Categorization:
    # The type of bundle.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_package_type: str | None = plist_field("CFBundlePackageType")

    # The category that best describes your app for the App Store.
    # Available: macOS 10.0+
    application_category_type: AppCategoryType | None = plist_field("LSApplicationCategoryType")


@record
class Identification:
    """bundle 的唯一标识；`CFBundleIdentifier` 为必填键。"""

    # A unique identifier for a bundle.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    # Required when decoding; `None` only while an InfoPlist is being built in memory.
    bundle_identifier: str | None = plist_field("CFBundleIdentifier", required=True, default=None)

    # The bundle ID of the watchOS app.
    # Available: watchOS 2.0+
    app_bundle_identifier: str | None = plist_field("WKAppBundleIdentifier")

    # The bundle ID of the watchOS app’s companion iOS app.
    # Available: watchOS 2.0+
    companion_app_bundle_identifier: str | None = plist_field("WKCompanionAppBundleIdentifier")


@record
class Naming:
    # A user-visible short name for the bundle.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_name: str | None = plist_field("CFBundleName")

    # The user-visible name for the bundle, used by Siri and visible on the iOS Home screen.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_display_name: str | None = plist_field("CFBundleDisplayName")

    # A replacement for the app name in text-to-speech operations.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_spoken_name: str | None = plist_field("CFBundleSpokenName")


@record
class BundleVersion:
    """对外版本号与构建号。"""

    # The version of the build that identifies an iteration of the bundle.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_version: str | None = plist_field("CFBundleVersion")

    # The release or version number of the bundle.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_short_version_string: str | None = plist_field("CFBundleShortVersionString")

    # The current version of the Information Property List structure.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_info_dictionary_version: str | None = plist_field("CFBundleInfoDictionaryVersion")

    # A human-readable copyright notice for the bundle.
    # Available: macOS 10.0+
    human_readable_copyright: str | None = plist_field("NSHumanReadableCopyright")


@record
class OperatingSystemVersion:
    # The minimum operating system version required for the app to run.
    # Available: macOS 10.0+
    minimum_system_version: str | None = plist_field("LSMinimumSystemVersion")

    # The minimum version of macOS required for the app to run on a set of architectures.
    # Available: macOS 10.0+
    minimum_system_version_by_architecture: (
        MinimumSystemVersionByArchitecture | None
    ) = plist_field("LSMinimumSystemVersionByArchitecture")

    # The minimum operating system version required for the app to run on iOS, tvOS, and watchOS.
    # Available: macOS 3.0+, tvOS 9.0+, watchOS 2.0+
    minimum_os_version: str | None = plist_field("MinimumOSVersion")

    # A Boolean value indicating whether the app must run in iOS.
    # Available: iOS 12.0+
    requires_iphone_os: bool | None = plist_field("LSRequiresIPhoneOS")

    # A Boolean value that indicates whether the bundle is a watchOS app.
    # Available: watchOS 2.0+
    watch_kit_app: bool | None = plist_field("WKWatchKitApp")


@record
class Localization:
    # The default language and region for the bundle, as a language ID.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_development_region: str | None = plist_field("CFBundleDevelopmentRegion")

    # The localizations handled manually by your app.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_localizations: list[BundleLocalizations] | None = plist_field("CFBundleLocalizations")

    # A Boolean value that indicates whether the bundle supports the retrieval of localized
    # strings from frameworks.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_allow_mixed_localizations: bool | None = plist_field("CFBundleAllowMixedLocalizations")

    # A Boolean value that enables the Caps Lock key to switch between Latin and non-Latin input
    # sources.
    # Available: macOS 10.15+
    caps_lock_language_switch_capable: bool | None = plist_field("TICapsLockLanguageSwitchCapable")


@record
class Help:
    # The name of the bundle’s HTML help file.
    # Available: macOS 10.0+
    apple_help_anchor: str | None = plist_field("CFAppleHelpAnchor")

    # The name of the help file that will be opened in Help Viewer.
    # Available: macOS 10.0+
    bundle_help_book_name: str | None = plist_field("CFBundleHelpBookName")

    # The name of the folder containing the bundle’s help files.
    # Available: macOS 10.0+
    bundle_help_book_folder: str | None = plist_field("CFBundleHelpBookFolder")


class AppCategoryType(Enum):
    BUSINESS = "public.app-category.business"
    DEVELOPER_TOOLS = "public.app-category.developer-tools"
    EDUCATION = "public.app-category.education"
    ENTERTAINMENT = "public.app-category.entertainment"
    FINANCE = "public.app-category.finance"
    GAMES = "public.app-category.games"
    ACTION_GAMES = "public.app-category.action-games"
    ADVENTURE_GAMES = "public.app-category.adventure-games"
    ARCADE_GAMES = "public.app-category.arcade-games"
    BOARD_GAMES = "public.app-category.board-games"
    CARD_GAMES = "public.app-category.card-games"
    CASINO_GAMES = "public.app-category.casino-games"
    DICE_GAMES = "public.app-category.dice-games"
    EDUCATIONAL_GAMES = "public.app-category.educational-games"
    FAMILY_GAMES = "public.app-category.family-games"
    KIDS_GAMES = "public.app-category.kids-games"
    MUSIC_GAMES = "public.app-category.music-games"
    PUZZLE_GAMES = "public.app-category.puzzle-games"
    RACING_GAMES = "public.app-category.racing-games"
    ROLE_PLAYING_GAMES = "public.app-category.role-playing-games"
    SIMULATION_GAMES = "public.app-category.simulation-games"
    SPORTS_GAMES = "public.app-category.sports-games"
    STRATEGY_GAMES = "public.app-category.strategy-games"
    TRIVIA_GAMES = "public.app-category.trivia-games"
    WORD_GAMES = "public.app-category.word-games"
    GRAPHICS_DESIGN = "public.app-category.graphics-design"
    HEALTHCARE_FITNESS = "public.app-category.healthcare-fitness"
    LIFESTYLE = "public.app-category.lifestyle"
    MEDICAL = "public.app-category.medical"
    MUSIC = "public.app-category.music"
    NEWS = "public.app-category.news"
    PHOTOGRAPHY = "public.app-category.photography"
    PRODUCTIVITY = "public.app-category.productivity"
    REFERENCE = "public.app-category.reference"
    SOCIAL_NETWORKING = "public.app-category.social-networking"
    SPORTS = "public.app-category.sports"
    TRAVEL = "public.app-category.travel"
    UTILITIES = "public.app-category.utilities"
    VIDEO = "public.app-category.video"
    WEATHER = "public.app-category.weather"


@record
class MinimumSystemVersionByArchitecture:
    """按 CPU 架构区分的最低 macOS 版本。"""

    i386: str = plist_field("i386", required=True, default="10.0.0")
    ppc: str = plist_field("ppc", required=True, default="10.0.0")
    ppc64: str = plist_field("ppc64", required=True, default="10.0.0")
    x86_64: str = plist_field("x86_64", required=True, default="10.0.0")


class BundleLocalizations(Enum):
    ZH = "zh"
    ZH_CN = "zh_CN"
    ZH_TW = "zh_TW"
    EN = "en"
    FR = "fr"
    DE = "de"
    IT = "it"
    JA = "ja"
    KO = "ko"
