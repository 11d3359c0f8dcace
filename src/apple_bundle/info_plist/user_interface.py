"""
Info.plist 中与界面相关的键：主界面、启动界面、图标、方向、样式、状态栏等。

https://developer.apple.com/documentation/bundleresources/information_property_list/user_interface
"""

from __future__ import annotations

from enum import Enum

from ..codec import deprecated_variants, flattened, plist_field, record
from ..types import DefaultDictionary


@record
class MainUserInterface:
    # The information about the app's scene-based life-cycle support.
    # Available: iOS 13.0+
    application_scene_manifest: ApplicationSceneManifest | None = plist_field(
        "UIApplicationSceneManifest"
    )

    # The name of an app's storyboard resource file.
    # Available: macOS 10.10+
    main_storyboard_resource_file_base_name: str | None = plist_field("NSMainStoryboardFile")

    # The name of the app’s main storyboard file.
    # Available: iOS 5.0+, tvOS 9.0+
    main_storyboard_file_base_name: str | None = plist_field("UIMainStoryboardFile")

    # The name of an app’s main user interface file.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    main_nib_file_base_name: str | None = plist_field("NSMainNibFile")

    # A Boolean value indicating whether the app is an agent app that runs in the background and
    # doesn't appear in the Dock.
    # Available: macOS 10.0+
    application_is_agent: bool | None = plist_field("LSUIElement")


@record
class LaunchInterface:
    # The user interface to show while an app launches.
    # Available: iOS 14.0+
    launch_screen: LaunchScreen | None = plist_field("UILaunchScreen")

    # The user interfaces to show while an app launches in response to different URL schemes.
    # Available: iOS 14.0+
    launch_screens: LaunchScreens | None = plist_field("UILaunchScreens")

    # The filename of the storyboard from which to generate the app’s launch image.
    # Available: iOS 14.0+, tvOS 9.0+, watchOS 2.0+
    launch_storyboard_name: str | None = plist_field("UILaunchStoryboardName")

    # The launch storyboards.
    # Available: iOS 9.0+
    launch_storyboards: LaunchStoryboards | None = plist_field("UILaunchStoryboards")

    # The initial user-interface mode for the app.
    # Available: macOS 10.0+
    presentation_mode: int | None = plist_field("LSUIPresentationMode")


@record
class Icons:
    # Information about all of the icons used by the app.
    # Available: macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_icons: BundleIcons | None = plist_field("CFBundleIcons")

    # The names of the bundle’s icon image files.
    # Available: iOS 3.2+, tvOS 9.0+, watchOS 2.0+
    bundle_icon_files: list[str] | None = plist_field("CFBundleIconFiles")

    # The file containing the bundle's icon.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_icon_file: str | None = plist_field("CFBundleIconFile")

    # The name of the asset that represents the app icon.
    # Available: macOS 10.13+
    bundle_icon_name: str | None = plist_field("CFBundleIconName")

    # A Boolean value indicating whether the app’s icon already contains a shine effect.
    # Available: iOS 2.0+, tvOS 9.0+, watchOS 2.0+
    prerendered_icon: bool | None = plist_field("UIPrerenderedIcon")


@record
class Orientation:
    # The initial orientation of the app’s user interface.
    # Available: iOS 2.0+
    interface_orientation: InterfaceOrientation | None = plist_field("UIInterfaceOrientation")

    # The initial orientation of the app’s user interface.
    # Available: iOS 3.2+
    supported_interface_orientations: list[InterfaceOrientation] | None = plist_field(
        "UISupportedInterfaceOrientations"
    )


@record
class Styling:
    # The user interface style for the app.
    # Available: iOS 13.0+, tvOS 10.0+
    user_interface_style: UserInterfaceStyle | None = plist_field("UIUserInterfaceStyle")

    # A Boolean value indicating whether Core Animation layers use antialiasing when drawing a
    # layer that's not aligned to pixel boundaries.
    # Available: iOS 3.0+, tvOS 9.0+, watchOS 2.0+
    view_edge_antialiasing: bool | None = plist_field("UIViewEdgeAntialiasing")

    # The app’s white point adaptivity style, enabled on devices with True Tone displays.
    # Available: iOS 9.3+
    white_point_adaptivity_style: WhitePointAdaptivityStyle | None = plist_field(
        "UIWhitePointAdaptivityStyle"
    )

    # A Boolean value indicating whether Core Animation sublayers inherit the opacity of their
    # superlayer.
    # Available: iOS 3.0+, tvOS 9.0+, watchOS 2.0+
    view_group_opacity: bool | None = plist_field("UIViewGroupOpacity")

    # A Boolean value indicating whether the app requires fullscreen or not.
    # Available: iOS 9.0+
    requires_full_screen: bool | None = plist_field("UIRequiresFullScreen")

    # The name of a color in an asset catalog to use for a target’s global accent color.
    # Available: iOS 14.0+, macOS 11.0+, tvOS 14.0+, watchOS 7.0+
    accent_color_name: str | None = plist_field("NSAccentColorName")

    # The name of a color in an asset catalog to use for a widget’s configuration interface.
    # Available: iOS 14.0+, macOS 11.0+
    widget_background_color_name: str | None = plist_field("NSWidgetBackgroundColorName")


@record
class Fonts:
    # The location of a font file or directory of fonts in the bundle’s Resources folder.
    # Available: macOS 10.0+
    application_fonts_path: str | None = plist_field("ATSApplicationFontsPath")

    # App-specific font files located in the bundle and that the system loads at runtime.
    # Available: iOS 3.2+, tvOS 9.0+, watchOS 2.0+
    app_fonts: list[str] | None = plist_field("UIAppFonts")


@record
class StatusBar:
    # A Boolean value indicating whether the status bar is initially hidden when the app launches.
    # Available: iOS 2.0+
    status_bar_hidden: bool | None = plist_field("UIStatusBarHidden")

    # The style of the status bar as the app launches.
    # Available: iOS 2.0+
    status_bar_style: StatusBarStyle | None = plist_field("UIStatusBarStyle")

    # The status bar tint.
    # Available: iOS 2.0+, tvOS 9.0+, watchOS 2.0+
    status_bar_tint_parameters: StatusBarTintParameters | None = plist_field(
        "UIStatusBarTintParameters"
    )

    # A Boolean value indicating whether the status bar appearance is based on the style preferred
    # for the current view controller.
    # Available: iOS 2.0+
    view_controller_based_status_bar_appearance: bool | None = plist_field(
        "UIViewControllerBasedStatusBarAppearance"
    )


@record
class Preferences:
    # The name of an image file used to represent a preference pane in the System Preferences app.
    # Available: macOS 10.1+
    pref_pane_icon_file: str | None = plist_field("NSPrefPaneIconFile")

    # The name of a preference pane displayed beneath the preference pane icon in the System
    # Preferences app.
    # Available: macOS 10.1+
    pref_pane_icon_label: str | None = plist_field("NSPrefPaneIconLabel")


@record
class Graphics:
    # A Boolean value indicating whether the app supports HDR mode on Apple TV 4K.
    # Available: tvOS 11.2+
    app_supports_hdr: bool | None = plist_field("UIAppSupportsHDR")

    # A Boolean value indicating whether the Cocoa app supports high-resolution displays.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    high_resolution_capable: bool | None = plist_field("NSHighResolutionCapable")

    # A Boolean value indicating whether an OpenGL app may utilize the integrated GPU.
    # Available: macOS 10.7+
    supports_automatic_graphics_switching: bool | None = plist_field(
        "NSSupportsAutomaticGraphicsSwitching"
    )

    # The preferred system action when an external GPU is connected from the system.
    # Available: macOS 10.14+
    gpu_eject_policy: GpuEjectPolicy | None = plist_field("GPUEjectPolicy")

    # The app's preference for whether it wants to use external graphics processors.
    # Available: macOS 10.14+
    gpu_selection_policy: GpuSelectionPolicy | None = plist_field("GPUSelectionPolicy")


@record
class QuickLook:
    # A Boolean value indicating whether a Quick Look app's generator can be run in threads other
    # than the main thread.
    # Available: iOS 4.0+, macOS 10.5+
    needs_to_be_run_in_main_thread: bool | None = plist_field("QLNeedsToBeRunInMainThread")

    # A hint at the height, in points, of a Quick Look app's previews.
    # Available: iOS 4.0+, macOS 10.5+
    preview_height: float | None = plist_field("QLPreviewHeight")

    # A hint at the width, in points, of a Quick Look app's previews.
    # Available: iOS 4.0+, macOS 10.5+
    preview_width: float | None = plist_field("QLPreviewWidth")

    # A Boolean value indicating whether a Quick Look app's generator can handle concurrent
    # thumbnail and preview requests.
    # Available: iOS 4.0+, macOS 10.5+
    supports_concurrent_requests: bool | None = plist_field("QLSupportsConcurrentRequests")

    # The minimum size, in points, along one dimension of thumbnails for a Quick Look app's
    # generator.
    # Available: iOS 4.0+, macOS 10.5+
    thumbnail_minimum_size: float | None = plist_field("QLThumbnailMinimumSize")


@record
class DeprecatedKeys:
    """已弃用但仍可能出现在旧工程中的界面键。"""

    # A dictionary containing information about launch images.
    # Available: iOS 7.0-13.0, tvOS 9.0-13.0
    launch_images: list[DefaultDictionary] | None = plist_field(
        "UILaunchImages",
        deprecated="iOS 7.0-13.0, tvOS 9.0-13.0",
        note="UILaunchImages has been deprecated; use Xcode launch storyboards instead.",
    )


class GpuEjectPolicy(Enum):
    # Set this value to allow macOS to quit and relaunch your app with another GPU. Your app can
    # implement the application(_:willEncodeRestorableState:) method to save any state before it
    # quits, and it can implement the application(_:didDecodeRestorableState:) method to restore
    # any saved state after it relaunches.
    RELAUNCH = "relaunch"
    # Set this value to manually respond to the safe disconnect request. Your app must register
    # and respond to the removalRequested notification posted by Metal. macOS waits for your app
    # to remove all references to the external GPU before notifying the user that it's safe to
    # disconnect the GPU.
    WAIT = "wait"
    # Set this value to allow macOS to force your app to quit.
    KILL = "kill"
    # Tells the system to ignore the disconnect message. Don’t use this key in new macOS apps.
    IGNORE = "ignore"


class GpuSelectionPolicy(Enum):
    # Metal tries to avoid creating contexts on external GPUs. For legacy OpenGL apps, OpenGL also
    # avoids creating contexts using external GPUs. Set this option only if your app doesn't
    # support external GPU event handling.
    AVOID_REMOVABLE = "avoidRemovable"
    # If external GPUs are visible to the system, Metal prefers them over other GPUs. Similarly,
    # for legacy OpenGL apps, OpenGL also prefers to create contexts on the external GPU.
    PREFER_REMOVABLE = "preferRemovable"


@record
class StatusBarTintParameters:
    # The initial navigation bar’s style and translucency.
    # Available: iOS 2.0+, tvOS 9.0+, watchOS 2.0+
    navigation_bar: NavigationBar | None = plist_field("UINavigationBar")


@record
class NavigationBar:
    background_image: str = plist_field("BackgroundImage", required=True)

    style: BarStyle = plist_field("Style", required=True)

    translucent: bool = plist_field("Translucent", required=True)

    # The tint color to apply to the background of the navigation bar.
    # Available: iOS 2.0+, tvOS 9.0+, watchOS 2.0+
    tint_color: TintColor | None = plist_field("TintColor")


class BarStyle(Enum):
    DEFAULT = "UIBarStyleDefault"
    BLACK = "UIBarStyleBlack"


@record
class TintColor:
    blue: float = plist_field("Blue", required=True)

    green: float = plist_field("Green", required=True)

    red: float = plist_field("Red", required=True)


@deprecated_variants(BLACK_TRANSLUCENT="iOS 2.0-7.0", BLACK_OPAQUE="iOS 2.0-7.0")
class StatusBarStyle(Enum):
    """状态栏样式；两个 Black 样式已弃用。"""

    DEFAULT = "UIStatusBarStyleDefault"
    BLACK_TRANSLUCENT = "UIStatusBarStyleBlackTranslucent"
    BLACK_OPAQUE = "UIStatusBarStyleBlackOpaque"


class WhitePointAdaptivityStyle(Enum):
    STANDARD = "UIWhitePointAdaptivityStyleStandard"
    READING = "UIWhitePointAdaptivityStyleReading"
    PHOTO = "UIWhitePointAdaptivityStylePhoto"
    VIDEO = "UIWhitePointAdaptivityStyleVideo"
    GAME = "UIWhitePointAdaptivityStyleGame"


class UserInterfaceStyle(Enum):
    # Set this value to adopt the systemwide user interface style, and observe any changes to that
    # style. This is the default value, and provides the same functionality as if the key weren’t
    # explicitly set.
    AUTOMATIC = "Automatic"
    # Set this value to force the light user interface style, even when the systemwide style is
    # set to dark. Your app will ignore any changes to the systemwide style.
    LIGHT = "Light"
    # Set this value to force the dark user interface style, even when the systemwide style is set
    # to light. Your app will ignore any changes to the systemwide style.
    DARK = "Dark"


class InterfaceOrientation(Enum):
    """界面方向；短名称见 `from_short_name`。"""

    # The app supports the display in portrait mode, with the device upright and the front camera
    # at the top.
    PORTRAIT = "UIInterfaceOrientationPortrait"
    # The app supports the display in portrait mode but is upside down, with the device upright
    # and the front camera at the bottom. UIViewController ignores this option on devices without
    # a Home button.
    PORTRAIT_UPSIDE_DOWN = "UIInterfaceOrientationPortraitUpsideDown"
    # The app supports the display in landscape mode, with the device upright and the front camera
    # on the left.
    LANDSCAPE_LEFT = "UIInterfaceOrientationLandscapeLeft"
    # The app supports the display in landscape mode, with the device upright and the front camera
    # on the right.
    LANDSCAPE_RIGHT = "UIInterfaceOrientationLandscapeRight"

    @classmethod
    def from_short_name(cls, name: str) -> InterfaceOrientation:
        """把 `portrait`、`landscape-left` 这类短名解析为对应方向。"""
        try:
            return _ORIENTATION_SHORT_NAMES[name.strip().lower()]
        except KeyError:
            known = ", ".join(_ORIENTATION_SHORT_NAMES)
            raise ValueError(
                f"unknown interface orientation: {name!r} (expected one of: {known})"
            ) from None


_ORIENTATION_SHORT_NAMES = {
    "portrait": InterfaceOrientation.PORTRAIT,
    "portrait-upside-down": InterfaceOrientation.PORTRAIT_UPSIDE_DOWN,
    "landscape-left": InterfaceOrientation.LANDSCAPE_LEFT,
    "landscape-right": InterfaceOrientation.LANDSCAPE_RIGHT,
}


@record
class BundleIcons:
    # Available: iOS 5.0+, tvOS 9.0+, watchOS 2.0+
    bundle_alternate_icons: dict[str, AppIconReferenceName] | None = plist_field(
        "CFBundleAlternateIcons"
    )

    # The primary icon for the Home screen and Settings app, among others.
    # Available: iOS 5.0+, tvOS 9.0+, watchOS 2.0+
    bundle_primary_icon: BundlePrimaryIcon = plist_field("CFBundlePrimaryIcon", required=True)


@record
class AppIconReferenceName:
    bundle_icon_files: list[str] | None = plist_field("CFBundleIconFiles")

    prerendered_icon: bool | None = plist_field("UIPrerenderedIcon")


@record
class BundlePrimaryIcon:
    # The names of a bundle’s icon files.
    # Available: iOS 3.2+, tvOS 9.0+, watchOS 2.0+
    bundle_icon_files: list[str] = plist_field("CFBundleIconFiles", required=True)

    # The name of a symbol from SF Symbols.
    # Available: iOS 13.0+
    bundle_symbol_name: str | None = plist_field("CFBundleSymbolName")

    # A Boolean value indicating whether the icon files already incorporate a shine effect.
    # Available: iOS 2.0+, tvOS 9.0+, watchOS 2.0+
    prerendered_icon: bool = plist_field("UIPrerenderedIcon", required=True)


@record
class LaunchScreen:
    # The name of a color to use as the background color on the launch screen.
    # Available: iOS 14.0+
    color_name: str | None = plist_field("UIColorName")

    # The name of an image to display during app launch.
    # Available: iOS 14.0+
    image_name: str | None = plist_field("UIImageName")

    # A Boolean that specifies whether the launch image should respect the safe area insets.
    # Available: iOS 14.0+
    image_respects_safe_area_insets: bool | None = plist_field("UIImageRespectsSafeAreaInsets")

    # Navigation bar visibility and configuration during launch.
    # Available: iOS 14.0+
    navigation_bar: Bar | None = plist_field("UINavigationBar")

    # Tab bar visibility and configuration during launch.
    # Available: iOS 14.0+
    tab_bar: Bar | None = plist_field("UITabBar")

    # When you provide a dictionary for this key, the system displays a toolbar during launch. You
    # can optionally set the dictionary’s UIImageName key to define a custom image for the
    # toolbar.
    # Available: iOS 14.0+
    toolbar: Bar | None = plist_field("UIToolbar")


@record
class Bar:
    # A custom image that replaces the navigation/tab/tool bar during launch.
    # Available: iOS 14.0+
    image_name: str | None = plist_field("UIImageName")


@record
class LaunchScreens:
    # A collection of launch screen configuration dictionaries.
    # Available: iOS 14.0+
    launch_screen_definitions: list[LaunchScreenDefinitions] | None = plist_field(
        "UILaunchScreenDefinitions"
    )

    # The mapping of URL schemes to launch screen configurations.
    # Available: iOS 14.0+
    url_to_launch_screen_associations: dict[str, str] | None = plist_field(
        "UIURLToLaunchScreenAssociations"
    )

    # The default launch screen configuration.
    # Available: iOS 14.0+
    default_launch_screen: str | None = plist_field("UIDefaultLaunchScreen")


@record
class LaunchScreenDefinitions:
    """按 `UILaunchScreenIdentifier` 区分的一组启动屏配置。"""

    # A unique name for the launch screen configuration, referenced from
    # UIURLToLaunchScreenAssociations and UIDefaultLaunchScreen.
    launch_screen_identifier: str | None = plist_field("UILaunchScreenIdentifier")

    # Available: iOS 14.0+
    launch_screen: LaunchScreen = flattened(LaunchScreen)


@record
class LaunchStoryboards:
    default_launch_storyboard: str | None = plist_field("UIDefaultLaunchStoryboard")

    launch_storyboard_definitions: list[LaunchStoryboardDefinition] | None = plist_field(
        "UILaunchStoryboardDefinitions"
    )

    url_to_launch_storyboard_associations: dict[str, str] | None = plist_field(
        "UIURLToLaunchStoryboardAssociations"
    )


@record
class LaunchStoryboardDefinition:
    launch_storyboard_file: str | None = plist_field("UILaunchStoryboardFile")

    launch_storyboard_identifier: str | None = plist_field("UILaunchStoryboardIdentifier")


@record
class ApplicationSceneManifest:
    """多场景支持的配置入口。"""

    # A Boolean value indicating whether the app supports two or more scenes simultaneously.
    # Available: iOS 13.0+
    enable_multiple_windows: bool | None = plist_field("UIApplicationSupportsMultipleScenes")

    # The default configuration details for UIKit to use when creating new scenes.
    # Available: iOS 13.0+
    scene_configurations: SceneConfigurations | None = plist_field("UISceneConfigurations")


@record
class SceneConfigurations:
    """按会话角色分组的场景配置。"""

    # Scenes that you use to display content on the device's main screen and respond to user
    # interactions.
    # Available: iOS 13.0+
    application_session_role: list[WindowSceneSessionRole] | None = plist_field(
        "UIWindowSceneSessionRoleApplication"
    )

    # Scenes that you use to display content on an externally connected display.
    # Available: iOS 13.0+
    external_display_session_role: list[WindowSceneSessionRole] | None = plist_field(
        "UIWindowSceneSessionRoleExternalDisplay"
    )


@record
class WindowSceneSessionRole:
    # The app-specific name you use to identify the scene.
    # Available: iOS 13.0+
    configuration_name: str | None = plist_field("UISceneConfigurationName")

    # The name of the scene class you want UIKit to instantiate.
    # Available: iOS 13.0+
    class_name: str | None = plist_field("UISceneClassName")

    # The name of the app-specific class that you want UIKit to instantiate and use as the scene
    # delegate object.
    # Available: iOS 13.0+
    delegate_class_name: str | None = plist_field("UISceneDelegateClassName")

    # The name of the storyboard file containing the scene's initial user interface.
    # Available: iOS 13.0+
    storyboard_name: str | None = plist_field("UISceneStoryboardFile")
