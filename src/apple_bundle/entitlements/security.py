"""
App Sandbox 签名权限：网络、硬件、个人信息与文件访问。
"""

from __future__ import annotations

from ..codec import plist_field, record


@record
class Security:
    """App Sandbox 及其资源访问权限。"""

    # A Boolean value that indicates whether the app may use access control technology to contain
    # damage to the system and user data if an app is compromised.
    # Available: macOS 10.7+
    app_sandbox: bool | None = plist_field("com.apple.security.app-sandbox")

    # A Boolean value indicating whether your app may listen for incoming network connections.
    # Available: macOS 10.7+
    security_network_server: bool | None = plist_field("com.apple.security.network.server")

    # A Boolean value indicating whether your app may open outgoing network connections.
    # Available: macOS 10.7+
    security_network_client: bool | None = plist_field("com.apple.security.network.client")

    # A Boolean value that indicates whether the app may capture movies and still images using the
    # built-in camera.
    # Available: macOS 10.7+
    camera: bool | None = plist_field("com.apple.security.device.camera")

    # A Boolean value that indicates whether the app may use the microphone.
    # Available: macOS 10.7+
    device_microphone: bool | None = plist_field("com.apple.security.device.microphone")

    # A Boolean value indicating whether your app may interact with USB devices.
    # Available: macOS 10.7+
    device_usb: bool | None = plist_field("com.apple.security.device.usb")

    # A Boolean value indicating whether your app may print a document.
    # Available: macOS 10.7+
    print: bool | None = plist_field("com.apple.security.print")

    # A Boolean value indicating whether your app may interact with Bluetooth devices.
    # Available: macOS 10.7+
    bluetooth: bool | None = plist_field("com.apple.security.device.bluetooth")

    # A Boolean value that indicates whether the app may access location information from Location
    # Services.
    # Available: macOS 10.7+
    location: bool | None = plist_field("com.apple.security.personal-information.location")

    # A Boolean value that indicates whether the app may have read-write access to the user's
    # calendar.
    # Available: macOS 10.7+
    calendars: bool | None = plist_field("com.apple.security.personal-information.calendars")

    # A Boolean value that indicates whether the app may have read-only access to files the user
    # has selected using an Open or Save dialog.
    # Available: macOS 10.7+
    files_user_selected_read_only: bool | None = plist_field(
        "com.apple.security.files.user-selected.read-only"
    )

    # A Boolean value that indicates whether the app may have read-write access to files the user
    # has selected using an Open or Save dialog.
    # Available: macOS 10.7+
    files_user_selected_read_write: bool | None = plist_field(
        "com.apple.security.files.user-selected.read-write"
    )

    # A Boolean value that indicates whether the app may have read-only access to the Downloads
    # folder.
    # Available: macOS 10.7+
    files_downloads_read_only: bool | None = plist_field(
        "com.apple.security.files.downloads.read-only"
    )

    # A Boolean value that indicates whether the app may have read-write access to the Downloads
    # folder.
    # Available: macOS 10.7+
    files_downloads_read_write: bool | None = plist_field(
        "com.apple.security.files.downloads.read-write"
    )

    # A Boolean value that indicates whether the app may have read-only access to the Pictures
    # folder.
    # Available: macOS 10.7+
    assets_pictures_read_only: bool | None = plist_field(
        "com.apple.security.assets.pictures.read-only"
    )

    # A Boolean value that indicates whether the app may have read-write access to the Pictures
    # folder.
    # Available: macOS 10.7+
    assets_pictures_read_write: bool | None = plist_field(
        "com.apple.security.assets.pictures.read-write"
    )

    # A Boolean value that indicates whether the app may have read-only access to the Music
    # folder.
    # Available: macOS 10.7+
    assets_music_read_only: bool | None = plist_field("com.apple.security.assets.music.read-only")

    # A Boolean value that indicates whether the app may have read-only access to the Movies
    # folder.
    # Available: macOS 10.7+
    assets_movies_read_only: bool | None = plist_field(
        "com.apple.security.assets.movies.read-only"
    )

    # A Boolean value that indicates whether the app may have read-write access to the Movies
    # folder.
    # Available: macOS 10.7+
    assets_movies_read_write: bool | None = plist_field(
        "com.apple.security.assets.movies.read-write"
    )

    # A Boolean value that indicates whether the app may have access to all files.
    # Available: macOS 10.7-10.11
    all_files: bool | None = plist_field(
        "com.apple.security.files.all", deprecated="macOS 10.7-10.11"
    )
