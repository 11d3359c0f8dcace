import plistlib

import pytest

from apple_bundle.codec import decode, deprecated_fields, encode
from apple_bundle.errors import MissingRequiredField, TypeMismatch, UnknownVariant
from apple_bundle.info_plist.aggregate import InfoPlist
from apple_bundle.info_plist.bundle_configuration import (
    AppCategoryType,
    BundleVersion,
    Categorization,
    Identification,
    Localization,
    Naming,
)
from apple_bundle.info_plist.app_execution import Launch
from apple_bundle.info_plist.data_and_storage import BundleURLTypes
from apple_bundle.info_plist.user_interface import (
    InterfaceOrientation,
    LaunchInterface,
    Orientation,
    Styling,
)
from apple_bundle.plist_io import from_bytes, to_bytes

EXPECTED_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
    '<plist version="1.0">\n'
    "<dict>\n"
    "\t<key>CFBundlePackageType</key>\n"
    "\t<string>APPL</string>\n"
    "\t<key>LSApplicationCategoryType</key>\n"
    "\t<string>public.app-category.business</string>\n"
    "\t<key>CFBundleIdentifier</key>\n"
    "\t<string>com.test.test-id</string>\n"
    "\t<key>CFBundleName</key>\n"
    "\t<string>Test</string>\n"
    "\t<key>CFBundleVersion</key>\n"
    "\t<string>1</string>\n"
    "\t<key>CFBundleShortVersionString</key>\n"
    "\t<string>1.0</string>\n"
    "\t<key>CFBundleInfoDictionaryVersion</key>\n"
    "\t<string>1.0</string>\n"
    "\t<key>CFBundleDevelopmentRegion</key>\n"
    "\t<string>en</string>\n"
    "\t<key>UILaunchStoryboardName</key>\n"
    "\t<string>LaunchScreen</string>\n"
    "\t<key>UISupportedInterfaceOrientations</key>\n"
    "\t<array>\n"
    "\t\t<string>UIInterfaceOrientationPortrait</string>\n"
    "\t\t<string>UIInterfaceOrientationPortraitUpsideDown</string>\n"
    "\t\t<string>UIInterfaceOrientationLandscapeLeft</string>\n"
    "\t\t<string>UIInterfaceOrientationLandscapeRight</string>\n"
    "\t</array>\n"
    "\t<key>UIRequiresFullScreen</key>\n"
    "\t<false/>\n"
    "\t<key>CFBundleExecutable</key>\n"
    "\t<string>test</string>\n"
    "</dict>\n"
    "</plist>\n"
)


def _sample_info_plist() -> InfoPlist:
    return InfoPlist(
        localization=Localization(bundle_development_region="en"),
        launch=Launch(bundle_executable="test"),
        identification=Identification(bundle_identifier="com.test.test-id"),
        bundle_version=BundleVersion(
            bundle_version="1",
            bundle_info_dictionary_version="1.0",
            bundle_short_version_string="1.0",
        ),
        naming=Naming(bundle_name="Test"),
        categorization=Categorization(
            bundle_package_type="APPL",
            application_category_type=AppCategoryType.BUSINESS,
        ),
        launch_interface=LaunchInterface(launch_storyboard_name="LaunchScreen"),
        styling=Styling(requires_full_screen=False),
        orientation=Orientation(
            supported_interface_orientations=[
                InterfaceOrientation.PORTRAIT,
                InterfaceOrientation.PORTRAIT_UPSIDE_DOWN,
                InterfaceOrientation.LANDSCAPE_LEFT,
                InterfaceOrientation.LANDSCAPE_RIGHT,
            ]
        ),
    )


def test_serializes_to_expected_xml() -> None:
    data = to_bytes(_sample_info_plist())
    assert data.decode("utf-8") == EXPECTED_XML


def test_expected_xml_parses_back_equal() -> None:
    info = from_bytes(InfoPlist, EXPECTED_XML.encode("utf-8"))
    assert info == _sample_info_plist()
    assert info.styling.requires_full_screen is False


def test_missing_bundle_identifier() -> None:
    doc = {"CFBundleName": "Test", "CFBundleVersion": "1"}
    with pytest.raises(MissingRequiredField) as e:
        decode(InfoPlist, doc)
    assert e.value.key == "CFBundleIdentifier"
    assert e.value.record == "Identification"
    assert e.value.field == "bundle_identifier"
    assert e.value.member == "identification"


def test_default_info_plist_encodes_empty() -> None:
    assert encode(InfoPlist()) == {}


def test_build_then_assign() -> None:
    info = InfoPlist()
    info.identification.bundle_identifier = "com.demo.app"
    info.url_schemes.bundle_url_types = [
        BundleURLTypes(bundle_url_name="demo", bundle_url_schemes=["demo"])
    ]

    assert encode(info) == {
        "CFBundleIdentifier": "com.demo.app",
        "CFBundleURLTypes": [{"CFBundleURLName": "demo", "CFBundleURLSchemes": ["demo"]}],
    }


def test_nested_error_path_and_member() -> None:
    doc = {
        "CFBundleIdentifier": "com.demo.app",
        "CFBundleURLTypes": [{"CFBundleURLName": "ok"}, {"CFBundleURLSchemes": ["x"]}],
    }
    with pytest.raises(MissingRequiredField) as e:
        decode(InfoPlist, doc)
    assert e.value.key == "CFBundleURLTypes:1:CFBundleURLName"
    assert e.value.record == "BundleURLTypes"
    assert e.value.member == "url_schemes"


def test_orientation_literal_is_case_sensitive() -> None:
    doc = {
        "CFBundleIdentifier": "com.demo.app",
        "UISupportedInterfaceOrientations": ["uiinterfaceorientationportrait"],
    }
    with pytest.raises(UnknownVariant) as e:
        decode(InfoPlist, doc)
    assert e.value.key == "UISupportedInterfaceOrientations:0"


def test_interface_orientation_from_short_name() -> None:
    assert InterfaceOrientation.from_short_name("portrait") is InterfaceOrientation.PORTRAIT
    assert (
        InterfaceOrientation.from_short_name("portrait-upside-down")
        is InterfaceOrientation.PORTRAIT_UPSIDE_DOWN
    )
    assert (
        InterfaceOrientation.from_short_name("landscape-left")
        is InterfaceOrientation.LANDSCAPE_LEFT
    )
    assert (
        InterfaceOrientation.from_short_name("landscape-right")
        is InterfaceOrientation.LANDSCAPE_RIGHT
    )
    with pytest.raises(ValueError):
        InterfaceOrientation.from_short_name("sideways")


def test_scene_manifest_nests_configurations() -> None:
    doc = {
        "CFBundleIdentifier": "com.demo.app",
        "UIApplicationSceneManifest": {
            "UIApplicationSupportsMultipleScenes": False,
            "UISceneConfigurations": {
                "UIWindowSceneSessionRoleApplication": [
                    {
                        "UISceneConfigurationName": "Default Configuration",
                        "UISceneDelegateClassName": "SceneDelegate",
                    }
                ]
            },
        },
    }
    info = decode(InfoPlist, doc)
    manifest = info.main_user_interface.application_scene_manifest
    roles = manifest.scene_configurations.application_session_role

    assert roles[0].delegate_class_name == "SceneDelegate"
    assert manifest.scene_configurations.external_display_session_role is None
    assert encode(info) == doc


def test_exception_domains_keyed_by_domain() -> None:
    doc = {
        "CFBundleIdentifier": "com.demo.app",
        "NSAppTransportSecurity": {
            "NSExceptionDomains": {
                "example.com": {
                    "NSIncludesSubdomains": True,
                    "NSExceptionAllowsInsecureHTTPLoads": True,
                }
            }
        },
    }
    info = decode(InfoPlist, doc)
    domains = info.network.app_transport_security.exception_domains

    assert domains["example.com"].includes_subdomains is True
    assert encode(info) == doc


def test_deprecated_status_bar_style_is_reported() -> None:
    doc = {
        "CFBundleIdentifier": "com.demo.app",
        "UIStatusBarStyle": "UIStatusBarStyleBlackOpaque",
    }
    info = decode(InfoPlist, doc)

    assert encode(info) == doc
    found = dict(deprecated_fields(info))
    assert found["UIStatusBarStyle=UIStatusBarStyleBlackOpaque"].since == "iOS 2.0-7.0"


def test_real_field_accepts_integer_from_plist() -> None:
    data = plistlib.dumps({"CFBundleIdentifier": "com.demo.app", "QLPreviewHeight": 200})
    info = from_bytes(InfoPlist, data)
    assert info.quick_look.preview_height == 200.0

    bad = plistlib.dumps({"CFBundleIdentifier": "com.demo.app", "QLPreviewHeight": True})
    with pytest.raises(TypeMismatch):
        from_bytes(InfoPlist, bad)
