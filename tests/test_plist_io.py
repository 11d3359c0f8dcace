import io
import plistlib

import pytest

from apple_bundle import plist_io
from apple_bundle.entitlements.aggregate import Entitlements
from apple_bundle.entitlements.games import Games
from apple_bundle.errors import PlistFormatError, TypeMismatch
from apple_bundle.info_plist.aggregate import InfoPlist


def _sample() -> Entitlements:
    ents = Entitlements()
    ents.games = Games(game_center=True)
    return ents


def test_xml_file_round_trip(tmp_path) -> None:
    path = tmp_path / "app.entitlements"
    plist_io.to_file_xml(_sample(), str(path))

    assert path.read_bytes().startswith(b"<?xml")
    assert plist_io.from_file(Entitlements, str(path)) == _sample()


def test_binary_file_round_trip(tmp_path) -> None:
    path = tmp_path / "app.entitlements"
    plist_io.to_file_binary(_sample(), str(path))

    assert path.read_bytes().startswith(b"bplist00")
    assert plist_io.load_document(str(path)) == {"com.apple.developer.game-center": True}
    assert plist_io.from_file(Entitlements, str(path)) == _sample()


def test_writer_and_reader_streams() -> None:
    buf = io.BytesIO()
    plist_io.to_writer_binary(_sample(), buf)
    buf.seek(0)
    assert plist_io.from_reader(Entitlements, buf) == _sample()

    buf = io.BytesIO()
    plist_io.to_writer_xml(_sample(), buf)
    assert b"<key>com.apple.developer.game-center</key>" in buf.getvalue()


def test_to_bytes_keeps_declaration_order() -> None:
    info = InfoPlist()
    info.identification.bundle_identifier = "com.demo.app"
    info.categorization.bundle_package_type = "APPL"

    data = plist_io.to_bytes(info)
    assert data.index(b"CFBundlePackageType") < data.index(b"CFBundleIdentifier")


@pytest.mark.parametrize("data", [b"", b"not a plist", b"<plist><dict><key>A</key></plist>"])
def test_invalid_bytes(data: bytes) -> None:
    with pytest.raises(PlistFormatError):
        plist_io.from_bytes(Entitlements, data)


def test_root_must_be_dictionary() -> None:
    data = plistlib.dumps(["aps-environment"])
    with pytest.raises(TypeMismatch) as e:
        plist_io.from_bytes(Entitlements, data)
    assert e.value.expected == "dictionary"
    assert e.value.actual == "array"
    assert str(e.value) == "(root): expected dictionary, got array"


def test_from_reader_xml_rejects_binary() -> None:
    buf = io.BytesIO(plist_io.to_bytes(_sample()))
    assert plist_io.from_reader_xml(Entitlements, buf) == _sample()

    buf = io.BytesIO(plist_io.to_bytes(_sample(), binary=True))
    with pytest.raises(PlistFormatError):
        plist_io.from_reader_xml(Entitlements, buf)
