import pytest

from apple_bundle.codec import decode, deprecated_fields, encode
from apple_bundle.entitlements.aggregate import Entitlements
from apple_bundle.entitlements.icloud import ICloudServices
from apple_bundle.entitlements.push_notifications import APSEnvironment
from apple_bundle.entitlements.security import Security
from apple_bundle.errors import TypeMismatch, UnknownVariant


def test_minimal_document_round_trip() -> None:
    doc = {"com.apple.developer.game-center": True}
    ents = decode(Entitlements, doc)

    assert ents.games.game_center is True
    assert ents.push_notifications.aps_environment is None
    assert ents.icloud.icloud_services is None
    assert encode(ents) == doc


def test_aps_environment_literals() -> None:
    ents = decode(Entitlements, {"aps-environment": "development"})
    assert ents.push_notifications.aps_environment is APSEnvironment.DEVELOPMENT

    with pytest.raises(UnknownVariant) as e:
        decode(Entitlements, {"aps-environment": "staging"})
    assert e.value.key == "aps-environment"
    assert e.value.literal == "staging"
    assert e.value.member == "push_notifications"


def test_icloud_services_keep_order() -> None:
    doc = {"com.apple.developer.icloud-services": ["CloudKit", "CloudDocuments"]}
    ents = decode(Entitlements, doc)

    assert ents.icloud.icloud_services == [
        ICloudServices.CLOUD_KIT,
        ICloudServices.CLOUD_DOCUMENTS,
    ]
    assert encode(ents) == doc


def test_default_entitlements_encode_empty() -> None:
    assert encode(Entitlements()) == {}


def test_build_in_memory() -> None:
    ents = Entitlements()
    ents.security = Security(app_sandbox=True)
    ents.push_notifications.aps_environment = APSEnvironment.PRODUCTION

    assert encode(ents) == {
        "aps-environment": "production",
        "com.apple.security.app-sandbox": True,
    }


def test_boolean_entitlement_rejects_string() -> None:
    with pytest.raises(TypeMismatch) as e:
        decode(Entitlements, {"com.apple.security.app-sandbox": "YES"})
    assert e.value.member == "security"
    assert e.value.expected == "boolean"


def test_deprecated_entitlement_still_decodes() -> None:
    ents = decode(Entitlements, {"com.apple.vm.hypervisor": True})
    assert ents.hypervisor.vm_hypervisor is True
    assert [key for key, _dep in deprecated_fields(ents)] == ["com.apple.vm.hypervisor"]
