"""
签名权限（Entitlements）聚合记录。

`Entitlements` 由各能力域记录扁平组合而成：对外是一个扁平的键值文档，
对内每个能力域仍是独立的具名子记录。成员之间的外部键在类定义时检查唯一性。

https://developer.apple.com/documentation/bundleresources/entitlements
"""

from __future__ import annotations

from ..codec import flattened, record
from .app_clips import AppClips
from .authentication import Authentication
from .car_play import CarPlay
from .contacts import Contacts
from .deprecated_entitlements import DeprecatedEntitlements
from .education import Education
from .exposure_notification import ExposureNotification
from .games import Games
from .health import Health
from .home_automation import HomeAutomation
from .hypervisor import Hypervisor
from .icloud import ICloud
from .networking import Networking
from .push_notifications import PushNotifications
from .security import Security
from .sensors import Sensors
from .siri import Siri
from .system import System
from .tv import Tv
from .wallet import Wallet
from .wireless_interfaces import WirelessInterfaces


@record
class Entitlements:
    """一个完整的 `.entitlements` 文档。"""

    authentication: Authentication = flattened(Authentication)
    app_clips: AppClips = flattened(AppClips)
    car_play: CarPlay = flattened(CarPlay)
    contacts: Contacts = flattened(Contacts)
    education: Education = flattened(Education)
    exposure_notification: ExposureNotification = flattened(ExposureNotification)
    games: Games = flattened(Games)
    health: Health = flattened(Health)
    home_automation: HomeAutomation = flattened(HomeAutomation)
    hypervisor: Hypervisor = flattened(Hypervisor)
    icloud: ICloud = flattened(ICloud)
    networking: Networking = flattened(Networking)
    push_notifications: PushNotifications = flattened(PushNotifications)
    security: Security = flattened(Security)
    sensors: Sensors = flattened(Sensors)
    siri: Siri = flattened(Siri)
    system: System = flattened(System)
    tv: Tv = flattened(Tv)
    wallet: Wallet = flattened(Wallet)
    wireless_interfaces: WirelessInterfaces = flattened(WirelessInterfaces)
    deprecated_entitlements: DeprecatedEntitlements = flattened(DeprecatedEntitlements)
