"""
网络扩展、VPN、关联域名等网络相关签名权限。
"""

from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record


@record
class Networking:
    """网络扩展、VPN 与多路径等网络能力权限。"""

    # The APIs an app can use to customize networking features.
    # Available: iOS 9.0+, macOS 10.11+
    network_extensions: list[NetworkExtensions] | None = plist_field(
        "com.apple.developer.networking.networkextension"
    )

    # The API an app can use to create and control a custom system VPN configuration.
    # Available: iOS 8.0+, macOS 10.10+
    personal_vpn: list[PersonalVPN] | None = plist_field("com.apple.developer.networking.vpn.api")

    # The associated domains for specific services, such as shared web credentials, universal
    # links, and App Clips.
    # Available: iOS 9.0+, macOS 10.15+, tvOS 9.0+, watchOS 6.0+
    associated_domains: list[str] | None = plist_field("com.apple.developer.associated-domains")

    # A Boolean value that indicates whether an app can send or receive IP multicast traffic.
    # Available: iOS 14.0+, macOS 11.0+, tvOS 14.0+
    networking_multicast: bool | None = plist_field("com.apple.developer.networking.multicast")

    # Available: macOS 10.15+
    associated_domains_applinks_read_write: bool | None = plist_field(
        "com.apple.developer.associated-domains.applinks.read-write"
    )


class NetworkExtensions(Enum):
    # The APIs you use to proxy DNS queries.
    DNS_PROXY = "dns-proxy"
    # The APIs you use to proxy TCP and UDP connections.
    APP_PROXY_PROVIDER = "app-proxy-provider"
    # The filter APIs you use to allow or deny network connections created by other apps on the
    # system.
    CONTENT_FILTER_PROVIDER = "content-filter-provider"
    # The APIs you use to tunnel IP packets to a remote network using any custom tunneling
    # protocol.
    PACKET_TUNNEL_PROVIDER = "packet-tunnel-provider"
    # The APIs you use to proxy DNS queries, when signed with a Developer ID profile.
    DNS_PROXY_SYSTEMEXTENSION = "dns-proxy-systemextension"
    # The APIs you use to proxy TCP and UDP connections, when signed with a Developer ID profile.
    APP_PROXY_PROVIDER_SYSTEMEXTENSION = "app-proxy-provider-systemextension"
    # The filter APIs you use to allow or deny network connections created by other apps on the
    # system, when signed with a Developer ID profile.
    CONTENT_FILTER_PROVIDER_SYSTEM_EXTENSIONS = "content-filter-provider-systemextension"
    # The APIs you use to tunnel IP packets to a remote network using any custom tunneling
    # protocol, when signed with a Developer ID profile.
    PACKET_TUNNEL_PROVIDER_SYSTEM_EXTENSION = "packet-tunnel-provider-systemextension"
    # The APIs you use to create and manage a system-wide DNS configuration.
    DNS_SETTINGS = "dns-settings"
    # The APIs you use for providing functionality similar to Apple Push Notification Service when
    # access to the wider internet is unavailable.
    APP_PUSH_PROVIDER = "app-push-provider"


class PersonalVPN(Enum):
    ALLOW_VPN = "allow-vpn"
