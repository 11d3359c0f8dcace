"""
Info.plist 中与数据和存储相关的键：文档类型、URL scheme、UTI 声明、网络安全、存储。
"""

from __future__ import annotations

from enum import Enum

from ..codec import plist_field, record
from ..types import DefaultDictionary


@record
class Documents:
    # The document types supported by the bundle.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_document_types: list[BundleDocumentTypes] | None = plist_field("CFBundleDocumentTypes")

    # A Boolean value indicating whether the app is a document-based app.
    # Available: iOS 11.0+
    supports_document_browser: bool | None = plist_field("UISupportsDocumentBrowser")

    # A Boolean value indicating whether the app may open the original document from a file
    # provider, rather than a copy of the document.
    # Available: iOS 12.0+
    supports_opening_documents_in_place: bool | None = plist_field(
        "LSSupportsOpeningDocumentsInPlace"
    )

    # The Core Data persistent store type associated with a document type.
    # Available: macOS 10.4+
    persistent_store_type_key: PersistentStoreTypeKey | None = plist_field(
        "NSPersistentStoreTypeKey"
    )


class PersistentStoreTypeKey(Enum):
    SQLITE = "SQLite"
    XML = "XML"
    BINARY = "Binary"
    IN_MEMORY = "InMemory"


@record
class URLSchemes:
    # A list of URL schemes (http, ftp, and so on) supported by the app.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_url_types: list[BundleURLTypes] | None = plist_field("CFBundleURLTypes")


@record
class BundleDocumentTypes:
    # The icon to associate with the document type.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_type_icon_file: str | None = plist_field("CFBundleTypeIconFile")

    # The abstract name for the document type.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_type_name: str = plist_field("CFBundleTypeName", required=True)

    # The app's role with respect to the document type.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_type_role: BundleTypeRole | None = plist_field("CFBundleTypeRole")

    # The ranking of this app among apps that declare themselves as editors or viewers of the
    # given file type.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    handler_rank: HandlerRank | None = plist_field("LSHandlerRank")

    # The document file types the app supports.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    item_content_types: list[str] | None = plist_field("LSItemContentTypes")

    # A Boolean value indicating whether the document is distributed as a bundle.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    type_is_package: bool | None = plist_field("LSTypeIsPackage")

    # The subclass used to create instances of this document.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    document_class: str | None = plist_field("NSDocumentClass")

    # The file types that this document can be exported to.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    exportable_types: list[str] | None = plist_field("NSExportableTypes")


class BundleTypeRole(Enum):
    EDITOR = "Editor"
    VIEWER = "Viewer"
    SHELL = "Shell"
    QL_GENERATOR = "QLGenerator"
    NONE = "None"


class HandlerRank(Enum):
    OWNER = "Owner"
    DEFAULT = "Default"
    ALTERNATE = "Alternate"
    NONE = "None"


@record
class BundleURLTypes:
    # The app’s role with respect to the type.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_type_role: BundleTypeRole | None = plist_field("CFBundleTypeRole")

    # The name of the icon image file, without the extension, to be used for this type.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_url_icon_file: str | None = plist_field("CFBundleURLIconFile")

    # The abstract name for this type.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_url_name: str = plist_field("CFBundleURLName", required=True)

    # The URL schemes supported by this type.
    # Available: iOS 2.0+, macOS 10.0+, tvOS 9.0+, watchOS 2.0+
    bundle_url_schemes: list[str] | None = plist_field("CFBundleURLSchemes")


@record
class UniversalTypeIdentifiers:
    # The uniform type identifiers owned and exported by the app.
    # Available: iOS 5.0+, macOS 10.7+
    exported_type_declarations: list[ExportedTypeDeclarations] | None = plist_field(
        "UTExportedTypeDeclarations"
    )

    # The uniform type identifiers inherently supported, but not owned, by the app.
    # Available: iOS 3.2+, macOS 10.5+
    imported_type_declarations: list[ImportedTypeDeclarations] | None = plist_field(
        "UTImportedTypeDeclarations"
    )


@record
class ExportedTypeDeclarations:
    """本 app 拥有并导出的统一类型标识（UTI）。"""

    # The Uniform Type Identifier types that this type conforms to.
    type_conforms_to: list[str] = plist_field("UTTypeConformsTo", required=True)

    # A description for this type.
    type_description: str | None = plist_field("UTTypeDescription")

    # The bundle icon resource to associate with this type.
    type_icon_file: str | None = plist_field("UTTypeIconFile")

    # One or more bundle icon resources to associate with this type.
    type_icon_files: list[str] | None = plist_field("UTTypeIconFiles")

    # The Uniform Type Identifier to assign to this type.
    type_identifier: str = plist_field("UTTypeIdentifier", required=True)

    # The webpage for a reference document that describes this type.
    type_reference_url: str | None = plist_field("UTTypeReferenceURL")

    # A dictionary defining one or more equivalent type identifiers.
    type_tag_specification: DefaultDictionary = plist_field(
        "UTTypeTagSpecification", required=True
    )


@record
class ImportedTypeDeclarations:
    """本 app 使用但不拥有的统一类型标识（UTI）。"""

    # The Uniform Type Identifier types that this type conforms to.
    type_conforms_to: list[str] = plist_field("UTTypeConformsTo", required=True)

    # A description for this type.
    type_description: str | None = plist_field("UTTypeDescription")

    # The bundle icon resource to associate with this type.
    type_icon_file: str | None = plist_field("UTTypeIconFile")

    # One or more bundle icon resources to associate with this type.
    type_icon_files: list[str] | None = plist_field("UTTypeIconFiles")

    # The Uniform Type Identifier to assign to this type.
    type_identifier: str = plist_field("UTTypeIdentifier", required=True)

    # The webpage for a reference document that describes this type.
    type_reference_url: str | None = plist_field("UTTypeReferenceURL")

    # A dictionary defining one or more equivalent type identifiers.
    type_tag_specification: DefaultDictionary = plist_field(
        "UTTypeTagSpecification", required=True
    )


@record
class Network:
    # The URL where Private Click Measurement sends event attribution information.
    # Available: iOS 14.5+
    advertising_attribution_report_endpoint: str | None = plist_field(
        "NSAdvertisingAttributionReportEndpoint"
    )

    # A description of changes made to the default security for HTTP connections.
    # Important: Always look for ways to improve server security before adding ATS exceptions.
    # Loosening ATS restrictions reduces the security of your app.
    # Available: iOS 9.0+, macOS 10.11+
    app_transport_security: AppTransportSecurity | None = plist_field("NSAppTransportSecurity")

    # Bonjour service types browsed by the app.
    # Available: iOS 14.0+, macOS 11.0+, tvOS 14.0+
    bonjour_services: list[str] | None = plist_field("NSBonjourServices")

    # A Boolean value that indicates your app supports CloudKit Sharing.
    # Available: iOS 10.0+, macOS 10.12+
    sharing_supported: bool | None = plist_field("CKSharingSupported")


@record
class AppTransportSecurity:
    """App Transport Security（ATS）网络安全策略。"""

    # A Boolean value indicating whether App Transport Security restrictions are disabled for all
    # network connections.
    # Important: You must supply a justification during App Store review if you set the key’s value
    # to YES, as described in Provide Justification for Exceptions. Use this key with caution
    # because it significantly reduces the security of your app. In most cases, it’s better to
    # upgrade your servers to meet the requirements imposed by ATS, or at least to use a narrower
    # exception.
    # Available: iOS 9.0+, macOS 10.11+
    allows_arbitrary_loads: bool | None = plist_field("NSAllowsArbitraryLoads")

    # A Boolean value indicating whether all App Transport Security restrictions are disabled for
    # requests made using the AV Foundation framework.
    # Important: You must supply a justification during App Store review if you set the key’s value
    # to YES, as described in Provide Justification for Exceptions.
    # Available: iOS 10.0+, macOS 10.12+
    allows_arbitrary_loads_for_media: bool | None = plist_field("NSAllowsArbitraryLoadsForMedia")

    # A Boolean value indicating whether all App Transport Security restrictions are disabled for
    # requests made from web views.
    # Important: You must supply a justification during App Store review if you set the key’s value
    # to YES, as described in Provide Justification for Exceptions.
    # Available: iOS 10.0+, macOS 10.12+
    allows_arbitrary_loads_in_web_content: bool | None = plist_field(
        "NSAllowsArbitraryLoadsInWebContent"
    )

    # A Boolean value indicating whether to allow loading of local resources.
    # Available: iOS 10.0+, macOS 10.12+
    allows_local_networking: bool | None = plist_field("NSAllowsLocalNetworking")

    # Custom App Transport Security configurations for named domains, keyed by domain name.
    # Available: iOS 9.0+, macOS 10.11+
    exception_domains: dict[str, ExceptionDomains] | None = plist_field("NSExceptionDomains")

    # A collection of certificates that App Transport Security expects when connecting to named
    # domains, keyed by domain name.
    # Available: iOS 14.0+, macOS 11.0+
    pinned_domains: dict[str, PinnedDomains] | None = plist_field("NSPinnedDomains")


@record
class ExceptionDomains:
    """单个域名的 ATS 例外配置，按域名作为字典键。"""

    # A Boolean value that indicates whether to extend the configuration to subdomains of the
    # given domain.
    # Available: iOS 9.0+, macOS 10.11+
    includes_subdomains: bool | None = plist_field("NSIncludesSubdomains")

    # A Boolean value indicating whether to allow insecure HTTP loads.
    # Important: You must supply a justification during App Store review if you set the key’s value
    # to YES, as described in Provide Justification for Exceptions.
    # Available: iOS 9.0+, macOS 10.11+
    exception_allows_insecure_http_loads: bool | None = plist_field(
        "NSExceptionAllowsInsecureHTTPLoads"
    )

    # The minimum Transport Layer Security (TLS) version for network connections.
    # Important: You must supply a justification during App Store review if you use this key to set
    # a protocol version lower than 1.2, as described in Provide Justification for Exceptions.
    # Available: iOS 9.0+, macOS 10.11+
    exception_minimum_tls_version: ExceptionMinimumTLSVersion | None = plist_field(
        "NSExceptionMinimumTLSVersion"
    )

    # A Boolean value indicating whether to override the perfect forward secrecy requirement.
    # Available: iOS 9.0+, macOS 10.11+
    exception_requires_forward_secrecy: bool | None = plist_field(
        "NSExceptionRequiresForwardSecrecy"
    )

    # A Boolean value indicating whether to require Certificate Transparency.
    # Available: iOS 9.0+, macOS 10.11+
    requires_certificate_transparency: bool | None = plist_field(
        "NSRequiresCertificateTransparency"
    )


class ExceptionMinimumTLSVersion(Enum):
    # Require a minimum TLS version of 1.0.
    TLS_V1_0 = "TLSv1.0"
    # Require a minimum TLS version of 1.1.
    TLS_V1_1 = "TLSv1.1"
    # Require a minimum TLS version of 1.2.
    TLS_V1_2 = "TLSv1.2"
    # Require a minimum TLS version of 1.3.
    TLS_V1_3 = "TLSv1.3"


@record
class PinnedDomains:
    """单个域名的证书固定配置，按域名作为字典键。"""

    # A Boolean value that indicates whether to extend the configuration to subdomains of the
    # given domain.
    # Available: iOS 9.0+, macOS 10.11+
    includes_subdomains: bool | None = plist_field("NSIncludesSubdomains")

    # A list of allowed Certificate Authority certificates for a given domain name.
    # Available: iOS 14.0+, macOS 11.0+
    pinned_ca_identities: list[PinnedCAIdentity] | None = plist_field("NSPinnedCAIdentities")


@record
class PinnedCAIdentity:
    # The digest of an X.509 certificate’s Subject Public Key Info structure.
    # Available: iOS 14.0+, macOS 11.0+
    spki_sha256_base64: str | None = plist_field("SPKI-SHA256-BASE64")


@record
class Storage:
    # Describes the files or directories the app installs on the system.
    # Available: macOS 10.0+
    files: Files | None = plist_field("APFiles")

    # The base path to the files or directories the app installs.
    # Available: macOS 10.0+
    installer_url: str | None = plist_field("APInstallerURL")

    # A Boolean value indicating whether the app continues working if the system purges the local
    # storage.
    # Available: iOS 9.3+
    supports_purgeable_local_storage: bool | None = plist_field("NSSupportsPurgeableLocalStorage")

    # A Boolean value indicating whether the files this app creates are quarantined by default.
    # Available: macOS 10.0+
    file_quarantine_enabled: bool | None = plist_field("LSFileQuarantineEnabled")

    # A Boolean value indicating whether the app shares files through iTunes.
    # Available: iOS 3.2+, tvOS 9.0+, watchOS 2.0+
    file_sharing_enabled: bool | None = plist_field("UIFileSharingEnabled")

    # A Boolean value indicating whether the app's resources files should be mapped into memory.
    # Available: macOS 10.0+
    resources_file_mapped: bool | None = plist_field("CSResourcesFileMapped")

    # A Boolean value that indicates whether the system should download documents before handing
    # them over to the app.
    # Available: macOS 11.0+
    downloads_ubiquitous_contents: bool | None = plist_field("NSDownloadsUbiquitousContents")


@record
class Files:
    # A Boolean value indicating whether the file or a folder icon is displayed in the Info
    # window.
    # Available: macOS 10.0+
    displayed_as_container: bool | None = plist_field("APDisplayedAsContainer")

    # A short description of the file or folder that appears in the Info window.
    # Available: macOS 10.0+
    file_description_key: str = plist_field("APFileDescriptionKey", required=True)

    # The path to use when installing the file or folder, relative to the app bundle.
    # Available: macOS 10.0+
    file_destination_path: str = plist_field("APFileDestinationPath", required=True)

    # The name of the file or folder to install.
    # Available: macOS 10.0+
    file_name: str = plist_field("APFileName", required=True)

    # The path to the file or folder in the app package, relative to the installer path.
    # Available: macOS 10.0+
    file_source_path: str = plist_field("APFileSourcePath", required=True)

    # The action to take on the file or folder.
    # Available: macOS 10.0+
    install_action: InstallAction | None = plist_field("APInstallAction")


class InstallAction(Enum):
    COPY = "Copy"
    OPEN = "Open"


@record
class CoreMLModels:
    # A Boolean value indicating whether the app contains a Core ML model to optimize loading the
    # model.
    # Available: iOS 12.0+, macOS 10.0+, tvOS 12.0+, watchOS 5.0+
    bundle_contains_core_ml_mlmodelc: bool | None = plist_field("LSBundleContainsCoreMLmlmodelc")


@record
class Java:
    # The root directory for the app’s Java class files.
    # Available: macOS 10.0+
    java_root: str | None = plist_field("NSJavaRoot")
