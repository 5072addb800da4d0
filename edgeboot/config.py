"""Configuration structures shared by every service bootstrapped with edgeboot."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_HTTP_PROTOCOL = "http"

SERVICE_TYPE_APP = "app-service"
SERVICE_TYPE_DEVICE = "device-service"
SERVICE_TYPE_OTHER = "other"

COMMON_CONFIG_DONE = "IsCommonConfigReady"

API_PING_ROUTE = "/api/v3/ping"
DEFAULT_BASE_TOPIC = "edgex"
SECRET_STORE_TYPE_VAULT = "vault"


@dataclass
class CORSConfigurationInfo:
    """Cross-origin resource sharing settings."""

    enable_cors: bool = False
    cors_allow_credentials: bool = False
    cors_allowed_origin: str = ""
    cors_allowed_methods: str = ""
    cors_allowed_headers: str = ""
    cors_expose_headers: str = ""
    cors_max_age: int = 0


@dataclass
class ServiceInfo:
    """Settings needed for the basic operation of any service."""

    health_check_interval: str = ""
    host: str = ""
    port: int = 0
    server_bind_addr: str = ""
    startup_msg: str = ""
    max_result_count: int = 0
    max_request_size: int = 0
    request_timeout: str = ""
    cors_configuration: CORSConfigurationInfo = field(default_factory=CORSConfigurationInfo)

    def health_check(self) -> str:
        """URL of the health check endpoint used by the registry."""
        return f"http://{self.host}:{self.port}{API_PING_ROUTE}"

    def url(self) -> str:
        """Full URL of the service."""
        return f"{DEFAULT_HTTP_PROTOCOL}://{self.host}:{self.port}"


@dataclass
class ConfigProviderInfo:
    """Type and location of the configuration provider."""

    host: str = ""
    port: int = 0
    type: str = ""


@dataclass
class RegistryInfo:
    """Type and location of the service registry."""

    host: str = ""
    port: int = 0
    type: str = ""


@dataclass
class ClientInfo:
    """Host and port of another service."""

    host: str = ""
    port: int = 0
    protocol: str = ""
    use_message_bus: bool = False

    def url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"


@dataclass
class AuthenticationInfo:
    """How a client authenticates against the secret store."""

    auth_type: str = ""
    auth_token: str = ""


@dataclass
class RuntimeTokenProviderInfo:
    """Settings of the runtime token provider used for delayed start."""

    enabled: bool = False
    protocol: str = ""
    host: str = ""
    port: int = 0
    trust_domain: str = ""
    endpoint_socket: str = ""
    required_secrets: str = ""


@dataclass
class SecretStoreInfo:
    """Properties used to create a secret client."""

    type: str = ""
    host: str = ""
    port: int = 0
    path: str = ""
    protocol: str = ""
    namespace: str = ""
    root_ca_cert_path: str = ""
    server_name: str = ""
    authentication: AuthenticationInfo = field(default_factory=AuthenticationInfo)
    token_file: str = ""
    secrets_file: str = ""
    disable_scrub_secrets_file: bool = False
    runtime_token_provider: RuntimeTokenProviderInfo = field(
        default_factory=RuntimeTokenProviderInfo
    )


def new_secret_store_info(service_key: str) -> SecretStoreInfo:
    """Default secret store settings for the given service."""
    return SecretStoreInfo(
        type=SECRET_STORE_TYPE_VAULT,
        protocol="http",
        host="localhost",
        port=8200,
        path=service_key,
        token_file=f"/tmp/edgex/secrets/{service_key}/secrets-token.json",
        disable_scrub_secrets_file=False,
        namespace="",
        root_ca_cert_path="",
        server_name="",
        secrets_file="",
        authentication=AuthenticationInfo(auth_type="X-Vault-Token", auth_token=""),
        runtime_token_provider=RuntimeTokenProviderInfo(
            enabled=False,
            protocol="https",
            host="localhost",
            port=59841,
            trust_domain="edgexfoundry.org",
            endpoint_socket="/tmp/edgex/secrets/spiffe/public/api.sock",
            required_secrets="redisdb",
        ),
    )


@dataclass
class Database:
    type: str = ""
    timeout: int = 0
    host: str = ""
    port: int = 0
    name: str = ""


@dataclass
class Credentials:
    """Username and password pair."""

    username: str = ""
    password: str = ""


@dataclass
class CertKeyPair:
    """Public certificate and private key of an SSL certificate."""

    cert: str = ""
    key: str = ""


@dataclass
class InsecureSecretsInfo:
    """Secrets held directly in the configuration."""

    path: str = ""
    secrets: dict[str, str] = field(default_factory=dict)


InsecureSecrets = dict[str, InsecureSecretsInfo]


@dataclass
class MessageBusInfo:
    """Parameters for connecting to the message bus."""

    disabled: bool = False
    type: str = ""
    protocol: str = ""
    host: str = ""
    port: int = 0
    auth_mode: str = ""
    secret_name: str = ""
    base_topic_prefix: str = ""
    optional: dict[str, str] = field(default_factory=dict)

    def get_base_topic_prefix(self) -> str:
        """The configured base topic prefix, or the default one when unset."""
        return self.base_topic_prefix or DEFAULT_BASE_TOPIC

    def url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"


@dataclass
class ExternalMQTTInfo:
    """Settings for connecting to an external MQTT broker."""

    url: str = ""
    subscribe_topics: str = ""
    publish_topic: str = ""
    topics: dict[str, str] = field(default_factory=dict)
    client_id: str = ""
    connect_timeout: str = ""
    auto_reconnect: bool = False
    keep_alive: int = 0
    qos: int = 0
    retain: bool = False
    skip_cert_verify: bool = False
    secret_path: str = ""
    auth_mode: str = ""
    retry_duration: int = 0
    retry_interval: int = 0
    enabled: bool = False


@dataclass
class BootstrapConfiguration:
    """Configuration elements required by the bootstrap."""

    clients: dict[str, ClientInfo] = field(default_factory=dict)
    service: ServiceInfo = field(default_factory=ServiceInfo)
    config: ConfigProviderInfo = field(default_factory=ConfigProviderInfo)
    registry: RegistryInfo = field(default_factory=RegistryInfo)
    message_bus: MessageBusInfo = field(default_factory=MessageBusInfo)
    external_mqtt: ExternalMQTTInfo = field(default_factory=ExternalMQTTInfo)


@dataclass
class TelemetryInfo:
    """Metrics collection settings of a service."""

    interval: str = ""
    metrics: dict[str, bool] = field(default_factory=dict)
    tags: dict[str, str] = field(default_factory=dict)

    def get_enabled_metric_name(self, metric_name: str) -> tuple[str, bool]:
        """Return the configured metric name that prefixes ``metric_name`` and whether it is enabled."""
        for configured, enabled in self.metrics.items():
            if metric_name.startswith(configured):
                return configured, enabled
        return "", False