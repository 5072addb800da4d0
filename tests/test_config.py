import pytest

from edgeboot.config import (
    ClientInfo,
    MessageBusInfo,
    ServiceInfo,
    TelemetryInfo,
    new_secret_store_info,
)

MANY_METRICS = {
    "OtherMetric": False,
    "YourMetric": False,
    "MyMetricSpecial": False,
    "MyMetric": True,
}


@pytest.mark.parametrize(
    "service_metric, expected_name, expected_enabled",
    [
        ("MyMetric", "MyMetric", True),
        ("MyMetric-1234", "MyMetric", True),
        ("1234-MyMetric", "", False),
    ],
)
def test_get_enabled_metric_name(service_metric, expected_name, expected_enabled):
    target = TelemetryInfo(metrics=dict(MANY_METRICS))
    name, enabled = target.get_enabled_metric_name(service_metric)
    assert enabled is expected_enabled
    assert name == expected_name


def test_get_enabled_metric_name_empty_metrics():
    assert TelemetryInfo().get_enabled_metric_name("Anything") == ("", False)


def test_service_info_urls():
    info = ServiceInfo(host="localhost", port=8080)
    assert info.url() == "http://localhost:8080"
    assert info.health_check() == "http://localhost:8080/api/v3/ping"


def test_client_info_url_uses_protocol():
    client = ClientInfo(host="core-data", port=59880, protocol="https")
    assert client.url() == "https://core-data:59880"


def test_message_bus_url_and_prefix():
    bus = MessageBusInfo(protocol="redis", host="localhost", port=6379)
    assert bus.url() == "redis://localhost:6379"
    assert bus.get_base_topic_prefix() == "edgex"
    bus.base_topic_prefix = "custom"
    assert bus.get_base_topic_prefix() == "custom"


def test_new_secret_store_info_defaults():
    info = new_secret_store_info("core-data")
    assert info.type == "vault"
    assert info.port == 8200
    assert info.path == "core-data"
    assert info.token_file == "/tmp/edgex/secrets/core-data/secrets-token.json"
    assert info.authentication.auth_type == "X-Vault-Token"
    assert info.authentication.auth_token == ""
    assert info.runtime_token_provider.enabled is False
    assert info.runtime_token_provider.port == 59841
    assert info.runtime_token_provider.required_secrets == "redisdb"


def test_mutable_defaults_are_not_shared():
    first = TelemetryInfo()
    second = TelemetryInfo()
    first.metrics["A"] = True
    assert second.metrics == {}