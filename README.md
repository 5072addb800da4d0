# edgeboot

Building blocks for starting an edge service: typed configuration records,
a small dependency-injection container, a startup retry timer, the service
secrets file format, and a secret provider that serves secrets kept in the
configuration itself.

The package has no third-party dependencies.

## Installation

```
pip install edgeboot
```

For running the test suite:

```
pip install "edgeboot[test]"
pytest
```

## Configuration types (`edgeboot.config`)

Dataclasses for each configuration section: `ServiceInfo`,
`CORSConfigurationInfo`, `ClientInfo`, `ConfigProviderInfo`, `RegistryInfo`,
`MessageBusInfo`, `ExternalMQTTInfo`, `SecretStoreInfo` (with
`AuthenticationInfo` and `RuntimeTokenProviderInfo`), `InsecureSecretsInfo`,
`TelemetryInfo`, `BootstrapConfiguration`, `Database`, `Credentials` and
`CertKeyPair`.

```python
from edgeboot.config import MessageBusInfo, ServiceInfo, TelemetryInfo, new_secret_store_info

service = ServiceInfo(host="localhost", port=59880)
service.url()            # "http://localhost:59880"
service.health_check()   # "http://localhost:59880/api/v3/ping"

MessageBusInfo().get_base_topic_prefix()   # "edgex" when no prefix is set

telemetry = TelemetryInfo(metrics={"MyMetric": True})
telemetry.get_enabled_metric_name("MyMetric-1234")   # ("MyMetric", True)
telemetry.get_enabled_metric_name("1234-MyMetric")   # ("", False)

store = new_secret_store_info("core-data")
store.port         # 8200
store.token_file   # "/tmp/edgex/secrets/core-data/secrets-token.json"
```

## Dependency injection (`edgeboot.di`)

```python
from edgeboot.di import Container, type_instance_to_name

container = Container({
    "foo": lambda get: {"message": "foo"},
    "bar": lambda get: {"message": "bar", "foo": get("foo")},
})
container.get("bar")["foo"]["message"]   # "foo"
container.get("unknown")                 # None
```

Each constructor runs once; later lookups return the same instance.
`Container.update` adds or replaces constructors and drops the cached
instances of the names it replaces. Access is guarded by a lock.
`type_instance_to_name(value)` gives `"<module>.<qualified class name>"` for
the type of a value (or for a class passed directly).

## Startup timer (`edgeboot.startup`)

```python
from edgeboot.startup import Timer, format_duration

timer = Timer(duration=60, interval=1)   # seconds
while timer.has_not_elapsed():
    ...  # try something
    timer.sleep_for_interval()

timer.remaining_as_string()   # e.g. "59.5s", never negative
format_duration(3723.5)       # "1h2m3.5s"
format_duration(0.25)         # "250ms"
```

## Service secrets file (`edgeboot.secret_types`)

`unmarshal_service_secrets_json(data)` parses and validates a document of
the form:

```json
{"secrets": [{"path": "credentials001", "imported": false,
              "secretData": [{"key": "username", "value": "password"}]}]}
```

It returns a `ServiceSecrets` holding `ServiceSecret` and
`SecretDataKeyValue` records, and raises `SecretsValidationError` when the
document is not valid JSON, has no secrets, has an empty path, lacks
`secretData`, has a key or value missing, or has empty `secretData` on a
secret not yet imported. `ServiceSecrets.to_json()` writes the compact form
back.

`is_security_enabled()` is true unless the environment variable
`EDGEX_SECURITY_SECRET_STORE` is exactly `false`.

## Insecure secret provider (`edgeboot.insecure`)

`InsecureProvider` serves secrets from any configuration object that has a
`get_insecure_secrets()` method returning a mapping of names to
`InsecureSecretsInfo`.

```python
from edgeboot.config import InsecureSecretsInfo
from edgeboot.insecure import InsecureProvider

class Settings:
    def get_insecure_secrets(self):
        return {"DB": InsecureSecretsInfo(path="redisdb",
                                          secrets={"username": "admin", "password": "password"})}

provider = InsecureProvider(Settings())
provider.get_secret("redisdb")               # all secrets at the path
provider.get_secret("redisdb", "username")   # {"username": "admin"}
provider.has_secret("redisdb")               # True
provider.list_secret_paths()                 # ["redisdb"]
provider.get_access_token("consul", "core-data")   # ""
```

- `get_secret` raises `LookupError` naming any missing keys and
  `PathNotFoundError` for an unknown path.
- Every method that reads the secrets raises `ValueError` when the
  configuration has none.
- `store_secret` always raises `RuntimeError`.
- `registered_secret_updated_callback`, `secret_updated_at_path` and
  `deregister_secret_updated_callback` manage one callback per path;
  registering a second one for the same path raises `ValueError`.
- `secrets_updated` / `secrets_last_updated` track the last update time.
- `get_metrics_to_register` returns the `Counter` objects for secrets
  requested and secrets stored. `DurationTimer` is also provided for timing
  operations.

## What the package does not do

It has no client for a secure secret store: there is no provider that talks
to a secrets server, caches its answers or seeds secrets from a secrets file
into it, and nothing chooses a provider from `is_security_enabled()`. It does
not register services with a service registry. It has no command-line entry
point and no server.