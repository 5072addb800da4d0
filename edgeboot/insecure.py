"""Secret provider that serves secrets held directly in the configuration."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from datetime import datetime
from typing import Any

from edgeboot.secret_types import PathNotFoundError

SECRETS_REQUESTED_METRIC_NAME = "SecuritySecretsRequested"
SECRETS_STORED_METRIC_NAME = "SecuritySecretsStored"

SecretCallback = Callable[[str], Any]


class Counter:
    """A monotonically increasing count."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.count = 0

    def inc(self, amount: int = 1) -> None:
        with self._lock:
            self.count += amount


class DurationTimer:
    """Accumulates how long repeated operations took, in seconds."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.count = 0
        self.total = 0.0
        self.last = 0.0

    def update_since(self, started: float) -> None:
        """Record the time elapsed since ``started``, a ``time.monotonic()`` value."""
        elapsed = time.monotonic() - started
        with self._lock:
            self.count += 1
            self.total += elapsed
            self.last = elapsed


class InsecureProvider:
    """Serves the insecure secrets found in a service's configuration.

    ``configuration`` is any object with a ``get_insecure_secrets()`` method
    returning a mapping of names to ``InsecureSecretsInfo``, or None.
    """

    def __init__(self, configuration: Any, logger: logging.Logger | None = None) -> None:
        self._configuration = configuration
        self._logger = logger or logging.getLogger(__name__)
        self._last_updated = datetime.now()
        self._callbacks: dict[str, SecretCallback | None] = {}
        self._secrets_requested = Counter()
        self._secrets_stored = Counter()

    def _insecure_secrets(self):
        secrets = (
            self._configuration.get_insecure_secrets() if self._configuration is not None else None
        )
        if secrets is None:
            raise ValueError("InsecureSecrets missing from configuration")
        return secrets

    def get_secret(self, path: str, *keys: str) -> dict[str, str]:
        """Return the secrets at ``path``: only ``keys`` if given, else all of them."""
        self._secrets_requested.inc(1)

        results: dict[str, str] = {}
        path_exists = False
        missing: list[str] = []

        for info in self._insecure_secrets().values():
            if info.path != path:
                continue
            if not keys:
                return dict(info.secrets or {})
            path_exists = True
            stored = info.secrets or {}
            for key in keys:
                if key in stored:
                    results[key] = stored[key]
                else:
                    missing.append(key)

        if missing:
            raise LookupError(f"No value for the keys: [{','.join(missing)}] exists")
        if not path_exists:
            raise PathNotFoundError(f"Error, path ({path}) doesn't exist in secret store")
        return results

    def store_secret(self, path: str, secrets: dict[str, str]) -> None:
        """Always fails: insecure secrets cannot be stored."""
        count = len(secrets) if secrets is not None else 0
        self._logger.debug("refusing to store %d value(s) at path '%s'", count, path)
        raise RuntimeError("storing secrets is not supported when running in insecure mode")

    def secrets_updated(self) -> None:
        """Mark the insecure secrets as updated now."""
        self._last_updated = datetime.now()

    def secrets_last_updated(self) -> datetime:
        return self._last_updated

    def get_access_token(self, token_type: str, service_key: str) -> str:
        """No access token is needed in insecure mode, so this is always empty."""
        self._logger.debug(
            "no '%s' access token needed for '%s' in insecure mode", token_type, service_key
        )
        return ""

    def has_secret(self, path: str) -> bool:
        return any(info.path == path for info in self._insecure_secrets().values())

    def list_secret_paths(self) -> list[str]:
        return [info.path for info in self._insecure_secrets().values()]

    def registered_secret_updated_callback(
        self, path: str, callback: SecretCallback | None
    ) -> None:
        """Register the callback run when the secret at ``path`` is updated."""
        if path in self._callbacks:
            raise ValueError(f"there is a callback already registered for path '{path}'")
        self._callbacks[path] = callback

    def secret_updated_at_path(self, path: str) -> None:
        """Record an update of ``path`` and run its registered callback."""
        self._secrets_stored.inc(1)
        self._last_updated = datetime.now()
        if path in self._callbacks:
            callback = self._callbacks[path]
            self._logger.debug("invoking callback registered for path: '%s'", path)
            if callback is not None:
                callback(path)

    def deregister_secret_updated_callback(self, path: str) -> None:
        self._callbacks.pop(path, None)

    def get_metrics_to_register(self) -> dict[str, Any]:
        return {
            SECRETS_REQUESTED_METRIC_NAME: self._secrets_requested,
            SECRETS_STORED_METRIC_NAME: self._secrets_stored,
        }