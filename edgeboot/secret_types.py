"""Service secrets file format and security mode detection."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any

ENV_SECRET_STORE = "EDGEX_SECURITY_SECRET_STORE"
USERNAME_KEY = "username"
PASSWORD_KEY = "password"


class SecretsValidationError(ValueError):
    """A service secrets document is malformed or fails validation."""


class PathNotFoundError(LookupError):
    """The requested secret path does not exist in the secret store."""


def is_security_enabled() -> bool:
    """Security is on unless the secret store variable is exactly ``false``."""
    return os.environ.get(ENV_SECRET_STORE, "") != "false"


@dataclass
class SecretDataKeyValue:
    """One key/value pair of a secret."""

    key: str = ""
    value: str = ""


@dataclass
class ServiceSecret:
    """A secret to import into a service's secret store."""

    path: str = ""
    imported: bool = False
    secret_data: list[SecretDataKeyValue] = field(default_factory=list)


@dataclass
class ServiceSecrets:
    """The list of secrets to import into a service's secret store."""

    secrets: list[ServiceSecret] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialize to the compact JSON form of the secrets file."""
        document = {
            "secrets": [
                {
                    "path": secret.path,
                    "imported": secret.imported,
                    "secretData": [
                        {"key": item.key, "value": item.value} for item in secret.secret_data
                    ],
                }
                for secret in self.secrets
            ]
        }
        return json.dumps(document, separators=(",", ":"), ensure_ascii=False)


def _format_multi_error(messages: list[str]) -> str:
    noun = "error" if len(messages) == 1 else "errors"
    points = "".join(f"\n\t* {message}" for message in messages)
    return f"{len(messages)} {noun} occurred:{points}\n\n"


def _string(raw: Any, where: str) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise SecretsValidationError(f"{where} must be a string")
    return raw


def _parse_secret_data(raw: Any, where: str) -> list[SecretDataKeyValue] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise SecretsValidationError(f"{where} must be an array")
    items = []
    for position, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise SecretsValidationError(f"{where}[{position}] must be an object")
        items.append(
            SecretDataKeyValue(
                key=_string(entry.get("key"), f"{where}[{position}].key"),
                value=_string(entry.get("value"), f"{where}[{position}].value"),
            )
        )
    return items


def unmarshal_service_secrets_json(data: str | bytes) -> ServiceSecrets:
    """Parse and validate a service secrets document."""
    try:
        document = json.loads(data)
    except ValueError as err:
        raise SecretsValidationError(str(err)) from err
    if not isinstance(document, dict):
        raise SecretsValidationError("service secrets document must be a JSON object")

    raw_secrets = document.get("secrets")
    if raw_secrets is None:
        raise SecretsValidationError("ServiceSecrets.Secrets field is required")
    if not isinstance(raw_secrets, list):
        raise SecretsValidationError("secrets must be an array")
    if not raw_secrets:
        raise SecretsValidationError("ServiceSecrets.Secrets field should greater than 0")

    problems: list[str] = []
    secrets: list[ServiceSecret] = []
    for index, entry in enumerate(raw_secrets):
        if not isinstance(entry, dict):
            raise SecretsValidationError(f"secrets[{index}] must be an object")
        prefix = f"ServiceSecrets.Secrets[{index}]"
        path = _string(entry.get("path"), f"secrets[{index}].path")
        imported = entry.get("imported")
        if imported is None:
            imported = False
        if not isinstance(imported, bool):
            raise SecretsValidationError(f"secrets[{index}].imported must be a boolean")
        secret_data = _parse_secret_data(entry.get("secretData"), f"secrets[{index}].secretData")

        if not path.strip():
            problems.append(f"{prefix}.Path field should not be empty string")
        if secret_data is None:
            problems.append(f"{prefix}.SecretData field is required")
        else:
            for position, item in enumerate(secret_data):
                if not item.key:
                    problems.append(f"{prefix}.SecretData[{position}].Key field is required")
                if not item.value:
                    problems.append(f"{prefix}.SecretData[{position}].Value field is required")

        secrets.append(ServiceSecret(path=path, imported=imported, secret_data=secret_data or []))

    if problems:
        raise SecretsValidationError("; ".join(problems))

    empty = [
        f"SecretData for '{secret.path}' must not be empty when Imported=false"
        for secret in secrets
        if not secret.imported and not secret.secret_data
    ]
    if empty:
        raise SecretsValidationError(_format_multi_error(empty))

    return ServiceSecrets(secrets=secrets)