"""Bootstrap helpers for edge services: configuration types, dependency injection, a startup timer, the service secrets file format and an insecure secret provider."""

__version__ = "0.1.0"