"""Configuration failures: unreadable file, unset variables, schema violations."""

from pathlib import Path

from cipher_sql.core.errors import CipherSqlError


class MissingEnvVarsError(CipherSqlError):
    """The config references variables that are neither set nor defaulted."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        names = ", ".join(sorted(missing_vars))
        super().__init__(f"Failed to load config: missing environment variables: {names}")


class ConfigValidationError(CipherSqlError):
    """The YAML parsed but does not describe a valid StudioConfig."""

    def __init__(self, details: str) -> None:
        super().__init__(f"Failed to validate config: {details}")


class ConfigLoadError(CipherSqlError):
    """The config file is missing, unreadable or not a YAML mapping."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load config: {reason}: {path}")
