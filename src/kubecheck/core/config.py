"""Configuration management for kubecheck."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from kubecheck.core.exceptions import ConfigurationError

SUPPORTED_API_VERSIONS = ("v1",)


class ClusterConnectionConfig(BaseModel):
    """How to reach and authenticate against the Kubernetes API.

    Resolution order used by the client: ``in_cluster`` first, then an
    explicit ``api_server``, then the kubeconfig file.
    """

    api_server: str | None = Field(None, description="URL to the API server")
    api_version: str = Field("v1", description="Core API version")
    in_cluster: bool = Field(False, description="Use service account authentication")
    ca_file: str | None = Field(None, description="CA file to verify the API server cert")
    client_cert: str | None = Field(None, description="Client certificate to present")
    client_key: str | None = Field(None, description="Key for the client certificate")
    user: str | None = Field(None, description="User for basic authentication")
    password: str | None = Field(None, description="Password for basic authentication")
    token: str | None = Field(None, description="Bearer token")
    token_file: str | None = Field(None, description="File containing a bearer token")
    kubeconfig: str | None = Field(None, description="Path to kubeconfig file")
    context: str | None = Field(None, description="Kubeconfig context to use")
    insecure_skip_tls_verify: bool = False
    request_timeout: float | None = Field(None, gt=0, description="Request timeout in seconds")

    @model_validator(mode="after")
    def validate_auth_options(self) -> "ClusterConnectionConfig":
        """Reject contradictory or incomplete authentication options.

        Returns:
            Self if validation passes

        Raises:
            ValueError: If options are inconsistent
        """
        if self.api_version not in SUPPORTED_API_VERSIONS:
            raise ValueError(
                f"Unsupported API version '{self.api_version}', "
                f"expected one of: {', '.join(SUPPORTED_API_VERSIONS)}"
            )

        if self.user and self.password is None:
            raise ValueError("If user is passed, also pass a password")
        if self.password is not None and not self.user:
            raise ValueError("A password requires a user")

        if self.client_key and not self.client_cert:
            raise ValueError("A client key requires a client certificate")
        if self.client_cert and not self.client_key:
            raise ValueError("A client certificate requires a client key")

        if self.token and self.token_file:
            raise ValueError("Pass either a token or a token file, not both")
        if self.user and (self.token or self.token_file):
            raise ValueError("Pass either basic auth or a bearer token, not both")

        return self


class CheckSettings(BaseModel):
    """Node readiness check settings."""

    minimal: int = Field(1, ge=0, description="Threshold for minimal nodes ready allowed")
    node_filter: str | None = Field(None, description="Selector filter for nodes to be checked")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "console"
    output: str = "stderr"


class CheckConfig(BaseModel):
    """Main kubecheck configuration."""

    connection: ClusterConnectionConfig = Field(default_factory=ClusterConnectionConfig)
    check: CheckSettings = Field(default_factory=CheckSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: str | Path) -> "CheckConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to configuration file

        Returns:
            CheckConfig instance

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        config_path = Path(path).expanduser()

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError("Invalid configuration: top level must be a mapping")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CheckConfig":
        """Build and validate configuration from a plain dictionary.

        Raises:
            ConfigurationError: If the data does not validate
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {details}") from e

    def with_overrides(self, **sections: dict[str, Any]) -> "CheckConfig":
        """Return a copy with per-section overrides applied.

        ``None`` values are ignored so unset command line options keep the
        file or default value.

        Args:
            **sections: Mapping of section name (connection, check, logging)
                to field overrides

        Returns:
            New validated CheckConfig

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        data = self.model_dump()
        for section, values in sections.items():
            if section not in data:
                raise ConfigurationError(f"Unknown configuration section: {section}")
            data[section].update({k: v for k, v in values.items() if v is not None})

        return self.from_dict(data)
