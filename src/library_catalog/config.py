"""Configuration management for the Library Catalog server.

Settings are read from ``LIBRARY_CATALOG_*`` environment variables (and an
optional ``.env`` file) and validated with Pydantic v2:
1. Server metadata - name and version sent during the MCP handshake
2. Transport - how the server talks to clients
3. Logging - verbosity of diagnostic output
4. Catalog behavior - how record identifiers are assigned
"""

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogConfig(BaseSettings):
    """Library Catalog configuration.

    The catalog itself is in-memory, so there is no database or cache to
    configure here. Everything below controls how the catalog is served.
    """

    model_config = SettingsConfigDict(
        # Use LIBRARY_CATALOG_ prefix for all env vars
        env_prefix="LIBRARY_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Server Metadata ===

    server_name: str = Field(
        default="library-catalog",
        description="MCP server name used in protocol handshake",
        pattern=r"^[a-z0-9-]+$",
    )

    server_version: str = Field(
        default="0.1.0",
        description="Server version for capability negotiation",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    # === Transport Configuration ===

    transport: str = Field(
        default="stdio",
        description="Transport mechanism used to serve the catalog",
        pattern=r"^stdio$",
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    # === Catalog Behavior ===

    id_strategy: str = Field(
        default="sequential",
        description=(
            "How record ids are assigned: 'sequential' never reuses an id, "
            "'legacy' uses collection size + 1 and may reuse ids after removals"
        ),
        pattern=r"^(sequential|legacy)$",
    )

    # === Validation Methods ===

    @field_validator("log_level", "id_strategy", mode="before")
    @classmethod
    def normalize_case(cls, v: object, info: ValidationInfo) -> object:
        """Accept any casing for enumerated settings."""
        if not isinstance(v, str):
            return v
        v = v.strip()
        return v.upper() if info.field_name == "log_level" else v.lower()

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        """Validate server name length; clients use it for identification."""
        if len(v) < 3:
            raise ValueError("Server name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Server name must not exceed 50 characters")
        return v

    # === Computed Properties ===

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"

    @property
    def server_info(self) -> dict[str, str]:
        """Get server information for the MCP handshake."""
        return {
            "name": self.server_name,
            "version": self.server_version,
            "transport": self.transport,
        }


# === Global Configuration Instance ===


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: CatalogConfig | None = None


def get_config() -> CatalogConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CatalogConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
