"""Client configuration management."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """Client configuration from environment variables."""

    model_config = SettingsConfigDict(env_prefix="ETHRPC_", env_file=".env", extra="ignore")

    # Node endpoint
    host: str = "localhost"
    port: int = 8545
    http_scheme: str = "http"
    ws_scheme: str = "ws"

    # Transport selection: "http" or "ws"
    transport: str = "http"
    http_pooled: bool = False

    # Timeouts (seconds)
    request_timeout: float = 10.0
    ws_open_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"
    log_rpc_errors: bool = False

    @property
    def scheme(self) -> str:
        """Endpoint scheme for the configured transport."""
        return self.ws_scheme if self.transport == "ws" else self.http_scheme

    @property
    def endpoint_url(self) -> str:
        """Endpoint URI built from host, port and transport scheme."""
        return f"{self.scheme}://{self.host}:{self.port}"


config = ClientConfig()
