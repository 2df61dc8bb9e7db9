"""Configuration settings for the sarasara feed server."""
from typing import Optional, Tuple
from pydantic import HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BIND_ADDRESS = "0.0.0.0:8080"
DEFAULT_RAIPLAYSOUND_URL = "https://www.raiplaysound.it"

class Settings(BaseSettings):
    """Application settings."""

    # Server settings
    BIND_ADDRESS: str = DEFAULT_BIND_ADDRESS

    # Upstream settings
    RAIPLAYSOUND_URL: HttpUrl = DEFAULT_RAIPLAYSOUND_URL
    REQUEST_TIMEOUT: float = 30.0  # Seconds per outbound request

    # Public base used to build proxied enclosure links (None disables proxying)
    PUBLIC_URL: Optional[HttpUrl] = None

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="SARASARA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def bind_host_port(self) -> Tuple[str, int]:
        """Split BIND_ADDRESS into a (host, port) pair."""
        host, sep, port = self.BIND_ADDRESS.rpartition(":")
        if not sep or not host or not port.isdigit():
            raise ValueError(f"Invalid bind address: {self.BIND_ADDRESS!r}, expected host:port")
        return host.strip("[]"), int(port)

_settings = None

def get_settings():
    """Return initialized settings."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
