"""Configuration settings for the EIA feed."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv


load_dotenv()


DEFAULT_BASE_URL = "https://api.eia.gov/series/"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass
class Settings:
    """Application settings."""

    eia_api_key: str = field(default_factory=lambda: os.getenv("EIA_API_KEY", ""))
    base_url: str = field(
        default_factory=lambda: os.getenv("EIA_BASE_URL", DEFAULT_BASE_URL)
    )
    # Lenient parsing turns a malformed payload into an empty batch
    strict_parsing: bool = field(
        default_factory=lambda: _env_flag("EIA_STRICT_PARSING")
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("EIA_TIMEOUT", "30.0"))
    )

    def validate(self) -> None:
        """Validate required settings."""
        if not self.base_url:
            raise ValueError("EIA_BASE_URL must not be empty")
        if self.timeout <= 0:
            raise ValueError(f"EIA_TIMEOUT must be positive, got {self.timeout}")

    def set_api_key(self, api_key: str | None) -> None:
        """Replace the API key. Blank input leaves the current key in place."""
        if not api_key or not api_key.strip():
            return
        self.eia_api_key = api_key

    def has_api_key(self) -> bool:
        """Check if an EIA API key is configured."""
        return bool(self.eia_api_key)
