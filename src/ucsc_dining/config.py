"""Library configuration."""

from zoneinfo import ZoneInfo

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ucsc_dining.domain.requests import MenuEndpoint

UPSTREAM_TIMEZONE = "America/Los_Angeles"


class Settings(BaseSettings):
    """Client settings, optionally overridden by UCSC_DINING_* variables."""

    endpoint: MenuEndpoint = MenuEndpoint.MENU_SAMP
    timezone: str = UPSTREAM_TIMEZONE
    timeout_seconds: float | None = None
    raise_for_status: bool = False
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="UCSC_DINING_",
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        """Reject zone names the tz database does not know."""
        cleaned = value.strip()
        if cleaned:
            try:
                ZoneInfo(cleaned)
            except (ValueError, KeyError) as exc:
                raise ValueError(f"Unknown time zone: {cleaned}") from exc
        return cleaned

    @property
    def timezone_name(self) -> str | None:
        """Configured zone name, or None for the process local clock."""
        return self.timezone or None
