from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

# Built-in fallback identifiers, used when neither UUID_JSON nor UUIDS is set
DEFAULT_UUIDS = (
    "11111111-1111-1111-1111-111111111111",
    "22222222-2222-2222-2222-222222222222",
)


class Settings(BaseSettings):
    # env vars as-is (no prefix), case-insensitive
    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    UUID_JSON: str | None = Field(None)
    UUIDS: str | None = Field(None)

    FALLBACK_HOST: str = Field("example.com")
    PAGE_TIMEZONE: str = Field("Asia/Tokyo")

    HOST: str = Field("0.0.0.0")
    PORT: int = Field(8080)
    LOG_LEVEL: str = Field("info")

    @field_validator("PAGE_TIMEZONE")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone: {v}") from exc
        return v

    def env(self) -> dict:
        """Key/value view consumed by the identifier resolver."""
        return {"UUID_JSON": self.UUID_JSON, "UUIDS": self.UUIDS}


settings = Settings()
