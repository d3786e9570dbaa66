"""Base class for settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class InfrastructureSettings(BaseSettings):
    """Settings section read from the environment or a local ``.env``.

    Fields declare their environment variable as an alias; the Python name
    is accepted too so tests can pass overrides directly.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
