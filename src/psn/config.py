"""Configuration management module"""
import os
from pathlib import Path
from typing import Optional
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)


def get_home_path() -> Path:
    """Get the psn home directory from environment or default"""
    home_path = os.environ.get("PSN_HOME")
    if home_path:
        return Path(home_path).expanduser()
    return Path.home() / ".psn"


def get_config_file() -> Path | None:
    """Get config file path if it exists"""
    config_file = get_home_path() / "config.toml"
    if config_file.exists():
        return config_file
    return None


class Settings(BaseSettings):
    """Client configuration settings

    Every field can be set from a ``PSN_``-prefixed environment variable,
    a ``.env`` file or ``$PSN_HOME/config.toml``, in that order of priority.
    """

    # Credentials (acquired elsewhere, only read here)
    authorization_token: Optional[str] = None
    online_id: Optional[str] = None

    # HTTP transport
    timeout: float = 30.0

    # Language for trophy titles and descriptions
    np_language: str = "en"

    # Logging configuration
    log_dir: Optional[Path] = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PSN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML file"""
        config_file = get_config_file()
        if config_file:
            toml_settings = TomlConfigSettingsSource(
                settings_cls, toml_file=config_file
            )
            return (
                init_settings,
                env_settings,
                dotenv_settings,
                toml_settings,
                file_secret_settings,
            )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


def get_settings() -> Settings:
    """Load settings from the environment, .env and config.toml"""
    return Settings()
