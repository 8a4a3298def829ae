"""Configuration for the HotelHook service."""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from hotelhook.utils.exceptions import ConfigurationError

# Environment variable -> config field
ENV_VARS = {
    "HOTELHOOK_HOST": "host",
    "PORT": "port",
    "HOTELHOOK_LOG_LEVEL": "log_level",
    "HOTELHOOK_SEED_DATA": "seed_data",
    "HOTELHOOK_RESERVATION_START_ID": "reservation_start_id",
}


class HotelHookConfig(BaseModel):
    """Configuration for the webhook server."""

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=3000, ge=1, le=65535, description="Port to listen on")
    log_level: str = Field(default="INFO", description="Logging level name")
    service_name: str = Field(
        default="Hotel Webhook Simulator", description="Name reported by info endpoints"
    )
    reservation_start_id: int = Field(
        default=1000, ge=0, description="Number used for the first RES-XXXX identifier"
    )
    seed_data: bool = Field(default=True, description="Load the sample hotel data on startup")

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "HotelHookConfig":
        """Build a config from environment variables.

        Args:
            dotenv: Load a ``.env`` file from the working directory first

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        values = {
            field: os.environ[var] for var, field in ENV_VARS.items() if os.environ.get(var)
        }

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
