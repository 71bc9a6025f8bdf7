import os
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator
from dotenv import load_dotenv

from src.infrastructure.registry_client import DEFAULT_REGISTRY_URL, DEFAULT_TIMEOUT_SECONDS

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

class StoreSettings(BaseModel):
    """Site-level settings consumed by the plugin store page."""
    model_config = ConfigDict(frozen=True, validate_default=True)

    registry_url: HttpUrl = Field(default=DEFAULT_REGISTRY_URL, description="Base URL of the plugin registry")
    use_fixture_data: bool = Field(default=False, description="Serve bundled fixture plugins instead of the registry")
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Total timeout per registry request")

    @field_validator("use_fixture_data", mode="before")
    @classmethod
    def _parse_flag(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValueError(f"not a boolean flag: {value!r}")
        return value


def load_settings() -> StoreSettings:
    """
    Loads settings from the environment, reading a .env file first if present.

    Raises:
        pydantic.ValidationError: If any variable holds an invalid value.
    """
    load_dotenv()

    values = {}
    registry_url = os.getenv("PLUGIN_REGISTRY_URL")
    if registry_url:
        values["registry_url"] = registry_url
    use_fixture_data = os.getenv("USE_FIXTURE_DATA")
    if use_fixture_data is not None:
        values["use_fixture_data"] = use_fixture_data
    timeout_seconds = os.getenv("REGISTRY_TIMEOUT_SECONDS")
    if timeout_seconds:
        values["timeout_seconds"] = timeout_seconds

    return StoreSettings(**values)
