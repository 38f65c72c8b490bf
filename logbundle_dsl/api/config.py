from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TRUE_VALUES = {"1", "true", "yes", "on"}


class GeneratorSettings(BaseSettings):
    """
    Generator configuration.

    Read once (environment + optional .env file) and passed to the generator
    at construction time; generation itself never looks at the environment.
    """

    model_config = SettingsConfigDict(env_prefix="LOGBUNDLE_", env_file=".env", extra="ignore")

    # LOGBUNDLE_DEBUG=true turns on per-method trace output
    DEBUG: bool = False
    IMPL_SUFFIX: str = "_impl"
    OUTPUT_ENCODING: str = "utf-8"

    @field_validator("DEBUG", mode="before")
    @classmethod
    def _lenient_bool(cls, value):
        # Unparseable values fall back to False instead of failing startup
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() in _TRUE_VALUES
