from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_CHRONIC_METHODS = {"trailing_avg", "ewma"}
DEFAULT_CHRONIC_METHOD = "trailing_avg"


class Settings(BaseSettings):
    chronic_method: str = Field(
        default=DEFAULT_CHRONIC_METHOD,
        validation_alias="CHRONIC_METHOD",
        description="Chronic load smoothing method (trailing_avg or ewma)",
    )
    readiness_window: int = Field(
        default=3,
        ge=1,
        validation_alias="READINESS_WINDOW",
        description="Number of most recent readiness samples averaged",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="", validation_alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("chronic_method")
    @classmethod
    def validate_chronic_method(cls, value: str) -> str:
        """Fall back to the trailing average when the method is unknown."""
        lower_value = value.strip().lower()
        if lower_value not in VALID_CHRONIC_METHODS:
            logger.warning(
                f"Invalid CHRONIC_METHOD '{value}'. Valid methods are: {', '.join(sorted(VALID_CHRONIC_METHODS))}. "
                f"Defaulting to {DEFAULT_CHRONIC_METHOD}."
            )
            return DEFAULT_CHRONIC_METHOD
        return lower_value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value


settings = Settings()
