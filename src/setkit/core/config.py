import os
from pydantic import BaseModel, Field, field_validator

_ENV_PREFIX = "SETKIT_"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    STRICT_SETS: bool = Field(
        default=True,
        description="Reject non-set inputs instead of coercing them to a frozenset.",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {_LEVELS}, got '{value}'")
        return level

    @classmethod
    def load(cls) -> "Settings":
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(_ENV_PREFIX + name)
            if raw is not None:
                values[name] = raw
        return cls(**values)


settings = Settings.load()
