import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LABEL_DELIMITER: str = Field(default=".", min_length=1)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @classmethod
    def load(cls, prefix: Optional[str] = None) -> "Settings":
        prefix = prefix or "HIGHERORDER_"
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{prefix}{name}")
            if raw is not None:
                values[name] = raw
        return cls(**values)
