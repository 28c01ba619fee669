from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, PostgresDsn, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prompts.advice.maternal_advice import MATERNAL_ADVICE_PROMPT


class CustomSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


class AppSettings(CustomSettings):
    ENVIRONMENT: Literal["local", "dev", "prod"] = Field(default="local")
    LOG_LEVEL: str = Field(default="INFO")
    JSON_LOGS: bool = Field(default=False)
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=5000)


class PgDbSettings(CustomSettings):
    POSTGRES_ENGINE: str = Field(default="postgresql+asyncpg")
    POSTGRES_USER: str = Field(default="postgres")
    POSTGRES_PASSWORD: SecretStr = Field(default="postgres")
    POSTGRES_DB: str = Field(default="maternal")
    POSTGRES_HOST: str = Field(default="localhost")
    POSTGRES_PORT: int = Field(default=5432)
    DATABASE_URL: PostgresDsn | str = Field(default="")

    @model_validator(mode="before")
    def validate_postgres_dsn(cls, data: dict):
        if isinstance(data, dict) and not data.get("DATABASE_URL"):
            _built_uri = PostgresDsn.build(
                scheme=data.get("POSTGRES_ENGINE", "postgresql+asyncpg"),
                username=data.get("POSTGRES_USER", "postgres"),
                password=data.get("POSTGRES_PASSWORD", "postgres"),
                host=data.get("POSTGRES_HOST", "localhost"),
                port=int(data.get("POSTGRES_PORT", 5432)),
                path=data.get("POSTGRES_DB", "maternal"),
            ).unicode_string()
            data["DATABASE_URL"] = _built_uri
        return data


class SecuritySettings(CustomSettings):
    BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=31)


class GeminiSettings(CustomSettings):
    """Configuration for the Gemini generateContent API.

    Env vars:
    - GEMINI_API_KEY (empty means "not configured")
    - GEMINI_MODEL
    - GEMINI_BASE_URL
    - GEMINI_TEMPERATURE / GEMINI_TOP_K / GEMINI_TOP_P
    - ADVICE_PROMPT_TEMPLATE (must contain a ``{user_input}`` placeholder)
    """

    GEMINI_API_KEY: SecretStr = Field(default="")
    GEMINI_MODEL: str = Field(default="gemini-1.5-flash")
    GEMINI_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta"
    )
    GEMINI_TEMPERATURE: float = Field(default=0.7)
    GEMINI_TOP_K: int = Field(default=40)
    GEMINI_TOP_P: float = Field(default=0.95)
    ADVICE_PROMPT_TEMPLATE: str = Field(default=MATERNAL_ADVICE_PROMPT)


class Settings(BaseModel):
    APP: AppSettings = Field(default_factory=AppSettings)
    DATABASE: PgDbSettings = Field(default_factory=PgDbSettings)
    SECURITY: SecuritySettings = Field(default_factory=SecuritySettings)
    GEMINI: GeminiSettings = Field(default_factory=GeminiSettings)


@lru_cache
def get_settings() -> Settings:
    return Settings()

