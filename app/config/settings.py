from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read env from container + optionally from files
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.docker"),
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENVIRONMENT: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    APP_NAME: str = Field(default="solidinvoice_payments", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    DEBUG: bool = Field(default=False, validation_alias=AliasChoices("DEBUG", "debug"))

    # Infrastructure
    DATABASE_URL: str = Field(
        default="postgresql+asyncpg://postgres:postgres@db:5432/solidinvoice",
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )
    DB_ECHO: bool = Field(default=False, validation_alias=AliasChoices("DB_ECHO", "db_echo"))

    # Payments
    RECENT_PAYMENTS_LIMIT: int = Field(
        default=5,
        validation_alias=AliasChoices("RECENT_PAYMENTS_LIMIT", "recent_payments_limit"),
    )
    DEFAULT_CURRENCY: str = Field(
        default="USD",
        validation_alias=AliasChoices("DEFAULT_CURRENCY", "default_currency"),
    )


settings = Settings()
