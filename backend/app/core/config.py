from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "ratecard"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    APP_DATABASE_DSN: str = "sqlite:////tmp/ratecard.db"

    # Shared weight brackets seeded on first use
    DEFAULT_BRACKET_LIMITS: list[Decimal] = [Decimal(50), Decimal(100), Decimal(150), Decimal(500)]
    # Step used when appending a bracket after the last limit
    BRACKET_APPEND_STEP: Decimal = Decimal(50)

    # Volumetric weight = L * W * H / divisor
    DEFAULT_VOLUMETRIC_DIVISOR: Decimal = Decimal(6000)

    CURRENCY_LABEL: str = "Php"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    @property
    def version(self) -> str:
        return self.APP_VERSION


settings = Settings()
