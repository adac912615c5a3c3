from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "postgresql+psycopg://postgres:postgres@db:5432/ledgerbook"
    app_env: str = "dev"
    app_cors_origins: str = "*"
    log_level: str = "INFO"
    sql_echo: bool = False
    # Label of the synthetic equity line on the balance sheet
    net_income_label: str = "Net Income"


settings = Settings()
