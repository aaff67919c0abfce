"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "lending-engine"
    log_level: str = "INFO"

    # Loan application preview
    default_loan_rate_percent: float = 15.0
    schedule_first_due_months: int = 1


settings = Settings()
