# app/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    api_title: str = Field(default="Contact Relay API", alias="API_TITLE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Mailtrap Email Sending API
    mailtrap_api_token: Optional[str] = Field(default=None, alias="MAILTRAP_API_TOKEN")
    mailtrap_api_url: Optional[str] = Field(
        default="https://send.api.mailtrap.io/api/send",
        alias="MAILTRAP_API_URL",
    )
    from_email: Optional[str] = Field(default=None, alias="FROM_EMAIL")
    to_email: Optional[str] = Field(default=None, alias="TO_EMAIL")

    # Shown in the footer of every relayed message
    site_name: str = Field(default="desallyltd.com", alias="SITE_NAME")

    # Seconds; unset means wait for the provider as long as the platform allows
    email_api_timeout: Optional[float] = Field(default=None, alias="EMAIL_API_TIMEOUT")

settings = Settings()
