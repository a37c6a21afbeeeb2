"""Application configuration"""
from pydantic import EmailStr
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # EmailJS account
    emailjs_service_id: str = "service_0c1f5z4"
    emailjs_template_id: str = "template_o877rum"
    emailjs_public_key: str = "GTl-AWnAxGjC-wZxB"
    # Only required when the account enforces access tokens for non-browser calls
    emailjs_private_key: str = ""
    emailjs_api_url: str = "https://api.emailjs.com/api/v1.0/email/send"

    # Every form is delivered to the association mailbox
    organization_email: EmailStr = "asso-alamane@outlook.com"

    # Submissions
    submit_timeout_seconds: float = 30.0  # <= 0 waits for the provider indefinitely
    notification_duration_seconds: float = 4.0

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
