"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""
    
    # HTTP
    port: int = 5001
    frontend_url: Optional[str] = None
    
    # MongoDB (required)
    database_url: str
    database_name: str = "achilles"
    
    # SMTP relay - no host means codes are only written to the log
    email_host: Optional[str] = None
    email_port: int = 587
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    email_from: Optional[str] = None
    email_subject: str = "Your OTP for Project Achilles"
    email_timeout_seconds: float = 10.0
    
    # JWT Configuration
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 30
    
    # One-time passcodes
    otp_length: int = 6
    otp_expire_minutes: int = 5
    
    # Logging
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def mail_sender(self) -> Optional[str]:
        """Address used in the From header."""
        return self.email_from or self.email_user


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
