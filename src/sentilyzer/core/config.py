"""Configuration management for Sentilyzer."""

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""
    
    # OpenAI API
    openai_api_key: str = Field("", description="OpenAI API key")
    OPENAI_API_KEY: str = Field("", description="OpenAI API key (alternative naming)")
    openai_model: str = Field("gpt-4o-mini", description="Model used for sentiment classification")
    
    @property
    def effective_openai_key(self) -> str:
        """Get the effective OpenAI API key from either field."""
        return self.openai_api_key or self.OPENAI_API_KEY
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    
    # Request settings (one attempt, library default timeout)
    max_retries: int = Field(1, description="Attempts per classification request")
    request_timeout: Optional[float] = Field(None, description="Request timeout in seconds")
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
