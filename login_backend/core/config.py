# Standard library imports
import os
from typing import Final, List, Optional


DEFAULT_CORS_ORIGINS = "http://localhost:5173,https://login-frontend-react.netlify.app"


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Application Configuration
        self.app_title: Final[str] = os.getenv("APP_TITLE", "Registro y Login API")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        
        # CORS Configuration
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        )


def _split_csv(raw: str) -> List[str]:
    """Split a comma-separated environment value, dropping blanks"""
    return [item.strip() for item in raw.split(",") if item.strip()]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
