# Standard library imports
import os
from typing import Final, List, Optional


DEFAULT_ROBOFLOW_MODEL_URL = "https://serverless.roboflow.com/face-detection-mik1i/27"


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Device platform configuration
        self.package_name: Final[str] = os.getenv("PACKAGE_NAME", "")
        self.mentraos_api_key: Final[str] = os.getenv("MENTRAOS_API_KEY", "")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))

        # Face detection (Roboflow) configuration
        self.roboflow_api_key: Final[str] = os.getenv("ROBOFLOW_API_KEY", "")
        self.roboflow_model_url: Final[str] = os.getenv(
            "ROBOFLOW_MODEL_URL",
            DEFAULT_ROBOFLOW_MODEL_URL
        )
        self.roboflow_timeout_seconds: Final[float] = float(
            os.getenv("ROBOFLOW_TIMEOUT_SECONDS", "30")
        )
        self.roboflow_max_connections: Final[int] = int(os.getenv("ROBOFLOW_MAX_CONNECTIONS", "100"))
        self.roboflow_max_keepalive_connections: Final[int] = int(
            os.getenv("ROBOFLOW_MAX_KEEPALIVE_CONNECTIONS", "20")
        )
        self.roboflow_keepalive_seconds: Final[float] = float(
            os.getenv("ROBOFLOW_KEEPALIVE_SECONDS", "30")
        )
        self.roboflow_http2: Final[bool] = os.getenv("ROBOFLOW_HTTP2", "true").lower() == "true"

        # JWT Configuration (webview identity)
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

        # Capture loop configuration
        self.capture_tick_seconds: Final[float] = float(os.getenv("CAPTURE_TICK_SECONDS", "1.0"))
        self.capture_fallback_seconds: Final[float] = float(
            os.getenv("CAPTURE_FALLBACK_SECONDS", "30.0")
        )
        self.text_wall_duration_ms: Final[int] = int(os.getenv("TEXT_WALL_DURATION_MS", "4000"))

        # CORS
        self.cors_allowed_origins: Final[str] = os.getenv(
            "CORS_ALLOWED_ORIGINS",
            "http://localhost:3000"
        )

    def get_cors_origins(self) -> List[str]:
        """Split the comma separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    def missing_required(self) -> List[str]:
        """
        List required environment variables that are not set.

        Returns:
            Names of the missing variables (empty list if all are present)
        """
        required = {
            "PACKAGE_NAME": self.package_name,
            "MENTRAOS_API_KEY": self.mentraos_api_key,
            "ROBOFLOW_API_KEY": self.roboflow_api_key,
        }
        return [name for name, value in required.items() if not value]


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


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
