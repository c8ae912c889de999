# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(value: str) -> List[str]:
    """Split a comma-separated env value into trimmed, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Application
        self.app_name: Final[str] = os.getenv("APP_NAME", "FieldVue Backend API")
        self.app_version: Final[str] = os.getenv("APP_VERSION", "1.0.0")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173,http://localhost:8081")
        )

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "fieldvue")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "10080")
        )

        # Vision detection
        # "gemini" calls the generative model directly, "http" posts to DETECTION_ENDPOINT
        self.detection_backend: Final[str] = os.getenv("DETECTION_BACKEND", "gemini").lower()
        self.detection_endpoint: Final[str] = os.getenv("DETECTION_ENDPOINT", "http://localhost:8000")
        self.google_api_key: Final[str] = os.getenv("GOOGLE_API_KEY", "")
        self.google_project_id: Final[str] = os.getenv("GOOGLE_PROJECT_ID", "")
        self.google_location: Final[str] = os.getenv("GOOGLE_LOCATION", "us-central1")
        self.vision_model_name: Final[str] = os.getenv("VISION_MODEL_NAME", "gemini-2.5-flash")
        self.detection_timeout_seconds: Final[float] = float(os.getenv("DETECTION_TIMEOUT_SECONDS", "120"))
        self.detection_max_retries: Final[int] = int(os.getenv("DETECTION_MAX_RETRIES", "2"))

        # Categories that also accept medium/low confidence, per scene type
        self.lenient_confidence_types_interior: Final[List[str]] = _split_csv(
            os.getenv("LENIENT_CONFIDENCE_TYPES_INTERIOR", "")
        )
        self.lenient_confidence_types_exterior: Final[List[str]] = _split_csv(
            os.getenv("LENIENT_CONFIDENCE_TYPES_EXTERIOR", "siding,foundation")
        )

        # Blob storage
        self.storage_dir: Final[str] = os.getenv("STORAGE_DIR", "storage")
        self.public_base_url: Final[str] = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000/files")
        self.upload_max_mb: Final[int] = int(os.getenv("UPLOAD_MAX_MB", "25"))

        # Background analysis queue
        self.analysis_workers: Final[int] = int(os.getenv("ANALYSIS_WORKERS", "2"))
        self.analysis_queue_size: Final[int] = int(os.getenv("ANALYSIS_QUEUE_SIZE", "100"))
        self.analysis_shutdown_timeout: Final[float] = float(os.getenv("ANALYSIS_SHUTDOWN_TIMEOUT", "30"))


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
