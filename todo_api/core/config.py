"""
Configuration settings for Todo API.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings"""

    def __init__(self):
        # Service information
        self.service_name: str = os.getenv("SERVICE_NAME", "todo_api")
        self.service_version: str = os.getenv("SERVICE_VERSION", "1.0.0")
        self.debug: bool = _env_bool("DEBUG", "False")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Server configuration
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3000"))
        self.public_url: str = os.getenv("PUBLIC_URL", f"http://localhost:{self.port}")

        # API configuration
        self.api_prefix: str = os.getenv("API_PREFIX", "").rstrip("/")
        self.docs_url: str = os.getenv("DOCS_URL", "/api-docs")

        # Registry configuration
        self.id_strategy: str = os.getenv("ID_STRATEGY", "length").lower()
        self.seed_todos: bool = _env_bool("SEED_TODOS", "True")

        # CORS configuration
        self.allowed_origins: List[str] = os.getenv("ALLOWED_ORIGINS", "*").split(",")

    def __repr__(self):
        return (
            f"<Settings(service_name='{self.service_name}', port={self.port}, "
            f"id_strategy='{self.id_strategy}')>"
        )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get settings instance."""
    return settings
