"""Configuration and environment settings"""

from pydantic_settings import BaseSettings
from typing import Optional
from pathlib import Path


class Settings(BaseSettings):
    """Application configuration"""

    # Database
    DATABASE_URL: Optional[str] = None
    DOCUMENTS_TABLE: str = "documents"

    # Output
    OUTPUT_DIR: str = "./output"

    # Bulk import
    IMPORT_BATCH_SIZE: int = 400
    DATE_SHIFT_HOURS: int = 12  # Added to parsed date cells before reading the day

    # Charts
    HISTOGRAM_BIN_COUNT: int = 10
    VIEWPORT_HEADROOM: float = 1.1  # Auto ceiling = max * headroom
    VIEWPORT_ZOOM_STEP: float = 0.10  # Range change per scroll tick
    VIEWPORT_PAN_FACTOR: float = 0.002  # Share of range moved per pixel dragged

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    def get_output_path(self, subdir: str = "") -> Path:
        """Get output directory path"""
        path = Path(self.OUTPUT_DIR) / subdir
        path.mkdir(parents=True, exist_ok=True)
        return path


settings = Settings()
