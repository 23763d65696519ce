"""
Application configuration settings.
"""
from pydantic_settings import BaseSettings
from pathlib import Path


PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Population stores (read-only SQLite files built by scripts/init_database.py)
    RESULTS_DATABASE_PATH: str = "db/popzones-10.db"  # 10-year bands
    DOWNLOAD_DATABASE_PATH: str = "db/popzones-5.db"  # 5-year bands
    
    # Source data for the store builder
    SOURCE_CSV_PATH: str = "data/population.csv"
    
    # Templates and static resources
    TEMPLATE_DIR: str = str(PACKAGE_DIR / "templates")
    RESOURCES_DIR: str = str(PACKAGE_DIR / "resources")
    
    # Server settings
    PROJECT_NAME: str = "Population Builder"
    VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    
    # Shown on the generic error page; internal details are only logged
    DEFAULT_ERROR_MESSAGE: str = "Sorry! An error has occurred."
    
    @property
    def base_dir(self) -> Path:
        """Get base directory of the project."""
        return PACKAGE_DIR.parent
    
    class Config:
        env_file = ".env"
        extra = "allow"


# Global settings instance
settings = Settings()
