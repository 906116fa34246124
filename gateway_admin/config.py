from pydantic_settings import BaseSettings
from pathlib import Path

# Get the repository root directory (parent of gateway_admin directory)
REPO_ROOT = Path(__file__).parent.parent.absolute()

class Settings(BaseSettings):
    """Application settings."""
    
    # API settings
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 9095
    API_RELOAD: bool = True
    
    # Version and environment
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    
    # Selector store settings
    SELECTOR_STORE: str = "memory"  # "memory" or "database"
    DATABASE_URL: str = f"sqlite:///{REPO_ROOT / 'storage' / 'gateway_admin.db'}"
    
    class Config:
        env_file = ".env"

settings = Settings()
