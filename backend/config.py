import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
if os.path.exists(".env"):
    load_dotenv()

# Settings
class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///goals.db")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3010"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Global settings
settings = Settings()

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger()
