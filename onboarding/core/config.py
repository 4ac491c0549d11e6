from functools import lru_cache

from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import os

load_dotenv()

class Settings(BaseSettings):
    # App
    APP_NAME: str = os.getenv("APP_NAME", "Rental Onboarding API")
    DEBUG: bool = os.getenv("DEBUG", "False") == "True"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./onboarding.db")

    # Origins
    SITE_URL: str = os.getenv("SITE_URL", "http://localhost:3000")
    PUBLIC_URL: str = os.getenv("PUBLIC_URL", "http://localhost:8000")

    # Sessions
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "__session")
    SESSION_DURATION_DAYS: int = int(os.getenv("SESSION_DURATION_DAYS", "30"))

    # JWT
    JWT_PRIVATE_KEY: str = os.getenv("JWT_PRIVATE_KEY", "")
    ALGORITHM: str = os.getenv("ALGORITHM", "RS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    TOKEN_AUDIENCE: str = os.getenv("TOKEN_AUDIENCE", "onboarding")

    # Password hashing (argon2id)
    ARGON2_TIME_COST: int = int(os.getenv("ARGON2_TIME_COST", "2"))
    ARGON2_MEMORY_COST: int = int(os.getenv("ARGON2_MEMORY_COST", "65536"))
    ARGON2_PARALLELISM: int = int(os.getenv("ARGON2_PARALLELISM", "4"))

    @property
    def session_duration_ms(self) -> int:
        return self.SESSION_DURATION_DAYS * 24 * 60 * 60 * 1000


@lru_cache
def get_settings() -> Settings:
    """Build the process settings once; passed explicitly everywhere else."""
    return Settings()
