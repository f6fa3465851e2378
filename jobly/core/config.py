from pydantic_settings import BaseSettings
from typing import List, Optional, Union
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_V1_STR: str = ""
    PROJECT_NAME: str = "Jobly API"

    # development | test | production
    ENVIRONMENT: str = "development"

    # Database Settings
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    DATABASE_NAME: str = "jobly"
    TEST_DATABASE_NAME: str = "jobly_test"

    # Auth Settings
    SECRET_KEY: str = "secret-dev"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # Legacy behavior of GET /jobs: answer 404 instead of an empty list
    EMPTY_JOB_LIST_IS_NOT_FOUND: bool = False

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",")]
        return v

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def BCRYPT_WORK_FACTOR(self) -> int:
        # Speed up tests
        return 4 if self.ENVIRONMENT == "test" else 12

    def get_database_uri(self) -> str:
        """
        Database URI for the current environment.

        An explicit DATABASE_URL always wins; otherwise the test database is
        used when ENVIRONMENT is "test" and the main database elsewhere.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL

        db_name = self.TEST_DATABASE_NAME if self.ENVIRONMENT == "test" else self.DATABASE_NAME
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{db_name}"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
