from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    PROJECT_NAME: str = "Moringa Toolkit"
    API_PREFIX: str = "/api"

    # Server
    BIND_ADDRESS: str = "0.0.0.0"
    PORT: int = 4567
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"

    @property
    def reload(self) -> bool:
        # Code reloading only while developing
        return self.ENVIRONMENT == "development"

    class Config:
        env_file = ".env"
        case_sensitive = False

@lru_cache()
def get_settings():
    return Settings()

settings = get_settings()
