from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "Receipt Points Service"
    ENV: str = "dev"

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # "all" counts every character of the retailer name, "alphanumeric" only letters and digits
    RETAILER_POINTS_MODE: Literal["all", "alphanumeric"] = "all"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
