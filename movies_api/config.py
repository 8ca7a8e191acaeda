from pydantic_settings import BaseSettings, SettingsConfigDict

VERSION = "1.0.0"

# Origins allowed to call the API from a browser
ACCEPTED_ORIGINS = (
    "http://localhost:8080",
    "http://localhost:1234",
    "http://localhost:3000",
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    HOST: str = "0.0.0.0"
    PORT: int = 1234
    LOG_LEVEL: str = "INFO"


settings = Settings()
