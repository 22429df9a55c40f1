from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_name: str = "moderation-types"
    log_level: str = "INFO"
    log_file: str | None = None

    class Config:
        env_file = ".env"
        env_prefix = "MODERATION_"
        extra = "ignore"

settings = Settings()
