from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Library App"

    # Banco de dados
    DATABASE_URL: str = "sqlite:///./library.db"
    DATABASE_ECHO: bool = False

    # logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
