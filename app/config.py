from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    google_api_key: str = ""
    log_level: str = "INFO"
    http_timeout: float = 30.0
    cors_origins: list[str] = ["*"]
    app_name: str = "Crawl"
