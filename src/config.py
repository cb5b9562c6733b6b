from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Artificial latency before an estimate is returned (seconds).
    # The web forms used 1.5s; 0 keeps the API and tests deterministic.
    calculation_delay_seconds: float = 0.0

    # Example API address shown in the CLI --api-url help
    api_base_url: str = "http://localhost:8000"

    # CORS
    cors_origins: list[str] = ["*"]


settings = Settings()
