from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Random draws
    # Unset means fresh OS entropy for every new sequence
    random_seed: int | None = None

    # Input bounds
    max_lease_years: int = 99

    # Sessions
    default_session_id: str = "default"
    max_sessions: int = 1000


settings = Settings()
