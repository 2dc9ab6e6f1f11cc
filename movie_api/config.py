from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    db_path: Path = Path(__file__).resolve().parent.parent / "movies.db"
    log_level: str = "INFO"
    random_seed: int | None = None

    model_config = {"env_prefix": "MOVIE_API_"}


settings = Settings()
