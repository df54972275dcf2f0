from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = Field(default="REVTEC API")
    api_port: int = Field(default=8000)
    database_url: str = Field(default="sqlite:///./revtec.db")
    create_tables: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    cors_origins: List[str] = Field(default=["*"])
    rate_limit: str = Field(default="120/minute")
    rate_limit_enabled: bool = Field(default=True)
    # Las contraseñas se guardan tal cual salvo que se active explícitamente.
    hash_passwords: bool = Field(default=False)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
