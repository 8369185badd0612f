from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Land Unit Converter for Nepal"
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    default_from_unit: str = "ropani"
    default_to_unit: str = "aana"
    result_precision: int = 6  # decimals shown in result text
    history_limit: int = 500  # entries kept for the session
    log_level: str = "info"
    host: str = "127.0.0.1"
    port: int = 0  # 0 picks a free port at startup
    open_browser: bool = True

    class Config:
        env_prefix = "LANDCONV_"


settings = Settings()
