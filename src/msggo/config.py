from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://msggo.io"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MSGGO_", env_file=".env", extra="ignore")

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0


def load_config(config_path: str | Path = "msggo.yaml") -> Settings:
    with open(config_path, "r") as f:
        config_data = yaml.safe_load(f) or {}
    return Settings(**config_data)
