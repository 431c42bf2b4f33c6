from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='GEOJSON_',
        extra='ignore',
    )

    # Decode a malformed bbox member as "no bbox" instead of raising BboxFieldError
    drop_invalid_bbox: bool = False

    # Text encoding of geometries stored as raw bytes
    scalar_encoding: str = 'utf-8'


@lru_cache
def get_settings() -> Settings:
    return Settings()
