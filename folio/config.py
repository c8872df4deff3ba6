import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Site
    site_name: str = "Folio"
    site_url: str = "http://localhost:3000"

    # Client-side key holding the last selected locale
    locale_storage_key: str = "lang"

    # App
    log_level: str = "INFO"
    debug: bool = False


settings = Settings()

_log = logging.getLogger(__name__)
if not settings.locale_storage_key:
    _log.warning("LOCALE_STORAGE_KEY is empty, falling back to 'lang'")
    settings.locale_storage_key = "lang"
