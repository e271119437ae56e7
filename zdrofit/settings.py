from functools import lru_cache
from typing import Optional

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from zdrofit.consts import (
    AUTH_COOKIE_NAME,
    BOOK_CLASS_PATH,
    CANCEL_BOOKING_PATH,
    DAILY_CLASSES_PATH,
    DEFAULT_BASE_URL,
    LOGIN_PATH,
)


@lru_cache()
def get_settings():
    return Settings()


class Settings(BaseSettings):
    IS_DEVELOPMENT: bool = False
    LOG_LEVEL: Optional[str] = None

    ZDROFIT_BASE_URL: str = DEFAULT_BASE_URL
    ZDROFIT_STRICT: bool = True
    ZDROFIT_LOGIN: Optional[str] = None
    ZDROFIT_PASSWORD: Optional[str] = None
    ZDROFIT_CLUB_ID: Optional[int] = None

    ZDROFIT_LOGIN_PATH: str = LOGIN_PATH
    ZDROFIT_DAILY_CLASSES_PATH: str = DAILY_CLASSES_PATH
    ZDROFIT_BOOK_CLASS_PATH: str = BOOK_CLASS_PATH
    ZDROFIT_CANCEL_BOOKING_PATH: str = CANCEL_BOOKING_PATH
    ZDROFIT_AUTH_COOKIE_NAME: str = AUTH_COOKIE_NAME

    model_config = SettingsConfigDict(
        env_file=[find_dotenv("zdrofit.env")],
        env_file_encoding="utf-8",
        extra="ignore",
    )
