import os

from . import split_csv


class Config:
    """Values shared by every environment; each settings module overrides what it needs."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "ojt_attendance")

    TIMEZONE = os.environ.get("TIMEZONE", "Asia/Manila")
    OFFICE_SSID = os.environ.get("OFFICE_SSID", "Steerhub First Floor")
    CAMPUS_PUBLIC_IPS = split_csv(os.environ.get("CAMPUS_PUBLIC_IPS", "122.53.28.50"))
    ITEMS_PER_PAGE = int(os.environ.get("ITEMS_PER_PAGE", "5"))

    ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "")
    ADMIN_PASSWORD_HASH = os.environ.get("ADMIN_PASSWORD_HASH", "")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}
