import os

from .config import DB_CONFIG, Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = dict(DB_CONFIG)

TIMEZONE = Config.TIMEZONE
OFFICE_SSID = Config.OFFICE_SSID
CAMPUS_PUBLIC_IPS = Config.CAMPUS_PUBLIC_IPS
ITEMS_PER_PAGE = Config.ITEMS_PER_PAGE
ADMIN_EMAIL = Config.ADMIN_EMAIL
ADMIN_PASSWORD_HASH = Config.ADMIN_PASSWORD_HASH

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

ALLOW_LOCAL_NETWORK = bool(int(os.getenv("ALLOW_LOCAL_NETWORK", "0")))
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
