import os

from .config import DB_CONFIG, Config

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = dict(DB_CONFIG)

TIMEZONE = Config.TIMEZONE
OFFICE_SSID = Config.OFFICE_SSID
CAMPUS_PUBLIC_IPS = Config.CAMPUS_PUBLIC_IPS
ITEMS_PER_PAGE = Config.ITEMS_PER_PAGE
ADMIN_EMAIL = Config.ADMIN_EMAIL
ADMIN_PASSWORD_HASH = Config.ADMIN_PASSWORD_HASH

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Lets localhost / 192.168.x.x through the network gate while developing.
ALLOW_LOCAL_NETWORK = bool(int(os.getenv("ALLOW_LOCAL_NETWORK", "1")))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
