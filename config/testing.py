import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "ojt_attendance_test"),
}

TIMEZONE = "Asia/Manila"
OFFICE_SSID = "Test Office WiFi"
CAMPUS_PUBLIC_IPS = ("122.53.28.50",)
ITEMS_PER_PAGE = 5
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD_HASH = ""

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ALLOW_LOCAL_NETWORK = False
AUTO_INIT_DB = False
