import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_attendance_test"),
}
DB_POOL_SIZE = 2

RESEND_API_KEY = ""
MAIL_FROM = "attendance@example.com"

CORS_ORIGINS = "*"
LOG_LEVEL = "WARNING"
PORT = 5000

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
