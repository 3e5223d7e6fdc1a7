import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | json | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
JSON_STORE_PATH = os.getenv("JSON_STORE_PATH", "instance/students.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "student_attendance"),
}

EMAIL_DOMAIN = os.getenv("EMAIL_DOMAIN", "example.com")
STREAK_MAX_DAYS = int(os.getenv("STREAK_MAX_DAYS", "365"))

DEBUG = True

# If enabled (mysql backend), apply database/schema.sql on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Fill an empty store with demo students on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
