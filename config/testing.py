SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
JSON_STORE_PATH = ""

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "student_attendance_test",
}

EMAIL_DOMAIN = "example.com"
STREAK_MAX_DAYS = 365

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
