from config.config import db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password="test")

DEBUG = False
TESTING = True

TIMEZONE = "America/Maceio"
WORKDAY = {
    "expected_start_hour": 8,
    "expected_start_minute": 0,
    "expected_end_hour": 18,
    "expected_end_minute": 0,
    "expected_work_minutes": 480,
    "tolerance_minutes": 10,
    "lunch_start_hour": 12,
    "lunch_start_minute": 0,
    "lunch_duration_minutes": 120,
}
DAILY_CLOSE_CRON = "30 18 * * 1-5"

AUTO_INIT_DB = False
