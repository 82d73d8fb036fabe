import os

from config.config import db_config_from_env, env_flag, workday_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(default_password="dev")

DEBUG = True

TIMEZONE = os.getenv("TZ", "America/Maceio")
WORKDAY = workday_from_env()
DAILY_CLOSE_CRON = os.getenv("DAILY_CLOSE_CRON", "30 18 * * 1-5")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
