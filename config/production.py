import os

from config.config import db_config_from_env, env_flag, workday_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

DEBUG = False

TIMEZONE = os.getenv("TZ", "America/Maceio")
WORKDAY = workday_from_env()
DAILY_CLOSE_CRON = os.getenv("DAILY_CLOSE_CRON", "30 18 * * 1-5")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
