import os


def env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def db_config_from_env(default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": env_int("DB_PORT", 3306),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "timesheet_db"),
    }


def workday_from_env() -> dict:
    # Jornada padrão: 08:00-18:00, 480 min, tolerância 10, almoço 12:00 por 120 min
    return {
        "expected_start_hour": env_int("WORKDAY_START_HOUR", 8),
        "expected_start_minute": env_int("WORKDAY_START_MINUTE", 0),
        "expected_end_hour": env_int("WORKDAY_END_HOUR", 18),
        "expected_end_minute": env_int("WORKDAY_END_MINUTE", 0),
        "expected_work_minutes": env_int("WORKDAY_EXPECTED_MINUTES", 480),
        "tolerance_minutes": env_int("WORKDAY_TOLERANCE_MINUTES", 10),
        "lunch_start_hour": env_int("LUNCH_START_HOUR", 12),
        "lunch_start_minute": env_int("LUNCH_START_MINUTE", 0),
        "lunch_duration_minutes": env_int("LUNCH_DURATION_MINUTES", 120),
    }
