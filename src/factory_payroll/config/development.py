import os

from . import env_ids, env_list

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "factory_payroll"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, `init-db` also runs on every CLI start (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

SPECIAL_DEPARTMENTS = env_list("SPECIAL_DEPARTMENTS")
SPECIAL_SUNDAY_SUPERVISORS = env_list("SPECIAL_SUNDAY_SUPERVISORS")
FULL_SALARY_EMPLOYEE_IDS = env_ids("FULL_SALARY_EMPLOYEE_IDS")
