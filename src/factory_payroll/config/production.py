import os

from . import env_ids, env_list

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "payroll"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "factory_payroll"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

SPECIAL_DEPARTMENTS = env_list("SPECIAL_DEPARTMENTS")
SPECIAL_SUNDAY_SUPERVISORS = env_list("SPECIAL_SUNDAY_SUPERVISORS")
FULL_SALARY_EMPLOYEE_IDS = env_ids("FULL_SALARY_EMPLOYEE_IDS")
