"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically, with a CPUSCHED_ prefix
  (e.g., CPUSCHED_BUSY_MARK env var → Settings.BUSY_MARK)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
The time quantum is deliberately NOT here: Round Robin always uses 1.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Input ───────────────────────────────────────────────────
    FIELD_DELIMITER: str = "\t"        # separates name, start time, duration

    # ── Gantt chart ─────────────────────────────────────────────
    BUSY_MARK: str = "X"               # one per time unit the job is running
    IDLE_MARK: str = " "               # one per time unit the job is not running
    FCFS_LABEL: str = "FCFS"
    ROUND_ROBIN_LABEL: str = "Round-Robin"

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "WARNING"         # logs go to stderr, the chart to stdout

    model_config = {
        "env_prefix": "CPUSCHED_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Singleton — import this everywhere
settings = Settings()
