"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

These are defaults for the outer surfaces (CLI, API, benchmarks). The
scheduler engine itself never reads them: core count and scheme are
always passed to it explicitly.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_NUM_CORES: int = 1
    DEFAULT_SCHEDULING_SCHEME: str = "fcfs"
    ROUND_ROBIN_TIME_QUANTUM: float = 2.0  # time units per slice in Round Robin

    # ── Simulation limits ───────────────────────────────────────
    MAX_JOBS_PER_SIMULATION: int = 10000   # guards the HTTP endpoint

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this everywhere
settings = Settings()
