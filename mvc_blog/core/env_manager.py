"""Environment variable access."""

import os
from typing import Optional


class EnvManager:
    """Read settings from the process environment."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> str:
        value = os.getenv(name)
        if value is None or value == "":
            return default  # type: ignore
        return value
