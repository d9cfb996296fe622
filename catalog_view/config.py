import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ViewSettings:
    api_url: str = "http://localhost:5001"
    timeout: float = 10.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ViewSettings":
        return cls(
            api_url=os.getenv("CATALOG_API_URL", "http://localhost:5001"),
            timeout=float(os.getenv("CATALOG_API_TIMEOUT", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
