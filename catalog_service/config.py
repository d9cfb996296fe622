import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

DEV_ORIGINS = ["http://localhost:4200", "https://localhost:4200"]

DEFAULT_STATIC_DIR = Path(__file__).parent / "static"


@dataclass(frozen=True)
class Settings:
    frontend_url: Optional[str] = None
    env: str = "production"
    host: str = "0.0.0.0"
    port: int = 5001
    static_dir: Path = field(default=DEFAULT_STATIC_DIR)
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @property
    def cors_origins(self) -> List[str]:
        origins = list(DEV_ORIGINS)
        # production frontend only when configured
        if self.frontend_url:
            origins.append(self.frontend_url)
        return origins

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            frontend_url=os.getenv("FRONTEND_URL", "").strip() or None,
            env=os.getenv("CATALOG_ENV", "production").lower(),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5001")),
            static_dir=Path(os.getenv("STATIC_DIR", str(DEFAULT_STATIC_DIR))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
