"""
Configuration settings for the API.
Environment variables override defaults.

Each field is read from ``CSHARP_REVIEW_API_<FIELD>`` (for example
``CSHARP_REVIEW_API_PORT=9000``); bare ``HOST``/``PORT`` are left alone
since shells and container runtimes commonly set them.
"""
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

ENV_PREFIX = "CSHARP_REVIEW_API_"


@dataclass
class Settings:
    """API Configuration"""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    environ: Optional[Mapping[str, str]] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        """Load from environment variables"""
        env = os.environ if self.environ is None else self.environ
        for key, spec in self.__dataclass_fields__.items():
            if not key.isupper():
                continue
            env_value = env.get(ENV_PREFIX + key)
            if env_value is None:
                continue
            if spec.type == bool:
                setattr(self, key, env_value.lower() in ("true", "1", "yes"))
            elif spec.type == int:
                setattr(self, key, int(env_value))
            elif spec.type == List[str]:
                setattr(self, key, [o.strip() for o in env_value.split(",") if o.strip()])
            else:
                setattr(self, key, env_value)


# Global settings instance
settings = Settings()
