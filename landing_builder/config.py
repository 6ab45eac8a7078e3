"""Configuration du gateway landing-pages (variables d'environnement)."""
import os

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "http://localhost:3000"


class GatewayConfig(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    tenant: str = Field(..., min_length=1)
    timeout: float = Field(default=10.0, gt=0)
    max_retries: int = Field(default=3, ge=0)
    backoff: float = Field(default=0.5, ge=0)

    @property
    def api_root(self) -> str:
        """http://host/api/{tenant}"""
        return f"{self.base_url.rstrip('/')}/api/{self.tenant}"

    @classmethod
    def from_env(cls, **overrides) -> "GatewayConfig":
        values = {
            "base_url":    os.getenv("LANDING_API_URL", DEFAULT_BASE_URL),
            "tenant":      os.getenv("LANDING_TENANT", ""),
            "timeout":     os.getenv("LANDING_API_TIMEOUT", "10"),
            "max_retries": os.getenv("LANDING_API_RETRIES", "3"),
            "backoff":     os.getenv("LANDING_API_BACKOFF", "0.5"),
        }
        values.update(overrides)
        return cls(**values)
