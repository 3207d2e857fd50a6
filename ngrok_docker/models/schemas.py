"""
Pydantic models for run configuration and tunnel status payloads
"""
import ipaddress
from pydantic import BaseModel, Field, HttpUrl, field_validator
from typing import List, Optional

from ..config import (
    CONTAINER_NAME,
    IMAGE,
    DEFAULT_PORT,
    MAX_RETRIES,
    RETRY_DELAY_MS,
    API_URL,
)


class InterfaceAddress(BaseModel):
    address: str
    family: str  # IPv4, IPv6, or the raw family name for anything else
    internal: bool = False


class TunnelConfig(BaseModel):
    """Validated settings for a single run, built once at startup"""
    host_ip: str
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)
    container_name: str = Field(CONTAINER_NAME, min_length=1)
    image: str = Field(IMAGE, min_length=1)
    max_retries: int = Field(MAX_RETRIES, ge=1)
    retry_delay_ms: int = Field(RETRY_DELAY_MS, ge=0)
    api_url: Optional[HttpUrl] = API_URL

    @field_validator("host_ip", mode="before")
    @classmethod
    def check_host_ip(cls, value):
        if value is None:
            raise ValueError("no non-internal IPv4 address found on this host")
        try:
            ipaddress.IPv4Address(str(value))
        except ValueError:
            raise ValueError(f"{value!r} is not an IPv4 address")
        return str(value)

    @field_validator("api_url", mode="before")
    @classmethod
    def blank_api_url(cls, value):
        return value or None

    @property
    def binding(self) -> str:
        return f"{self.host_ip}:{self.port}"

    @property
    def retry_delay(self) -> float:
        """Retry delay in seconds"""
        return self.retry_delay_ms / 1000

    @property
    def status_api_url(self) -> Optional[str]:
        return str(self.api_url) if self.api_url else None


class TunnelInfo(BaseModel):
    public_url: str
    name: Optional[str] = None
    proto: Optional[str] = None


class TunnelStatus(BaseModel):
    tunnels: List[TunnelInfo] = []
