from .schemas import (
    InterfaceAddress,
    TunnelConfig,
    TunnelInfo,
    TunnelStatus,
)

__all__ = [
    "InterfaceAddress",
    "TunnelConfig",
    "TunnelInfo",
    "TunnelStatus",
]
