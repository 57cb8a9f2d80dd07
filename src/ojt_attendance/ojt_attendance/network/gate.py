from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

_IPV4_MAPPED_PREFIX = "::ffff:"
_LOOPBACK = frozenset({"127.0.0.1", "::1", "localhost"})


@dataclass(frozen=True)
class NetworkCheck:
    authorized: bool
    ip: Optional[str]

    def as_dict(self) -> dict:
        return {"authorized": self.authorized, "ip": self.ip}


def resolve_client_ip(forwarded_for: Optional[str], remote_addr: Optional[str]) -> Optional[str]:
    """First X-Forwarded-For hop wins, else the socket peer address."""

    ip = None
    if forwarded_for:
        ip = forwarded_for.split(",")[0].strip() or None
    if not ip:
        ip = (remote_addr or "").strip() or None
    if ip and ip.startswith(_IPV4_MAPPED_PREFIX):
        ip = ip[len(_IPV4_MAPPED_PREFIX):]
    return ip


@dataclass(frozen=True)
class NetworkPolicy:
    """Which client addresses count as "on the office network"."""

    allowed_ips: frozenset[str] = field(default_factory=frozenset)
    local_prefixes: tuple[str, ...] = ("192.168.",)
    allow_local: bool = False

    @classmethod
    def from_settings(cls, *, allowed_ips: Iterable[str], allow_local: bool, local_prefixes: Iterable[str] = ("192.168.",)) -> "NetworkPolicy":
        return cls(
            allowed_ips=frozenset(ip.strip() for ip in allowed_ips if ip and ip.strip()),
            local_prefixes=tuple(local_prefixes),
            allow_local=bool(allow_local),
        )

    def is_local(self, ip: str) -> bool:
        return ip in _LOOPBACK or any(ip.startswith(p) for p in self.local_prefixes)

    def check(self, ip: Optional[str]) -> NetworkCheck:
        if not ip:
            return NetworkCheck(authorized=False, ip=None)
        if ip in self.allowed_ips:
            return NetworkCheck(authorized=True, ip=ip)
        if self.allow_local and self.is_local(ip):
            return NetworkCheck(authorized=True, ip=ip)
        return NetworkCheck(authorized=False, ip=ip)
