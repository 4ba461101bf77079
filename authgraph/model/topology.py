"""
Topology description: the resolver's only input.

All types are frozen dataclasses. The topology is built once (from a graph
file or a preset) and never mutated during resolution.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class DistProtocol(str, Enum):
    """Transport used for key distribution with the Auth broker."""

    TCP = "TCP"
    UDP = "UDP"


@dataclass(frozen=True)
class AuthBroker:
    """An Auth trust broker serving one network segment."""
    id: int
    host: str
    tcp_port: int
    udp_port: int

    def port_for(self, protocol: DistProtocol) -> int:
        return self.udp_port if protocol is DistProtocol.UDP else self.tcp_port


@dataclass(frozen=True)
class Entity:
    """
    A client or server node.

    An entity is a server if and only if both host and port are set.
    """

    name: str
    group: str
    dist_protocol: DistProtocol
    net_name: str
    credential_prefix: str

    host: str | None = None
    port: int | None = None

    # Pre-shared symmetric key instead of a private key + public-key handshake
    use_permanent_dist_key: bool = False
    in_der_format: bool = False

    # Curve/group for ephemeral key exchange, e.g. "secp128r2"
    diffie_hellman: str | None = None
    backup_to_auth_id: int | None = None

    @property
    def is_server(self) -> bool:
        return self.host is not None and self.port is not None

    def is_placeholder(self, prefix: str) -> bool:
        return self.group.startswith(prefix)


@dataclass(frozen=True)
class NetworkTopology:
    auth_list: tuple[AuthBroker, ...] = ()
    entity_list: tuple[Entity, ...] = ()
    # entity name -> Auth id
    assignments: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "auth_list", tuple(self.auth_list))
        object.__setattr__(self, "entity_list", tuple(self.entity_list))
        object.__setattr__(self, "assignments", MappingProxyType(dict(self.assignments)))

    @property
    def servers(self) -> tuple[Entity, ...]:
        return tuple(e for e in self.entity_list if e.is_server)
