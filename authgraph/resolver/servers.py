"""
Peer-server partitioning.

Every server-role entity lands in exactly one of three lists, chosen by the
same rule that later selects a client's targets:

    diffie_hellman set  -> DH list
    else UDP            -> UDP list
    else                -> TCP list
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

from ..model import DistProtocol, Entity, ServerInfo


class ServerClass(Enum):
    DH = auto()
    UDP = auto()
    TCP = auto()


def classify(entity: Entity) -> ServerClass:
    """Apply the three-way rule. DH takes priority over the transport."""
    if entity.diffie_hellman is not None:
        return ServerClass.DH
    if entity.dist_protocol is DistProtocol.UDP:
        return ServerClass.UDP
    return ServerClass.TCP


@dataclass(frozen=True)
class ServerLists:
    dh: tuple[ServerInfo, ...] = ()
    udp: tuple[ServerInfo, ...] = ()
    tcp: tuple[ServerInfo, ...] = ()

    def for_class(self, server_class: ServerClass) -> tuple[ServerInfo, ...]:
        if server_class is ServerClass.DH:
            return self.dh
        if server_class is ServerClass.UDP:
            return self.udp
        return self.tcp

    def __iter__(self):
        return iter((self.dh, self.udp, self.tcp))


def partition_servers(entities: Iterable[Entity]) -> ServerLists:
    """Split server-role entities into DH/UDP/TCP lists, keeping declared order."""
    buckets: dict[ServerClass, list[ServerInfo]] = {c: [] for c in ServerClass}
    for entity in entities:
        if not entity.is_server:
            continue
        buckets[classify(entity)].append(ServerInfo(entity.name, entity.host, entity.port))
    return ServerLists(
        dh=tuple(buckets[ServerClass.DH]),
        udp=tuple(buckets[ServerClass.UDP]),
        tcp=tuple(buckets[ServerClass.TCP]),
    )


def select_targets(entity: Entity, servers: ServerLists) -> list[ServerInfo]:
    """Return a fresh list of the peer servers a client may connect to."""
    return list(servers.for_class(classify(entity)))
