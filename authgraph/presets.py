"""
Legacy naming-convention preset.

The earlier generator derived everything from substrings of fixed entity
names ("udp", "rc", "safetycritical", "client"/"server") and computed ports
from a small network id. Here those names are translated once into explicit
Entity fields, producing an ordinary NetworkTopology for the resolver.
"""
from __future__ import annotations

from .model import AuthBroker, DistProtocol, Entity, NetworkTopology

LEGACY_DH_GROUP = "secp128r2"
LEGACY_HOST = "localhost"

# (name, port offset from the segment's port base)
LEGACY_SERVERS = (
    ("server", 100),
    ("ptServer", 200),
    ("rcServer", 300),
    ("udpServer", 400),
    ("safetyCriticalServer", 500),
    ("rcUdpServer", 600),
)

LEGACY_CLIENTS = (
    "client",
    "ptClient",
    "rcClient",
    "udpClient",
    "safetyCriticalClient",
    "rcUdpClient",
)


def net_name(net_id: int) -> str:
    return f"net{net_id}"


def net_port_base(net_id: int) -> int:
    return 20000 + net_id * 1000


def legacy_auth(net_id: int) -> AuthBroker:
    base = net_port_base(net_id)
    return AuthBroker(id=100 + net_id, host=LEGACY_HOST, tcp_port=base + 900, udp_port=base + 902)


def legacy_entity(net_id: int, name: str, port_offset: int | None = None) -> Entity:
    """Build one entity, reading role and security mode off its legacy name."""
    lowered = name.lower()
    is_server = port_offset is not None
    group = "Servers" if is_server else "Clients"
    if lowered.startswith("pt"):
        group = "Pt" + group

    return Entity(
        name=f"{net_name(net_id)}.{name}",
        group=group,
        dist_protocol=DistProtocol.UDP if "udp" in lowered else DistProtocol.TCP,
        net_name=net_name(net_id),
        credential_prefix=name[:1].upper() + name[1:],
        host=LEGACY_HOST if is_server else None,
        port=net_port_base(net_id) + port_offset if is_server else None,
        use_permanent_dist_key="rc" in lowered,
        diffie_hellman=LEGACY_DH_GROUP if "safetycritical" in lowered else None,
    )


def legacy_topology(num_nets: int = 2) -> NetworkTopology:
    """Six clients and six servers per segment, one Auth per segment."""
    if num_nets < 1:
        raise ValueError("num_nets must be at least 1")

    auths = []
    entities = []
    assignments = {}
    for net_id in range(1, num_nets + 1):
        auth = legacy_auth(net_id)
        auths.append(auth)
        segment = [legacy_entity(net_id, name) for name in LEGACY_CLIENTS]
        segment += [legacy_entity(net_id, name, offset) for name, offset in LEGACY_SERVERS]
        for entity in segment:
            assignments[entity.name] = auth.id
        entities.extend(segment)

    return NetworkTopology(auth_list=auths, entity_list=entities, assignments=assignments)
