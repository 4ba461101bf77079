"""
Pytest configuration for authgraph tests.

This file provides topology fixtures shared across the test modules.
"""
import pytest
import sys
from pathlib import Path

# Ensure authgraph package is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from authgraph.model import AuthBroker, DistProtocol, Entity, NetworkTopology


def make_entity(name, **kwargs):
    """Entity with sensible defaults; net/credential fields follow the name."""
    net, _, short = name.partition(".")
    defaults = dict(
        group="Clients",
        dist_protocol=DistProtocol.TCP,
        net_name=net if short else "net1",
        credential_prefix=(short or name)[:1].upper() + (short or name)[1:],
    )
    defaults.update(kwargs)
    return Entity(name=name, **defaults)


@pytest.fixture
def entity_factory():
    """Factory for entities with defaults; see make_entity."""
    return make_entity


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's AUTHGRAPH_CFG out of the tests."""
    monkeypatch.delenv("AUTHGRAPH_CFG", raising=False)


@pytest.fixture
def auth_list():
    return (
        AuthBroker(id=1, host="auth1.local", tcp_port=20900, udp_port=20902),
        AuthBroker(id=2, host="auth2.local", tcp_port=21900, udp_port=21902),
    )


@pytest.fixture
def mixed_topology(auth_list):
    """Two segments with TCP, UDP, DH, permanent-key and placeholder entities."""
    entities = (
        make_entity("net1.client", backup_to_auth_id=2),
        make_entity("net1.udpClient", dist_protocol=DistProtocol.UDP),
        make_entity("net1.dhClient", diffie_hellman="secp128r2"),
        make_entity("net1.rcClient", use_permanent_dist_key=True),
        make_entity("net1.ptClient", group="PtClient"),
        make_entity("net1.server", group="Servers", host="localhost", port=21100),
        make_entity("net1.udpServer", group="Servers", host="localhost", port=21400,
                    dist_protocol=DistProtocol.UDP),
        make_entity("net1.dhServer", group="Servers", host="localhost", port=21500,
                    diffie_hellman="secp128r2", dist_protocol=DistProtocol.UDP),
        make_entity("net1.ptServer", group="PtServers", host="localhost", port=21200),
        make_entity("net2.server", group="Servers", host="10.0.0.2", port=22100),
    )
    assignments = {e.name: (2 if e.name.startswith("net2") else 1) for e in entities}
    return NetworkTopology(auth_list=auth_list, entity_list=entities, assignments=assignments)


@pytest.fixture
def default_graph_path():
    return Path(__file__).parent.parent / "configs" / "default.graph"
