"""
Topology input types and resolved output records.
"""
from .topology import DistProtocol, AuthBroker, Entity, NetworkTopology
from .records import (
    PermanentDistKey,
    EntityInfo,
    AuthInfo,
    MigrationInfo,
    PublicKeyCryptoSpec,
    SymmetricCryptoSpec,
    CryptoInfo,
    ServerInfo,
    ListeningServerInfo,
    ResolvedEntityConfig,
)

__all__ = [
    # Input
    "DistProtocol",
    "AuthBroker",
    "Entity",
    "NetworkTopology",
    # Output
    "PermanentDistKey",
    "EntityInfo",
    "AuthInfo",
    "MigrationInfo",
    "PublicKeyCryptoSpec",
    "SymmetricCryptoSpec",
    "CryptoInfo",
    "ServerInfo",
    "ListeningServerInfo",
    "ResolvedEntityConfig",
]
