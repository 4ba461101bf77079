"""
Topology Resolver - pure functional core.

This package contains the resolution logic separated from I/O concerns.
TopologyResolver.resolve() is the entry point: it takes a topology and
returns the resolved records, which the writer then persists.
"""
from .servers import ServerClass, ServerLists, classify, partition_servers, select_targets
from .crypto import negotiate_crypto
from .keys import KeyMaterial, key_path, derive_key_material
from .machine import ResolutionContext, TopologyResolver, resolve_entity, connection_timeout

__all__ = [
    # Partitioning
    "ServerClass",
    "ServerLists",
    "classify",
    "partition_servers",
    "select_targets",
    # Field derivation
    "negotiate_crypto",
    "KeyMaterial",
    "key_path",
    "derive_key_material",
    "connection_timeout",
    # Resolver
    "ResolutionContext",
    "TopologyResolver",
    "resolve_entity",
]
