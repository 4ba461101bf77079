"""
Topology Resolver.

The core of authgraph, implemented as pure functions:
    resolve(topology) -> [ResolvedEntityConfig, ...]

No I/O, no module-level state. Lookup tables are built once per run into a
ResolutionContext and passed explicitly to every per-entity derivation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..errors import ConfigurationError
from ..model import (
    AuthBroker,
    AuthInfo,
    DistProtocol,
    Entity,
    EntityInfo,
    ListeningServerInfo,
    MigrationInfo,
    NetworkTopology,
    ResolvedEntityConfig,
)
from ..settings import GeneratorSettings
from .crypto import negotiate_crypto
from .keys import derive_key_material
from .servers import ServerLists, partition_servers, select_targets

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    """Read-only tables shared by every entity in one resolution run."""
    auths: Mapping[int, AuthBroker]
    assignments: Mapping[str, int]
    servers: ServerLists
    settings: GeneratorSettings

    @classmethod
    def build(cls, topology: NetworkTopology, settings: GeneratorSettings | None = None) -> "ResolutionContext":
        return cls(
            auths=MappingProxyType({auth.id: auth for auth in topology.auth_list}),
            assignments=topology.assignments,
            servers=partition_servers(topology.entity_list),
            settings=settings or GeneratorSettings(),
        )


class TopologyResolver:
    """
    Turns a NetworkTopology into one ResolvedEntityConfig per real entity.

    Usage:
        configs = TopologyResolver.resolve(topology)
        # writer persists configs...
    """

    @staticmethod
    def resolve(topology: NetworkTopology, settings: GeneratorSettings | None = None) -> list[ResolvedEntityConfig]:
        """
        Resolve every non-placeholder entity, in declared order.

        Raises ConfigurationError on the first entity whose Auth binding
        cannot be resolved; nothing is returned in that case.
        """
        ctx = ResolutionContext.build(topology, settings)
        prefix = ctx.settings.placeholder_prefix

        configs = []
        for entity in topology.entity_list:
            if entity.is_placeholder(prefix):
                log.debug("skipping placeholder entity %s (group %s)", entity.name, entity.group)
                continue
            configs.append(resolve_entity(ctx, entity))
        log.debug("resolved %d of %d entities", len(configs), len(topology.entity_list))
        return configs


def resolve_entity(ctx: ResolutionContext, entity: Entity) -> ResolvedEntityConfig:
    """Derive every field of one entity's configuration."""
    entity_info = _entity_info(ctx, entity)
    auth_info = _auth_info(ctx, entity)
    migration_info = _migration_info(ctx, entity)
    crypto_info = negotiate_crypto(entity, ctx.settings.crypto)

    if entity.is_server:
        log.debug("%s: server listening on %s:%s", entity.name, entity.host, entity.port)
        return ResolvedEntityConfig(
            entity_info=entity_info,
            auth_info=auth_info,
            crypto_info=crypto_info,
            migration_info=migration_info,
            listening_server_info=ListeningServerInfo(entity.host, entity.port),
        )

    targets = select_targets(entity, ctx.servers)
    log.debug("%s: client with %d target servers", entity.name, len(targets))
    return ResolvedEntityConfig(
        entity_info=entity_info,
        auth_info=auth_info,
        crypto_info=crypto_info,
        migration_info=migration_info,
        target_server_info_list=targets,
    )


# =============================================================================
# Field derivation
# =============================================================================

def connection_timeout(entity: Entity, settings: GeneratorSettings) -> int:
    if entity.dist_protocol is DistProtocol.UDP:
        return settings.udp_timeout_ms
    return settings.tcp_timeout_ms


def _entity_info(ctx: ResolutionContext, entity: Entity) -> EntityInfo:
    keys = derive_key_material(
        entity,
        ctx.settings.credentials_root,
        ctx.settings.permanent_key_validity,
    )
    return EntityInfo(
        name=entity.name,
        group=entity.group,
        dist_protocol=entity.dist_protocol.value,
        use_permanent_dist_key=entity.use_permanent_dist_key,
        connection_timeout=connection_timeout(entity, ctx.settings),
        permanent_dist_key=keys.permanent_dist_key,
        private_key=keys.private_key,
    )


def _lookup_auth(ctx: ResolutionContext, entity: Entity, auth_id: int, role: str) -> AuthBroker:
    auth = ctx.auths.get(auth_id)
    if auth is None:
        raise ConfigurationError(
            f"{entity.name}: {role} Auth {auth_id} is not in the Auth list",
            entity=entity.name,
        )
    return auth


def _auth_info(ctx: ResolutionContext, entity: Entity) -> AuthInfo:
    auth_id = ctx.assignments.get(entity.name)
    if auth_id is None:
        raise ConfigurationError(f"{entity.name}: no Auth assignment", entity=entity.name)
    auth = _lookup_auth(ctx, entity, auth_id, "assigned")
    return AuthInfo(id=auth.id, host=auth.host, port=auth.port_for(entity.dist_protocol))


def _migration_info(ctx: ResolutionContext, entity: Entity) -> MigrationInfo | None:
    if entity.backup_to_auth_id is None:
        return None
    auth = _lookup_auth(ctx, entity, entity.backup_to_auth_id, "backup")
    return MigrationInfo(host=auth.host, port=auth.port_for(entity.dist_protocol))
