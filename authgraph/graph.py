"""
Graph file reader.

A graph file is a JSON (or YAML) object with authList, entityList and
assignments. Keys are validated as they are read so malformed input fails
fast, naming the entity or Auth at fault.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import MalformedTopologyError
from .model import AuthBroker, DistProtocol, Entity, NetworkTopology

log = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def _require(obj: Mapping[str, Any], key: str, owner: str | int | None, what: str) -> Any:
    value = obj.get(key)
    if value is None:
        raise MalformedTopologyError(f"{what} {owner}: missing required field '{key}'", entity=owner)
    return value


def _as_int(value: Any, key: str, owner: str | int | None, what: str) -> int:
    # bool is an int subclass but never a valid port or id
    if isinstance(value, bool):
        raise MalformedTopologyError(f"{what} {owner}: '{key}' must be an integer", entity=owner)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedTopologyError(
            f"{what} {owner}: '{key}' must be an integer, got {value!r}", entity=owner
        ) from None


def _as_bool(raw: Mapping[str, Any], key: str, owner: str) -> bool:
    value = raw.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise MalformedTopologyError(f"Entity {owner}: '{key}' must be a boolean", entity=owner)
    return value


def _parse_auth(raw: Mapping[str, Any], index: int) -> AuthBroker:
    if not isinstance(raw, Mapping):
        raise MalformedTopologyError(f"authList[{index}] is not an object")
    owner = raw.get("id", f"#{index}")
    auth_id = _as_int(_require(raw, "id", owner, "Auth"), "id", owner, "Auth")
    return AuthBroker(
        id=auth_id,
        host=str(_require(raw, "host", auth_id, "Auth")),
        tcp_port=_as_int(_require(raw, "tcpPort", auth_id, "Auth"), "tcpPort", auth_id, "Auth"),
        udp_port=_as_int(_require(raw, "udpPort", auth_id, "Auth"), "udpPort", auth_id, "Auth"),
    )


def _parse_entity(raw: Mapping[str, Any], index: int) -> Entity:
    if not isinstance(raw, Mapping):
        raise MalformedTopologyError(f"entityList[{index}] is not an object")
    name = raw.get("name")
    if not name:
        raise MalformedTopologyError(f"entityList[{index}]: missing required field 'name'")

    protocol_raw = _require(raw, "distProtocol", name, "Entity")
    try:
        protocol = DistProtocol(str(protocol_raw).upper())
    except ValueError:
        raise MalformedTopologyError(
            f"Entity {name}: unknown distProtocol {protocol_raw!r}", entity=name
        ) from None

    host = raw.get("host")
    port = raw.get("port")
    if (host is None) != (port is None):
        raise MalformedTopologyError(
            f"Entity {name}: 'host' and 'port' must be given together", entity=name
        )

    backup = raw.get("backupToAuthId")
    return Entity(
        name=str(name),
        group=str(_require(raw, "group", name, "Entity")),
        dist_protocol=protocol,
        net_name=str(_require(raw, "netName", name, "Entity")),
        credential_prefix=str(_require(raw, "credentialPrefix", name, "Entity")),
        host=None if host is None else str(host),
        port=None if port is None else _as_int(port, "port", name, "Entity"),
        use_permanent_dist_key=_as_bool(raw, "usePermanentDistKey", name),
        in_der_format=_as_bool(raw, "inDerFormat", name),
        diffie_hellman=raw.get("diffieHellman"),
        backup_to_auth_id=None if backup is None else _as_int(backup, "backupToAuthId", name, "Entity"),
    )


def parse_topology(data: Mapping[str, Any]) -> NetworkTopology:
    """Build a NetworkTopology from an already-decoded graph object."""
    if not isinstance(data, Mapping):
        raise MalformedTopologyError("graph must be an object")
    for key in ("authList", "entityList", "assignments"):
        if key not in data:
            raise MalformedTopologyError(f"graph: missing top-level '{key}'")
    for key in ("authList", "entityList"):
        if not isinstance(data[key], list):
            raise MalformedTopologyError(f"graph: '{key}' must be a list")

    auths = [_parse_auth(raw, i) for i, raw in enumerate(data["authList"])]
    seen_auths: set[int] = set()
    for auth in auths:
        if auth.id in seen_auths:
            raise MalformedTopologyError(f"Auth {auth.id}: duplicate id", entity=auth.id)
        seen_auths.add(auth.id)

    entities = [_parse_entity(raw, i) for i, raw in enumerate(data["entityList"])]
    seen_names: set[str] = set()
    for entity in entities:
        if entity.name in seen_names:
            raise MalformedTopologyError(f"Entity {entity.name}: duplicate name", entity=entity.name)
        seen_names.add(entity.name)

    raw_assignments = data["assignments"]
    if not isinstance(raw_assignments, Mapping):
        raise MalformedTopologyError("graph: 'assignments' must be an object")
    assignments = {
        str(name): _as_int(auth_id, "assignments", name, "Entity")
        for name, auth_id in raw_assignments.items()
    }

    log.debug("parsed graph: %d Auths, %d entities", len(auths), len(entities))
    return NetworkTopology(auth_list=auths, entity_list=entities, assignments=assignments)


def load_topology(path: str | Path) -> NetworkTopology:
    """Read a graph file from disk. YAML by suffix, JSON otherwise."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fp:
        if path.suffix.lower() in YAML_SUFFIXES:
            try:
                data = yaml.safe_load(fp)
            except yaml.YAMLError as e:
                raise MalformedTopologyError(f"{path}: invalid YAML: {e}") from e
        else:
            try:
                data = json.load(fp)
            except json.JSONDecodeError as e:
                raise MalformedTopologyError(f"{path}: invalid JSON: {e}") from e
    log.info("Loaded graph %s", path)
    return parse_topology(data)
