"""
Resolved configuration records: the resolver's output.

Records are frozen dataclasses. to_dict() produces the on-disk layout with
camelCase keys in a fixed order, so encoding the same record twice always
gives the same bytes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PermanentDistKey:
    cipher_key: str
    mac_key: str
    validity: str

    def to_dict(self) -> dict[str, Any]:
        return {"cipherKey": self.cipher_key, "macKey": self.mac_key, "validity": self.validity}


@dataclass(frozen=True)
class EntityInfo:
    name: str
    group: str
    dist_protocol: str
    use_permanent_dist_key: bool
    connection_timeout: int
    # Exactly one of the two is set
    permanent_dist_key: PermanentDistKey | None = None
    private_key: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "group": self.group,
            "distProtocol": self.dist_protocol,
            "usePermanentDistKey": self.use_permanent_dist_key,
            "connectionTimeout": self.connection_timeout,
        }
        if self.permanent_dist_key is not None:
            out["permanentDistKey"] = self.permanent_dist_key.to_dict()
        if self.private_key is not None:
            out["privateKey"] = self.private_key
        return out


@dataclass(frozen=True)
class AuthInfo:
    id: int
    host: str
    port: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "host": self.host, "port": self.port}


@dataclass(frozen=True)
class MigrationInfo:
    host: str
    port: int

    def to_dict(self) -> dict[str, Any]:
        return {"host": self.host, "port": self.port}


@dataclass(frozen=True)
class PublicKeyCryptoSpec:
    sign: str
    padding: str
    key_size: int
    diffie_hellman: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"sign": self.sign, "padding": self.padding, "keySize": self.key_size}
        if self.diffie_hellman is not None:
            out["diffieHellman"] = self.diffie_hellman
        return out


@dataclass(frozen=True)
class SymmetricCryptoSpec:
    """Cipher + MAC pair used for distribution and session channels."""
    cipher: str
    mac: str
    diffie_hellman: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"cipher": self.cipher, "mac": self.mac}
        if self.diffie_hellman is not None:
            out["diffieHellman"] = self.diffie_hellman
        return out


@dataclass(frozen=True)
class CryptoInfo:
    distribution_crypto_spec: SymmetricCryptoSpec
    session_crypto_spec: SymmetricCryptoSpec
    public_key_crypto_spec: PublicKeyCryptoSpec | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.public_key_crypto_spec is not None:
            out["publicKeyCryptoSpec"] = self.public_key_crypto_spec.to_dict()
        out["distributionCryptoSpec"] = self.distribution_crypto_spec.to_dict()
        out["sessionCryptoSpec"] = self.session_crypto_spec.to_dict()
        return out


@dataclass(frozen=True)
class ServerInfo:
    name: str
    host: str
    port: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "host": self.host, "port": self.port}


@dataclass(frozen=True)
class ListeningServerInfo:
    host: str
    port: int

    def to_dict(self) -> dict[str, Any]:
        return {"host": self.host, "port": self.port}


@dataclass(frozen=True)
class ResolvedEntityConfig:
    """
    Fully resolved configuration for one entity.

    Servers carry listening_server_info, clients carry
    target_server_info_list; never both.
    """

    entity_info: EntityInfo
    auth_info: AuthInfo
    crypto_info: CryptoInfo
    migration_info: MigrationInfo | None = None
    listening_server_info: ListeningServerInfo | None = None
    target_server_info_list: list[ServerInfo] | None = None

    def __post_init__(self):
        if (self.listening_server_info is None) == (self.target_server_info_list is None):
            raise ValueError(
                f"{self.entity_info.name}: exactly one of listening_server_info "
                f"and target_server_info_list must be set"
            )

    @property
    def name(self) -> str:
        return self.entity_info.name

    @property
    def is_server(self) -> bool:
        return self.listening_server_info is not None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "entityInfo": self.entity_info.to_dict(),
            "authInfo": self.auth_info.to_dict(),
        }
        if self.migration_info is not None:
            out["migrationInfo"] = self.migration_info.to_dict()
        out["cryptoInfo"] = self.crypto_info.to_dict()
        if self.listening_server_info is not None:
            out["listeningServerInfo"] = self.listening_server_info.to_dict()
        else:
            out["targetServerInfoList"] = [s.to_dict() for s in self.target_server_info_list]
        return out
