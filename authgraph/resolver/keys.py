"""
Key material paths.

Paths follow <credentials-root>/<netName>/<credentialPrefix><suffix>.
Nothing here touches the filesystem.
"""
from __future__ import annotations

from typing import NamedTuple

from ..model import Entity, PermanentDistKey

CIPHER_KEY_SUFFIX = "CipherKey.key"
MAC_KEY_SUFFIX = "MacKey.key"
PEM_SUFFIX = "Key.pem"
DER_SUFFIX = "Key.der"


class KeyMaterial(NamedTuple):
    permanent_dist_key: PermanentDistKey | None
    private_key: str | None


def key_path(credentials_root: str, net_name: str, credential_prefix: str, suffix: str) -> str:
    root = credentials_root.rstrip("/")
    return f"{root}/{net_name}/{credential_prefix}{suffix}"


def private_key_suffix(entity: Entity) -> str:
    return DER_SUFFIX if entity.in_der_format else PEM_SUFFIX


def derive_key_material(entity: Entity, credentials_root: str, validity: str) -> KeyMaterial:
    """Permanent-key entities get a cipher/MAC key pair; all others a private key."""
    if entity.use_permanent_dist_key:
        return KeyMaterial(
            permanent_dist_key=PermanentDistKey(
                cipher_key=key_path(credentials_root, entity.net_name, entity.credential_prefix, CIPHER_KEY_SUFFIX),
                mac_key=key_path(credentials_root, entity.net_name, entity.credential_prefix, MAC_KEY_SUFFIX),
                validity=validity,
            ),
            private_key=None,
        )
    return KeyMaterial(
        permanent_dist_key=None,
        private_key=key_path(
            credentials_root, entity.net_name, entity.credential_prefix, private_key_suffix(entity)
        ),
    )
