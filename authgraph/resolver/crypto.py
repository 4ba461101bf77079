"""
Cryptographic parameter negotiation.

A fixed decision table, evaluated in order:

1. permanent distribution key -> no publicKeyCryptoSpec
2. otherwise the default public-key profile, plus diffieHellman if set
3. distribution and session specs always use the default cipher/MAC
4. diffieHellman, if set, is also attached to the session spec
"""
from __future__ import annotations

from ..model import CryptoInfo, Entity, PublicKeyCryptoSpec, SymmetricCryptoSpec
from ..settings import CryptoDefaults


def negotiate_crypto(entity: Entity, defaults: CryptoDefaults | None = None) -> CryptoInfo:
    defaults = defaults or CryptoDefaults()

    public_key_spec = None
    if not entity.use_permanent_dist_key:
        public_key_spec = PublicKeyCryptoSpec(
            sign=defaults.sign,
            padding=defaults.padding,
            key_size=defaults.key_size,
            diffie_hellman=entity.diffie_hellman,
        )

    distribution_spec = SymmetricCryptoSpec(cipher=defaults.cipher, mac=defaults.mac)
    session_spec = SymmetricCryptoSpec(
        cipher=defaults.cipher,
        mac=defaults.mac,
        diffie_hellman=entity.diffie_hellman,
    )

    return CryptoInfo(
        distribution_crypto_spec=distribution_spec,
        session_crypto_spec=session_spec,
        public_key_crypto_spec=public_key_spec,
    )
