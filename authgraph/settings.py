"""
Generator settings.

GeneratorSettings is immutable; overrides are applied by building a new
instance. Values can be supplied as a JSON object in AUTHGRAPH_CFG.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any

log = logging.getLogger(__name__)

ENV_VAR = "AUTHGRAPH_CFG"


@dataclass(frozen=True)
class CryptoDefaults:
    """Fixed crypto profile emitted into every cryptoInfo block."""
    sign: str = "RSA-SHA256"
    padding: str = "RSA_PKCS1_PADDING"
    key_size: int = 256             # bytes, i.e. 2048-bit RSA
    cipher: str = "AES-128-CBC"
    mac: str = "SHA256"


@dataclass(frozen=True)
class GeneratorSettings:
    credentials_root: str = "../../credentials/keys"
    configs_root: str = "configs"
    placeholder_prefix: str = "Pt"

    # UDP has no retransmission, so clients wait longer
    tcp_timeout_ms: int = 1500
    udp_timeout_ms: int = 3000

    permanent_key_validity: str = "365*day"
    crypto: CryptoDefaults = field(default_factory=CryptoDefaults)


def _matches(current: Any, value: Any) -> bool:
    # bool is an int subclass but never a valid timeout or key size
    if isinstance(value, bool) and not isinstance(current, bool):
        return False
    return isinstance(value, type(current))


def _merge(base: Any, overrides: dict[str, Any], scope: str) -> dict[str, Any]:
    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in {f.name for f in fields(base)}:
            log.debug("ignoring unknown setting %r", scope + key)
            continue
        current = getattr(base, key)
        if key == "crypto" and isinstance(value, dict):
            value = replace(current, **_merge(current, value, "crypto."))
        elif not _matches(current, value):
            log.warning("ignoring setting %r: expected %s, got %r",
                        scope + key, type(current).__name__, value)
            continue
        changes[key] = value
    return changes


def _apply(base: GeneratorSettings, overrides: dict[str, Any]) -> GeneratorSettings:
    return replace(base, **_merge(base, overrides, ""))


def load_settings(base: GeneratorSettings | None = None, **overrides: Any) -> GeneratorSettings:
    """Merge base settings with AUTHGRAPH_CFG, then with explicit overrides.

    Explicit overrides whose value is None are skipped so CLI flags that
    were not given leave the environment value in place.
    """
    settings = base or GeneratorSettings()
    try:
        env_cfg = os.environ.get(ENV_VAR)
        if env_cfg:
            parsed = json.loads(env_cfg)
            if isinstance(parsed, dict):
                settings = _apply(settings, parsed)
    except json.JSONDecodeError:
        log.warning("%s is not valid JSON, ignoring it", ENV_VAR)
    return _apply(settings, {k: v for k, v in overrides.items() if v is not None})
