from .errors import AuthGraphError, MalformedTopologyError, ConfigurationError
from .model import DistProtocol, AuthBroker, Entity, NetworkTopology, ResolvedEntityConfig
from .resolver import TopologyResolver
from .graph import load_topology, parse_topology
from .writer import ConfigWriter, encode_config
from .presets import legacy_topology
from .settings import GeneratorSettings, load_settings

__all__ = [
    "AuthGraphError",
    "MalformedTopologyError",
    "ConfigurationError",
    "DistProtocol",
    "AuthBroker",
    "Entity",
    "NetworkTopology",
    "ResolvedEntityConfig",
    "TopologyResolver",
    "load_topology",
    "parse_topology",
    "ConfigWriter",
    "encode_config",
    "legacy_topology",
    "GeneratorSettings",
    "load_settings",
]

__version__ = "0.1.0"
