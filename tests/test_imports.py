"""
Import test suite for authgraph.

Validates that the public API is exported from the expected modules.
"""
import pytest


class TestTopLevelImports:
    """Test top-level package imports."""

    def test_import_authgraph(self):
        """Test basic package import."""
        import authgraph
        assert authgraph.__version__ is not None

    def test_authgraph_exports_core(self):
        """Test that the package exports the resolver and its types."""
        from authgraph import (
            TopologyResolver,
            NetworkTopology,
            Entity,
            AuthBroker,
            DistProtocol,
            ResolvedEntityConfig,
        )
        assert TopologyResolver is not None
        assert hasattr(TopologyResolver, "resolve")
        assert DistProtocol.UDP.value == "UDP"

    def test_authgraph_exports_io(self):
        """Test that graph reading and writing are exported."""
        from authgraph import load_topology, parse_topology, ConfigWriter, encode_config
        assert callable(load_topology)
        assert callable(parse_topology)
        assert ConfigWriter is not None
        assert callable(encode_config)

    def test_error_hierarchy(self):
        """Malformed input is both an AuthGraphError and a ValueError."""
        from authgraph import AuthGraphError, MalformedTopologyError, ConfigurationError
        assert issubclass(MalformedTopologyError, AuthGraphError)
        assert issubclass(MalformedTopologyError, ValueError)
        assert issubclass(ConfigurationError, AuthGraphError)
        assert not issubclass(ConfigurationError, ValueError)


class TestResolverImports:
    """Test resolver submodule imports."""

    @pytest.mark.parametrize("name", [
        "ServerClass",
        "ServerLists",
        "classify",
        "partition_servers",
        "select_targets",
        "negotiate_crypto",
        "key_path",
        "derive_key_material",
        "connection_timeout",
        "ResolutionContext",
        "resolve_entity",
    ])
    def test_resolver_exports(self, name):
        """Every name in resolver.__all__ resolves."""
        from authgraph import resolver
        assert name in resolver.__all__
        assert getattr(resolver, name) is not None


class TestModelImports:
    """Test model submodule imports."""

    def test_record_types(self):
        """Test output record classes."""
        from authgraph.model import (
            EntityInfo,
            AuthInfo,
            MigrationInfo,
            CryptoInfo,
            PublicKeyCryptoSpec,
            SymmetricCryptoSpec,
            ServerInfo,
            ListeningServerInfo,
            PermanentDistKey,
        )
        assert ServerInfo("a", "h", 1).to_dict() == {"name": "a", "host": "h", "port": 1}
