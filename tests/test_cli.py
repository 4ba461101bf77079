"""
Tests for the authgraph command line.
"""
from __future__ import annotations

import json

import pytest

from authgraph.cli import main


class TestLegacyCommand:

    def test_writes_configs(self, tmp_path):
        assert main(["legacy", "--nets", "1", "-o", str(tmp_path)]) == 0
        written = sorted(p.name for p in (tmp_path / "net1").iterdir())
        assert len(written) == 10
        assert "client.config" in written
        assert "ptServer.config" not in written

    def test_rejects_zero_nets(self, tmp_path):
        assert main(["legacy", "--nets", "0", "-o", str(tmp_path)]) == 1


class TestGenerateCommand:

    def test_default_graph(self, tmp_path, default_graph_path):
        assert main(["generate", str(default_graph_path), "-o", str(tmp_path)]) == 0
        record = json.loads((tmp_path / "net2" / "client.config").read_text(encoding="utf-8"))
        assert record["entityInfo"]["privateKey"].endswith("net2/ClientKey.der")

    def test_credentials_root(self, tmp_path, default_graph_path):
        argv = ["generate", str(default_graph_path), "-o", str(tmp_path), "--credentials-root", "/keys"]
        assert main(argv) == 0
        record = json.loads((tmp_path / "net1" / "server.config").read_text(encoding="utf-8"))
        assert record["entityInfo"]["privateKey"] == "/keys/net1/ServerKey.pem"

    def test_stdout(self, tmp_path, default_graph_path, capsys):
        assert main(["generate", str(default_graph_path), "--stdout", "-o", str(tmp_path)]) == 0
        records = json.loads(capsys.readouterr().out)
        assert [r["entityInfo"]["name"] for r in records][:1] == ["net1.client"]
        assert len(records) == 9
        assert not any(tmp_path.iterdir())

    def test_missing_file(self, tmp_path):
        assert main(["generate", str(tmp_path / "nope.graph")]) == 1

    def test_unresolvable_assignment(self, tmp_path):
        graph = {
            "authList": [],
            "entityList": [{"name": "net1.c", "group": "Clients", "distProtocol": "TCP",
                            "netName": "net1", "credentialPrefix": "C"}],
            "assignments": {},
        }
        path = tmp_path / "bad.graph"
        path.write_text(json.dumps(graph), encoding="utf-8")
        assert main(["generate", str(path), "-o", str(tmp_path / "out")]) == 1
        assert not (tmp_path / "out").exists()

    def test_requires_command(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 2


class TestMalformedGraph:

    @pytest.mark.parametrize("patch", [
        {"authList": None},
        {"entityList": 5},
    ])
    def test_exits_with_error(self, tmp_path, default_graph_path, patch):
        """Malformed graphs log an error and exit 1 instead of raising."""
        graph = json.loads(default_graph_path.read_text(encoding="utf-8"))
        graph.update(patch)
        path = tmp_path / "bad.graph"
        path.write_text(json.dumps(graph), encoding="utf-8")
        assert main(["generate", str(path), "-o", str(tmp_path / "out")]) == 1
