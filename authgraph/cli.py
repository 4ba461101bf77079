"""
authgraph command line.

Usage:
    authgraph generate configs/default.graph -o configs
    authgraph legacy --nets 2 -o configs
    authgraph generate topology.yaml --stdout     # one JSON array of records
"""
from __future__ import annotations

import argparse
import logging
import sys

from .errors import AuthGraphError
from .graph import load_topology
from .model import NetworkTopology
from .presets import legacy_topology
from .resolver import TopologyResolver
from .settings import load_settings
from .writer import ConfigWriter, encode_configs

log = logging.getLogger("authgraph")


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-o", "--output", dest="configs_root", default=None,
                        help="Root directory for generated configs (default: configs)")
    common.add_argument("--credentials-root", default=None,
                        help="Directory prefix used in key file paths")
    common.add_argument("--stdout", action="store_true",
                        help="Print records instead of writing files")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    p = argparse.ArgumentParser(prog="authgraph",
                                description="Generate entity configs from an Auth topology.")
    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", parents=[common], help="Resolve a graph file")
    gen.add_argument("graph", help="Graph file (.graph/.json or .yaml)")

    legacy = sub.add_parser("legacy", parents=[common], help="Resolve the built-in legacy topology")
    legacy.add_argument("--nets", type=int, default=2, help="Number of network segments (default: 2)")
    return p


def run(topology: NetworkTopology, configs_root: str, credentials_root: str | None = None,
        to_stdout: bool = False) -> int:
    settings = load_settings(configs_root=configs_root, credentials_root=credentials_root)
    configs = TopologyResolver.resolve(topology, settings)

    if to_stdout:
        print(encode_configs(configs))
        return len(configs)

    net_names = {e.name: e.net_name for e in topology.entity_list}
    writer = ConfigWriter(settings.configs_root, net_names)
    paths = writer.write_all(configs)
    log.info("Wrote %d entity configs under %s", len(paths), settings.configs_root)
    return len(paths)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        if args.command == "generate":
            topology = load_topology(args.graph)
        else:
            topology = legacy_topology(args.nets)
        run(topology, args.configs_root, args.credentials_root, args.stdout)
    except (AuthGraphError, OSError, ValueError) as e:  # ValueError: --nets < 1
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
