"""Command line entry point for the ZeroHour demo backend."""
from __future__ import annotations

import argparse
from typing import List, Optional

from zerohour.base.config import get_config
from zerohour.catalog.service import ScenarioCatalog

ENDPOINTS = [
    ("GET ", "/health", "Health check"),
    ("GET ", "/scenario/current", "Current state"),
    ("GET ", "/scenario/list", "Available scenarios"),
    ("GET ", "/exposure/summary", "Exposure summary"),
    ("GET ", "/exposure/domains", "Risk domains"),
    ("GET ", "/exposure/timeline", "Event timeline"),
    ("GET ", "/exposure/signals", "Observed signals"),
    ("GET ", "/target/current", "Target entity"),
    ("GET ", "/target/countdown", "Exposure countdown"),
    ("POST", "/admin/setScenario", "Set scenario (auth)"),
    ("POST", "/admin/setState", "Set state (auth)"),
    ("POST", "/admin/reset", "Reset state (auth)"),
]


def print_banner(host: str, port: int) -> None:
    print("")
    print("=========================================")
    print("  ZeroHour Demo Backend")
    print("=========================================")
    print(f"  Server running on: http://{host}:{port}")
    print("")
    print("  Endpoints:")
    for method, path, label in ENDPOINTS:
        print(f"    {method} {path:<20} - {label}")
    print("=========================================")
    print("")


def run_server(args):
    """Start the API server."""
    from zerohour.server.api import serve

    config = get_config()
    host = args.host or config.api_host
    port = args.port or config.api_port
    print_banner(host, port)
    serve(port=port, host=host)


def run_scenarios(args):
    """Print the scenario catalog and the escalation order."""
    config = get_config()
    catalog = ScenarioCatalog(config.catalog)
    for entry in catalog.describe_scenarios():
        marker = "*" if entry["id"] == config.catalog.default_scenario else " "
        print(f"{marker} {entry['id']:<30} {entry['name']}: {entry['description']}")
    print("")
    print("States: " + " → ".join(catalog.get_all_states()))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="zerohour", description="ZeroHour demo backend")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", help="Bind address (default from ZEROHOUR_API_HOST)")
    serve_parser.add_argument("--port", type=int, help="Port (default from ZEROHOUR_API_PORT / PORT)")
    serve_parser.set_defaults(func=run_server)

    scenarios_parser = subparsers.add_parser("scenarios", help="List scenarios and states")
    scenarios_parser.set_defaults(func=run_scenarios)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        args.func(args)
        return 0
    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
