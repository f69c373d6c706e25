# main.py
import argparse
import sys
from pathlib import Path

from core.exceptions import DomainError
from core.reporting.api import generate_utilization_workbook
from infra.bootstrap import open_service_graph
from infra.logging_config import setup_logging
from infra.settings import AppSettings
from infra.tracing import bind_trace_id
from infra.version import get_app_version


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="capacity-planner")
    parser.add_argument("--version", action="version", version=get_app_version())
    sub = parser.add_subparsers(dest="command", required=True)

    export = sub.add_parser("export-utilization", help="Write the team utilisation workbook")
    export.add_argument("output", type=Path)

    sub.add_parser("migrate", help="Upgrade the database schema")
    return parser


def main(argv=None) -> int:
    args = _parser().parse_args(argv)
    settings = AppSettings.from_env()
    setup_logging(settings)

    with bind_trace_id(None):
        graph = open_service_graph(settings)
        try:
            if args.command == "export-utilization":
                path = generate_utilization_workbook(graph.analytics_service, args.output)
                print(path)
        except DomainError as exc:
            print(f"error [{exc.code}]: {exc}", file=sys.stderr)
            return 1
        finally:
            graph.session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
