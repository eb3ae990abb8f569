"""Command Line Interface for the campus routing engine.

This module provides a CLI for querying routes between campus locations. Results
are printed as JSON so they can be piped into other tools.

The CLI supports the following commands:
    - route: Find the optimal route, ranked alternatives and algorithm timings
    - locations: List every known location

By default the built-in campus dataset is used. A different graph can be loaded
from a pair of CSV files with --nodes and --edges.

Example Usage:
    python -m wayfinder route "Main Entrance" "Balme Library"
    python -m wayfinder route 0 7 --by-id --time morning-rush --via dining
    python -m wayfinder locations --nodes data/nodes.csv --edges data/edges.csv
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from wayfinder.core.config import RoutingConfig
from wayfinder.core.engine import RoutingEngine
from wayfinder.core.enums import TimeOfDay
from wayfinder.core.exceptions import (
    ConfigurationError,
    LoaderError,
    ResourceNotFoundError,
    ValidationError,
)
from wayfinder.core.graph import LocationGraph
from wayfinder.core.graph_paths.models import Route
from wayfinder.data.campus import build_campus_graph
from wayfinder.infrastructure.loader import load_graph

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def load_source_graph(args: argparse.Namespace) -> LocationGraph:
    """Return the graph selected on the command line.

    Raises:
        LoaderError: If the CSV files cannot be read.
    """
    if args.nodes is None:
        return build_campus_graph()

    graph, report = load_graph(args.nodes, args.edges)
    for row in report.skipped:
        print(f"warning: {row.source}:{row.line_number}: {row.reason}", file=sys.stderr)
    return graph


def route_to_dict(engine: RoutingEngine, route: Route) -> Dict[str, Any]:
    """Serialize a route together with its traffic summary and directions."""
    data = route.to_dict()
    data["average_traffic"] = route.average_traffic(engine.graph).label
    data["directions"] = [step.to_dict() for step in engine.directions(route)]
    return data


def run_route(engine: RoutingEngine, args: argparse.Namespace) -> Dict[str, Any]:
    """Execute the route command and build its JSON payload.

    Raises:
        NodeNotFoundError: If a location is unknown.
        ValidationError: If --time or --via is not a recognised label.
    """
    if args.time is not None:
        engine.update_traffic_conditions(TimeOfDay.parse(args.time))

    if args.by_id:
        try:
            source_id, dest_id = int(args.source), int(args.dest)
        except ValueError:
            raise ValidationError(f"--by-id expects integer ids, got {args.source!r} {args.dest!r}")
        result = engine.find_routes(source_id, dest_id, args.via)
    else:
        result = engine.find_routes_by_name(args.source, args.dest, args.via)

    payload = result.to_dict()
    payload["optimal"] = route_to_dict(engine, result.optimal)
    payload["alternatives"] = [route_to_dict(engine, route) for route in result.alternatives]
    payload["all_pairs_build_time_us"] = engine.all_pairs_build_time_us
    return payload


def list_locations(graph: LocationGraph) -> List[Dict[str, Any]]:
    """Plain-data view of all locations, ordered by id."""
    return [
        {
            "id": location.id,
            "name": location.name,
            "latitude": location.latitude,
            "longitude": location.longitude,
            "category": location.landmark_type.label,
        }
        for location in sorted(graph.get_nodes(), key=lambda location: location.id)
    ]


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="wayfinder", description="Campus route finder")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    data = argparse.ArgumentParser(add_help=False)
    data.add_argument("--nodes", help="CSV file of locations")
    data.add_argument("--edges", help="CSV file of walkways")

    # Route command
    route = subparsers.add_parser("route", parents=[data], help="Find routes between two locations")
    route.add_argument("source", help="Starting location name (or id with --by-id)")
    route.add_argument("dest", help="Destination location name (or id with --by-id)")
    route.add_argument("--time", help="Time of day: normal, morning-rush or evening-rush")
    route.add_argument("--via", help="Landmark category to route through, e.g. dining")
    route.add_argument("--by-id", action="store_true", help="Treat SOURCE and DEST as ids")

    # Locations command
    subparsers.add_parser("locations", parents=[data], help="List all locations")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return EXIT_USAGE
    if (args.nodes is None) != (args.edges is None):
        parser.error("--nodes and --edges must be given together")

    try:
        graph = load_source_graph(args)
        if args.command == "locations":
            payload: Any = list_locations(graph)
        else:
            engine = RoutingEngine(graph, RoutingConfig.from_env())
            payload = run_route(engine, args)
    except (ResourceNotFoundError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (LoaderError, ConfigurationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(json.dumps(payload, indent=2))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
