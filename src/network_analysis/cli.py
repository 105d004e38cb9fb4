"""Command line interface.

Usage:
    network-analysis TOPOLOGY path SRC DST
    network-analysis TOPOLOGY medium-connected [--medium copper|fiber]
    network-analysis TOPOLOGY spanning-forest
    network-analysis TOPOLOGY robust
    network-analysis TOPOLOGY summary
    network-analysis TOPOLOGY            # interactive menu

Exit codes: 0 on success, 1 if the topology cannot be loaded or a query
names an unknown vertex, 2 on usage errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from network_analysis.algorithms.robustness import RobustnessAnalysis
from network_analysis.algorithms.shortest_path import ShortestPath
from network_analysis.algorithms.spanning_forest import SpanningForest
from network_analysis.config import ReportConfig
from network_analysis.errors import InvalidVertexError, TopologyFormatError
from network_analysis.serialization import (
    robustness_to_dict,
    shortest_path_to_dict,
    spanning_forest_to_dict,
    topology_to_dict,
)
from network_analysis.topology.graph import Topology
from network_analysis.topology.loader import load_topology
from network_analysis.types import Medium

logger = logging.getLogger(__name__)

MENU = (
    "Enter 0 to exit.\n"
    "Enter 1 to find the lowest latency path between two vertices.\n"
    "Enter 2 to find out whether or not the network is copper-only connected.\n"
    "Enter 3 to find the lowest average latency spanning tree.\n"
    "Enter 4 to find out if the network remains connected if any two vertices fail."
)


# ── formatting ────────────────────────────────────────────────────────


def format_bandwidth(bandwidth: float, report: ReportConfig) -> str:
    """Render a bandwidth in gigabits per second."""
    if math.isinf(bandwidth):
        return "unbounded"
    return f"{bandwidth / report.bandwidth_divisor} gigabits per second"


def format_latency(weight: float, report: ReportConfig) -> str:
    """Render a latency weight in seconds."""
    return f"{weight * report.latency_unit_seconds:.4e} seconds"


def format_path(path: ShortestPath, report: ReportConfig) -> str:
    """Render a shortest-path result."""
    if not path.exists:
        return f"No path was found between {path.source} and {path.target}."
    if path.source == path.target:
        return "\n".join(
            [
                f"Path: {path.source} <-> {path.target}",
                f"Bandwidth available: {format_bandwidth(path.bottleneck_bandwidth, report)}",
            ]
        )
    return "\n".join(
        [
            f"Path: {' -> '.join(str(v) for v in path.vertices)}",
            f"Links: {', '.join(str(link) for link in path.links)}",
            f"Latency: {format_latency(path.distance, report)}",
            f"Bandwidth available: {format_bandwidth(path.bottleneck_bandwidth, report)}",
        ]
    )


def format_medium(medium: Medium, connected: bool) -> str:
    """Render a medium-connectivity answer."""
    if connected:
        return f"The network is completely {medium.value}-connected."
    return f"The network is not completely {medium.value}-connected."


def format_forest(forest: SpanningForest, report: ReportConfig) -> str:
    """Render a spanning-forest result."""
    lines = [
        f"Weight of the forest: {format_latency(forest.total_weight, report)}",
        f"Trees: {forest.num_trees}",
        "Links in the forest:",
    ]
    for link in forest.links[: report.max_listed_links]:
        lines.append(f"  - {link} ({link.medium.value}, weight {link.weight:.4f})")
    hidden = len(forest.links) - report.max_listed_links
    if hidden > 0:
        lines.append(f"  ... {hidden} more")
    return "\n".join(lines)


def format_robustness(analysis: RobustnessAnalysis) -> str:
    """Render a robustness result."""
    return analysis.summary()


# ── interactive menu ──────────────────────────────────────────────────


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_interactive(
    topology: Topology,
    stdin: TextIO,
    stdout: TextIO,
    report: ReportConfig | None = None,
) -> int:
    """Serve the numbered query menu until the user exits or input ends.

    Args:
        topology: Topology to query
        stdin: Input stream
        stdout: Output stream
        report: Report formatting configuration

    Returns:
        Process exit code
    """
    report = report or ReportConfig()
    tokens = _tokens(stdin)

    def say(text: str = "") -> None:
        print(text, file=stdout)

    while True:
        say(MENU)
        choice = next(tokens, None)
        if choice is None or choice == "0":
            say("\nYou have chosen to exit.\n")
            return 0

        if choice == "1":
            say("\nYou have chosen to find the lowest latency path between two vertices.\n")
            say(
                "Please enter two vertex numbers between 0 and "
                f"{topology.vertex_count - 1} inclusive: "
            )
            raw = [next(tokens, None), next(tokens, None)]
            if None in raw:
                say("\nYou have chosen to exit.\n")
                return 0
            try:
                source, target = (int(t) for t in raw)  # type: ignore[arg-type]
                path = topology.shortest_path(source, target)
            except ValueError as e:
                say(f"\nInvalid vertices: {e}\n")
                continue
            say()
            say(format_path(path, report))
            say()
        elif choice == "2":
            say("\nYou have chosen to find out whether or not the network is copper-connected.\n")
            say(format_medium(Medium.COPPER, topology.is_copper_connected()))
            say()
        elif choice == "3":
            say("\nYou have chosen to find the lowest average latency spanning tree.\n")
            say(format_forest(topology.minimum_spanning_forest(), report))
            say()
        elif choice == "4":
            say(
                "\nYou have chosen to find out if the network remains connected "
                "if any two vertices fail.\n"
            )
            say(format_robustness(topology.robustness()))
            say()
        else:
            say(
                "\nYou have entered an invalid input. Please enter a number from 1-4 "
                "inclusive, to perform an action, or 0 to exit.\n"
            )


# ── entry point ───────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="network-analysis",
        description="Latency, bandwidth and failure analysis of a copper/fiber network.",
    )
    parser.add_argument("topology", help="Topology file (vertex count, then one link per line)")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log verbosity"
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    sub = parser.add_subparsers(dest="command")

    path = sub.add_parser("path", help="Lowest-latency path between two vertices")
    path.add_argument("source", type=int)
    path.add_argument("target", type=int)

    medium = sub.add_parser("medium-connected", help="Connectivity over one medium only")
    medium.add_argument(
        "--medium",
        type=Medium.parse,
        default=Medium.COPPER,
        help="copper (default) or fiber",
    )

    sub.add_parser("spanning-forest", help="Minimum-latency spanning forest")
    sub.add_parser("robust", help="Whether any two vertex failures disconnect the network")
    sub.add_parser("summary", help="Topology statistics")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    report = ReportConfig()

    try:
        topology = load_topology(args.topology)
    except (OSError, TopologyFormatError) as e:
        print(f"Error uploading file: {e}", file=sys.stderr)
        return 1
    logger.info(f"Loaded {topology!r} from {args.topology}")

    if args.command is None:
        return run_interactive(topology, sys.stdin, sys.stdout, report)

    if args.command == "path":
        try:
            result = topology.shortest_path(args.source, args.target)
        except InvalidVertexError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        output = (
            json.dumps(shortest_path_to_dict(result), indent=2)
            if args.json
            else format_path(result, report)
        )
    elif args.command == "medium-connected":
        connected = topology.is_medium_connected(args.medium)
        output = (
            json.dumps({"medium": args.medium.value, "connected": connected}, indent=2)
            if args.json
            else format_medium(args.medium, connected)
        )
    elif args.command == "spanning-forest":
        forest = topology.minimum_spanning_forest()
        output = (
            json.dumps(spanning_forest_to_dict(forest), indent=2)
            if args.json
            else format_forest(forest, report)
        )
    elif args.command == "robust":
        analysis = topology.robustness()
        output = (
            json.dumps(robustness_to_dict(analysis), indent=2)
            if args.json
            else format_robustness(analysis)
        )
    else:
        output = (
            json.dumps(
                {"statistics": topology.get_statistics(), "topology": topology_to_dict(topology)},
                indent=2,
            )
            if args.json
            else topology.summary(report)
        )

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
