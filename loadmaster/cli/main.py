"""
Command-line interface for the loadmaster weight and balance engine.

Usage:
    python -m loadmaster aircraft [C-17|C-130]
    python -m loadmaster make-example [--aircraft C-17] [--output example_load.json]
    python -m loadmaster analyze --input load.json [--output analysis.json] [--readable]
    python -m loadmaster summary --input analysis.json
    python -m loadmaster reoptimize --input load.json [--output optimized.json]
    python -m loadmaster split --input load.json [--index 3] [--new-id FLT-B]
    python -m loadmaster transfer --source a.json --target b.json --pallets PLT-001 PLT-002
    python -m loadmaster estimate --pallets 40 --weight 250000 [--vehicles 4]
    python -m loadmaster serve [--port 8000]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from loadmaster import __version__
from loadmaster.balance.cob import format_limit, format_weight
from loadmaster.catalog.specs import list_aircraft, spec_for
from loadmaster.checks.analysis import analyze
from loadmaster.cli.readable_output import print_analysis, print_readable_output
from loadmaster.config import Settings
from loadmaster.models.aircraft import AircraftType
from loadmaster.models.flight import FlightLoad
from loadmaster.planner.estimate import quick_estimate
from loadmaster.planner.example import example_load
from loadmaster.planner.flights import split, transfer
from loadmaster.planner.placement import reoptimize

logger = logging.getLogger(__name__)

AIRCRAFT_CHOICES = [t.value for t in AircraftType]


def create_parser(settings: Optional[Settings] = None) -> argparse.ArgumentParser:
    """Create the argument parser."""
    settings = settings or Settings.from_env()
    parser = argparse.ArgumentParser(
        prog="loadmaster",
        description="Loadmaster - weight and balance and pallet placement for C-17 and C-130 "
                    "airlift. WARNING: Planning aid only, NOT a substitute for a certified load plan.",
    )
    parser.add_argument("--version", action="version", version=f"loadmaster {__version__}")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging level (default: {settings.log_level}, env LOADMASTER_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # aircraft command
    aircraft_parser = subparsers.add_parser(
        "aircraft",
        help="List supported aircraft or show one specification",
    )
    aircraft_parser.add_argument(
        "aircraft_type",
        nargs="?",
        choices=AIRCRAFT_CHOICES,
        help="Aircraft to show in full (lists all when omitted)",
    )

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example flight load JSON file",
    )
    example_parser.add_argument(
        "--aircraft", "-a",
        choices=AIRCRAFT_CHOICES,
        default=AircraftType.C17.value,
        help="Aircraft type (default: C-17)",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_load.json"),
        help="Output path for example file (default: example_load.json)",
    )

    # analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Compute weight and CoB and validate a flight load",
    )
    _add_io_arguments(analyze_parser)
    analyze_parser.add_argument(
        "--readable",
        action="store_true",
        help="Print a console summary instead of JSON",
    )

    # summary command
    summary_parser = subparsers.add_parser(
        "summary",
        help="Print a readable summary of a saved analysis JSON file",
    )
    summary_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON output of the analyze command",
    )

    # reoptimize command
    reopt_parser = subparsers.add_parser(
        "reoptimize",
        help="Reassign pallets to stations around the CoB envelope midpoint",
    )
    _add_io_arguments(reopt_parser)

    # split command
    split_parser = subparsers.add_parser(
        "split",
        help="Split a flight's pallets into two flights",
    )
    _add_io_arguments(split_parser)
    split_parser.add_argument(
        "--index",
        type=int,
        default=None,
        help="Pallets before this index stay on the original (default: half, rounded up)",
    )
    split_parser.add_argument(
        "--new-id",
        default=None,
        help="Identifier for the new flight (default: <id>-B)",
    )

    # transfer command
    transfer_parser = subparsers.add_parser(
        "transfer",
        help="Move pallets from one flight to another",
    )
    transfer_parser.add_argument(
        "--source", "-s",
        type=Path,
        required=True,
        help="Path to JSON flight load the pallets leave",
    )
    transfer_parser.add_argument(
        "--target", "-t",
        type=Path,
        required=True,
        help="Path to JSON flight load the pallets join",
    )
    transfer_parser.add_argument(
        "--pallets",
        nargs="+",
        required=True,
        help="Pallet ids to move",
    )
    transfer_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )

    # estimate command
    estimate_parser = subparsers.add_parser(
        "estimate",
        help="Estimate how many aircraft a lift needs",
    )
    estimate_parser.add_argument(
        "--aircraft", "-a",
        choices=AIRCRAFT_CHOICES,
        default=AircraftType.C17.value,
        help="Aircraft type (default: C-17)",
    )
    estimate_parser.add_argument("--pallets", type=int, required=True, help="Number of 463L pallets")
    estimate_parser.add_argument("--weight", type=float, required=True, help="Total lift weight (lb)")
    estimate_parser.add_argument(
        "--vehicles",
        type=int,
        default=0,
        help="Number of vehicles (default: 0)",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port})",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON flight load",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )


def _load_flight(path: Path) -> FlightLoad:
    with open(path) as f:
        data = json.load(f)
    return FlightLoad.model_validate(data)


def _emit(result: BaseModel, output: Optional[Path]) -> None:
    output_json = result.model_dump_json(indent=2)
    if output:
        with open(output, "w") as f:
            f.write(output_json)
        print(f"\nResults saved to {output}", file=sys.stderr)
    else:
        print(output_json)


def cmd_aircraft(args: argparse.Namespace) -> int:
    """List the catalog or print one specification."""
    if args.aircraft_type:
        print(spec_for(args.aircraft_type).model_dump_json(indent=2))
        return 0

    for aircraft_type in list_aircraft():
        spec = spec_for(aircraft_type)
        print(
            f"{spec.type.value:<6} {spec.name:<24} "
            f"payload {format_weight(spec.max_payload)} lb | "
            f"{spec.pallet_positions} positions ({len(spec.ramp_positions)} ramp) | "
            f"CoB {format_limit(spec.cob_min_percent)}-{format_limit(spec.cob_max_percent)}% MAC | "
            f"{spec.seat_capacity} seats"
        )
    return 0


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example flight load JSON file."""
    example = example_load(args.aircraft)

    with open(args.output, "w") as f:
        f.write(example.model_dump_json(indent=2))

    print(f"Created example flight load: {args.output}")
    print("\nAnalyze it with:")
    print(f"  python -m loadmaster analyze --input {args.output} --readable")

    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """Compute weight and CoB and validate a flight load."""
    load = _load_flight(args.input)
    result = analyze(load)

    if args.readable:
        print_analysis(result.model_dump(mode="json"))
    else:
        _emit(result, args.output)

    if not result.validation.valid:
        print(f"\nFlight {load.id} is INVALID:", file=sys.stderr)
        for message in result.validation.messages:
            print(f"  - {message}", file=sys.stderr)
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    """Print a saved analysis as a console summary."""
    print_readable_output(args.input)
    return 0


def cmd_reoptimize(args: argparse.Namespace) -> int:
    """Re-plan pallet stations."""
    load = _load_flight(args.input)
    result = reoptimize(load)
    _emit(result, args.output)
    print(
        f"\nFlight {result.id}: CoB {load.cob_percent:.1f}% -> {result.cob_percent:.1f}% MAC",
        file=sys.stderr,
    )
    return 0


def cmd_split(args: argparse.Namespace) -> int:
    """Split a flight in two."""
    load = _load_flight(args.input)
    result = split(load, split_index=args.index, new_id=args.new_id)
    _emit(result, args.output)
    for flight in (result.first, result.second):
        print(
            f"  {flight.id} ({flight.callsign}): {len(flight.pallets)} pallets, "
            f"{format_weight(flight.total_weight)} lb, CoB {flight.cob_percent:.1f}% MAC",
            file=sys.stderr,
        )
    return 0


def cmd_transfer(args: argparse.Namespace) -> int:
    """Move pallets between two flights."""
    source = _load_flight(args.source)
    target = _load_flight(args.target)
    result = transfer(source, target, args.pallets)
    _emit(result, args.output)
    print(
        f"\nTransferred {format_weight(result.transferred_weight)} lb "
        f"from {source.id} to {target.id}",
        file=sys.stderr,
    )
    return 0


def cmd_estimate(args: argparse.Namespace) -> int:
    """Estimate aircraft needed for a lift."""
    estimate = quick_estimate(args.weight, args.pallets, args.vehicles, args.aircraft)
    limiter = "payload" if estimate.weight_limited else "floor space"
    print(
        f"{estimate.minimum} x {args.aircraft} "
        f"(by pallets {estimate.by_pallets}, by weight {estimate.by_weight}; "
        f"limited by {limiter}, confidence {estimate.confidence})"
    )
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    import uvicorn

    print("\nStarting Loadmaster API", file=sys.stderr)
    print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
    print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
    print("\nPress Ctrl+C to stop\n", file=sys.stderr)

    uvicorn.run(
        "loadmaster.api.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )
    return 0


COMMANDS = {
    "aircraft": cmd_aircraft,
    "make-example": cmd_make_example,
    "analyze": cmd_analyze,
    "summary": cmd_summary,
    "reoptimize": cmd_reoptimize,
    "split": cmd_split,
    "transfer": cmd_transfer,
    "estimate": cmd_estimate,
    "serve": cmd_serve,
}


def cli(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug("Running command %s", args.command)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
