"""Main entry point for the coffee tin game simulation."""

import argparse
import sys

from factory import CoffeeTinFactory
from game.constants import SAMPLE_TINS
from game.sim_config import parse_simulation_spec, parse_tin_spec


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Coffee tin game simulation",
        epilog="""
A tin of Blue (B) and Green (G) beans is reduced by drawing two beans at a
time: two beans of the same color are replaced by a Blue bean, two different
beans by a Green one. The last bean is Green exactly when the tin started
with an odd number of Green beans.

Simulation Configuration:
  Use --supply with the format:
    MODE[:PARAM=VALUE,PARAM=VALUE,...]

  Modes:
    rejection       - Draw over every slot, retry on empty ones (default)
    live            - Draw over occupied slots only

  Parameters:
    size=N          - Bean supply size, a multiple of 3 (default: 60)
    seed=N          - Random seed

  Examples:
    --tin BBBGG --tin GGG
    --supply live:size=90
    --runs 100 --seed 42 --stats
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--tin",
        action="append",
        metavar="SPEC",
        help=f"Tin contents such as BBBGG; repeat for several tins (default: {' '.join(SAMPLE_TINS)})",
    )
    parser.add_argument(
        "--supply",
        type=str,
        default="rejection",
        metavar="SPEC",
        help="Simulation configuration (default: rejection). See --help for format.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible runs (overrides seed= in --supply)",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=1,
        help="Number of times to reduce the tins (default: 1)",
    )
    parser.add_argument(
        "--transcript-file",
        nargs="?",
        const=".",
        default=None,
        metavar="DIR",
        help="Log every reduction step to coffeetin_<seed>.txt in DIR (default: current directory)",
    )
    parser.add_argument(
        "--transcript-screen",
        action="store_true",
        help="Output every reduction step to screen",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the per-tin report",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Track and report statistics over all runs",
    )
    args = parser.parse_args(argv)

    try:
        config = parse_simulation_spec(args.supply)
        tins = [parse_tin_spec(spec) for spec in args.tin] if args.tin else None
    except ValueError as e:
        parser.error(f"Invalid configuration: {e}")

    if args.runs < 1:
        parser.error("--runs must be at least 1")

    factory = CoffeeTinFactory()
    controller = factory.create_controller(
        config=config,
        tins=tins,
        seed=args.seed,
        runs=args.runs,
        log_to_file=args.transcript_file,
        log_to_screen=args.transcript_screen,
        quiet=args.quiet,
        track_statistics=args.stats,
    )
    exit_code = controller.run()

    if args.stats:
        controller.print_statistics()

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
