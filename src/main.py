# src/main.py — v1
"""CLI entry point: detect, betweenness commands.

Usage:
    gncommunities detect -i <edges.tsv> [-d <delimiter>] [-o <prefix>] [-a gn|gn-incremental|bsa]
    gncommunities betweenness -i <edges.tsv> [-a gn|bsa] [--top N]
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from gncommunities.version import __version__

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_PARAMETER = 2


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_FAILURE

    from pydantic import ValidationError

    from gncommunities.config.settings import ConfigurationError
    from gncommunities.core.errors import InvalidParameterError

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except (InvalidParameterError, ConfigurationError, ValidationError) as exc:
        logger.error("Invalid parameter: %s", exc)
        return EXIT_INVALID_PARAMETER
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return EXIT_FAILURE


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="gncommunities",
        description=f"gncommunities v{__version__} - Girvan-Newman community detection",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- detect ---
    p_detect = subparsers.add_parser(
        "detect", help="Detect communities and write the best partition",
    )
    _add_input_arguments(p_detect)
    p_detect.add_argument(
        "-o", "--output", dest="prefix", default=None,
        help="Output prefix for <prefix>_partition.txt / <prefix>_metrics.txt "
             "(default: out)",
    )
    p_detect.add_argument(
        "-a", "--algorithm", choices=["gn", "gn-incremental", "bsa"], default=None,
        help="gn (exact), gn-incremental (exact, restricted recomputation) "
             "or bsa (sampled betweenness) (default: gn)",
    )
    p_detect.add_argument(
        "--max-iterations", type=int, default=None,
        help="Stop after this many edge-removal rounds",
    )
    _add_sampling_arguments(p_detect)
    p_detect.set_defaults(func=_cmd_detect)

    # --- betweenness ---
    p_between = subparsers.add_parser(
        "betweenness", help="Print edge betweenness scores, highest first",
    )
    _add_input_arguments(p_between)
    p_between.add_argument(
        "-a", "--algorithm", choices=["gn", "bsa"], default="gn",
        help="gn (exact) or bsa (sampled) (default: gn)",
    )
    p_between.add_argument(
        "--top", type=int, default=None,
        help="Only print the N highest-scoring edges",
    )
    _add_sampling_arguments(p_between)
    p_between.set_defaults(func=_cmd_betweenness)

    return parser


def _add_input_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-i", "--input", type=Path, required=True,
        help="Edge list file (two columns per line)",
    )
    p.add_argument(
        "-d", "--delimiter", default=None,
        help="Column delimiter regex (default: tab)",
    )


def _add_sampling_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument("--epsilon", type=float, default=None, help="Sampling accuracy")
    p.add_argument("--delta", type=float, default=None, help="Sampling confidence")
    p.add_argument(
        "--vertex-diameter", type=int, default=None,
        help="Known vertex diameter (estimated if omitted)",
    )


def _load_settings(args: argparse.Namespace):
    """Settings from .env, overridden by any CLI flag that was given."""
    from gncommunities.config.settings import load_settings

    overrides = {
        "algorithm": getattr(args, "algorithm", None),
        "input_delimiter": args.delimiter,
        "output_prefix": getattr(args, "prefix", None),
        "max_iterations": getattr(args, "max_iterations", None),
        "random_seed": args.seed,
        "sampling_epsilon": args.epsilon,
        "sampling_delta": args.delta,
        "sampling_vertex_diameter": args.vertex_diameter,
    }
    return load_settings(**{k: v for k, v in overrides.items() if v is not None})


def _load_graph(path: Path, delimiter: str):
    from gncommunities.storage.edge_list import load_edge_list

    if not path.exists():
        logger.error("File not found: %s", path)
        return None
    return load_edge_list(path, delimiter)


def _cmd_detect(args: argparse.Namespace) -> int:
    """Run community detection and write partition + metrics files."""
    from gncommunities.api.facade import detect_communities
    from gncommunities.storage.partition_io import write_results

    settings = _load_settings(args)
    graph = _load_graph(args.input, settings.input_delimiter)
    if graph is None:
        return EXIT_FAILURE

    result = detect_communities(graph, settings)
    partition_file, metrics_file = write_results(
        settings.output_prefix, result.best_partition, result.best_modularity,
    )

    print(f"Algorithm:    {result.algorithm}")
    print(f"Vertices:     {result.vertex_count}")
    print(f"Edges:        {result.edge_count}")
    print(f"Rounds:       {result.iterations}")
    print(f"Best round:   {result.best_index + 1}")
    print(f"Communities:  {result.community_count}")
    print(f"Modularity:   {result.best_modularity:.6f}")
    print(f"Partition:    {partition_file}")
    print(f"Metrics:      {metrics_file}")
    return EXIT_OK


def _cmd_betweenness(args: argparse.Namespace) -> int:
    """Print one ``u<TAB>v<TAB>score`` line per edge."""
    from gncommunities.api.facade import run_sampling
    from gncommunities.betweenness.brandes import edge_betweenness

    settings = _load_settings(args)
    graph = _load_graph(args.input, settings.input_delimiter)
    if graph is None:
        return EXIT_FAILURE

    if args.algorithm == "bsa":
        scores = run_sampling(
            graph, settings.sampling_params(), random.Random(settings.random_seed),
        )
    else:
        scores = edge_betweenness(graph)

    ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    if args.top is not None:
        ranked = ranked[: args.top]
    for edge, score in ranked:
        print(f"{edge.u.name}\t{edge.v.name}\t{score:.6f}")
    return EXIT_OK


def _setup_logging(verbose: bool) -> None:
    """Configure logging from settings, with -v forcing DEBUG."""
    from gncommunities.config.settings import ConfigurationError, Settings
    from gncommunities.logging.logger import setup_logging

    try:
        settings = Settings()
    except (ConfigurationError, ValueError):
        # Reported again, with context, when the command loads its settings.
        settings = None

    if settings is None:
        setup_logging(level="DEBUG" if verbose else "INFO")
        return

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
