"""
Edit Search - Entry Point

Runs search strategies against the dynamic-programming oracle and prints
comparison, ranking and benchmark reports.

Example:
    python main.py --pair kitten sitting
    python main.py --suite classic --strategies bidirectional heuristic
    python main.py --rank algorithm algorythm logarithm algorithms
    python main.py --benchmark --seed 7
    python main.py --list-strategies
"""

import sys
import logging
import argparse
from typing import Any, Dict, List, Optional, Sequence

from editsearch.datagen import CorpusGenerator, classic_cases, spelling_cases
from editsearch.harness import compare_pair, random_cases, rank_candidates, run_suite
from editsearch.reference import available_engines, create_engine, heuristic_engines
from editsearch.report import (
    format_benchmarks,
    format_comparison,
    format_ranking,
    format_strategies,
    format_suite,
)
from editsearch.search import (
    create_strategy,
    get_strategy_info,
    get_strategy_names,
    get_strategy_parameters,
    SearchContext,
)
from editsearch.settings import load_settings, save_settings
from editsearch.timing import BenchmarkResult, current_rss_mb, run_benchmark

logger = logging.getLogger(__name__)

LOG_FILE = "edit_search.log"


def setup_logging(debug: bool) -> None:
    """Console and file output; DEBUG level when requested."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler(LOG_FILE, mode='w', encoding='utf-8')  # File output
        ]
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Edit Search - Edit distance as graph search, checked against DP"
    )
    parser.add_argument(
        "--pair", nargs=2, metavar=("SOURCE", "TARGET"),
        help="Compare all strategies on one pair"
    )
    parser.add_argument(
        "--suite", choices=["classic", "spelling", "random"],
        help="Run a curated or random suite"
    )
    parser.add_argument(
        "--strategies", nargs="+", metavar="NAME",
        help=f"Strategies to run (available: {', '.join(get_strategy_names())})"
    )
    parser.add_argument("--max-depth", type=int, help="Depth bound for the bounded strategy")
    parser.add_argument("--max-nodes", type=int, help="Node cap per strategy run")
    parser.add_argument("--timeout", type=float, help="Seconds allowed per strategy run")
    parser.add_argument("--seed", type=int, help="Seed for random suites and benchmarks")
    parser.add_argument(
        "--rank", nargs="+", metavar="WORD",
        help="Rank candidates: TARGET CANDIDATE [CANDIDATE ...]"
    )
    parser.add_argument("--benchmark", action="store_true", help="Run timing benchmarks")
    parser.add_argument(
        "--list-strategies", action="store_true",
        help="Show each strategy's ordering, admission rule and options"
    )
    parser.add_argument("--config", help="Settings file (default: config.json)")
    parser.add_argument(
        "--save-config", action="store_true",
        help="Write the effective settings back to the settings file"
    )
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def effective_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Saved settings with command line overrides applied."""
    settings = load_settings(args.config)
    overrides = {
        "strategy_names": args.strategies,
        "max_depth": args.max_depth,
        "max_nodes": args.max_nodes,
        "timeout_sec": args.timeout,
        "seed": args.seed,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return settings


def run_benchmarks(settings: Dict[str, Any]) -> List[BenchmarkResult]:
    """Time every engine on random pairs and the strategies on near-miss pairs."""
    generator = CorpusGenerator(seed=settings["seed"])
    results = []

    for source, target in generator.performance_pairs(sizes=(10, 50, 200), per_size=1):
        for name in available_engines():
            engine = create_engine(name)
            results.append(run_benchmark(
                f"{name} len={len(source)}",
                lambda e=engine, s=source, t=target: e.compute(s, t),
                iterations=5,
            ))

    source, target = generator.similar_pair("kitten", similarity=0.7)
    for name in settings["strategy_names"]:
        kwargs = {"max_depth": settings["max_depth"]} if "max_depth" in get_strategy_parameters(name) else {}
        strategy = create_strategy(name, **kwargs)
        results.append(run_benchmark(
            f"{name} {source}->{target}",
            lambda st=strategy: st.search(SearchContext(
                start=source,
                target=target,
                base_alphabet=settings["alphabet"],
                max_nodes=settings["max_nodes"],
                timeout_sec=settings["timeout_sec"],
            )),
            iterations=3,
        ))

    logger.info(f"Benchmarks done, process RSS {current_rss_mb():.1f} MB")
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the requested reports.

    Returns:
        Exit code: 0 when every strategy agreed with the oracle, 1 otherwise,
        2 for invalid arguments
    """
    args = parse_args(argv)
    setup_logging(args.debug)
    settings = effective_settings(args)
    # Saved debug_enabled re-levels after load; --debug is never persisted
    if settings.get("debug_enabled", False) and not args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    unknown = [n for n in settings["strategy_names"] if n not in get_strategy_names()]
    if unknown:
        logger.error(f"Unknown strategies: {', '.join(unknown)}")
        return 2

    if args.save_config:
        save_settings(settings, args.config)

    options = {
        "max_depth": settings["max_depth"],
        "max_nodes": settings["max_nodes"],
        "timeout_sec": settings["timeout_sec"],
        "alphabet": settings["alphabet"],
    }
    strategies = settings["strategy_names"]
    exit_code = 0
    ran_something = False

    if args.pair:
        ran_something = True
        comparison = compare_pair(args.pair[0], args.pair[1], strategies, heuristic_engines(), **options)
        print(format_comparison(comparison))
        if not comparison.all_agree:
            exit_code = 1

    if args.suite:
        ran_something = True
        if args.suite == "classic":
            cases = classic_cases()
        elif args.suite == "spelling":
            cases = spelling_cases()
        else:
            cases = random_cases(CorpusGenerator(seed=settings["seed"]))
        suite = run_suite(cases, strategies, heuristic_engines(), name=args.suite, **options)
        print(format_suite(suite))
        if not suite.all_agree:
            exit_code = 1

    if args.rank:
        ran_something = True
        target, candidates = args.rank[0], args.rank[1:]
        if not candidates:
            candidates = CorpusGenerator(seed=settings["seed"]).spelling_candidates(target)
        print(format_ranking(target, rank_candidates(target, candidates)))

    if args.benchmark:
        ran_something = True
        print(format_benchmarks(run_benchmarks(settings)))

    if args.list_strategies:
        ran_something = True
        print(format_strategies(get_strategy_info()))

    if not ran_something:
        comparison = compare_pair("kitten", "sitting", strategies, heuristic_engines(), **options)
        print(format_comparison(comparison))
        if not comparison.all_agree:
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
