"""
Comparison Harness - Cross-validate search strategies against the DP oracle.

Every pair is solved once by the exact "dp" engine. Each selected search
strategy is then checked against that distance, and each heuristic engine
gets an approximation ratio.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .datagen import CorpusGenerator, TestCase
from .reference import batch_distances, compact_distance, create_engine, heuristic_engines
from .search import (
    DEFAULT_ALPHABET,
    ResultSet,
    SearchContext,
    create_strategy,
    get_strategy_names,
    get_strategy_parameters,
    is_single_edit,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyOutcome:
    """
    One strategy's result on one pair.

    Attributes:
        strategy_name: Registered strategy name
        result: The ResultSet it returned
        agrees: True/False against the oracle; None when no verdict is
            possible (cancelled, or the target lies beyond a depth bound)
        paths_valid: Every returned path is a chain of single edits of the
            optimal length
    """
    strategy_name: str
    result: ResultSet
    agrees: Optional[bool]
    paths_valid: bool = True


@dataclass(frozen=True)
class EngineOutcome:
    """A heuristic engine's distance and its ratio to the oracle."""
    engine_name: str
    distance: int
    ratio: float
    reaches_target: bool
    computation_time_ms: float = 0.0


@dataclass
class PairComparison:
    """Everything measured for one (source, target) pair."""
    source: str
    target: str
    oracle_distance: int
    oracle_time_ms: float = 0.0
    strategies: List[StrategyOutcome] = field(default_factory=list)
    engines: List[EngineOutcome] = field(default_factory=list)

    @property
    def disagreements(self) -> List[str]:
        """Names of strategies whose distance or paths contradict the oracle."""
        return [
            outcome.strategy_name for outcome in self.strategies
            if outcome.agrees is False or not outcome.paths_valid
        ]

    @property
    def all_agree(self) -> bool:
        return not self.disagreements

    @property
    def cancelled(self) -> List[str]:
        return [o.strategy_name for o in self.strategies if o.result.was_cancelled]


@dataclass
class SuiteResult:
    """Comparisons for a list of curated or generated cases."""
    name: str
    cases: List[TestCase] = field(default_factory=list)
    comparisons: List[PairComparison] = field(default_factory=list)

    @property
    def all_agree(self) -> bool:
        return all(c.all_agree for c in self.comparisons)

    @property
    def oracle_mismatches(self) -> List[TestCase]:
        """Cases whose recorded expected distance differs from the oracle."""
        return [
            case for case, comparison in zip(self.cases, self.comparisons)
            if case.expected_distance != comparison.oracle_distance
        ]


def approximation_ratio(distance: int, oracle_distance: int) -> float:
    """distance / oracle; 1.0 for two zeros and inf for a nonzero guess of zero."""
    if oracle_distance == 0:
        return 1.0 if distance == 0 else float("inf")
    return distance / oracle_distance


def _paths_valid(result: ResultSet, source: str, target: str) -> bool:
    if result.min_distance is None:
        return True
    for path in result.paths:
        if len(path) != result.min_distance + 1:
            return False
        if path[0] != source or path[-1] != target:
            return False
        if not all(is_single_edit(a, b) for a, b in zip(path, path[1:])):
            return False
    return True


def _run_strategy(
    name: str,
    source: str,
    target: str,
    oracle_distance: int,
    max_depth: int,
    max_nodes: Optional[int],
    timeout_sec: Optional[float],
    alphabet: Optional[Iterable[str]],
) -> StrategyOutcome:
    depth_limited = "max_depth" in get_strategy_parameters(name)
    kwargs = {"max_depth": max_depth} if depth_limited else {}
    strategy = create_strategy(name, **kwargs)
    context = SearchContext(
        start=source,
        target=target,
        base_alphabet=alphabet,
        max_nodes=max_nodes,
        timeout_sec=timeout_sec,
    )
    result = strategy.search(context)

    if result.found:
        agrees: Optional[bool] = result.min_distance == oracle_distance
    elif result.was_cancelled:
        agrees = None
    elif depth_limited and oracle_distance > max_depth:
        agrees = None
    else:
        agrees = False

    outcome = StrategyOutcome(
        strategy_name=name,
        result=result,
        agrees=agrees,
        paths_valid=_paths_valid(result, source, target),
    )
    if outcome.agrees is False or not outcome.paths_valid:
        logger.error(
            f"{name} disagrees on {source!r} -> {target!r}: "
            f"got {result.min_distance}, oracle {oracle_distance}"
        )
    return outcome


def compare_pair(
    source: str,
    target: str,
    strategies: Optional[Sequence[str]] = None,
    engines: Optional[Sequence[str]] = None,
    *,
    max_depth: int = 3,
    max_nodes: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    alphabet: Optional[Iterable[str]] = DEFAULT_ALPHABET,
) -> PairComparison:
    """
    Run the oracle, heuristic engines and search strategies on one pair.

    Args:
        source: Start string
        target: Target string
        strategies: Strategy names (default: every registered strategy)
        engines: Heuristic engine names (default: every non-exact engine)
        max_depth: Depth bound for strategies that take one
        max_nodes: Node cap per strategy run
        timeout_sec: Time limit per strategy run
        alphabet: Reference alphabet (a-z by default; "" for inputs only)

    Returns:
        PairComparison
    """
    strategy_names = list(strategies) if strategies is not None else get_strategy_names()
    engine_names = list(engines) if engines is not None else heuristic_engines()

    oracle = create_engine("dp").compute(source, target)
    comparison = PairComparison(
        source=source,
        target=target,
        oracle_distance=oracle.distance,
        oracle_time_ms=oracle.computation_time_ms,
    )

    for name in engine_names:
        estimate = create_engine(name).compute(source, target)
        comparison.engines.append(EngineOutcome(
            engine_name=name,
            distance=estimate.distance,
            ratio=approximation_ratio(estimate.distance, oracle.distance),
            reaches_target=estimate.final_string == target,
            computation_time_ms=estimate.computation_time_ms,
        ))

    for name in strategy_names:
        comparison.strategies.append(_run_strategy(
            name, source, target, oracle.distance,
            max_depth, max_nodes, timeout_sec, alphabet,
        ))

    logger.info(
        f"Compared {source!r} -> {target!r}: oracle {oracle.distance}, "
        f"{len(comparison.disagreements)} disagreement(s)"
    )
    return comparison


def run_suite(
    cases: Sequence[TestCase],
    strategies: Optional[Sequence[str]] = None,
    engines: Optional[Sequence[str]] = None,
    *,
    name: str = "suite",
    max_depth: int = 3,
    max_nodes: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    alphabet: Optional[Iterable[str]] = DEFAULT_ALPHABET,
) -> SuiteResult:
    """compare_pair() over every case."""
    suite = SuiteResult(name=name, cases=list(cases))
    for case in suite.cases:
        logger.debug(f"[{name}] {case.description}: {case.source!r} -> {case.target!r}")
        suite.comparisons.append(compare_pair(
            case.source, case.target, strategies, engines,
            max_depth=max_depth,
            max_nodes=max_nodes,
            timeout_sec=timeout_sec,
            alphabet=alphabet,
        ))

    for case in suite.oracle_mismatches:
        logger.warning(
            f"[{name}] recorded distance {case.expected_distance} for "
            f"{case.source!r} -> {case.target!r} differs from the oracle"
        )
    return suite


def random_cases(generator: CorpusGenerator, count: int = 8,
                 min_length: int = 1, max_length: int = 4) -> List[TestCase]:
    """Random short pairs labelled with their exact distance."""
    cases = []
    for index, (source, target) in enumerate(generator.batch(count, min_length, max_length)):
        cases.append(TestCase(
            source, target, compact_distance(source, target), f"Random pair #{index + 1}"
        ))
    return cases


def rank_candidates(target: str, candidates: Sequence[str],
                    limit: Optional[int] = None) -> List[Tuple[str, int]]:
    """
    Order candidates by edit distance to target, closest first.

    Ties keep their input order.
    """
    ranking = batch_distances(target, candidates)
    if limit is not None:
        ranking = ranking[:limit]
    logger.debug(f"Ranked {len(candidates)} candidates against {target!r}")
    return ranking
