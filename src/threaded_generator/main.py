"""Demo entry point showing generators built from imperative producer routines."""

import logging
import sys
import time
from typing import List, Tuple

from .adapters import take, to_dataframe
from .config import GeneratorConfig, get_config
from .generator import Generator, generator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


@generator
def fibonacci(yield_):
    """Unbounded Fibonacci sequence starting at 0."""
    a, b = 0, 1
    while True:
        yield_(a)
        a, b = b, a + b


@generator
def lattice_points(yield_, width: int, height: int):
    """Every (x, y) point of a width x height grid, row by row."""
    for x in range(width):
        for y in range(height):
            yield_((x, y))


def in_rectangle(point: Tuple[int, int], x: int, y: int, width: int, height: int) -> bool:
    px, py = point
    return x <= px < x + width and y <= py < y + height


def counter(yield_):
    n = 0
    while True:
        yield_(n)
        n += 1


def print_summary(results: dict, elapsed: float):
    """Print summary statistics.

    Args:
        results: Demo name to result mapping
        elapsed: Total time taken
    """
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)
    for name, value in results.items():
        print(f"  {name}: {value}")
    print(f"\n  Total time: {elapsed:.3f} seconds")
    print("=" * 80)


def run_demos(config: GeneratorConfig) -> dict:
    """Run every demo and return their results."""
    results = {}

    with fibonacci().cursor() as cursor:
        fibs: List[int] = take(cursor, config.demo_items)
    results[f"Sum of first {config.demo_items} Fibonacci numbers"] = sum(fibs)
    logger.info(f"Fibonacci: {fibs[:10]} ...")

    with lattice_points(10, 10).cursor() as cursor:
        frame = to_dataframe(cursor, columns=["x", "y"])
    inside = [p for p in zip(frame["x"], frame["y"]) if in_rectangle(p, 2, 3, 2, 4)]
    results["Lattice points inside (2, 3, 2, 4)"] = len(inside)
    logger.info(f"Lattice points inside rectangle: {inside}")

    counting = Generator(counter, config)
    try:
        first = sum(counting.get() for _ in range(5))
        counting.reset()
        second = sum(counting.get() for _ in range(10))
    finally:
        counting.close()
    results["Counter sums (5 items, then 10 after reset)"] = (first, second)

    return results


def main():
    """Main execution function."""
    try:
        config = get_config()
        setup_logging(config.verbose)

        logger.info("Starting threaded generator demos")
        logger.info("=" * 80)

        start_time = time.time()
        results = run_demos(config)
        print_summary(results, time.time() - start_time)

        logger.info("Execution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
