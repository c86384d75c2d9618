"""**********************************************************************************
 * Title: generator.py
 * -------------------------------------------------------------------------------
 * Description:
 * Builds playable levels. A random region layout is produced by the
 * partitioner and kept as soon as the backtracking solver finds a placement
 * for it. After a fixed number of rejected layouts the generator falls back
 * to one region per column, which is solvable by construction, so a caller
 * always receives a level.
 **********************************************************************************"""

import logging
import random
import time

from queenslab.constants import DEFAULT_SIZE, MAX_GENERATION_ATTEMPTS
from queenslab.models import Level, build_grid
from queenslab.partitioner import partition_regions, column_partition
from queenslab.solver import solve_placement, staircase_placement, is_valid_placement


def generate_level(size=DEFAULT_SIZE, rng=None):
    """
    Generates a solvable level with all cells empty.

    :param int size: Board dimension (and region count). Must be positive.
    :param random.Random rng: Optional seeded source for reproducible levels.
    :returns: A Level.
    :raises ValueError: if size is not a positive integer.
    """
    level, _ = generate_puzzle(size, rng)
    return level


def generate_puzzle(size=DEFAULT_SIZE, rng=None, max_attempts=MAX_GENERATION_ATTEMPTS):
    """
    Runs the bounded generate-and-test loop.

    The first layout the solver can complete is accepted as is. Region sizes
    are not re-checked, so a layout whose leftover cells pushed one region
    past `size` cells is still a valid, solvable level.

    :returns: A (level, placement) tuple, where placement maps each row to the
        column of one known solution. The placement is None only for sizes 2
        and 3, where no solution exists for any layout.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ValueError(f"Board size must be a positive integer, got {size!r}.")
    rng = rng or random.Random()
    start_time = time.monotonic()

    for attempt in range(1, max_attempts + 1):
        regions = partition_regions(size, rng)
        placement = solve_placement(regions, size)
        if placement is None:
            logging.debug(f"Attempt #{attempt}: discarding unsolvable layout.")
            continue
        logging.info(
            f"Generated a {size}x{size} level after {attempt} attempt(s) "
            f"in {time.monotonic() - start_time:.3f} s."
        )
        return Level(size, build_grid(regions)), placement

    logging.warning(
        f"No solvable layout found for size {size} after {max_attempts} attempts; "
        f"using the column layout."
    )
    return generate_fallback_level(size), _fallback_placement(size)


def generate_fallback_level(size):
    """One region per column. Solvable for size 1 and every size from 4 up."""
    return Level(size, build_grid(column_partition(size)))


def _fallback_placement(size):
    placement = staircase_placement(size)
    if is_valid_placement(placement, column_partition(size)):
        return placement
    return None
