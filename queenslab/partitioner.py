# --- File: queenslab/partitioner.py ---
# Splits a size x size grid into `size` color regions of `size` cells each by
# growing every region outward from a random seed cell.

import random
from collections import deque

from queenslab.constants import UNASSIGNED, ORTHOGONAL_OFFSETS


def partition_regions(size, rng=None):
    """
    Grows `size` regions from random seeds with a shared FIFO frontier.

    Each region is capped at `size` cells. Cells that no region reaches before
    the frontier runs dry are handed to an already-assigned orthogonal
    neighbor, or failing that to the smallest region. The result is balanced
    and contiguous in the common case, but neither property is enforced for
    the leftover cells.

    :param int size: The grid dimension and the number of regions.
    :param random.Random rng: Source of randomness. A fresh, unseeded one is
        used when omitted.
    :returns: A size x size list of region ids in [0, size).
    """
    rng = rng or random.Random()
    grid = [[UNASSIGNED] * size for _ in range(size)]
    region_sizes = [0] * size

    all_cells = [(r, c) for r in range(size) for c in range(size)]
    seeds = rng.sample(all_cells, size)
    queue = deque()
    for region, (row, col) in enumerate(seeds):
        grid[row][col] = region
        region_sizes[region] = 1
        queue.append((row, col, region))

    while queue:
        row, col, region = queue.popleft()
        if region_sizes[region] >= size:
            continue

        neighbors = [(row + dr, col + dc) for dr, dc in ORTHOGONAL_OFFSETS]
        rng.shuffle(neighbors)
        for nr, nc in neighbors:
            if region_sizes[region] >= size:
                break
            if 0 <= nr < size and 0 <= nc < size and grid[nr][nc] == UNASSIGNED:
                grid[nr][nc] = region
                region_sizes[region] += 1
                queue.append((nr, nc, region))

    _fill_orphans(grid, region_sizes)
    return grid


def _fill_orphans(grid, region_sizes):
    size = len(grid)
    for r in range(size):
        for c in range(size):
            if grid[r][c] != UNASSIGNED:
                continue
            neighbor_regions = [
                grid[nr][nc]
                for nr, nc in ((r + dr, c + dc) for dr, dc in ORTHOGONAL_OFFSETS)
                if 0 <= nr < size and 0 <= nc < size and grid[nr][nc] != UNASSIGNED
            ]
            if neighbor_regions:
                region = neighbor_regions[0]
            else:
                # index() of the minimum picks the lowest id on ties.
                region = region_sizes.index(min(region_sizes))
            grid[r][c] = region
            region_sizes[region] += 1


def column_partition(size):
    """The fallback layout: every column is its own region."""
    return [list(range(size)) for _ in range(size)]


def region_sizes(region_grid):
    """Counts the cells of each region id, indexed by id."""
    counts = [0] * len(region_grid)
    for row in region_grid:
        for region in row:
            counts[region] += 1
    return counts


def is_contiguous(region_grid):
    """True when every region's cells form one orthogonally connected block."""
    size = len(region_grid)
    seen = set()
    visited_regions = set()
    for r_start in range(size):
        for c_start in range(size):
            if (r_start, c_start) in seen:
                continue
            region = region_grid[r_start][c_start]
            if region in visited_regions:
                return False
            visited_regions.add(region)
            q = deque([(r_start, c_start)])
            seen.add((r_start, c_start))
            while q:
                r, c = q.popleft()
                for dr, dc in ORTHOGONAL_OFFSETS:
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < size and 0 <= nc < size and (nr, nc) not in seen and region_grid[nr][nc] == region:
                        seen.add((nr, nc))
                        q.append((nr, nc))
    return True
