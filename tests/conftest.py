"""
Shared pytest fixtures and utilities for testing
"""

import heapq
import math
from collections import deque

import pytest
from hypothesis import strategies as st

from gridpath.routing import Grid, Position, Connectivity
from gridpath.routing.astar import NEIGHBOR_OFFSETS


@pytest.fixture
def open_grid():
    """5x5 grid with every cell walkable"""
    return Grid(5, 5)


@pytest.fixture
def gap_grid():
    """5x5 grid with column x=2 blocked except for (2, 4)"""
    grid = Grid(5, 5)
    for y in range(4):
        grid.set_walkable((2, y), False)
    return grid


@pytest.fixture
def enclosed_grid():
    """7x7 grid where (5, 5) is surrounded by walls"""
    grid = Grid(7, 7)
    for x in range(4, 7):
        for y in range(4, 7):
            if (x, y) != (5, 5):
                grid.set_walkable((x, y), False)
    return grid


@pytest.fixture
def room_grid():
    """
    10x7 grid with a wall that has to be walked around:

        ..........
        ..........
        ..######..
        ..#.......
        ..#.......
        ..#.......
        ..........
    """
    grid = Grid(10, 7)
    for x in range(2, 8):
        grid.set_walkable((x, 2), False)
    for y in range(3, 6):
        grid.set_walkable((2, y), False)
    return grid


# Hypothesis strategies

@st.composite
def grids_with_endpoints(draw, max_size=8, walkable_start=True):
    """Random grid plus walkable end cell and (by default) walkable start cell"""
    width = draw(st.integers(min_value=1, max_value=max_size))
    height = draw(st.integers(min_value=1, max_value=max_size))
    rows = draw(st.lists(
        st.lists(st.booleans(), min_size=width, max_size=width),
        min_size=height, max_size=height
    ))
    grid = Grid.from_rows(rows)

    start = Position(draw(st.integers(0, width - 1)), draw(st.integers(0, height - 1)))
    end = Position(draw(st.integers(0, width - 1)), draw(st.integers(0, height - 1)))
    if walkable_start:
        grid.set_walkable(start, True)
    grid.set_walkable(end, True)
    return grid, start, end


# Helper functions for tests

def reachable(grid, start, connectivity=Connectivity.EIGHT):
    """Cells reachable from start by breadth-first search"""
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for dx, dy in NEIGHBOR_OFFSETS[Connectivity(connectivity)]:
            neighbor = Position(current.x + dx, current.y + dy)
            if neighbor in seen or not grid.in_bounds(neighbor) or not grid.is_walkable(neighbor):
                continue
            seen.add(neighbor)
            queue.append(neighbor)
    return seen


def shortest_cost(grid, start, end, connectivity=Connectivity.EIGHT):
    """Optimal route cost by Dijkstra's algorithm, or None when unreachable"""
    best = {start: 0.0}
    frontier = [(0.0, start)]
    while frontier:
        cost, current = heapq.heappop(frontier)
        if current == end:
            return cost
        if cost > best[current]:
            continue
        for dx, dy in NEIGHBOR_OFFSETS[Connectivity(connectivity)]:
            neighbor = Position(current.x + dx, current.y + dy)
            if not grid.in_bounds(neighbor) or not grid.is_walkable(neighbor):
                continue
            candidate = cost + math.hypot(dx, dy)
            if candidate < best.get(neighbor, math.inf):
                best[neighbor] = candidate
                heapq.heappush(frontier, (candidate, neighbor))
    return None


def path_cost(path):
    """Total Euclidean length of a path's steps"""
    return sum(math.hypot(*direction.value) for direction in path)


def assert_walks_to(grid, path, start, end):
    """Assert that a path stays on walkable cells and ends at end"""
    cells = path.positions(start)
    assert cells[-1] == end, f"Path ends at {cells[-1]}, expected {end}"
    for cell in cells[1:]:
        assert grid.in_bounds(cell), f"{cell} is outside the grid"
        assert grid.is_walkable(cell), f"{cell} is not walkable"


def linear_scan_cells(grid, start, end, connectivity=Connectivity.EIGHT):
    """
    Reference A* over an insertion-ordered open list

    The best open cell is found by scanning the list front to back and only
    replacing the candidate on a strictly lower f, or an equal f with a
    strictly lower h, so the earliest inserted cell wins remaining ties.

    Returns:
        Walked cells from start to end, or None when end is unreachable
    """
    scores = {start: (0.0, 0.0, 0.0, None)}  # g, h, f, predecessor
    open_list = [start]
    closed = set()

    while open_list:
        current = open_list[0]
        for candidate in open_list[1:]:
            _, h, f, _ = scores[candidate]
            _, best_h, best_f, _ = scores[current]
            if f < best_f or (f == best_f and h < best_h):
                current = candidate

        open_list.remove(current)
        closed.add(current)

        if current == end:
            cells = [current]
            while scores[cells[-1]][3] is not None:
                cells.append(scores[cells[-1]][3])
            return cells[::-1]

        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if (dx, dy) == (0, 0):
                    continue
                if connectivity == Connectivity.FOUR and dx != 0 and dy != 0:
                    continue
                neighbor = Position(current.x + dx, current.y + dy)
                if not grid.in_bounds(neighbor) or not grid.is_walkable(neighbor) or neighbor in closed:
                    continue

                g = scores[current][0] + math.hypot(dx, dy)
                if neighbor not in open_list or g < scores[neighbor][0]:
                    h = math.hypot(neighbor.x - end.x, neighbor.y - end.y)
                    scores[neighbor] = (g, h, g + h, current)
                    if neighbor not in open_list:
                        open_list.append(neighbor)

    return None
