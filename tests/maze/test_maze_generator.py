"""
Tests for maze generation including property-based tests using Hypothesis
"""

import random
from collections import deque

import pytest
from hypothesis import given, settings, strategies as st

from gridpath.core.exceptions import OutOfBoundsError
from gridpath.maze import generate_maze
from gridpath.routing import Grid, Position, find_path, Connectivity


def walkable_cells(layout):
    return {
        Position(x, y)
        for y, row in enumerate(layout)
        for x, walkable in enumerate(row)
        if walkable
    }


def flood_fill(cells, start):
    """Cells reachable from start through 4-connected walkable steps"""
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for dx, dy in [(1, 0), (-1, 0), (0, 1), (0, -1)]:
            neighbor = Position(current.x + dx, current.y + dy)
            if neighbor in cells and neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


def count_edges(cells):
    """Number of 4-adjacent walkable pairs"""
    return sum(
        1 for pos in cells
        for dx, dy in [(1, 0), (0, 1)]
        if Position(pos.x + dx, pos.y + dy) in cells
    )


class TestGenerateMazeBasic:
    """Basic unit tests for generate_maze"""

    def test_shape(self):
        layout = generate_maze(11, 7, (0, 0), (10, 6), seed=1)
        assert len(layout) == 7
        assert all(len(row) == 11 for row in layout)

    def test_endpoints_walkable(self):
        layout = generate_maze(11, 7, (0, 0), (10, 6), seed=3)
        assert layout[0][0]
        assert layout[6][10]

    def test_same_seed_same_maze(self):
        first = generate_maze(21, 15, (0, 0), (20, 14), seed=42)
        second = generate_maze(21, 15, (0, 0), (20, 14), seed=42)
        assert first == second

    def test_injected_rng(self):
        first = generate_maze(21, 15, (0, 0), (20, 14), rng=random.Random(7))
        second = generate_maze(21, 15, (0, 0), (20, 14), rng=random.Random(7))
        assert first == second

    def test_seeds_vary_layouts(self):
        layouts = {
            tuple(tuple(row) for row in generate_maze(21, 15, (0, 0), (20, 14), seed=seed))
            for seed in range(10)
        }
        assert len(layouts) > 1

    def test_empty_dimensions(self):
        assert generate_maze(0, 5, (0, 0), (0, 0)) == []
        assert generate_maze(5, 0, (0, 0), (0, 0)) == []

    def test_single_cell(self):
        assert generate_maze(1, 1, (0, 0), (0, 0)) == [[True]]

    def test_single_column(self):
        layout = generate_maze(1, 5, (0, 0), (0, 4), seed=0)
        assert layout == [[True]] * 5

    def test_out_of_bounds_endpoints_raise(self):
        with pytest.raises(OutOfBoundsError):
            generate_maze(5, 5, (5, 0), (0, 0))
        with pytest.raises(OutOfBoundsError):
            generate_maze(5, 5, (0, 0), (0, -1))

    def test_lattice_cells_are_carved(self):
        """Every cell on the start's stride-2 lattice ends up walkable"""
        layout = generate_maze(9, 9, (0, 0), (8, 8), seed=5)
        for y in range(0, 9, 2):
            for x in range(0, 9, 2):
                assert layout[y][x]

    def test_odd_cells_stay_walls(self):
        """Cells off the lattice on both axes are never carved"""
        layout = generate_maze(9, 9, (0, 0), (8, 8), seed=5)
        for y in range(1, 9, 2):
            for x in range(1, 9, 2):
                assert not layout[y][x]

    def test_off_lattice_end_is_forced_open(self):
        layout = generate_maze(9, 9, (0, 0), (7, 7), seed=2)
        assert layout[7][7]

    def test_maze_is_solvable(self):
        layout = generate_maze(31, 21, (0, 0), (30, 20), seed=11)
        grid = Grid.from_rows(layout)
        path = find_path(grid, (0, 0), (30, 20), Connectivity.FOUR)
        assert path is not None
        assert path.destination((0, 0)) == Position(30, 20)


class TestGenerateMazeProperties:
    """Property-based tests for generate_maze"""

    @given(
        st.integers(min_value=1, max_value=12),
        st.integers(min_value=1, max_value=12),
        st.integers(min_value=0, max_value=10_000),
        st.data()
    )
    @settings(max_examples=100, deadline=None)
    def test_perfect_maze(self, half_width, half_height, seed, data):
        """All walkable cells are connected and form a tree (no loops)"""
        width, height = 2 * half_width + 1, 2 * half_height + 1
        start = Position(2 * data.draw(st.integers(0, half_width)), 2 * data.draw(st.integers(0, half_height)))
        end = Position(2 * data.draw(st.integers(0, half_width)), 2 * data.draw(st.integers(0, half_height)))

        layout = generate_maze(width, height, start, end, seed=seed)
        cells = walkable_cells(layout)

        assert start in cells
        assert end in cells
        assert flood_fill(cells, start) == cells
        assert count_edges(cells) == len(cells) - 1
