"""
Tests for the grid-bound Pathfinder
"""

from gridpath.routing import Pathfinder, Position, Direction, Connectivity
from gridpath.routing.path_optimizer import corner_points, smooth_path


class TestPathfinder:
    """Test suite for Pathfinder"""

    def test_matches_module_functions(self, gap_grid):
        pathfinder = Pathfinder(gap_grid)
        start, end = Position(0, 0), Position(4, 0)

        assert pathfinder.corner_points(start, end) == corner_points(gap_grid, start, end)
        assert pathfinder.smooth_path(start, end) == smooth_path(gap_grid, start, end)

    def test_connectivity_is_bound_at_construction(self, open_grid):
        pathfinder = Pathfinder(open_grid, 4)
        assert pathfinder.connectivity == Connectivity.FOUR

        path = pathfinder.find_path((0, 0), (3, 3))
        assert len(path) == 6
        assert not any(d.is_diagonal for d in path)

    def test_last_search_exposes_scores(self, open_grid):
        pathfinder = Pathfinder(open_grid)
        assert pathfinder.last_search is None

        path = pathfinder.find_path((0, 0), (4, 0))
        assert path.directions == [Direction.RIGHT] * 4

        state = pathfinder.last_search
        assert state.start == Position(0, 0)
        assert state.end == Position(4, 0)
        assert state.scores[Position(4, 0)].g == 4.0
        assert Position(4, 0) in state.closed

    def test_each_search_gets_fresh_state(self, open_grid):
        pathfinder = Pathfinder(open_grid)
        pathfinder.find_path((0, 0), (4, 4))
        first = pathfinder.last_search

        pathfinder.find_path((4, 4), (0, 0))
        second = pathfinder.last_search

        assert second is not first
        assert second.scores[Position(4, 4)].g == 0.0
        assert first.scores[Position(0, 0)].g == 0.0

    def test_reset_forgets_last_search(self, open_grid):
        pathfinder = Pathfinder(open_grid)
        pathfinder.smooth_path((0, 0), (2, 3))
        assert pathfinder.last_search is not None

        pathfinder.reset()
        assert pathfinder.last_search is None

    def test_no_path_keeps_state(self, enclosed_grid):
        pathfinder = Pathfinder(enclosed_grid)
        assert pathfinder.corner_points((0, 0), (5, 5)) is None
        assert pathfinder.smooth_path((0, 0), (5, 5)) is None
        assert pathfinder.last_search.expanded > 0
