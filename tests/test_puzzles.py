"""Tests for the puzzle solvers on the worked examples."""

import numpy as np
import pytest

from aoc_solver.puzzles import PUZZLES, available_days, get_puzzle
from aoc_solver.puzzles import day12, day16, day24

from conftest import EXPECTED


class TestRegistry:
    """Test the solver registry."""

    def test_available_days(self):
        assert available_days() == [12, 16, 24]

    def test_get_puzzle(self):
        assert get_puzzle(16) is day16
        assert all(PUZZLES[day].DAY == day for day in PUZZLES)

    def test_unknown_day(self):
        with pytest.raises(ValueError, match="available days: 12, 16, 24"):
            get_puzzle(3)


@pytest.mark.parametrize("day", [12, 16, 24])
def test_examples(day, example_lines):
    assert get_puzzle(day).solve(example_lines(day)) == EXPECTED[day]


class TestDay12:
    """Test Hill Climbing Algorithm."""

    def test_parse_heightmap(self, example_lines):
        heightmap = day12.parse_heightmap(example_lines(12))

        assert heightmap.heights.shape == (5, 8)
        assert heightmap.start == (0, 0)
        assert heightmap.summit == (2, 5)
        assert heightmap.heights[heightmap.start] == day12.LOWEST
        assert heightmap.heights[heightmap.summit] == day12.HIGHEST

    def test_descent_respects_climbing_rule(self, example_lines):
        heightmap = day12.parse_heightmap(example_lines(12))
        problem = day12.DescentProblem(heightmap, lambda cell: False)
        heights = heightmap.heights

        for neighbor in problem.neighbors(heightmap.summit):
            assert heights[heightmap.summit] - heights[neighbor] <= 1

    def test_unreachable_start(self):
        # 'S' is walled off by squares too low to descend to from 'z'
        lines = ["Saz", "aaz", "zzE"]
        heightmap = day12.parse_heightmap(lines)

        assert day12.part1(heightmap) is None
        assert day12.part2(heightmap) is None

    @pytest.mark.parametrize("lines", [
        [],
        ["Sab", "cE"],
        ["abc", "deE"],
        ["SaE", "aSa"],
        ["Sa1", "abE"],
    ])
    def test_invalid_heightmap(self, lines):
        with pytest.raises(ValueError):
            day12.parse_heightmap(lines)


class TestDay16:
    """Test Proboscidea Volcanium."""

    def test_parse_valve(self):
        valve = day16.parse_valve("Valve HH has flow rate=22; tunnel leads to valve GG")

        assert valve.name == "HH"
        assert valve.flow_rate == 22
        assert valve.leads_to == ["GG"]

    def test_parse_valve_with_several_tunnels(self):
        valve = day16.parse_valve("Valve AA has flow rate=0; tunnels lead to valves DD, II, BB")
        assert valve.leads_to == ["DD", "II", "BB"]

    def test_invalid_line(self):
        with pytest.raises(ValueError):
            day16.parse_valve("Valve AA is broken")

    def test_missing_entry_valve(self):
        with pytest.raises(ValueError, match="AA"):
            day16.parse_valves(["Valve BB has flow rate=1; tunnel leads to valve BB"])

    def test_unknown_tunnel_target(self):
        with pytest.raises(ValueError, match="ZZ"):
            day16.parse_valves(["Valve AA has flow rate=0; tunnel leads to valve ZZ"])

    def test_distance_table(self, example_lines):
        valves = day16.parse_valves(example_lines(16))
        table = day16.distance_table(valves, ["AA", "BB", "HH", "JJ"])

        assert table["AA"]["BB"] == 1
        assert table["AA"]["HH"] == 5
        assert table["AA"]["JJ"] == 2
        assert table["HH"]["JJ"] == 7
        assert table["JJ"]["HH"] == 7

    def test_distance_table_skips_unreachable(self):
        valves = day16.parse_valves([
            "Valve AA has flow rate=0; tunnel leads to valve BB",
            "Valve BB has flow rate=5; tunnel leads to valve AA",
            "Valve CC has flow rate=7; tunnel leads to valve CC",
        ])
        table = day16.distance_table(valves, ["AA", "BB", "CC"])

        assert table["AA"] == {"BB": 1}
        assert table["CC"] == {}

    def test_entry_valve_with_flow_is_opened_first(self):
        lines = [
            "Valve AA has flow rate=10; tunnel leads to valve BB",
            "Valve BB has flow rate=1; tunnel leads to valve AA",
        ]

        # Open AA at once (29 minutes), then BB two minutes later (27 minutes)
        assert day16.solve(lines) == (10 * 29 + 27, 10 * 25 + 24)

    def test_useful_valves(self, example_lines):
        valves = day16.parse_valves(example_lines(16))
        assert day16.useful_valves(valves) == ["BB", "CC", "DD", "EE", "HH", "JJ"]


class TestDay24:
    """Test Blizzard Basin."""

    @pytest.fixture
    def valley(self, example_lines):
        return day24.parse_valley(example_lines(24))

    def test_parse_valley(self, valley):
        assert (valley.width, valley.height) == (6, 4)
        assert valley.entry == (0, -1)
        assert valley.exit == (5, 4)
        assert valley.period == 12
        assert len(valley.origins) == 19

    def test_blizzards_wrap_around(self):
        valley = day24.parse_valley(["#.###", "#>..#", "###.#"])

        assert valley.blizzards_at(0).tolist() == [[0, 0]]
        assert valley.blizzards_at(2).tolist() == [[2, 0]]
        assert valley.blizzards_at(3).tolist() == [[0, 0]]

    def test_blizzard_layout_repeats_after_period(self, valley):
        assert np.array_equal(valley.open_cells(0), valley.open_cells(valley.period))
        assert not np.array_equal(valley.open_cells(0), valley.open_cells(1))

    def test_memo_grows_only_as_needed(self, valley):
        problem = day24.BlizzardProblem(valley, day24.State(*valley.entry, 0), valley.exit)

        problem.update(problem.start())
        assert len(problem.open_memo) == 2

        assert day24.part1(problem) == 18
        assert len(problem.open_memo) <= valley.period

        assert day24.part2(problem) == 54
        assert len(problem.open_memo) <= valley.period

    def test_unreachable_exit(self):
        # The only interior cell is occupied by a blizzard forever
        valley = day24.parse_valley(["#.#", "#>#", "#.#"])
        problem = day24.BlizzardProblem(valley, day24.State(*valley.entry, 0), valley.exit)

        with pytest.raises(ValueError, match="No way through"):
            day24.part1(problem)

    def test_unreachable_exit_search_is_bounded(self):
        # Two blizzards take turns filling the only column next to the exit
        valley = day24.parse_valley(["#.###", "#..v#", "#..^#", "###.#"])
        problem = day24.BlizzardProblem(valley, day24.State(*valley.entry, 0), valley.exit)

        with pytest.raises(ValueError):
            day24.part1(problem)

        cells = valley.width * valley.height + 2
        assert len(problem.earliest) <= cells * valley.period
        assert len(problem.open_memo) == valley.period

    def test_invalid_tile(self):
        with pytest.raises(ValueError):
            day24.parse_valley(["#.###", "#>x.#", "###.#"])

    def test_map_too_small(self):
        with pytest.raises(ValueError):
            day24.parse_valley(["#.#", "#.#"])
