"""Shared fixtures: the worked examples from each puzzle statement."""

import pytest

from aoc_solver.config import reset_config


DAY12_EXAMPLE = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""

DAY16_EXAMPLE = """\
Valve AA has flow rate=0; tunnels lead to valves DD, II, BB
Valve BB has flow rate=13; tunnels lead to valves CC, AA
Valve CC has flow rate=2; tunnels lead to valves DD, BB
Valve DD has flow rate=20; tunnels lead to valves CC, AA, EE
Valve EE has flow rate=3; tunnels lead to valves FF, DD
Valve FF has flow rate=0; tunnels lead to valves EE, GG
Valve GG has flow rate=0; tunnels lead to valves FF, HH
Valve HH has flow rate=22; tunnel leads to valve GG
Valve II has flow rate=0; tunnels lead to valves AA, JJ
Valve JJ has flow rate=21; tunnel leads to valve II
"""

DAY24_EXAMPLE = """\
#.######
#>>.<^<#
#.<..<<#
#>v.><>#
#<^v^^>#
######.#
"""

EXAMPLES = {
    12: DAY12_EXAMPLE,
    16: DAY16_EXAMPLE,
    24: DAY24_EXAMPLE,
}

EXPECTED = {
    12: (31, 29),
    16: (1651, 1707),
    24: (18, 54),
}


@pytest.fixture
def example_lines():
    """Return the example input of a day as a list of lines."""
    def lines(day):
        return EXAMPLES[day].splitlines()
    return lines


@pytest.fixture
def example_data_dir(tmp_path):
    """Directory holding every example as ``dayNN.txt``."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    for day, text in EXAMPLES.items():
        (data_dir / f"day{day:02d}.txt").write_text(text)
    return data_dir


@pytest.fixture(autouse=True)
def clean_global_config():
    reset_config()
    yield
    reset_config()
