"""Tests for CLI functionality."""

import json

import numpy as np
import pytest

from aoc_solver.cli.main import create_parser, main_cli
from aoc_solver.cli.commands import parse_day_selection
from aoc_solver.cli.utils import format_duration, save_results, summarize_results

from conftest import EXAMPLES


@pytest.fixture
def day12_input(tmp_path):
    path = tmp_path / "heightmap.txt"
    path.write_text(EXAMPLES[12])
    return path


class TestArgumentParser:
    """Test argument parser creation and parsing."""

    def test_parser_creation(self):
        parser = create_parser()
        assert parser.prog == 'aoc-solver'

    def test_run_command_parsing(self):
        parser = create_parser()
        args = parser.parse_args(['run', '12', '--input', 'in.txt', '--skip-stale'])

        assert args.command == 'run'
        assert args.day == '12'
        assert args.input == 'in.txt'
        assert args.skip_stale is True
        assert args.data_dir is None

    def test_global_options(self):
        parser = create_parser()
        args = parser.parse_args(['-vv', '--output', 'out.json', 'run', 'all'])

        assert args.verbose == 2
        assert args.output == 'out.json'
        assert args.day == 'all'

    def test_config_command_parsing(self):
        parser = create_parser()
        args = parser.parse_args(['config', 'validate'])

        assert args.command == 'config'
        assert args.config_action == 'validate'


class TestDaySelection:
    """Test resolving the day argument."""

    def test_all(self):
        assert parse_day_selection('all') == [12, 16, 24]

    def test_single_day(self):
        assert parse_day_selection('16') == [16]

    @pytest.mark.parametrize("selection", ['3', 'twelve', ''])
    def test_invalid(self, selection):
        with pytest.raises(ValueError):
            parse_day_selection(selection)


class TestRunCommand:
    """Test the run command end to end."""

    def test_single_day_from_input_file(self, day12_input, capsys):
        assert main_cli(['run', '12', '--input', str(day12_input)]) == 0

        out = capsys.readouterr().out
        assert "== Day 12 ==" in out
        assert "Part 1: 31" in out
        assert "Part 2: 29" in out

    def test_skip_stale_gives_same_answers(self, day12_input, capsys):
        assert main_cli(['run', '12', '--input', str(day12_input), '--skip-stale']) == 0

        out = capsys.readouterr().out
        assert "Part 1: 31" in out
        assert "Part 2: 29" in out

    def test_all_days_from_data_dir(self, example_data_dir, capsys):
        assert main_cli(['run', 'all', '--data-dir', str(example_data_dir)]) == 0

        out = capsys.readouterr().out
        assert out.index("== Day 12 ==") < out.index("== Day 16 ==") < out.index("== Day 24 ==")
        assert "Part 1: 1651" in out
        assert "Part 2: 54" in out

    def test_results_written_as_json(self, day12_input, tmp_path):
        output = tmp_path / "results" / "out.json"
        assert main_cli(['--output', str(output), 'run', '12', '--input', str(day12_input)]) == 0

        with open(output) as f:
            saved = json.load(f)
        result, = saved['results']
        assert result['day'] == 12
        assert result['part1'] == 31
        assert result['part2'] == 29
        assert result['computation_time'] >= 0
        assert saved['summary']['days'] == 1
        assert saved['summary']['unsolved_days'] == []

    def test_unknown_day(self):
        assert main_cli(['run', '3']) == 1

    def test_missing_input(self, tmp_path):
        assert main_cli(['run', '12', '--input', str(tmp_path / "missing.txt")]) == 1

    def test_missing_data_dir_input(self, tmp_path):
        assert main_cli(['run', '24', '--data-dir', str(tmp_path)]) == 1

    def test_input_requires_single_day(self, day12_input):
        assert main_cli(['run', 'all', '--input', str(day12_input)]) == 1

    def test_malformed_input(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("not a heightmap\n")
        assert main_cli(['run', '12', '--input', str(path)]) == 1


class TestOtherCommands:
    """Test list and config commands."""

    def test_list(self, capsys):
        assert main_cli(['list']) == 0

        out = capsys.readouterr().out
        assert "12  Hill Climbing Algorithm" in out
        assert "16  Proboscidea Volcanium" in out
        assert "24  Blizzard Basin" in out

    def test_config_show(self, capsys):
        assert main_cli(['config', 'show']) == 0

        out = capsys.readouterr().out
        assert "Current Configuration:" in out
        assert "skip_stale: false" in out

    def test_config_show_with_override(self, capsys):
        assert main_cli(['--config', 'search.astar.skip_stale=true', 'config', 'show']) == 0
        assert "skip_stale: true" in capsys.readouterr().out

    def test_config_validate(self, capsys):
        assert main_cli(['config', 'validate']) == 0
        assert "Configuration is valid" in capsys.readouterr().out

    def test_config_validate_rejects_bad_override(self, capsys):
        assert main_cli(['--config', 'logging.level=LOUD', 'config', 'validate']) == 1
        assert "Configuration validation failed" in capsys.readouterr().out

    def test_config_without_action(self):
        assert main_cli(['config']) == 1

    def test_no_command(self, capsys):
        assert main_cli([]) == 1
        assert "usage" in capsys.readouterr().out


class TestUtils:
    """Test CLI helpers."""

    def test_save_results_converts_numpy(self, tmp_path):
        output = tmp_path / "out.json"
        save_results({'grid': np.zeros((2, 2), dtype=int), 'cell': (1, 2), 7: np.int64(3)}, output)

        with open(output) as f:
            saved = json.load(f)
        assert saved == {'grid': [[0, 0], [0, 0]], 'cell': [1, 2], '7': 3}

    @pytest.mark.parametrize("seconds,expected", [
        (0.0000005, "0.5µs"),
        (0.25, "250.0ms"),
        (2.5, "2.50s"),
        (125, "2m 5.0s"),
    ])
    def test_format_duration(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_summarize_results(self):
        summary = summarize_results([
            {'day': 12, 'part1': 31, 'part2': 29, 'computation_time': 0.5},
            {'day': 24, 'part1': None, 'part2': None, 'computation_time': 1.5},
        ])

        assert summary['days'] == 2
        assert summary['unsolved_days'] == [24]
        assert summary['total_time'] == pytest.approx(2.0)
        assert summary['slowest_day'] == 24

    def test_summarize_no_results(self):
        assert summarize_results([]) == {
            'days': 0, 'unsolved_days': [], 'total_time': 0, 'slowest_day': None
        }
