"""Line-based input loading for puzzle solvers."""

import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_INPUT_TEMPLATE = "day{day:02d}.txt"


def read_lines(file_path: Union[str, Path]) -> Iterator[str]:
    """Yield the lines of a text file without their line terminators.

    Args:
        file_path: Path to the input file

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Input file not found: {file_path}")
    return _iter_lines(file_path)


def _iter_lines(file_path: Path) -> Iterator[str]:
    with open(file_path, 'r') as f:
        for line in f:
            yield line.rstrip('\r\n')


def read_and_convert(file_path: Union[str, Path],
                     convert: Callable[[str], Optional[T]]) -> List[T]:
    """Convert every line of a file, keeping results that are not None.

    Args:
        file_path: Path to the input file
        convert: Line parser returning None for lines to skip

    Returns:
        Converted items in file order
    """
    result = []
    for line in read_lines(file_path):
        item = convert(line)
        if item is not None:
            result.append(item)
    return result


class PuzzleInputLoader:
    """Locates and reads the input file of each day."""

    def __init__(self, data_dir: Union[str, Path], input_template: str = DEFAULT_INPUT_TEMPLATE):
        """Initialize the loader.

        Args:
            data_dir: Directory holding the puzzle inputs
            input_template: File name pattern formatted with ``day``
        """
        self.data_dir = Path(data_dir)
        self.input_template = input_template

    def path_for(self, day: int) -> Path:
        """Expected input path for ``day``."""
        return self.data_dir / self.input_template.format(day=day)

    def load_lines(self, day: int) -> List[str]:
        """Read the input of ``day`` with trailing blank lines removed.

        Raises:
            FileNotFoundError: If the input file is missing
        """
        path = self.path_for(day)
        logger.info(f"Loading day {day} input from {path}")
        return strip_trailing_blank(list(read_lines(path)))


def strip_trailing_blank(lines: List[str]) -> List[str]:
    """Drop empty lines at the end of ``lines``."""
    end = len(lines)
    while end > 0 and not lines[end - 1].strip():
        end -= 1
    return lines[:end]
