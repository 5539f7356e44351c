"""Allow ``python -m aoc_solver``."""

from aoc_solver.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
