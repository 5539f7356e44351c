"""Input loading for puzzle solvers."""
