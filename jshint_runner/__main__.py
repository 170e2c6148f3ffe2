"""Allow running jshint-runner as ``python -m jshint_runner``."""

from .cli import run

if __name__ == "__main__":
    run()
