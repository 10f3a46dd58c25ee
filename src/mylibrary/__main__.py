"""Allow running as ``python -m mylibrary``."""

from mylibrary.cli import run

if __name__ == "__main__":
    run()
