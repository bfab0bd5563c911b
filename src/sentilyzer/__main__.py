"""Entry point for ``python -m sentilyzer``."""

from sentilyzer.cli import main

if __name__ == "__main__":
    main()
