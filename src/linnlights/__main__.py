"""Allow `python -m linnlights`."""

from linnlights.cli import main

if __name__ == "__main__":
    main()
