"""Main entry point for ``python -m dockstrap``."""

from dockstrap.cli.main import main


if __name__ == "__main__":
    main()
