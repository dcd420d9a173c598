"""Entry point for 'python -m wmscore' command."""

from wmscore.cli import main

if __name__ == "__main__":
    main()
