"""Entry point for 'python -m mintpad' command."""

from mintpad.cli import main

if __name__ == "__main__":
    main()
