"""CLI entrypoint for the crossword layout helper."""

from crossword_helper.cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
