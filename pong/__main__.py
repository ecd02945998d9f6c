from .cli import main

"""Module entry to run the terminal front-end with python -m pong."""

if __name__ == "__main__":
    raise SystemExit(main())
