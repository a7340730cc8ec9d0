"""Allow `python -m noughts` to start the console game."""

from .cli import main

main()
