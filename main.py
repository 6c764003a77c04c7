"""
main.py — Entry point.

Run with:
    python main.py

Requires:
    pip install pygame
"""

from wallsnake.controller import main


if __name__ == "__main__":
    main()
