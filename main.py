#!/usr/bin/env python3
"""ReadyGo — entry point.

Run with:
    python main.py
    python -m readygo
"""

from readygo.__main__ import main


if __name__ == "__main__":
    main()
