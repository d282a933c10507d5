#!/usr/bin/env python3
"""StudyHub entry point.

Run with:
    python main.py
    python -m studyhub
"""

from studyhub.__main__ import main


if __name__ == "__main__":
    main()
