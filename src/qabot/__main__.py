"""Run the chat loop via `python -m qabot`."""
from __future__ import annotations

from .chat import main

if __name__ == "__main__":
    main()
