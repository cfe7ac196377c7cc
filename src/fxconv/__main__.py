# src/fxconv/__main__.py
"""Allow running the converter with ``python -m fxconv``."""

from fxconv.app import main

if __name__ == "__main__":
    main()
