"""Allow running as ``python -m mdlive``."""

from mdlive.cli import main

if __name__ == "__main__":
    main()
