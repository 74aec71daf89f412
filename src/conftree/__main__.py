"""Allow running as ``python -m conftree``."""

from conftree.cli import main

if __name__ == "__main__":
    main()
