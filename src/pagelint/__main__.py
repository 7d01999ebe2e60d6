"""Allow running PageLint as ``python -m pagelint``."""
from pagelint.cli import main

if __name__ == "__main__":
    main()
