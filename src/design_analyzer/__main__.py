"""Allow ``python -m design_analyzer``."""

from .cli import main

if __name__ == "__main__":
    main()
