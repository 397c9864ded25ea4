"""Allow ``python -m cidrcalc``."""

from cidrcalc.address.cli import main

if __name__ == "__main__":
    main()
