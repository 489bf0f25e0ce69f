#!/usr/bin/env python3
"""``GroveGrid`` pipeline runner.

Usage:
    python scripts/run_grovegrid.py scripts/user_config.py
    python scripts/run_grovegrid.py --in data --out out --title "Orchard 2025"
    python scripts/run_grovegrid.py scripts/user_config.py --json-out out/data.json

Note: User config in scripts/user_config.py, expert defaults in grovegrid.schemas.param
"""

from grovegrid.cli.run_grid import main


if __name__ == "__main__":
    main()
