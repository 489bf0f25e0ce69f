"""GroveGrid User Configuration.

This is the user-facing configuration file. Modify settings here to customize
the pipeline behavior. Defaults live in grovegrid.schemas.param.

Usage:
    python scripts/run_grovegrid.py scripts/user_config.py
    python scripts/run_grovegrid.py scripts/user_config.py --title "Orchard 2025"
"""

CONFIG = {
    # ========================================================================
    # INPUT
    # ========================================================================
    "IN_DIR": "./data",          # One CSV per time slice, e.g. 2025-01.csv
    "FILE_PATTERN": "*.csv",
    "STRICT": False,             # True: fail on unparseable numbers

    # ========================================================================
    # OUTPUT
    # ========================================================================
    "OUT_DIR": "./out",
    "JSON_OUT": None,            # e.g. "./out/data.json"
    "TEMPLATE": None,            # None: packaged default template
    "TITLE": "GroveGrid",

    # ========================================================================
    # ADVANCED (nested overrides)
    # ========================================================================
    "render": {
        "zero_color": "#555555",
        "nodata_color": "#222222",
    },
    "LOG_LEVEL": "INFO",
}
