"""Formal pipeline invariants.

This file documents what each stage MUST produce. This is architecture, not code.
Use this file as a reviewer anchor and system reference.
"""

PIPELINE_INVARIANTS = {
    "ingest": [
        "Header has at least 3 columns (X, Y, Value)",
        "Observations keep file order; blank rows produce none",
        "Empty Value cell gives value == -1; unparseable numbers give 0",
    ],

    "aggregate": [
        "x_max / y_max are maxima over all observations of all slices (0 if none)",
        "value_min_pos / value_max range over value > 0 only (0, 0 if none)",
        "size_min / size_max range over size > 0 only (0, 0 if none)",
        "Slice names sorted; labels come from the first ingested header",
    ],

    "materialize": [
        "Dense grid has exactly x_max * y_max cells, x outer, y inner",
        "Absent coordinates carry -1; duplicate coordinates: last one wins",
        "Point list holds every observation in file order, duplicates included",
    ],

    "write": [
        "Nothing is written unless every slice ingested and materialized",
    ],
}

# Which stages are optional vs required
STAGE_REQUIREMENTS = {
    "ingest": "REQUIRED",
    "aggregate": "REQUIRED",
    "materialize": "REQUIRED",
    "write": "OPTIONAL",  # json dump and document are each configurable
}
