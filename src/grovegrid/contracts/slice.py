"""Ingest stage contract."""

from grovegrid.contracts.base import require
from grovegrid.ingest.record_parser import EXTRAS_START
from grovegrid.ingest.tokenizer import MIN_HEADER_COLUMNS
from grovegrid.model import Slice


def assert_slice(sl: Slice) -> None:
    """Enforce ingest stage contract on one Slice.

    Raises
    ------
    ContractViolation
        If the header is too short or extras use keys outside the header.
    """
    require(
        len(sl.header) >= MIN_HEADER_COLUMNS,
        f"Slice contract violated: '{sl.name}' header has {len(sl.header)} columns",
    )
    extra_names = {h.strip() for h in sl.header[EXTRAS_START:]}
    for obs in sl.observations:
        require(
            set(obs.extras) <= extra_names,
            f"Slice contract violated: '{sl.name}' has extras outside its header",
        )
