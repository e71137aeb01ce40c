"""Architecture metrics (Martin's abstractness / instability / distance)."""

from .metrics import (
    ZONE_MAIN_SEQUENCE,
    ZONE_PAIN,
    ZONE_USELESSNESS,
    classify_zone,
    compute_abstractness,
    compute_instability,
    compute_main_seq_distance,
    compute_type_metrics,
)

__all__ = [
    "ZONE_MAIN_SEQUENCE",
    "ZONE_PAIN",
    "ZONE_USELESSNESS",
    "classify_zone",
    "compute_abstractness",
    "compute_instability",
    "compute_main_seq_distance",
    "compute_type_metrics",
]
