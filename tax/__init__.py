from .gst_breakdown import (
    GSTBreakdown,
    GSTConfig,
    GSTInputError,
    LineItem,
    aggregate_breakdown,
    breakdown_for,
    compute_breakdown,
    determine_inter_state,
    inclusive_breakdown,
    line_item_breakdown,
    weighted_gst_rate,
)
from .states import INDIAN_STATES, state_from_gstin, state_key, state_name, validate_gstin, validate_pan

__all__ = [
    "GSTBreakdown",
    "GSTConfig",
    "GSTInputError",
    "INDIAN_STATES",
    "LineItem",
    "aggregate_breakdown",
    "breakdown_for",
    "compute_breakdown",
    "determine_inter_state",
    "inclusive_breakdown",
    "line_item_breakdown",
    "state_from_gstin",
    "state_key",
    "state_name",
    "validate_gstin",
    "validate_pan",
    "weighted_gst_rate",
]
