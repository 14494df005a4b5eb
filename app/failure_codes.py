"""Shared failure code constants for audit error handling."""

# Fatal to the run; raised before or instead of metric computation.
COLUMN_ROLE_UNSET = "column_role_unset"
INSUFFICIENT_USABLE_ROWS = "insufficient_usable_rows"
EMPTY_LEFT_ROWS = "empty_left_rows"
EMPTY_RIGHT_ROWS = "empty_right_rows"
MERGE_ID_UNSET = "merge_id_unset"
NO_GROUPS = "no_groups"
UNKNOWN_DEMO_DATASET = "unknown_demo_dataset"
