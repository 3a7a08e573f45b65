"""Configuration constants for SEDOL tools."""

# SEDOL layout
BODY_LENGTH = 6
SEDOL_LENGTH = 7

# Max failing values kept per error kind in the metrics report
MAX_METRIC_SAMPLES = 10

# Runtime flags (read by normalize_sedol and the CLI, never by validate)
SKIP_CHECKSUM_VALIDATION = False
ENFORCE_OLD_FORMAT = False
