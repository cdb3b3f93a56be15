# src/texmeta/observability/names.py

"""Metric names emitted by texmeta.

Durations are milliseconds.
"""

# ============================================================================
# Parsing
# ============================================================================

PARSE_DURATION = "texmeta_parse_duration"

PARSE_ERRORS_TOTAL = "texmeta_parse_errors_total"
# One increment per key=value field consumed, labelled with the field name
PARSE_FIELDS_TOTAL = "texmeta_parse_fields_total"


# ============================================================================
# Rendering
# ============================================================================

RENDER_DURATION = "texmeta_render_duration"

RENDER_ERRORS_TOTAL = "texmeta_render_errors_total"


# ============================================================================
# Citations
# ============================================================================

# Labelled with kind=cite|citeyear
CITATIONS_RESOLVED_TOTAL = "texmeta_citations_resolved_total"
CITATIONS_UNRESOLVED_TOTAL = "texmeta_citations_unresolved_total"


# ============================================================================
# Bibliography
# ============================================================================

# Gauge: entries available after loading
BIBLIOGRAPHY_ENTRIES = "texmeta_bibliography_entries"
