"""Well-known metric names emitted by the log redactor.

These values are shared with existing dashboards and alerts; never rename them.
Custom names remain legal, so this is a set of plain strings rather than an enum.
"""

# Counters
COUNT_POLICY_UPDATE = "policy_update"
COUNT_ERROR = "error"
COUNT_REDACTIONS = "redactions"
COUNT_MATCHES = "matches"
COUNT_SCANNED_LOG_STATEMENTS = "scanned_log_statements"
COUNT_REDACTED_LOG_STATEMENTS = "redacted_log_statements"
COUNT_MATCHED_LOG_STATEMENTS = "matched_log_statements"

# Timers (seconds)
TIMER_READ_POLICY_SECONDS = "read_policy_seconds"

# Gauges
GAUGE_POLICY_RULE_COUNT = "policy_rule_count"

ALL_NAMES: tuple[str, ...] = (
    COUNT_POLICY_UPDATE,
    COUNT_ERROR,
    COUNT_REDACTIONS,
    COUNT_MATCHES,
    COUNT_SCANNED_LOG_STATEMENTS,
    COUNT_REDACTED_LOG_STATEMENTS,
    COUNT_MATCHED_LOG_STATEMENTS,
    TIMER_READ_POLICY_SECONDS,
    GAUGE_POLICY_RULE_COUNT,
)
