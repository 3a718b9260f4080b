"""Utility: static set of two-letter US state codes.

Announcements spanning several states (or with no usable location) carry a
sentinel instead of a state code. Those rows are still grouped as their own
key, but cannot be drawn on a state choropleth.
"""

MULTI_STATE = "Multiple"

STATE_CODES = frozenset({
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "DC", "FL",
    "GA", "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME",
    "MD", "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH",
    "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI",
    "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI",
    "WY", "PR",
})


def is_state_code(value: object) -> bool:
    """Return True when `value` is a two-letter code a state map can place.

    Args:
        value: Grouping key taken from the `state` column.

    Returns:
        ``True`` for known codes, ``False`` for sentinels and anything else.
    """
    return isinstance(value, str) and value in STATE_CODES
