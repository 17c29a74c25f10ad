"""Metrics input error types.

The metrics engine degrades gracefully for missing data (no rating, empty
series, zero baseline). It only raises for inputs it cannot interpret:
- INVALID_DATE: A date string is not a canonical YYYY-MM-DD value
- UNKNOWN_CHRONIC_METHOD: Chronic method is neither trailing_avg nor ewma
"""


class MetricsInputError(ValueError):
    """Raised when the metrics engine receives an uninterpretable input.

    Attributes:
        code: Error code (e.g., "INVALID_DATE", "UNKNOWN_CHRONIC_METHOD")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")
