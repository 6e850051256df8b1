"""
Contract violations raised by the filter.

Filter outcomes (GOOD/BAD/STOP) are never exceptions. The exceptions here
mark programming defects in the caller and are not meant to be caught.
"""


class FilterContractError(AssertionError):
    """Raised when the filter is called in violation of its contract."""

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message if detail is None else f"{message} ({detail})")


class CandidateOrderError(FilterContractError):
    """
    Raised when candidates are not supplied in non-decreasing cost order.

    Only checked when order checking is enabled on the filter.
    """

    def __init__(self, previous_cost: int, cost: int, value: str):
        self.previous_cost = previous_cost
        self.cost = cost
        self.value = value
        super().__init__(
            "Candidates must be supplied in ascending cost order",
            detail=f"cost {cost} after {previous_cost} for {value!r}",
        )
