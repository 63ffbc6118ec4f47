"""Exceptions raised by the insights engine."""


class LoopInsightsError(Exception):
    """Base class for all engine errors."""


class InvalidRecordError(LoopInsightsError):
    """An interaction record violates the provider contract.

    ``field`` names the offending record attribute so callers can point the
    record provider at the exact problem.
    """

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        self.message = message or f"Invalid interaction record: bad or missing '{field}'"
        super().__init__(self.message)
