"""Error kinds raised or reported by the assessment core.

``ValidationError``, ``SubmissionError`` and ``StoreError`` are reported through
``ActionResult`` values; ``IllegalDimensionError`` and ``IllegalScoreLevelError``
are programming defects and are raised.
"""


class AssessmentError(Exception):
    """Base class for assessment workflow errors."""


class ValidationError(AssessmentError):
    """A workflow action was refused locally without contacting the store."""


class SubmissionError(AssessmentError):
    """The idea store rejected or failed a write (status update or submission)."""


class StoreError(AssessmentError):
    """The idea store failed a read."""


class StatusConflictError(AssessmentError):
    """The idea's status moved on before a conditional status update landed."""

    def __init__(self, idea_id: str, expected: str, actual: str | None = None):
        self.idea_id = idea_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Idea {idea_id} is no longer '{expected}'"
            + (f" (now '{actual}')" if actual else "")
        )


class IllegalDimensionError(AssessmentError, ValueError):
    """A score or rationale was addressed to a dimension outside the fixed seven."""


class IllegalScoreLevelError(AssessmentError, ValueError):
    """A score level outside the closed level enumeration was supplied."""


class IncompleteScorecardError(AssessmentError, ValueError):
    """Axis aggregation was requested for a scorecard missing dimensions."""

    def __init__(self, missing: list):
        self.missing = missing
        super().__init__(
            "Scorecard is missing dimensions: " + ", ".join(d.value for d in missing)
        )
