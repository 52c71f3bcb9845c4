# dreamhouse/domain/errors.py
from __future__ import annotations


class ScoringContractError(ValueError):
    """
    Raised when a caller hands the scorers something that is not a scorable
    intent/property at all. Missing public-record fields are NOT contract
    violations; they score neutrally.
    """
