"""Provably fair non-transitive dice: commit-reveal randomness and win-probability analysis."""

from .crypto import CommitmentMAC, SecureRandom
from .dice import Die
from .errors import (
    DiceGameError,
    ProtocolStateError,
    RangeError,
    ValidationError,
)
from .fair_random import ExchangeResult, ExchangeState, FairExchange, verify_result
from .probability import ProbabilityCalculator, ProbabilityMatrix

__all__ = [
    "CommitmentMAC",
    "DiceGameError",
    "Die",
    "ExchangeResult",
    "ExchangeState",
    "FairExchange",
    "ProbabilityCalculator",
    "ProbabilityMatrix",
    "ProtocolStateError",
    "RangeError",
    "SecureRandom",
    "ValidationError",
    "verify_result",
]
