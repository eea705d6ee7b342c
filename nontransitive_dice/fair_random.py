"""
Commit-reveal exchange producing a jointly random, verifiable number.

One side commits to a secret by publishing ``HMAC(key, secret)``, the
counterpart then picks a number, and only afterwards is the secret revealed
together with its key. The combined value ``(secret + choice) mod (range+1)``
is uniform whenever the secret is, whatever the counterpart picks.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Optional

from .crypto import CommitmentMAC, SecureRandom
from .errors import (
    AlreadyCommitted,
    AlreadyRevealed,
    InvalidRange,
    NotCommitted,
    OutOfRange,
)

logger = logging.getLogger(__name__)


class ExchangeState(enum.Enum):
    CREATED = "created"
    COMMITTED = "committed"
    REVEALED = "revealed"


@dataclass(frozen=True)
class SecretCommitment:
    secret_value: int = field(repr=False)
    key: bytes = field(repr=False)
    mac: str


@dataclass(frozen=True)
class ExchangeResult:
    combined_value: int
    revealed_secret: int
    revealed_key: bytes
    counterpart_choice: int
    range: int
    mac: str

    @property
    def key_hex(self) -> str:
        return self.revealed_key.hex().upper()

    def verify(self) -> bool:
        """Recompute the published MAC and the combined value from revealed data."""
        if not CommitmentMAC.verify(self.revealed_key, self.revealed_secret, self.mac):
            return False
        expected = (self.revealed_secret + self.counterpart_choice) % (self.range + 1)
        return expected == self.combined_value


def verify_result(mac: str, result: ExchangeResult) -> bool:
    """Check a reveal against the MAC the counterpart saw before choosing."""
    return mac.upper() == result.mac and result.verify()


class FairExchange:
    def __init__(self, range_: int, random: Optional[SecureRandom] = None):
        if isinstance(range_, bool) or not isinstance(range_, int) or range_ < 0:
            raise InvalidRange(f"Exchange range must be a non-negative integer, got {range_!r}.")
        self._range = range_
        self._random = random or SecureRandom()
        self._commitment: Optional[SecretCommitment] = None
        self._result: Optional[ExchangeResult] = None
        self._state = ExchangeState.CREATED

    @property
    def range(self) -> int:
        return self._range

    @property
    def state(self) -> ExchangeState:
        return self._state

    @property
    def mac(self) -> Optional[str]:
        return self._commitment.mac if self._commitment else None

    @property
    def result(self) -> Optional[ExchangeResult]:
        return self._result

    def commit(self) -> str:
        if self._state is not ExchangeState.CREATED:
            raise AlreadyCommitted("This exchange has already committed to a secret.")
        secret = self._random.uniform_in_range(self._range)
        key = self._random.generate_key()
        self._commitment = SecretCommitment(secret, key, CommitmentMAC.compute(key, secret))
        self._state = ExchangeState.COMMITTED
        logger.debug("Exchange committed over 0..%d (HMAC=%s)", self._range, self._commitment.mac)
        return self._commitment.mac

    def reveal(self, counterpart_choice: int) -> ExchangeResult:
        if self._state is ExchangeState.CREATED:
            raise NotCommitted("Cannot reveal before committing to a secret.")
        if self._state is ExchangeState.REVEALED:
            raise AlreadyRevealed("This exchange has already been revealed.")
        if (
            isinstance(counterpart_choice, bool)
            or not isinstance(counterpart_choice, int)
            or not 0 <= counterpart_choice <= self._range
        ):
            raise OutOfRange(
                f"Choice must be an integer in 0..{self._range}, got {counterpart_choice!r}."
            )

        commitment = self._commitment
        combined = (commitment.secret_value + counterpart_choice) % (self._range + 1)
        self._result = ExchangeResult(
            combined_value=combined,
            revealed_secret=commitment.secret_value,
            revealed_key=commitment.key,
            counterpart_choice=counterpart_choice,
            range=self._range,
            mac=commitment.mac,
        )
        self._state = ExchangeState.REVEALED
        logger.debug(
            "Exchange revealed: (%d + %d) mod %d = %d",
            commitment.secret_value, counterpart_choice, self._range + 1, combined,
        )
        return self._result
