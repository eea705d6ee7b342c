import hashlib
import hmac
import secrets

from .errors import InvalidRange

KEY_SIZE = 32
HASH_ALGORITHM = hashlib.sha3_256


class SecureRandom:
    """
    Cryptographically secure integers and keys.

    Raw samples come from ``secrets`` (os.urandom), which holds no state of
    its own, so one instance can serve several exchanges from different
    threads. The sources are injectable so tests can script raw draws.
    """

    def __init__(self, randbits=secrets.randbits, token_bytes=secrets.token_bytes):
        self._randbits = randbits
        self._token_bytes = token_bytes

    def uniform_in_range(self, max_value: int) -> int:
        """Return an integer drawn uniformly from ``[0, max_value]``.

        Draws ``max_value.bit_length()`` bits and redraws any sample above
        ``max_value``; every accepted sample has the same probability.
        """
        if isinstance(max_value, bool) or not isinstance(max_value, int) or max_value < 0:
            raise InvalidRange(f"Range maximum must be a non-negative integer, got {max_value!r}.")
        if max_value == 0:
            return 0
        bits = max_value.bit_length()
        while True:
            sample = self._randbits(bits)
            if sample <= max_value:
                return sample

    def generate_key(self) -> bytes:
        return self._token_bytes(KEY_SIZE)


class CommitmentMAC:
    @staticmethod
    def compute(key: bytes, message: int) -> str:
        # decimal text, so a verifier can recompute it from the displayed numbers
        message_bytes = str(message).encode('utf-8')
        h = hmac.new(key, message_bytes, HASH_ALGORITHM)
        return h.hexdigest().upper()

    @staticmethod
    def verify(key: bytes, message: int, mac: str) -> bool:
        if not mac.isascii():
            return False
        expected = CommitmentMAC.compute(key, message)
        return hmac.compare_digest(expected, mac.upper())
