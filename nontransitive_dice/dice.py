from decimal import Decimal
from numbers import Rational

from .errors import FaceValueOutOfRange, IndexOutOfRange, InvalidFaceCount, NonIntegerFace

FACE_COUNT = 6
MIN_DICE = 3

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _whole_number(value) -> int:
    # bool is an Integral but never a meaningful face value
    if isinstance(value, bool):
        raise NonIntegerFace(f"Face value {value!r} is not an integer.")
    if isinstance(value, Rational) and value.denominator == 1:
        face = int(value)
    elif isinstance(value, float) and value.is_integer():
        face = int(value)
    elif isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        face = int(value)
    else:
        raise NonIntegerFace(f"Face value {value!r} is not an integer.")
    if not INT64_MIN <= face <= INT64_MAX:
        raise FaceValueOutOfRange(f"Face value {face} does not fit in a 64-bit integer.")
    return face


class Die:
    """An immutable six-sided die; equality and display follow the face order."""

    __slots__ = ("_faces",)

    def __init__(self, faces):
        faces = tuple(faces)
        if len(faces) != FACE_COUNT:
            raise InvalidFaceCount(
                f"A die must have exactly {FACE_COUNT} faces, got {len(faces)}."
            )
        self._faces = tuple(_whole_number(f) for f in faces)

    @property
    def faces(self) -> tuple[int, ...]:
        return self._faces

    def face_at(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < FACE_COUNT:
            raise IndexOutOfRange(f"Face index must be in 0..{FACE_COUNT - 1}, got {index!r}.")
        return self._faces[index]

    def __str__(self) -> str:
        return ",".join(map(str, self._faces))

    def __repr__(self) -> str:
        return f"Die([{str(self)}])"

    def __len__(self) -> int:
        return len(self._faces)

    def __iter__(self):
        return iter(self._faces)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Die):
            return NotImplemented
        return self._faces == other._faces

    def __hash__(self) -> int:
        return hash(self._faces)
