from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from nontransitive_dice.dice import Die
from nontransitive_dice.errors import (
    FaceValueOutOfRange,
    IndexOutOfRange,
    InvalidFaceCount,
    NonIntegerFace,
    ValidationError,
)


class TestDieConstruction:
    def test_six_integer_faces(self):
        die = Die([2, 2, 4, 4, 9, 9])
        assert die.faces == (2, 2, 4, 4, 9, 9)
        assert len(die) == 6

    def test_negative_and_large_faces(self):
        die = Die([-5, 0, 7, 2 ** 63 - 1, -(2 ** 63), 1])
        assert die.face_at(3) == 2 ** 63 - 1

    @pytest.mark.parametrize("faces", [[1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6, 7], []])
    def test_wrong_face_count(self, faces):
        with pytest.raises(InvalidFaceCount):
            Die(faces)

    @pytest.mark.parametrize("bad", [2.5, "3", None, True])
    def test_non_integer_face(self, bad):
        with pytest.raises(NonIntegerFace):
            Die([1, 2, 3, 4, 5, bad])

    def test_whole_float_is_accepted_as_int(self):
        die = Die([1.0, 2, 3, 4, 5, 6])
        assert die.face_at(0) == 1
        assert isinstance(die.face_at(0), int)

    def test_face_outside_int64(self):
        with pytest.raises(FaceValueOutOfRange):
            Die([2 ** 63, 1, 1, 1, 1, 1])

    def test_errors_are_validation_errors(self):
        with pytest.raises(ValidationError):
            Die([1, 2, 3])

    def test_faces_are_copied(self):
        faces = [1, 2, 3, 4, 5, 6]
        die = Die(faces)
        faces[0] = 100
        assert die.face_at(0) == 1


class TestDieAccess:
    def test_face_at_bounds(self):
        die = Die([10, 20, 30, 40, 50, 60])
        assert die.face_at(0) == 10
        assert die.face_at(5) == 60

    @pytest.mark.parametrize("index", [-1, 6, 100, True, "1"])
    def test_face_at_out_of_range(self, index):
        with pytest.raises(IndexOutOfRange):
            Die([10, 20, 30, 40, 50, 60]).face_at(index)

    def test_index_error_compatible(self):
        with pytest.raises(IndexError):
            Die([10, 20, 30, 40, 50, 60]).face_at(6)


class TestDieIdentity:
    def test_display(self):
        assert str(Die([2, 2, 4, 4, 9, 9])) == "2,2,4,4,9,9"
        assert repr(Die([2, 2, 4, 4, 9, 9])) == "Die([2,2,4,4,9,9])"

    def test_equality_follows_face_order(self):
        assert Die([1, 2, 3, 4, 5, 6]) == Die([1, 2, 3, 4, 5, 6])
        assert Die([1, 2, 3, 4, 5, 6]) != Die([6, 5, 4, 3, 2, 1])
        assert len({Die([1, 2, 3, 4, 5, 6]), Die([1, 2, 3, 4, 5, 6])}) == 1


class TestWholeNumberFaces:
    @pytest.mark.parametrize("value", [Decimal("2"), Decimal("2.000"), Fraction(4, 1), 7.0])
    def test_accepts_whole_values(self, value):
        die = Die([1, 2, 3, 4, 5, value])
        assert die.face_at(5) == int(value)
        assert type(die.face_at(5)) is int

    @pytest.mark.parametrize("value", [Decimal("2.5"), Fraction(5, 2), Decimal("Infinity"), Decimal("NaN"), float("inf")])
    def test_rejects_fractional_or_non_finite(self, value):
        with pytest.raises(NonIntegerFace):
            Die([1, 2, 3, 4, 5, value])

    @given(st.lists(st.integers(), max_size=20).filter(lambda faces: len(faces) != 6))
    def test_any_other_length_is_rejected(self, faces):
        with pytest.raises(InvalidFaceCount):
            Die(faces)
