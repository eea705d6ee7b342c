from .dice import MIN_DICE, Die
from .errors import NonIntegerFace, UsageError, ValidationError


class DiceParser:
    @staticmethod
    def parse(args: list[str]) -> list[Die]:
        if len(args) < MIN_DICE:
            raise UsageError(f"Please specify at least {MIN_DICE} dice.")
        dice_list = []
        for position, arg in enumerate(args, start=1):
            try:
                dice_list.append(Die(DiceParser._parse_faces(arg)))
            except ValidationError as e:
                raise UsageError(f"Invalid dice configuration at position {position}: {e.message}") from e
        return dice_list

    @staticmethod
    def _parse_faces(arg: str) -> list[int]:
        faces = []
        for face in arg.split(','):
            try:
                faces.append(int(face.strip()))
            except ValueError:
                raise NonIntegerFace(f"All dice faces must be integer values, got {face.strip()!r}.") from None
        return faces
