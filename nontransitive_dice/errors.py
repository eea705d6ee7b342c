import os
import sys

# ==============================================================================
# Validation errors (bad die shape/values, bad range arguments)
# ==============================================================================

class DiceGameError(Exception):
    """Root of every error raised by the dice game."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(DiceGameError):
    """Raised when a die, a range or a CLI argument is malformed."""


class InvalidFaceCount(ValidationError):
    pass


class NonIntegerFace(ValidationError):
    pass


class FaceValueOutOfRange(ValidationError):
    pass


class IndexOutOfRange(ValidationError, IndexError):
    pass


class InvalidRange(ValidationError):
    pass


class UsageError(ValidationError):
    """
    Argument error shown to the person starting the game.
    Renders the message together with an example of correct usage.
    """
    _invocation_command = "python"

    @staticmethod
    def set_invocation_command(command: str):
        """Sets the command used to run the script (e.g., 'python' or 'py')."""
        UsageError._invocation_command = command

    @staticmethod
    def usage_example() -> str:
        script = sys.argv[0] if sys.argv and sys.argv[0] else 'game.py'
        if os.path.basename(script) == '__main__.py':
            command = f"{UsageError._invocation_command} -m nontransitive_dice"
        elif script.endswith('.py'):
            command = f"{UsageError._invocation_command} {script}"
        else:
            # installed console script, runs without the interpreter
            command = os.path.basename(script)
        return f"{command} 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7"

    def __str__(self) -> str:
        return f"\nArgument Error: {self.message}\n\nExample usage:\n{self.usage_example()}\n"

# ==============================================================================
# Protocol errors (commit/reveal called out of order or twice)
# ==============================================================================

class ProtocolStateError(DiceGameError):
    """A commit/reveal call was made in the wrong exchange state."""


class NotCommitted(ProtocolStateError):
    pass


class AlreadyCommitted(ProtocolStateError):
    pass


class AlreadyRevealed(ProtocolStateError):
    pass

# ==============================================================================
# Range errors (counterpart choice outside declared bounds)
# ==============================================================================

class RangeError(DiceGameError):
    """A counterpart value falls outside the exchange's declared bounds."""


class OutOfRange(RangeError, ValueError):
    pass

# ==============================================================================
# Session control
# ==============================================================================

class GameExit(DiceGameError):
    """The player asked to leave the game from a menu."""
