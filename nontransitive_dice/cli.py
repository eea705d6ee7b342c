import logging
import sys
from typing import Optional

import pydantic

from .config import get_settings
from .errors import GameExit, UsageError
from .game import FairInteraction, GameController
from .parser import DiceParser
from .probability import ProbabilityCalculator
from .ui import GameUI

logger = logging.getLogger(__name__)


def configure_logging():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format, stream=sys.stderr)


def main(argv: Optional[list[str]] = None) -> int:
    try:
        configure_logging()

        if 'py.exe' in sys.executable.lower():
            UsageError.set_invocation_command('py')
        else:
            UsageError.set_invocation_command('python')

        args = sys.argv[1:] if argv is None else argv
        dice = DiceParser.parse(args)
        matrix = ProbabilityCalculator.matrix(dice)
        logger.debug("Loaded %d dice", len(dice))

        ui = GameUI()
        GameController(matrix, ui, FairInteraction(ui)).run()

    except pydantic.ValidationError as e:
        print(f"\nConfiguration Error: invalid DICE_GAME_* setting\n{e}", file=sys.stderr)
        return 1
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1
    except GameExit:
        print("Exiting game. Goodbye!")
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted. Goodbye!")
    return 0
