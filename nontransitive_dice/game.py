import logging
from dataclasses import dataclass
from typing import Optional

from .crypto import SecureRandom
from .dice import Die
from .fair_random import ExchangeResult, FairExchange
from .probability import ProbabilityMatrix
from .table import HelpTableGenerator
from .ui import GameUI

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Roll:
    """A die roll whose face index came out of a fair exchange."""
    die: Die
    exchange: ExchangeResult

    @property
    def value(self) -> int:
        return self.die.face_at(self.exchange.combined_value)


@dataclass(frozen=True)
class RoundResult:
    user: Roll
    computer: Roll

    @property
    def outcome(self) -> int:
        """1 if the user won, -1 if the computer won, 0 on a draw."""
        return (self.user.value > self.computer.value) - (self.user.value < self.computer.value)

    def summary(self) -> str:
        user, computer = self.user.value, self.computer.value
        if self.outcome > 0:
            return f"You win ({user} > {computer})!"
        if self.outcome < 0:
            return f"I win ({computer} > {user})!"
        return f"It's a tie ({user} = {computer})!"

# ==============================================================================
# Provably fair random numbers, one exchange per need
# ==============================================================================

class FairInteraction:
    def __init__(self, ui: GameUI, random: Optional[SecureRandom] = None):
        self.ui = ui
        self.random = random or SecureRandom()

    def exchange(self, range_: int, prompt: str, label: str) -> ExchangeResult:
        """Commit, ask the player for their number, then reveal and show the proof."""
        exchange = FairExchange(range_, self.random)
        self.ui.show_commitment(range_, exchange.commit())
        choice = self.ui.choose(prompt, [str(i) for i in range(range_ + 1)])
        result = exchange.reveal(choice)
        self.ui.show_reveal(result, label)
        return result

    def determine_first_player(self) -> bool:
        """Return True when the user guessed the computer's hidden bit."""
        self.ui.show("\nLet's determine who makes the first move.")
        result = self.exchange(1, "Try to guess my selection.", "My selection")
        # the guess is compared with the secret itself, not the combined value
        user_goes_first = result.counterpart_choice == result.revealed_secret
        logger.info("First move decided: user_goes_first=%s", user_goes_first)
        return user_goes_first

    def roll(self, die: Die) -> Roll:
        faces = len(die)
        result = self.exchange(faces - 1, f"Add your number modulo {faces}.", "My number")
        return Roll(die, result)

# ==============================================================================
# Main game controller
# ==============================================================================

class GameController:
    def __init__(self, matrix: ProbabilityMatrix, ui: GameUI, interaction: FairInteraction):
        self.matrix = matrix
        self.ui = ui
        self.interaction = interaction

    def run(self):
        self.ui.show("--- Welcome to the Non-Transitive Dice Game! ---")
        while True:
            self.play_round()
            if not self.ui.confirm("\nPlay another round? (y/n): "):
                self.ui.show("Thanks for playing!")
                break

    def play_round(self) -> RoundResult:
        user_index, computer_index = self._select_dice(self.interaction.determine_first_player())
        user_die, computer_die = self.matrix.dice[user_index], self.matrix.dice[computer_index]
        self.ui.show()
        self.ui.show_die("Your", user_die)
        self.ui.show_die("My", computer_die)

        self.ui.show("\nIt's time for my roll.")
        computer_roll = self.interaction.roll(computer_die)
        self.ui.show(f"My roll result is {computer_roll.value}.")

        self.ui.show("\nIt's time for your roll.")
        user_roll = self.interaction.roll(user_die)
        self.ui.show(f"Your roll result is {user_roll.value}.")

        result = RoundResult(user=user_roll, computer=computer_roll)
        self.ui.show(result.summary())
        logger.info(
            "Round finished: user=%d computer=%d outcome=%d",
            user_roll.value, computer_roll.value, result.outcome,
        )
        return result

    def _select_dice(self, user_goes_first: bool) -> tuple[int, int]:
        """Return (user die index, computer die index); the second picker cannot reuse a die."""
        indices = list(range(len(self.matrix)))
        if user_goes_first:
            self.ui.show("You make the first move and choose the dice.")
            user = self._user_pick(indices)
            computer = self._computer_pick([i for i in indices if i != user])
        else:
            self.ui.show("I make the first move and choose the dice.")
            computer = self._computer_pick(indices)
            user = self._user_pick([i for i in indices if i != computer])
        return user, computer

    def _computer_pick(self, indices: list[int]) -> int:
        index = indices[self.interaction.random.uniform_in_range(len(indices) - 1)]
        self.ui.show(f"I choose the [{self.matrix.dice[index]}] dice.")
        return index

    def _user_pick(self, indices: list[int]) -> int:
        options = [str(self.matrix.dice[i]) for i in indices]
        while True:
            picked = self.ui.choose("Choose your dice:", options, allow_help=True)
            if picked is None:
                self.ui.show(HelpTableGenerator.generate_help(self.matrix))
                continue
            return indices[picked]
