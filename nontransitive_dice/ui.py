from typing import Optional, Sequence

from .dice import Die
from .errors import GameExit
from .fair_random import ExchangeResult

EXIT_KEY = 'x'
HELP_KEY = '?'


class GameUI:
    """Console front end; every exchange and roll is shown so it can be re-checked by hand."""

    def show(self, text: str = ""):
        print(text)

    def show_commitment(self, range_: int, mac: str):
        print(f"I have chosen a random value in range 0..{range_} (HMAC={mac}).")

    def show_reveal(self, result: ExchangeResult, label: str):
        print(f"{label}: {result.revealed_secret} (KEY={result.key_hex})")
        print(
            f"Fair random number: ({result.revealed_secret} + {result.counterpart_choice}) "
            f"mod {result.range + 1} = {result.combined_value}"
        )

    def show_die(self, owner: str, die: Die):
        print(f"{owner} die: [{die}]")

    def choose(self, prompt: str, options: Sequence[str], allow_help: bool = False) -> Optional[int]:
        """Return the picked option index, or None when help was requested.

        Raises GameExit when the player types the exit key.
        """
        menu = [f" {i} - {option}" for i, option in enumerate(options)]
        menu.append(f" {EXIT_KEY.upper()} - Exit")
        if allow_help:
            menu.append(f" {HELP_KEY} - Help")
        while True:
            print(f"\n{prompt}")
            print("\n".join(menu))
            answer = input("Your choice: ").strip().lower()
            if answer == EXIT_KEY:
                raise GameExit("Player left the game.")
            if allow_help and answer == HELP_KEY:
                return None
            index = self._parse_index(answer, len(options))
            if index is not None:
                return index
            print(f"Invalid choice. Enter a number from 0 to {len(options) - 1}"
                  + (f", '{HELP_KEY}'" if allow_help else "") + f" or '{EXIT_KEY.upper()}'.")

    @staticmethod
    def _parse_index(answer: str, size: int) -> Optional[int]:
        # int() rejects superscript digits that isdigit() accepts
        if not answer.isdecimal():
            return None
        index = int(answer)
        return index if index < size else None

    def confirm(self, prompt: str) -> bool:
        return input(prompt).strip().lower() == 'y'
