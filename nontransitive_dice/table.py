from fractions import Fraction

from tabulate import tabulate

from .probability import ProbabilityMatrix


def _format_probability(value: Fraction) -> str:
    return f"{float(value):.4f}"


class HelpTableGenerator:
    @staticmethod
    def generate_table(matrix: ProbabilityMatrix) -> str:
        labels = [str(d) for d in matrix.dice]
        headers = ["User v PC >"] + labels
        table_data = []
        for i, label in enumerate(labels):
            row = [label]
            for j in range(len(matrix)):
                if i == j:
                    row.append(f"*{_format_probability(matrix.self_play(i))}*")
                else:
                    row.append(_format_probability(matrix[i, j]))
            table_data.append(row)

        intro = (
            "\n--- Win Probability Table ---\n"
            "This table shows the probability of the User's die (rows) winning against the PC's die (columns).\n"
            "* Diagonal values show probability of a die winning against an identical one.\n"
        )
        return intro + tabulate(table_data, headers=headers, tablefmt="grid", disable_numparse=True)

    @staticmethod
    def generate_help(matrix: ProbabilityMatrix) -> str:
        lines = [RULES_TEXT, "Which die beats which (win probability above 0.5):"]
        for i, die in enumerate(matrix.dice):
            beaten = [str(other) for j, other in enumerate(matrix.dice) if matrix.beats(i, j)]
            lines.append(f"  [{die}] beats " + (", ".join(f"[{b}]" for b in beaten) or "nothing"))
        return "\n".join(lines) + "\n" + HelpTableGenerator.generate_table(matrix)


RULES_TEXT = """
--- Non-Transitive Dice Game Help ---
You and I each pick a different die and roll it; the higher roll wins.
These dice are non-transitive: A may usually beat B and B usually beat C,
while C still usually beats A, much like rock-paper-scissors.

Every random number is provably fair:
 1. I pick a secret number and a secret key, and show you HMAC-SHA3-256(key, number).
 2. You pick your own number.
 3. I reveal my number and key, so you can recompute the HMAC yourself.
 4. The result is (my number + your number) mod the range size.
"""
