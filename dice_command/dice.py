import enum
import typing

# Largest count a roll can carry, the range of an unsigned 32 bit integer.
MAX_COUNT = 2 ** 32 - 1


class Dice(enum.Enum):
    """The kinds of narrative dice which can be rolled."""

    BOOST = enum.auto()  # blue d6
    ABILITY = enum.auto()  # green d8
    PROFICIENCY = enum.auto()  # yellow d12
    SETBACK = enum.auto()  # black d6
    DIFFICULTY = enum.auto()  # purple d8
    CHALLENGE = enum.auto()  # red d12
    FORCE = enum.auto()  # white d12

    def __str__(self) -> str:
        return self.name.title()

    @property
    def colour(self) -> str:
        return DIE_FACES[self][0]

    @property
    def sides(self) -> int:
        return DIE_FACES[self][1]

    @property
    def aliases(self) -> typing.List[str]:
        return [alias for alias, die in ALIASES if die is self]

    @property
    def short_alias(self) -> str:
        # min keeps the first of equal length aliases, so table order decides
        return min(self.aliases, key=len)


# (colour, sides) of the physical die for each kind.
DIE_FACES: typing.Dict[Dice, typing.Tuple[str, int]] = {
    Dice.BOOST: ("blue", 6),
    Dice.ABILITY: ("green", 8),
    Dice.PROFICIENCY: ("yellow", 12),
    Dice.SETBACK: ("black", 6),
    Dice.DIFFICULTY: ("purple", 8),
    Dice.CHALLENGE: ("red", 12),
    Dice.FORCE: ("white", 12),
}

# Ordered list of (alias, kind) rules. Matching walks this list top to bottom
# and takes the first alias which prefixes the input, so order matters.
ALIASES: typing.List[typing.Tuple[str, Dice]] = [
    (alias, die)
    for die, aliases in [
        (Dice.ABILITY, ["green", "g", "ability", "abil"]),
        (Dice.CHALLENGE, ["challenge", "cha", "red", "r"]),
        (Dice.PROFICIENCY, ["proficiency", "prof", "yellow", "y"]),
        (Dice.DIFFICULTY, ["difficulty", "purple", "p", "diff", "dif", "d"]),
        (Dice.SETBACK, ["black", "k", "setback", "s"]),
        (Dice.FORCE, ["force", "white", "w"]),
        (Dice.BOOST, ["blue", "boost", "b"]),
    ]
    for alias in aliases
]


class DiceRoll:
    """A request to roll number_of_dice_to_roll dice of kind die.

    Checking that the count is sensible (e.g. not 0) is left to the caller.
    """

    def __init__(self, die: Dice, number_of_dice_to_roll: int) -> None:
        self.die = die
        self.number_of_dice_to_roll = number_of_dice_to_roll

    def __eq__(self, o: object) -> bool:
        return (
            isinstance(o, DiceRoll)
            and o.die is self.die
            and o.number_of_dice_to_roll == self.number_of_dice_to_roll
        )

    def __hash__(self) -> int:
        return hash((self.die, self.number_of_dice_to_roll))

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{self.number_of_dice_to_roll} {self.die}>"

    def __str__(self) -> str:
        return f"{self.number_of_dice_to_roll}{self.die.short_alias}"
