"""Parsing of narrative dice commands, e.g. "yyypp", "2g1y2p" or
"difficulty difficulty ability proficiency", into groups of DiceRolls which
can then be used to calculate a result."""

from dice_command.dice import ALIASES, MAX_COUNT, Dice, DiceRoll
from dice_command.error import ParseError, ParserError, UnknownError
from dice_command.parser import Group, command_string, parse_line

__all__ = [
    "ALIASES",
    "MAX_COUNT",
    "Dice",
    "DiceRoll",
    "Group",
    "ParseError",
    "ParserError",
    "UnknownError",
    "command_string",
    "parse_line",
]
