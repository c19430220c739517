import logging
import typing

from dice_command.dice import ALIASES, MAX_COUNT, Dice, DiceRoll
from dice_command.error import ParseError

logger = logging.getLogger(__name__)

# Rolls parsed from one comma separated section of a command, one per kind.
Group = typing.List[DiceRoll]

# Parsing functions scan string from a position and return their result along
# with the position just past what they consumed, i.e. (value, pos).
T = typing.TypeVar("T")
Parsed = typing.Tuple[T, int]

DIGITS = "0123456789"

GROUP_SEPERATOR = ","

# Longest run of significant digits which can still fit in MAX_COUNT.
MAX_COUNT_DIGITS = len(str(MAX_COUNT))

# How much of the input to quote in error messages.
EXCERPT_LENGTH = 20


def excerpt(string: str, pos: int) -> str:
    """Quote the input from pos, cut short so messages stay small."""

    text = string[pos : pos + EXCERPT_LENGTH]
    if len(string) - pos > EXCERPT_LENGTH:
        text += "..."
    return repr(text)


def match_dice_as_value(string: str, pos: int = 0) -> typing.Optional[Parsed[Dice]]:
    for alias, die in ALIASES:
        end = pos + len(alias)
        if string[pos:end].lower() == alias:
            return die, end

    return None


def parse_dice_as_value(string: str, pos: int = 0) -> Parsed[Dice]:
    """Match the first alias in ALIASES which appears at pos."""

    matched = match_dice_as_value(string, pos)
    if matched is None:
        raise ParseError(f"Expected a dice name, found: {excerpt(string, pos)}")

    return matched


def scan_digits(string: str, pos: int) -> int:
    """Return the end of the run of digits starting at pos."""

    while pos < len(string) and string[pos] in DIGITS:
        pos += 1
    return pos


def parse_count(digits: str) -> int:
    """Convert a run of digits to a count no larger than MAX_COUNT."""

    # int() refuses very long strings, so check the length first
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_COUNT_DIGITS or int(significant) > MAX_COUNT:
        raise ParseError(
            f"Number of dice too large: {excerpt(significant, 0)}"
        )

    return int(significant)


def match_dice(string: str, pos: int = 0) -> typing.Optional[Parsed[DiceRoll]]:
    """Match a single roll at pos, returning None if there isn't one.

    Raises ParseError if there is a roll but its count is too large.
    """

    end = scan_digits(string, pos)
    matched = match_dice_as_value(string, end)
    if matched is None:
        return None

    die, next_pos = matched
    count = parse_count(string[pos:end]) if end > pos else 1
    return DiceRoll(die, count), next_pos


def parse_dice(string: str, pos: int = 0) -> Parsed[DiceRoll]:
    """Parse a single roll, e.g. 2g or yellow."""

    matched = match_dice(string, pos)
    if matched is None:
        raise ParseError(f"Expected a dice roll, found: {excerpt(string, pos)}")

    return matched


def parse_group(string: str, pos: int = 0) -> Parsed[Group]:
    """Parse one or more rolls, totalling the number of dice of each kind."""

    roll, pos = parse_dice(string, pos)
    rolls = [roll]
    matched = match_dice(string, pos)
    while matched is not None:
        roll, pos = matched
        rolls.append(roll)
        matched = match_dice(string, pos)

    counts: typing.Dict[Dice, int] = {}
    for roll in rolls:
        counts[roll.die] = counts.get(roll.die, 0) + roll.number_of_dice_to_roll
        if counts[roll.die] > MAX_COUNT:
            raise ParseError(f"Too many {roll.die} dice in one group.")

    return [DiceRoll(die, count) for die, count in counts.items()], pos


def parse_groups(string: str, pos: int = 0) -> Parsed[typing.List[Group]]:
    """Parse comma seperated groups of rolls, preserving their order.

    A seperator which isn't followed by a roll is left unconsumed.
    """

    group, pos = parse_group(string, pos)
    groups = [group]
    while (
        string.startswith(GROUP_SEPERATOR, pos)
        and match_dice(string, pos + len(GROUP_SEPERATOR)) is not None
    ):
        group, pos = parse_group(string, pos + len(GROUP_SEPERATOR))
        groups.append(group)

    return groups, pos


def parse_line(line: str) -> typing.List[Group]:
    """Parse a dice command such as "2rkyyg, ppb" into groups of rolls.

    Spaces are removed before parsing and the whole line must be consumed.
    Raises ParseError if the line is not a valid command, including when the
    number of dice overflows MAX_COUNT.
    """

    string = line.replace(" ", "")
    try:
        groups, pos = parse_groups(string)
    except ParseError:
        logger.debug("Rejected dice command: %r", line)
        raise

    remaining = string[pos:]
    if remaining.strip():
        logger.debug("Rejected dice command: %r", line)
        raise ParseError(
            f"Expected remaining input to be empty, found: {remaining}"
        )

    logger.debug("Parsed %r into %d group(s)", line, len(groups))
    return groups


def command_string(groups: typing.List[Group]) -> str:
    """Format groups of rolls as a command which parse_line accepts."""

    return ", ".join(
        "".join(str(roll) for roll in group) for group in groups
    )
