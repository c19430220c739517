import unittest

from dice_command import ALIASES, Dice, DiceRoll, parse_line


class TestDice(unittest.TestCase):
    def test_faces(self) -> None:
        self.assertEqual((Dice.BOOST.colour, Dice.BOOST.sides), ("blue", 6))
        self.assertEqual((Dice.ABILITY.colour, Dice.ABILITY.sides), ("green", 8))
        self.assertEqual(
            (Dice.CHALLENGE.colour, Dice.CHALLENGE.sides), ("red", 12)
        )
        for die in Dice:
            self.assertIn(die.sides, [6, 8, 12])

    def test_colour_is_alias(self) -> None:
        for die in Dice:
            self.assertIn(die.colour, die.aliases)

    def test_aliases(self) -> None:
        self.assertEqual(
            Dice.CHALLENGE.aliases, ["challenge", "cha", "red", "r"]
        )
        self.assertEqual(len(ALIASES), sum(len(die.aliases) for die in Dice))

    def test_short_alias(self) -> None:
        self.assertEqual(
            [die.short_alias for die in Dice],
            ["b", "g", "y", "k", "p", "r", "w"],
        )

    def test_str(self) -> None:
        self.assertEqual(str(Dice.PROFICIENCY), "Proficiency")


class TestDiceRoll(unittest.TestCase):
    def test_equality(self) -> None:
        self.assertEqual(DiceRoll(Dice.BOOST, 6), DiceRoll(Dice.BOOST, 6))
        self.assertNotEqual(DiceRoll(Dice.BOOST, 6), DiceRoll(Dice.BOOST, 5))
        self.assertNotEqual(DiceRoll(Dice.BOOST, 6), DiceRoll(Dice.SETBACK, 6))
        self.assertEqual(
            len({DiceRoll(Dice.FORCE, 1), DiceRoll(Dice.FORCE, 1)}), 1
        )

    def test_strings(self) -> None:
        roll = DiceRoll(Dice.DIFFICULTY, 2)
        self.assertEqual(str(roll), "2p")
        self.assertEqual(repr(roll), "DiceRoll<2 Difficulty>")

    def test_str_parses(self) -> None:
        for die in Dice:
            roll = DiceRoll(die, 3)
            self.assertEqual(parse_line(str(roll)), [[roll]])


if __name__ == "__main__":
    unittest.main()
