import pytest

from dntrpg.classes import (
    Character,
    CharacterClass,
    HPColor,
    Segment,
    create_character,
    health_bar,
    hp_color,
    perform_attack,
    segments_to_text,
)


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


def make(kind):
    stats = {
        CharacterClass.WARRIOR: (100, 20, 10, 20),
        CharacterClass.MAGE: (100, 30, 5, 25),
        CharacterClass.RANGER: (100, 18, 8, 15),
        CharacterClass.PALADIN: (100, 15, 12, 30),
        CharacterClass.BARBARIAN: (100, 25, 6, 100),
    }[kind]
    return create_character(kind, *stats)


def test_create_character_fields():
    c = create_character(CharacterClass.MAGE, 100, 30, 5, 25)
    assert c == Character(CharacterClass.MAGE, "Mage", 100, 30, 5, 25)


@pytest.mark.parametrize("kind", list(CharacterClass))
def test_class_name_matches_enum(kind):
    assert create_character(kind, 1, 1, 1, 1).class_name == kind.value


@pytest.mark.parametrize(
    "hp,expected",
    [(100, HPColor.GREEN), (50, HPColor.GREEN), (49, HPColor.YELLOW),
     (34, HPColor.YELLOW), (33, HPColor.RED), (0, HPColor.RED)],
)
def test_hp_color_thresholds(hp, expected):
    assert hp_color(hp, 100) is expected


def test_health_bar_full():
    segs = health_bar("Warrior", 100, 100, 20)
    text = segments_to_text(segs)
    assert text.count("#") == 20
    assert text.startswith("Warrior   : [")
    assert text.endswith("] 100/100\n")
    assert segs[0].bold


def test_health_bar_empty_and_colors():
    segs = health_bar("Mage", 0, 100, 20)
    text = segments_to_text(segs)
    assert "#" not in text
    assert "[" + " " * 20 + "]" in text
    assert all(s.color in (None, HPColor.RED) for s in segs)


def test_health_bar_over_max_has_no_padding():
    text = segments_to_text(health_bar("Paladin", 110, 100, 20))
    assert "[" + "#" * 22 + "]" in text


def test_miss_leaves_defender_untouched():
    attacker, defender = make(CharacterClass.WARRIOR), make(CharacterClass.MAGE)
    rng = ScriptedRng([10])
    text = segments_to_text(perform_attack(attacker, defender, rng))
    assert defender.hp == 100
    assert "missed the attack on Mage" in text
    assert rng.values == []


def test_barbarian_never_misses():
    attacker, defender = make(CharacterClass.BARBARIAN), make(CharacterClass.WARRIOR)
    rng = ScriptedRng([0])
    text = segments_to_text(perform_attack(attacker, defender, rng))
    assert defender.hp == 100 - attacker.attack
    assert "A Barbarian never misses" in text


def test_failed_defense_full_damage():
    attacker, defender = make(CharacterClass.WARRIOR), make(CharacterClass.MAGE)
    rng = ScriptedRng([30, 99])
    perform_attack(attacker, defender, rng)
    assert defender.hp == 100 - attacker.attack
    assert rng.values == []


def test_regular_hit_subtracts_defense():
    attacker, defender = make(CharacterClass.WARRIOR), make(CharacterClass.MAGE)
    perform_attack(attacker, defender, ScriptedRng([50, 99]))
    assert defender.hp == 100 - (attacker.attack - defender.defense)


def test_warrior_critical_doubles():
    attacker, defender = make(CharacterClass.WARRIOR), make(CharacterClass.MAGE)
    text = segments_to_text(perform_attack(attacker, defender, ScriptedRng([50, 0])))
    assert defender.hp == 100 - 2 * (attacker.attack - defender.defense)
    assert "Critical hit!" in text


def test_mage_fireball_ignores_defense():
    attacker, defender = make(CharacterClass.MAGE), make(CharacterClass.WARRIOR)
    text = segments_to_text(perform_attack(attacker, defender, ScriptedRng([50, 0])))
    assert defender.hp == 100 - attacker.attack
    assert "FIREBALL" in text


def test_ranger_double_strike():
    attacker, defender = make(CharacterClass.RANGER), make(CharacterClass.WARRIOR)
    text = segments_to_text(perform_attack(attacker, defender, ScriptedRng([50, 0])))
    assert defender.hp == 100 - 2 * (attacker.attack - defender.defense)
    assert "Double Strike!" in text


def test_paladin_heals_when_defending():
    attacker, defender = make(CharacterClass.BARBARIAN), make(CharacterClass.PALADIN)
    segs = perform_attack(attacker, defender, ScriptedRng([50, 0]))
    assert defender.hp == 80
    assert Segment("5 ", HPColor.GREEN) in segs


def test_paladin_heals_at_least_one():
    attacker = create_character(CharacterClass.WARRIOR, 100, 5, 0, 0)
    defender = make(CharacterClass.PALADIN)
    perform_attack(attacker, defender, ScriptedRng([50, 99, 0]))
    assert defender.hp == 101


def test_hp_never_negative():
    attacker, defender = make(CharacterClass.BARBARIAN), make(CharacterClass.MAGE)
    defender.hp = 5
    text = segments_to_text(perform_attack(attacker, defender, ScriptedRng([0])))
    assert defender.hp == 0
    assert "Mage now has 0 HP left." in text


def test_segments_to_text_joins():
    assert segments_to_text([Segment("a"), Segment("b", HPColor.RED, True)]) == "ab"