"""Character classes, health bars and the attack rules."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

MAX_NAME_LENGTH = 20


class RandomSource(Protocol):
    """The part of :class:`random.Random` the combat rules need."""

    def randrange(self, stop: int) -> int: ...


class CharacterClass(enum.Enum):
    """The playable character classes."""

    WARRIOR = "Warrior"
    MAGE = "Mage"
    RANGER = "Ranger"
    PALADIN = "Paladin"
    BARBARIAN = "Barbarian"

    @property
    def display_name(self) -> str:
        return self.value


class HPColor(enum.IntEnum):
    """Colour used to draw a hit-point value; the value is the colour pair."""

    GREEN = 1
    YELLOW = 2
    RED = 3


@dataclass(frozen=True)
class Segment:
    """A run of output text with its display attributes."""

    text: str
    color: Optional[HPColor] = None
    bold: bool = False


@dataclass
class Character:
    """A combatant and its statistics."""

    character_class: CharacterClass
    class_name: str
    hp: int
    attack: int
    defense: int
    special_percentage: int

    @property
    def is_alive(self) -> bool:
        return self.hp > 0


def create_character(class_type, hp, attack, defense, special_chance) -> Character:
    """Build a character of the given class with the given statistics."""
    class_type = CharacterClass(class_type)
    return Character(
        character_class=class_type,
        class_name=class_type.display_name[: MAX_NAME_LENGTH - 1],
        hp=hp,
        attack=attack,
        defense=defense,
        special_percentage=special_chance,
    )


def hp_color(hp, max_hp) -> HPColor:
    """Green from half health up, yellow from a third, red below."""
    if hp * 2 >= max_hp:
        return HPColor.GREEN
    if hp * 3 >= max_hp:
        return HPColor.YELLOW
    return HPColor.RED


def health_bar(name, hp, max_hp, bar_width) -> list[Segment]:
    """Return the segments of one health-bar line, newline included."""
    filled = (hp * bar_width) // max_hp
    color = hp_color(hp, max_hp)
    return [
        Segment(f"{name:<10}", bold=True),
        Segment(": ["),
        Segment("#" * max(filled, 0), color),
        Segment(" " * max(bar_width - filled, 0)),
        Segment("] "),
        Segment(f"{hp:3d}", color),
        Segment(f"/{max_hp:3d}"),
        Segment("\n"),
    ]


def _header(attacker: Character, defender: Character) -> list[Segment]:
    attacker_color = hp_color(attacker.hp, 100)
    defender_color = hp_color(defender.hp, 100)
    return [
        Segment(f">> {attacker.class_name}", bold=True),
        Segment(" ("),
        Segment(f"HP: {attacker.hp}", attacker_color),
        Segment(") attacks "),
        Segment(defender.class_name, bold=True),
        Segment(" ("),
        Segment(f"HP: {defender.hp}", defender_color),
        Segment(")\n"),
    ]


def _special_triggers(character: Character, rng: RandomSource) -> bool:
    return rng.randrange(100) < character.special_percentage


def perform_attack(attacker, defender, rng) -> list[Segment]:
    """Resolve one attack, updating the defender; return the narration."""
    chance = rng.randrange(101)
    out = _header(attacker, defender)
    attacker_name = attacker.class_name
    defender_name = defender.class_name

    if attacker.character_class is CharacterClass.BARBARIAN:
        out.append(Segment("-> A Barbarian never misses an attack!\n"))
        damage = attacker.attack
    else:
        if chance < 20:
            out.append(
                Segment(f"-> Oh no! {attacker_name} missed the attack on {defender_name}...\n\n")
            )
            return out
        if chance < 40:
            out.append(
                Segment(f"-> {defender_name} failed to defend against {attacker_name}'s attack!\n")
            )
            damage = attacker.attack
        else:
            damage = max(attacker.attack - defender.defense, 0)

        kind = attacker.character_class
        if kind is CharacterClass.WARRIOR:
            if _special_triggers(attacker, rng):
                out.append(Segment(f"-> Critical hit! {attacker_name} deals double damage!\n"))
                damage *= 2
        elif kind is CharacterClass.MAGE:
            if _special_triggers(attacker, rng):
                out.append(
                    Segment(
                        "-> The mage doesn't care how small the room is. "
                        "HE CAST FIREBALL! (Ignoring defenses...)\n"
                    )
                )
                damage = attacker.attack
        elif kind is CharacterClass.RANGER:
            if _special_triggers(attacker, rng):
                out.append(Segment(f"-> Double Strike! {attacker_name} gets a bonus attack!\n"))
                damage += max(attacker.attack - defender.defense, 0)

    if defender.character_class is CharacterClass.PALADIN and _special_triggers(defender, rng):
        heal = max(int(damage * 0.2), 1)
        out.append(Segment("-> May the sun shine upon me, my Godness! Paladin heals "))
        out.append(Segment(f"{heal} ", HPColor.GREEN))
        out.append(Segment("HP\n"))
        defender.hp += heal

    damage = max(damage, 0)
    defender.hp = max(defender.hp - damage, 0)

    out.append(
        Segment(
            f"-> {attacker_name} attacks {defender_name} for {damage} damage! "
            f"{defender_name} now has {defender.hp} HP left.\n\n"
        )
    )
    return out


def segments_to_text(segments: Iterable[Segment]) -> str:
    """Concatenate the text of segments, dropping attributes."""
    return "".join(segment.text for segment in segments)