"""Party-versus-party battle and its terminal front end."""

from __future__ import annotations

import argparse
import curses
import math
import random
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from .classes import (
    Character,
    CharacterClass,
    HPColor,
    Segment,
    create_character,
    health_bar,
    perform_attack,
)

BAR_WIDTH = 20
MAX_HP = 100


def is_party_defeated(party) -> bool:
    """True when no member of the party has hit points left."""
    return all(member.hp <= 0 for member in party)


def party_status(party_name, party, bar_width=BAR_WIDTH) -> list[Segment]:
    """Segments showing a heading and one health bar per member."""
    out = [Segment(f"> {party_name}\n")]
    for member in party:
        out.extend(health_bar(member.class_name, member.hp, MAX_HP, bar_width))
    out.append(Segment("\n"))
    return out


def _weight(member: Character) -> float:
    if member.attack == 0:
        return math.inf
    return member.hp / member.attack


def pick_alive(party, is_attacking, rng) -> Optional[Character]:
    """Choose a living member: the sturdiest attacker, or a random target."""
    alive = [member for member in party if member.hp > 0]
    if not alive:
        return None
    random_index = rng.randrange(len(alive))
    if is_attacking:
        best = alive[0]
        for member in alive[1:]:
            if _weight(member) > _weight(best):
                best = member
        return best
    return alive[random_index]


def default_party() -> list[Character]:
    """One character of each class with the standard statistics."""
    return [
        create_character(CharacterClass.WARRIOR, 100, 20, 10, 20),
        create_character(CharacterClass.MAGE, 100, 30, 5, 25),
        create_character(CharacterClass.RANGER, 100, 18, 8, 15),
        create_character(CharacterClass.PALADIN, 100, 15, 12, 30),
        create_character(CharacterClass.BARBARIAN, 100, 25, 6, 100),
    ]


@dataclass
class RoundResult:
    """The narration of one round; ended_early marks a round cut short by a win."""

    number: int
    segments: list[Segment] = field(default_factory=list)
    ended_early: bool = False


class Battle:
    """Two parties taking turns until one is wiped out."""

    def __init__(self, party_one, party_two, rng=None):
        self.party_one: list[Character] = list(party_one)
        self.party_two: list[Character] = list(party_two)
        self.rng = rng if rng is not None else random.Random()
        self.starting_party = self.rng.randrange(2)
        self.round = 1

    def starting_banner(self) -> list[Segment]:
        starter = "One" if self.starting_party == 0 else "Two"
        return [
            Segment("Randomly drawing the starting party...\n"),
            Segment(f"Party {starter} will start the combat.\n\n"),
        ]

    def is_over(self) -> bool:
        return is_party_defeated(self.party_one) or is_party_defeated(self.party_two)

    def _turn(self, attackers: Sequence[Character], defenders: Sequence[Character],
              label: str) -> list[Segment]:
        attacker = pick_alive(attackers, True, self.rng)
        target = pick_alive(defenders, False, self.rng)
        if attacker is None or target is None:
            return []
        return [Segment(f"-= Party {label}'s turn =-\n"), *perform_attack(attacker, target, self.rng)]

    def play_round(self) -> RoundResult:
        """Play one round; raises RuntimeError once the battle is decided."""
        if self.is_over():
            raise RuntimeError("battle is already over")
        one = (self.party_one, self.party_two, "One")
        two = (self.party_two, self.party_one, "Two")
        first, second = (one, two) if self.starting_party == 0 else (two, one)

        result = RoundResult(self.round, [Segment(f">>> Round {self.round}:\n\n")])
        result.segments.extend(self._turn(*first))
        if is_party_defeated(first[1]):
            result.ended_early = True
            return result
        result.segments.extend(self._turn(*second))

        result.segments.append(Segment(f">>> Status after round {self.round}:\n"))
        result.segments.extend(party_status("Party One", self.party_one))
        result.segments.extend(party_status("Party Two", self.party_two))
        self.round += 1
        return result

    def result_message(self) -> str:
        if is_party_defeated(self.party_one):
            return ">>> Party One has been defeated! Party Two wins!\n"
        if is_party_defeated(self.party_two):
            return ">>> Party Two has been defeated! Party One wins!\n"
        return ">>>It's a draw!\n"

    def rounds(self) -> Iterator[RoundResult]:
        while not self.is_over():
            yield self.play_round()


def _render(window, segments) -> None:
    for segment in segments:
        attr = curses.A_BOLD if segment.bold else curses.A_NORMAL
        if segment.color is not None:
            attr |= curses.color_pair(int(segment.color))
        try:
            window.addstr(segment.text, attr)
        except curses.error:
            pass  # text past the bottom of the screen is dropped


def _run(window, battle: Battle) -> None:
    curses.cbreak()
    curses.noecho()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.start_color()
    curses.init_pair(HPColor.GREEN, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(HPColor.YELLOW, curses.COLOR_YELLOW, curses.COLOR_BLACK)
    curses.init_pair(HPColor.RED, curses.COLOR_RED, curses.COLOR_BLACK)

    _render(window, battle.starting_banner())
    window.getch()
    for result in battle.rounds():
        window.clear()
        _render(window, result.segments)
        if not result.ended_early:
            window.getch()
    window.clear()
    _render(window, [Segment(battle.result_message())])
    window.refresh()
    window.getch()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Two parties fight it out in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)
    battle = Battle(default_party(), default_party(), random.Random(args.seed))
    curses.wrapper(_run, battle)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())