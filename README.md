# dntrpg

A small turn-based battle game for the terminal. Two parties of five heroes
each (Warrior, Mage, Ranger, Paladin and Barbarian) fight round after round
until one side has fallen.

## Installing

```
pip install .
```

The game screen uses the standard library's `curses` module, so the
`dnt-rpg` command needs a Python build that has it (the usual builds on
Linux and macOS do). The library parts of the package do not use `curses`.

## Playing

```
dnt-rpg
dnt-rpg --seed 42
```

A random draw picks the party that attacks first. Press any key to go on to
each next round. Each round shows both attacks and then a health bar for
every character, coloured green, yellow or red as its hit points drop. When
one party has fallen, the winner is announced; press a key to leave.

`--seed` seeds the random generator, so the same seed plays the same battle.

## The classes

| Class     | HP  | Attack | Defense | Special chance | Special |
|-----------|-----|--------|---------|----------------|---------|
| Warrior   | 100 | 20     | 10      | 20%            | Critical hit: double damage |
| Mage      | 100 | 30     | 5       | 25%            | Fireball: ignores defense |
| Ranger    | 100 | 18     | 8       | 15%            | Double strike: a bonus hit |
| Paladin   | 100 | 15     | 12      | 30%            | Heals 20% of incoming damage (at least 1) when hit |
| Barbarian | 100 | 25     | 6       | 100%           | Never misses |

Every attack except a Barbarian's misses 20% of the time. Another 20% of the
time the defender fails to block and takes full damage; otherwise the
defender's defense is taken off the attack. Hit points never drop below zero.

Each party attacks with the living member that has the most hit points per
point of attack, and strikes a random living member of the other side.

## Using it as a library

```python
import random

from dntrpg.battle import Battle, default_party
from dntrpg.classes import segments_to_text

battle = Battle(default_party(), default_party(), random.Random(7))
print(segments_to_text(battle.starting_banner()))
for result in battle.rounds():
    print(segments_to_text(result.segments))
print(battle.result_message())
```

`dntrpg.battle` holds `Battle` (with `starting_banner`, `is_over`,
`play_round`, `rounds` and `result_message`), `RoundResult`,
`is_party_defeated`, `party_status`, `pick_alive`, `default_party` and
`main`. `play_round` raises `RuntimeError` once the battle is decided; a
`RoundResult` has `ended_early` set when the first attack of a round wins it.

`dntrpg.classes` holds `CharacterClass`, `Character`, `create_character`,
`perform_attack`, `health_bar`, `hp_color` and `HPColor`. Text comes back as
`Segment` pieces that carry their own colour and bold flag, so it can be shown
plain with `segments_to_text` or in colour by any front end. Anything with a
`randrange` method, such as `random.Random`, can serve as the random source.

## What it does not do

There is no character selection, no save files and no player control over
the fight: both parties are computer-driven and made up of the standard five
characters.

## Running the tests

```
pip install .[test]
pytest
```