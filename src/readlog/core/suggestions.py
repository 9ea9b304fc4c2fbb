# ABOUTME: Static reading suggestions grouped by hobby, genre, and popularity.
# ABOUTME: Samples a few picks from each list for the suggest command.

import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Suggestion:
    """A recommended title, optionally tagged with why it was picked."""

    title: str
    author: str
    tag_kind: str | None = None
    tag_value: str | None = None

    @property
    def caption(self) -> str:
        if self.tag_kind and self.tag_value:
            return f"{self.tag_kind}: {self.tag_value}"
        return f"by {self.author}"


HOBBIES: tuple[Suggestion, ...] = (
    Suggestion("The Well-Tended Perennial Garden", "Tracy DiSabato-Aust", "Hobby", "Gardening"),
    Suggestion("Salt, Fat, Acid, Heat", "Samin Nosrat", "Hobby", "Cooking"),
    Suggestion("A Walk in the Woods", "Bill Bryson", "Hobby", "Hiking"),
    Suggestion("Understanding Exposure", "Bryan Peterson", "Hobby", "Photography"),
    Suggestion("Bobby Fischer Teaches Chess", "B. Fischer", "Hobby", "Chess"),
    Suggestion("Drawing on the Right Side of the Brain", "Betty Edwards", "Hobby", "Drawing"),
    Suggestion("Vagabonding", "Rolf Potts", "Hobby", "Travel"),
    Suggestion("This Is Your Brain on Music", "Daniel Levitin", "Hobby", "Music"),
)

GENRES: tuple[Suggestion, ...] = (
    Suggestion("The Three-Body Problem", "Cixin Liu", "Genre", "Sci-Fi"),
    Suggestion("The Name of the Wind", "Patrick Rothfuss", "Genre", "Fantasy"),
    Suggestion("The Girl with the Dragon Tattoo", "Stieg Larsson", "Genre", "Mystery"),
    Suggestion("Atomic Habits", "James Clear", "Genre", "Nonfiction"),
    Suggestion("All the Light We Cannot See", "Anthony Doerr", "Genre", "Historical"),
    Suggestion("The Kiss Quotient", "Helen Hoang", "Genre", "Romance"),
    Suggestion("Mexican Gothic", "Silvia Moreno-Garcia", "Genre", "Horror"),
)

POPULAR: tuple[Suggestion, ...] = (
    Suggestion("Fourth Wing", "Rebecca Yarros"),
    Suggestion("Lessons in Chemistry", "Bonnie Garmus"),
    Suggestion("Tomorrow, and Tomorrow, and Tomorrow", "Gabrielle Zevin"),
    Suggestion("Project Hail Mary", "Andy Weir"),
    Suggestion("The Seven Husbands of Evelyn Hugo", "Taylor Jenkins Reid"),
    Suggestion("The Silent Patient", "Alex Michaelides"),
)


@dataclass(frozen=True)
class Suggestions:
    hobbies: list[Suggestion]
    genres: list[Suggestion]
    popular: list[Suggestion]


def pick_random(items: Sequence[T], n: int, rng: random.Random | None = None) -> list[T]:
    """Sample up to n distinct items."""
    rng = rng or random.Random()
    return rng.sample(list(items), min(max(n, 0), len(items)))


def suggest(n: int = 4, rng: random.Random | None = None) -> Suggestions:
    rng = rng or random.Random()
    return Suggestions(
        hobbies=pick_random(HOBBIES, n, rng),
        genres=pick_random(GENRES, n, rng),
        popular=pick_random(POPULAR, n, rng),
    )
