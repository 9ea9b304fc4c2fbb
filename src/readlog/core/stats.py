# ABOUTME: Points and badge progress derived from the book collection.
# ABOUTME: Pure functions over a Book snapshot and the static badge catalog.

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from readlog.db.mapping import Book


@dataclass(frozen=True)
class Badge:
    """An achievement unlocked once total logged pages reach a threshold."""

    id: str
    name: str
    threshold_pages: int
    icon: str


BADGES: tuple[Badge, ...] = (
    Badge(id="p50", name="50 Pages", threshold_pages=50, icon="🥉"),
    Badge(id="p100", name="100 Pages", threshold_pages=100, icon="🥈"),
)


@dataclass(frozen=True)
class BadgeProgress:
    """Unlock state of one badge for a given point total."""

    badge: Badge
    earned: bool
    progress: int


@dataclass(frozen=True)
class Stats:
    """Total points and per-badge progress, in catalog order."""

    total_points: int
    badges: list[BadgeProgress] = field(default_factory=list)

    @property
    def earned(self) -> list[Badge]:
        return [b.badge for b in self.badges if b.earned]


def total_points(books: Iterable[Book]) -> int:
    return sum(book.read_pages for book in books)


def badge_progress(badge: Badge, points: int) -> BadgeProgress:
    return BadgeProgress(
        badge=badge,
        earned=points >= badge.threshold_pages,
        progress=min(points, badge.threshold_pages),
    )


def compute_stats(books: Iterable[Book], catalog: Sequence[Badge] = BADGES) -> Stats:
    """Derive total points and badge progress from scratch."""
    points = total_points(books)
    return Stats(
        total_points=points,
        badges=[badge_progress(badge, points) for badge in catalog],
    )
