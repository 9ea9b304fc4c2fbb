# ABOUTME: MetadataProvider protocol defining the contract for ISBN metadata sources.
# ABOUTME: Google Books, Open Library, or any future source implements this.

from typing import Protocol, runtime_checkable

from readlog.metadata.types import MetadataResult


@runtime_checkable
class MetadataProvider(Protocol):
    """Protocol for ISBN lookup services.

    lookup() never raises for transport or data problems: a failed call, a
    key that matched nothing, and an uninformative entry all return None.
    """

    @property
    def name(self) -> str: ...

    def lookup(self, isbn: str) -> MetadataResult | None: ...
