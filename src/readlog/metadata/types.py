# ABOUTME: Normalized metadata shape returned by every metadata provider.
# ABOUTME: MetadataResult is the interchange format between providers and the scan pipeline.

from dataclasses import dataclass, fields


@dataclass
class MetadataResult:
    """Descriptive book fields resolved from an external provider.

    Every field is optional: providers differ in what they know about a
    given edition. A result with none of the descriptive fields set carries
    no information and is treated as "no result" by the resolver.
    """

    title: str | None = None
    author: str | None = None
    pages: int | None = None
    isbn: str | None = None
    thumbnail: str | None = None
    description: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether every descriptive field is missing.

        The isbn is excluded: it echoes the lookup key rather than
        describing the book.
        """
        return not any(
            getattr(self, f.name) for f in fields(self) if f.name != "isbn"
        )
