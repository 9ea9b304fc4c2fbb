# ABOUTME: Metadata package for resolving scanned ISBNs into descriptive book fields.
# ABOUTME: Exports the result type, provider protocol, and the fallback resolver.

from readlog.metadata.provider import MetadataProvider
from readlog.metadata.resolver import MetadataResolver, ResolutionCancelled, default_resolver
from readlog.metadata.types import MetadataResult

__all__ = [
    "MetadataProvider",
    "MetadataResolver",
    "MetadataResult",
    "ResolutionCancelled",
    "default_resolver",
]
