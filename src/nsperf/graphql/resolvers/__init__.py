"""Resolver package for the GraphQL schema.

Resolvers read the repository and loaders from ``info.context`` and convert
normalized records into GraphQL types. None of them catch storage errors;
the executor reports those as field errors.
"""

from .context import get_loaders, get_repository

__all__ = ["get_loaders", "get_repository"]
