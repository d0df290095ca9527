"""Use cases: dashboard search."""

from dashsearch.application.use_cases.search import SearchService

__all__ = ["SearchService"]
