"""Exceptions raised while building or querying an index."""


class SearchError(Exception):
    """Base class for search engine errors."""


class IndexBuildError(SearchError):
    """Listing or reading the corpus failed; no index was produced."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Could not build index from {path}: {reason}")
        self.path = path
        self.reason = reason


class EmptyCorpusError(SearchError):
    """The corpus holds no documents, so the average document length is undefined."""

    def __init__(self, path=None) -> None:
        where = f" in {path}" if path is not None else ""
        super().__init__(f"No documents found{where}")
        self.path = path


class IndexNotBuiltError(SearchError):
    """The index was queried before its corpus statistics were computed."""


class IndexFinalizedError(SearchError):
    """The index was modified after it was finalized for querying."""
