# solr_subquery/errors.py
"""Errors raised while building and combining Solr query URLs."""


class SolrSubqueryError(ValueError):
    """Base class for all query building errors."""

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidUrl(SolrSubqueryError):
    """The source could not be parsed as an absolute URL."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid URL: {self.reason}"


class MissingQQueryParameter(SolrSubqueryError):
    def __str__(self) -> str:
        return "Request has no `q` query parameter"


class MultipleQQueryParameters(SolrSubqueryError):
    def __str__(self) -> str:
        return "Request has multiple `q` query parameters"


class DifferentHosts(SolrSubqueryError):
    """Two requests point at different hosts."""

    def __init__(self, left: str | None, right: str | None) -> None:
        super().__init__(left, right)
        self.left = left
        self.right = right

    def __str__(self) -> str:
        return f"Requests have different hosts: {self.left!r} != {self.right!r}"


class DifferentPorts(SolrSubqueryError):
    """Two requests point at different ports. None means the scheme default."""

    def __init__(self, left: int | None, right: int | None) -> None:
        super().__init__(left, right)
        self.left = left
        self.right = right

    def __str__(self) -> str:
        return f"Requests have different ports: {self.left!r} != {self.right!r}"


class DifferentPaths(SolrSubqueryError):
    def __init__(self, left: str, right: str) -> None:
        super().__init__(left, right)
        self.left = left
        self.right = right

    def __str__(self) -> str:
        return f"Requests have different paths: {self.left!r} != {self.right!r}"


class ChainFoldError(RuntimeError):
    """A chain could not join two of its queued queries."""
