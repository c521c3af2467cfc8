# solr_subquery/query.py
import logging
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import parse_qsl, urlencode

import httpx

from solr_subquery.errors import (
    DifferentHosts,
    DifferentPaths,
    DifferentPorts,
    InvalidUrl,
    MissingQQueryParameter,
    MultipleQQueryParameters,
)

logger = logging.getLogger(__name__)

Q_PARAM = "q"

# Schemes that require a host
SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


class Operator(StrEnum):
    """Boolean operator placed between two `q` expressions."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


def _parse_url(source: httpx.URL | str) -> httpx.URL:
    """Parse a string into an absolute URL, or pass a URL through."""
    if isinstance(source, httpx.URL):
        url = source
    else:
        try:
            url = httpx.URL(source)
        except httpx.InvalidURL as e:
            raise InvalidUrl(str(e)) from e

    if not url.scheme:
        raise InvalidUrl("relative URL without a base")
    if url.scheme in SPECIAL_SCHEMES and not url.host:
        raise InvalidUrl("empty host")
    if url.port is not None and not 0 <= url.port <= 65535:
        raise InvalidUrl(f"invalid port number: {url.port}")
    return url


def _encoded_path(url: httpx.URL) -> str:
    """Path as it appears on the wire, percent-escapes intact."""
    return url.raw_path.partition(b"?")[0].decode("ascii")


def _query_pairs(url: httpx.URL) -> list[tuple[str, str]]:
    """Decoded query parameters in the order they appear."""
    return parse_qsl(url.query.decode("ascii"), keep_blank_values=True)


def _q_value(url: httpx.URL) -> str:
    values = [value for key, value in _query_pairs(url) if key == Q_PARAM]
    if not values:
        raise MissingQQueryParameter()
    if len(values) > 1:
        raise MultipleQQueryParameters()
    return values[0]


@dataclass(frozen=True)
class SolrQuery:
    """A Solr request URL with exactly one `q` parameter.

    Both fields accept a string or an `httpx.URL` and are validated on
    construction. `negation` is only set on the result of a join, where it
    holds the "left AND NOT right" counterpart of `url`.
    """

    url: httpx.URL
    negation: httpx.URL | None = None

    def __post_init__(self) -> None:
        url = _parse_url(self.url)
        _q_value(url)
        object.__setattr__(self, "url", url)

        if self.negation is not None:
            negation = _parse_url(self.negation)
            _q_value(negation)
            object.__setattr__(self, "negation", negation)

    def __and__(self, other: "SolrQuery") -> "SolrQuery":
        return self.inner_join(other)

    def __str__(self) -> str:
        return self.url_string()

    @property
    def q(self) -> str:
        """Decoded value of the `q` parameter."""
        return _q_value(self.url)

    def url_string(self) -> str:
        """Percent-encoded URL. Use `urllib.parse.unquote_plus` for a literal form."""
        return str(self.url)

    def inverse(self) -> "SolrQuery | None":
        """Query for the negation of the last join, or None if never joined."""
        if self.negation is None:
            return None
        return SolrQuery(self.negation)

    def inner_join(self, other: "SolrQuery") -> "SolrQuery":
        """Join two queries on the same endpoint with AND, keeping the NOT form as negation."""
        positive = self._merge(other, Operator.AND)
        negative = self._merge(other, Operator.NOT)
        logger.debug("Joined %s with %s", self.url, other.url)
        return SolrQuery(positive.url, negation=negative.url)

    def _merge(self, other: "SolrQuery", operator: Operator) -> "SolrQuery":
        """Combine both `q` values with operator, on top of other's URL."""
        self._check_same_endpoint(other)

        self_q = _q_value(self.url)
        other_q = _q_value(other.url)
        merged_q = f"({self_q}) {operator} ({other_q})"
        logger.debug("Merged q: %s", merged_q)

        pairs = [
            (key, merged_q if key == Q_PARAM else value)
            for key, value in _query_pairs(other.url)
        ]
        url = other.url.copy_with(query=urlencode(pairs).encode("ascii"))
        return SolrQuery(url)

    def _check_same_endpoint(self, other: "SolrQuery") -> None:
        if self.url.host != other.url.host:
            raise DifferentHosts(self.url.host or None, other.url.host or None)
        if self.url.port != other.url.port:
            raise DifferentPorts(self.url.port, other.url.port)
        self_path = _encoded_path(self.url)
        other_path = _encoded_path(other.url)
        if self_path != other_path:
            raise DifferentPaths(self_path, other_path)
