# solr_subquery/chain.py
import logging
from collections import deque
from collections.abc import Iterable

import httpx

from solr_subquery.errors import ChainFoldError, SolrSubqueryError
from solr_subquery.query import SolrQuery

logger = logging.getLogger(__name__)


class SolrQueryChain:
    """Left-associative fold of queries into cumulative inner joins.

    Each call to `advance()` takes one folding step and returns the partial
    result: the first query, then `q0 & q1`, then `(q0 & q1) & q2`, and so on.
    Folding consumes the queue, so a chain can only be walked once. The chain
    holds no lock; callers sharing it across threads must serialize access.
    """

    def __init__(self, queries: Iterable[SolrQuery] = ()) -> None:
        self._queries: deque[SolrQuery] = deque(queries)
        self._iteration = 0
        self._exhausted = False

    @property
    def iteration(self) -> int:
        """Number of folding steps taken so far."""
        return self._iteration

    def __len__(self) -> int:
        return len(self._queries)

    def __repr__(self) -> str:
        return f"SolrQueryChain(queued={len(self._queries)}, iteration={self._iteration})"

    def add_subquery(self, source: httpx.URL | str) -> None:
        """Parse source into a query and queue it at the end of the chain."""
        query = SolrQuery(source)
        self._queries.append(query)
        logger.debug("Queued subquery %s", query.url)

    def advance(self) -> SolrQuery | None:
        """Take one folding step. Returns None once the fold is exhausted."""
        if self._iteration == 0:
            self._iteration += 1
            return self._queries[0] if self._queries else None

        if self._exhausted or len(self._queries) < 2:
            self._exhausted = True
            self._queries.clear()
            return None

        first = self._queries.popleft()
        second = self._queries.popleft()
        try:
            joined = first.inner_join(second)
        except SolrSubqueryError as e:
            raise ChainFoldError(f"Cannot join queued queries: {e}") from e

        self._queries.appendleft(joined)
        self._iteration += 1
        logger.debug("Fold step %s: %s", self._iteration - 1, joined.url)
        return joined

    def __iter__(self) -> "SolrQueryChain":
        return self

    def __next__(self) -> SolrQuery:
        query = self.advance()
        if query is None:
            raise StopIteration
        return query
