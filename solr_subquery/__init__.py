# solr_subquery/__init__.py
"""solr-subquery - Combine Solr query URLs into joins and negation-joins."""

from solr_subquery.chain import SolrQueryChain
from solr_subquery.errors import (
    ChainFoldError,
    DifferentHosts,
    DifferentPaths,
    DifferentPorts,
    InvalidUrl,
    MissingQQueryParameter,
    MultipleQQueryParameters,
    SolrSubqueryError,
)
from solr_subquery.query import SolrQuery

__all__ = [
    # Queries
    "SolrQuery",
    "SolrQueryChain",
    # Errors
    "SolrSubqueryError",
    "InvalidUrl",
    "MissingQQueryParameter",
    "MultipleQQueryParameters",
    "DifferentHosts",
    "DifferentPorts",
    "DifferentPaths",
    "ChainFoldError",
]
