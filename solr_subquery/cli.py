# solr_subquery/cli.py
import logging
import sys
from typing import Annotated
from urllib.parse import unquote_plus

import cyclopts

from solr_subquery.chain import SolrQueryChain
from solr_subquery.errors import ChainFoldError, SolrSubqueryError
from solr_subquery.query import SolrQuery

logger = logging.getLogger(__name__)

app = cyclopts.App(
    name="solr-subquery",
    help="Combine Solr query URLs into cumulative joins.",
)


def _render(url: str, decode: bool) -> str:
    return unquote_plus(url) if decode else url


@app.command(name="join")
def join(
    urls: Annotated[
        list[str],
        cyclopts.Parameter(help="Query URLs on the same endpoint, joined left to right"),
    ],
    inverse: Annotated[
        bool,
        cyclopts.Parameter(name="--inverse", help="Also print the negation of each join"),
    ] = False,
    decode: Annotated[
        bool,
        cyclopts.Parameter(name=["--decode", "-d"], help="Print URLs without percent-encoding"),
    ] = False,
    verbose: Annotated[
        bool,
        cyclopts.Parameter(name=["--verbose", "-v"], help="Enable debug logging"),
    ] = False,
) -> None:
    """Print every step of the left-associative join of the given URLs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        chain = SolrQueryChain([SolrQuery(url) for url in urls])
    except SolrSubqueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Folding %s queries", len(chain))
    count = 0
    try:
        for query in chain:
            print(_render(query.url_string(), decode))
            if inverse:
                negated = query.inverse()
                if negated is not None:
                    print(f"  inverse: {_render(negated.url_string(), decode)}")
            count += 1
    except ChainFoldError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"\nSteps: {count}", file=sys.stderr)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
