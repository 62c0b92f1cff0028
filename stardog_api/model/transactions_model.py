"""Transactions Model Classes"""

from typing import Annotated, Optional

from ..client.utils.query_options import QueryOptions, QueryParam


class TransactionDataOptions(QueryOptions):
    """Options for adding or removing RDF data inside a transaction."""
    # named graph the data is added to or removed from; the default graph when unset
    graph_uri: Annotated[Optional[str], QueryParam("graph-uri", omit_empty=True)] = None
