"""
Stardog Transactions Endpoint

Client endpoint for explicit transactions: begin, add or remove RDF data,
then commit or roll back.
"""

import logging
from typing import Optional, Union

from .base_endpoint import BaseEndpoint, TEXT_ACCEPT, path_segment
from ..request_context import RequestContext
from ..request_options import RequestHeaderOptions
from ..response.client_response import Response
from ..utils.query_options import add_options
from ...model.formats_model import RDFFormat
from ...model.transactions_model import TransactionDataOptions

logger = logging.getLogger(__name__)


class TransactionsEndpoint(BaseEndpoint):
    """Client endpoint for transaction operations."""

    async def begin(self, ctx: Optional[RequestContext], database: str) -> str:
        """
        Begin a transaction.

        Returns:
            The transaction id to pass to the other transaction operations
        """
        self._validate(database=database)
        transaction_id = await self._request_text(ctx, "POST", f"{path_segment(database)}/transaction/begin",
                                                  header_options=TEXT_ACCEPT)
        transaction_id = transaction_id.strip()
        logger.debug(f"Began transaction {transaction_id} on {database}")
        return transaction_id

    async def commit(self, ctx: Optional[RequestContext], database: str, transaction_id: str) -> Response:
        self._validate(database=database, transaction_id=transaction_id)
        return await self._request(
            ctx, "POST", f"{path_segment(database)}/transaction/commit/{path_segment(transaction_id)}")

    async def rollback(self, ctx: Optional[RequestContext], database: str, transaction_id: str) -> Response:
        self._validate(database=database, transaction_id=transaction_id)
        return await self._request(
            ctx, "POST", f"{path_segment(database)}/transaction/rollback/{path_segment(transaction_id)}")

    async def _change(self, ctx, operation: str, database: str, transaction_id: str,
                      data: Union[bytes, str], rdf_format: RDFFormat,
                      options: Optional[TransactionDataOptions]) -> Response:
        self._validate(database=database, transaction_id=transaction_id)
        path = add_options(f"{path_segment(database)}/{path_segment(transaction_id)}/{operation}", options)
        header_options = RequestHeaderOptions(content_type=RDFFormat(rdf_format).value)
        return await self._request(ctx, "POST", path, header_options=header_options, content=data)

    async def add(self, ctx: Optional[RequestContext], database: str, transaction_id: str,
                  data: Union[bytes, str], rdf_format: RDFFormat = RDFFormat.TURTLE,
                  options: Optional[TransactionDataOptions] = None) -> Response:
        """Add RDF data, serialized in ``rdf_format``, within a transaction."""
        return await self._change(ctx, "add", database, transaction_id, data, rdf_format, options)

    async def remove(self, ctx: Optional[RequestContext], database: str, transaction_id: str,
                     data: Union[bytes, str], rdf_format: RDFFormat = RDFFormat.TURTLE,
                     options: Optional[TransactionDataOptions] = None) -> Response:
        """Remove RDF data, serialized in ``rdf_format``, within a transaction."""
        return await self._change(ctx, "remove", database, transaction_id, data, rdf_format, options)
