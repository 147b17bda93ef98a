"""Status decision for tag-association mutations.

=================  =================  ======
upstream status    ``data.success``   answer
=================  =================  ======
200                true               204
200                false              422
200                ``data`` absent    422
anything else      (not inspected)    same status
=================  =================  ======

GraphQL ``errors`` are logged but never change the answer.
"""

from __future__ import annotations

import logging

from fastapi import status

from catalog_gateway.datahub.decoder import decode_mutation
from catalog_gateway.datahub.models import MutationResult
from catalog_gateway.datahub.transport import UpstreamResponse

logger = logging.getLogger(__name__)


def mutation_status(upstream_status: int, result: MutationResult | None) -> int:
    if upstream_status != status.HTTP_200_OK:
        return upstream_status
    if result is not None and result.succeeded:
        return status.HTTP_204_NO_CONTENT
    return 422


def interpret_mutation(response: UpstreamResponse) -> int:
    """Decode a mutation response (only when the transport said OK) and decide."""
    if not response.ok:
        return mutation_status(response.status_code, None)

    result = decode_mutation(response.content)
    for error in result.errors or ():
        logger.warning("DataHub mutation reported error: %s", error.message)
    return mutation_status(response.status_code, result)
