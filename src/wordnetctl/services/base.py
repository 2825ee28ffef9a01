"""BaseService — abstract foundation for all wordnetctl services.

Every service receives a built :class:`WordNet` at construction time and
only reads from it. Domain exceptions are translated into ServiceResult
errors here, in one place.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wordnetctl.domain.errors import (
    NoCommonAncestorError,
    ParseError,
    UnknownIdError,
    UnknownWordError,
    WordNetError,
)
from wordnetctl.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from wordnetctl.infrastructure.wordnet import WordNet

logger = logging.getLogger(__name__)


def error_result(op: str, exc: WordNetError | OSError) -> ServiceResult:
    """Translate a domain or I/O exception into a failed ServiceResult."""
    logger.debug("%s failed: %s", op, exc)
    match exc:
        case UnknownWordError():
            return ServiceResult.failure(op, ErrorCode.UNKNOWN_WORD, str(exc), word=exc.word)
        case UnknownIdError():
            return ServiceResult.failure(op, ErrorCode.UNKNOWN_ID, str(exc), id=exc.node_id)
        case NoCommonAncestorError():
            return ServiceResult.failure(
                op,
                ErrorCode.NO_COMMON_ANCESTOR,
                str(exc),
                subset_a=exc.subset_a,
                subset_b=exc.subset_b,
            )
        case ParseError():
            return ServiceResult.failure(
                op, ErrorCode.PARSE_ERROR, str(exc), source=exc.source, line=exc.line_no
            )
        case FileNotFoundError():
            return ServiceResult.failure(
                op, ErrorCode.DATA_NOT_FOUND, f"Input file not found: {exc.filename}"
            )
        case _:
            return ServiceResult.failure(op, ErrorCode.INVALID_INPUT, str(exc))


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class QueryService(BaseService):
            def distance(self, noun1: str, noun2: str) -> ServiceResult:
                try:
                    length = self._wordnet.distance(noun1, noun2)
                except WordNetError as exc:
                    return error_result("distance", exc)
                ...
    """

    def __init__(self, wordnet: WordNet) -> None:
        self._wordnet = wordnet
