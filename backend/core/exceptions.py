import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .errors import BadRequestError, NotFoundError, StorageError, ValidationFailed

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error"


def portfolio_exception_handler(exc, context):
    """Map domain errors onto HTTP responses; DRF errors keep DRF's handling.

    Storage faults and anything unexpected become a bare 500 for the client,
    with the detail going to the server log only.
    """
    if isinstance(exc, ValidationFailed):
        return Response(
            {"message": "Validation failed", "errors": exc.errors},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(exc, BadRequestError):
        return Response({"message": exc.message}, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, NotFoundError):
        return Response({"message": exc.message}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, StorageError):
        logger.error(f"Storage fault ({exc.kind}): {exc.message}", exc_info=exc)
        return Response({"message": GENERIC_ERROR}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}")
    return Response({"message": GENERIC_ERROR}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
