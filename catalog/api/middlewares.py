from typing import Awaitable, Callable

from aiohttp import web
from pydantic import ValidationError

from catalog.core.logging import get_logger
from catalog.domain import DomainError, ErrorKind, ValidationFailedError
from catalog.schemas import ErrorResponse

logger = get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.WRITE_FAILED: 409,
    ErrorKind.DECODE_FAILED: 500,
    ErrorKind.STORAGE_UNAVAILABLE: 503,
}


def error_response(error: DomainError) -> web.Response:
    """Сериализует доменную ошибку в JSON-ответ с кодом по ErrorKind."""
    body = ErrorResponse(
        error=error.kind.value,
        message=error.message,
        details=error.details or None,
    )
    return web.json_response(
        body.model_dump(mode="json"),
        status=STATUS_BY_KIND[error.kind],
    )


def _from_pydantic(error: ValidationError) -> ValidationFailedError:
    errors = [
        {"loc": [str(part) for part in item["loc"]], "msg": item["msg"]}
        for item in error.errors()
    ]
    return ValidationFailedError("Invalid request", {"errors": errors})


@web.middleware
async def error_middleware(
    request: web.Request,
    handler: Callable[[web.Request], Awaitable[web.StreamResponse]],
) -> web.StreamResponse:
    """
    Переводит таксономию ошибок ядра в HTTP-ответы,
    чтобы обработчики не знали о кодах статуса.
    """
    try:
        return await handler(request)
    except ValidationError as e:
        error = _from_pydantic(e)
        logger.info("Rejected %s %s: %s", request.method, request.path, error)
        return error_response(error)
    except DomainError as e:
        if STATUS_BY_KIND[e.kind] >= 500:
            logger.error("Failed %s %s: %s", request.method, request.path, e)
        else:
            logger.info("Rejected %s %s: %s", request.method, request.path, e)
        return error_response(e)
