from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette import status
import logging

logger = logging.getLogger("currency_converter.errors")


class CurrencyConverterError(Exception):
    """Base class for domain errors."""

    error_code = "converter_error"
    status_code = status.HTTP_400_BAD_REQUEST


class RateTableError(CurrencyConverterError, ValueError):
    error_code = "invalid_rate_table"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UnknownCurrencyError(CurrencyConverterError, KeyError):
    error_code = "unknown_currency"

    def __init__(self, code: str, allowed):
        self.code = code
        self.allowed = list(allowed)
        super().__init__(code)

    def __str__(self) -> str:
        return f"Unsupported currency '{self.code}'. Allowed: {', '.join(self.allowed)}"


class InvalidAmountInputError(CurrencyConverterError, ValueError):
    error_code = "invalid_amount_input"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


def not_found_handler(request: Request, exc):  # type: ignore
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "http_error", "detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "not_found",
            "detail": f"No route for {request.method} {request.url.path}",
        },
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def domain_error_handler(request: Request, exc: CurrencyConverterError):  # type: ignore
    logger.info("request rejected: %s", exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error_code, "detail": str(exc)},
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
