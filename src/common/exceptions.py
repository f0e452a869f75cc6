from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    TASK = "Task"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(self, resource_type: ResourceType, identifier: int | str):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(f"{self.resource_type} with ID {identifier} not found")


class TemplateRenderException(Exception):
    def __init__(self, template_name: str, message: str):
        self.template_name = template_name
        super().__init__(message)


# Exception handlers
def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.error(exc)
    return PlainTextResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=str(exc),
    )


def template_render_exception_handler(
    request: Request, exc: TemplateRenderException
):
    logger.error(f"Failed to render template '{exc.template_name}': {exc}")
    return PlainTextResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=f"Error while loading templates: {exc}",
    )


def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error: {exc}")
    return PlainTextResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=str(getattr(exc, "orig", None) or exc),
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return PlainTextResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content="An unexpected error occurred",
    )


def validation_exception_handler(request: Request, exc: RequestValidationError):
    def loc_to_dot_sep(loc: tuple[Any, ...]) -> str:
        """Convert a tuple of location parts to a dot-separated string"""
        path = ""
        for i, x in enumerate(loc):
            if isinstance(x, str):
                if i > 0:
                    path += "."
                path += x
            elif isinstance(x, int):
                path += f"[{x}]"
            else:
                raise TypeError("Unexpected type")
        return path

    messages = [
        f"Invalid value for '{loc_to_dot_sep(error['loc'])}': {error['msg']}"
        for error in exc.errors()
    ]
    logger.warning("Validation error: %s", messages)

    return PlainTextResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content="\n".join(messages),
    )
