"""
Service layer decorators for common functionality.

This module provides the error-logging decorator applied to service methods.
"""

import functools
import inspect
import structlog
from typing import Any, Awaitable, Callable, Dict, ParamSpec, TypeVar

from pydantic import ValidationError as SchemaValidationError

from player_registry.core.exceptions import ServiceException, ValidationError
from player_registry.core.logging import operation_context

logger = structlog.get_logger(__name__)

# Type variables for generic decorator typing
P = ParamSpec("P")
R = TypeVar("R")


def _bound_arguments(
    func: Callable[..., Any], args: tuple, kwargs: dict
) -> Dict[str, Any]:
    bound_args = inspect.signature(func).bind(*args, **kwargs)
    bound_args.apply_defaults()
    return dict(bound_args.arguments)


def _build_context(
    func: Callable[..., Any],
    service_name: str,
    include_context: bool,
    arguments: Dict[str, Any],
) -> Dict[str, Any]:
    context: Dict[str, Any] = {
        "service": service_name,
        "operation": func.__name__,
    }
    if not include_context:
        return context

    for name, value in arguments.items():
        if name in ["self", "db", "session"]:
            continue
        # Limit string values to avoid huge log entries
        context[name] = str(value)[:200] if value is not None else None
    return context


def service_error_handler(
    service_name: str,
    include_context: bool = True,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Decorator for logging service method calls and failures.

    The service, operation and any ``player_id`` argument are bound to the
    structlog context for the duration of the call, so log lines emitted by
    repositories underneath carry them too.

    Service exceptions are logged with their context and re-raised as-is so
    the transport layer can map them to status codes. A ValueError raised by
    the operation becomes a ValidationError. Schema validation failures come
    from stored data rather than from the caller, so they propagate unchanged
    like any other unexpected error.

    :param service_name: Name of the service (e.g., "PlayerService")
    :param include_context: Whether to include method parameters in log context
    :returns: Decorated coroutine function

    :example:
        @service_error_handler("PlayerService")
        async def get_player(self, player_id: str) -> PlayerResponse:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            arguments = _bound_arguments(func, args, kwargs)
            context = _build_context(func, service_name, include_context, arguments)

            with operation_context(
                service=service_name,
                operation=func.__name__,
                player_id=arguments.get("player_id"),
            ):
                logger.debug("Service method called", **context)
                try:
                    result = await func(*args, **kwargs)
                except ServiceException as e:
                    logger.warning(
                        "Service operation rejected",
                        error_type=e.__class__.__name__,
                        error_message=str(e),
                        error_context=e.context,
                        **context,
                    )
                    raise
                except SchemaValidationError as e:
                    # Must precede ValueError, which it subclasses
                    logger.error(
                        "Stored data failed schema validation",
                        error_message=str(e),
                        **context,
                    )
                    raise
                except ValueError as e:
                    logger.warning(
                        "Validation error in service operation",
                        error_message=str(e),
                        **context,
                    )
                    raise ValidationError(
                        message=str(e),
                        service=service_name,
                        operation=func.__name__,
                        context=context if include_context else {},
                    ) from e
                except Exception as e:
                    logger.error(
                        "Unexpected error in service operation",
                        error_type=e.__class__.__name__,
                        error_message=str(e),
                        exc_info=True,
                        **context,
                    )
                    raise

                logger.debug("Service method completed successfully", **context)
                return result

        return wrapper

    return decorator
