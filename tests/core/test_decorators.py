"""
Tests for the service error handling decorator.
"""

import pytest
import structlog
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from player_registry.core.decorators import service_error_handler
from player_registry.core.exceptions import (
    NotFoundError,
    ServiceException,
    ValidationError,
)


class Stored(BaseModel):
    level: int


class SampleService:
    def __init__(self):
        self.seen_context = {}

    @service_error_handler("SampleService")
    async def lookup(self, player_id: str) -> str:
        self.seen_context = structlog.contextvars.get_contextvars()
        return player_id

    @service_error_handler("SampleService")
    async def load_corrupt(self) -> Stored:
        return Stored.model_validate({"level": "high"})

    @service_error_handler("SampleService")
    async def succeed(self, value: int) -> int:
        return value * 2

    @service_error_handler("SampleService")
    async def bad_value(self, value: str) -> None:
        raise ValueError(f"cannot use {value}")

    @service_error_handler("SampleService")
    async def missing(self) -> None:
        raise NotFoundError(message="nothing here", service="SampleService")

    @service_error_handler("SampleService", include_context=False)
    async def broken_storage(self) -> None:
        raise RuntimeError("connection lost")


@pytest.fixture
def sample_service():
    return SampleService()


async def test_result_passes_through(sample_service):
    assert await sample_service.succeed(21) == 42


async def test_value_error_becomes_validation_error(sample_service):
    with pytest.raises(ValidationError) as exc_info:
        await sample_service.bad_value("xyz")

    error = exc_info.value
    assert error.status_code == 400
    assert error.operation == "bad_value"
    assert error.context["value"] == "xyz"
    assert isinstance(error.__cause__, ValueError)


async def test_service_exception_is_reraised_unchanged(sample_service):
    with pytest.raises(NotFoundError) as exc_info:
        await sample_service.missing()
    assert exc_info.value.message == "nothing here"


async def test_unexpected_error_propagates(sample_service):
    with pytest.raises(RuntimeError, match="connection lost"):
        await sample_service.broken_storage()


def test_wrapper_keeps_metadata():
    assert SampleService.succeed.__name__ == "succeed"


def test_service_exception_string_names_origin():
    error = ServiceException("boom", service="PlayerService", operation="get_player")
    assert str(error) == "[PlayerService.get_player] boom"
    assert error.status_code == 500


async def test_schema_error_is_not_turned_into_bad_request(sample_service):
    with pytest.raises(SchemaValidationError) as exc_info:
        await sample_service.load_corrupt()
    assert not isinstance(exc_info.value, ServiceException)


async def test_operation_and_player_are_bound_during_call(sample_service):
    await sample_service.lookup("7")

    assert sample_service.seen_context["service"] == "SampleService"
    assert sample_service.seen_context["operation"] == "lookup"
    assert sample_service.seen_context["player_id"] == "7"


async def test_bindings_are_released_after_call(sample_service):
    await sample_service.lookup("7")
    assert "player_id" not in structlog.contextvars.get_contextvars()
