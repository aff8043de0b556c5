"""Tests for the HTTP error taxonomy and exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from chat_backend.domain.exceptions import DomainValidationError
from chat_backend.presentation.errors import (
    AppError,
    BadRequestError,
    InternalServerError,
    NotFoundError,
    UnprocessableEntityError,
    register_exception_handlers,
)


class TestErrorClasses:
    @pytest.mark.parametrize(
        "error_cls, status_code, default_message",
        [
            (BadRequestError, 400, "Bad request"),
            (NotFoundError, 404, "Resource not found"),
            (UnprocessableEntityError, 422, "Unprocessable entity"),
            (InternalServerError, 500, "Internal server error"),
        ],
    )
    def test_status_and_defaults(self, error_cls, status_code, default_message):
        err = error_cls()

        assert isinstance(err, AppError)
        assert err.status_code == status_code
        assert err.message == default_message
        assert err.name == error_cls.__name__

    def test_custom_message(self):
        assert NotFoundError("not here").message == "not here"


def make_client(error: Exception) -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    class Payload(BaseModel):
        name: str

    @app.get("/boom")
    async def boom():
        raise error

    @app.post("/validate")
    async def validate(payload: Payload):
        return payload

    return TestClient(app, raise_server_exceptions=False)


class TestHandlers:
    def test_app_error(self):
        res = make_client(NotFoundError("Item not found")).get("/boom")

        assert res.status_code == 404
        assert res.json() == {
            "success": False,
            "error": {"code": 404, "name": "NotFoundError", "message": "Item not found"},
        }

    def test_bad_request(self):
        res = make_client(BadRequestError("Missing field")).get("/boom")

        assert res.status_code == 400
        assert res.json()["error"]["code"] == 400

    def test_domain_validation(self):
        error = DomainValidationError("Message content cannot be empty")
        res = make_client(error).get("/boom")

        assert res.status_code == 422
        assert res.json()["error"]["name"] == "UnprocessableEntityError"
        assert res.json()["error"]["message"] == "Message content cannot be empty"

    def test_unknown_error_is_hidden(self):
        res = make_client(RuntimeError("database exploded")).get("/boom")

        assert res.status_code == 500
        assert res.json() == {
            "success": False,
            "error": {
                "code": 500,
                "name": "InternalServerError",
                "message": "Something went wrong",
            },
        }

    def test_request_validation_details(self):
        res = make_client(RuntimeError()).post("/validate", json={"name": 123})

        assert res.status_code == 400
        error = res.json()["error"]
        assert error["name"] == "ValidationError"
        assert error["message"] == "Invalid request"
        assert error["details"][0]["field"] == "name"
        assert error["details"][0]["message"]

    def test_method_not_allowed(self):
        res = make_client(RuntimeError()).delete("/boom")

        assert res.status_code == 405
        assert res.json()["error"]["name"] == "MethodNotAllowedError"
