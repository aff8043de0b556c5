"""
Response envelopes shared by every endpoint.

Single resource:
    {"success": true, "data": {...}}
Paginated:
    {"success": true, "data": [...], "pagination": {"offset": 0, "limit": 20, "total": 3}}
Error:
    {"success": false, "error": {"code": 404, "name": "NotFoundError", "message": "..."}}
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from chat_backend.application.dto.pagination import PaginationDTO

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T


class PaginatedResponse(BaseModel, Generic[T]):
    success: bool = True
    data: list[T]
    pagination: PaginationDTO


class FieldErrorBody(BaseModel):
    field: str
    message: str


class ErrorBody(BaseModel):
    code: int
    name: str
    message: str
    details: Optional[list[FieldErrorBody]] = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: ErrorBody
