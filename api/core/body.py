"""
JSON body parsing for routes that must authenticate before reading the body.

Undecodable JSON is left to raise: the route's `internal_on_failure` guard
turns it into that route's generic 500. Schema failures become 400s.
"""

from __future__ import annotations

from typing import TypeVar

import pydantic
from fastapi import Request

from . import errors

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


async def parse_body(request: Request, model: type[ModelT]) -> ModelT:
    payload = await request.json()
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise errors.ValidationError(errors.describe_validation_errors(list(exc.errors()))) from exc
