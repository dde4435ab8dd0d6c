import logging
from collections import defaultdict
from typing import Annotated, Any, Generic, Optional, Type, TypeVar
from fastapi import Depends, Path, Request
from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationFailedError
from app.db.base import BIGINT_MAX, BIGINT_MIN
from app.db.session import getDB_session

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# primary key taken from the URL
RecordId = Annotated[int, Path(ge=BIGINT_MIN, le=BIGINT_MAX)]

# pydantic error type -> rule name used as the key in `messages`
RULES = {
    "missing": "required",
    "string_type": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "datetime_type": "date",
    "datetime_parsing": "date",
    "datetime_from_date_parsing": "date",
    "string_too_long": "max",
    "less_than_equal": "max",
    "string_too_short": "min",
    "greater_than_equal": "min",
}


def is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


class RequestValidator(Generic[SchemaT]):
    """
    Validates a raw request body against `schema`.

    All failing fields are collected into ``{field: [messages]}`` before anything
    touches a repository. `exists` maps a field to a soft-deletable model whose
    live rows the value must reference.
    """

    def __init__(self,
                 schema: Type[SchemaT],
                 messages: Optional[dict[str, str]] = None,
                 exists: Optional[dict[str, Any]] = None,
                 partial: bool = False):
        self.schema = schema
        self.messages = messages or {}
        self.exists = exists or {}
        self.partial = partial

    def message_for(self, field: str, error: dict) -> str:
        rule = "required" if is_blank(error.get("input")) else RULES.get(error["type"], error["type"])
        return self.messages.get(f"{field}.{rule}", error["msg"])

    async def validate(self, payload: Any, db: AsyncSession) -> SchemaT:
        if not isinstance(payload, dict):
            raise ValidationFailedError({"body": ["The request body must be an object."]})

        errors: dict[str, list[str]] = defaultdict(list)
        if self.partial:
            # a field that is sent must carry a value
            for field in self.schema.model_fields:
                if field in payload and (payload[field] is None or is_blank(payload[field])):
                    errors[field].append(self.message_for(field, {"type": "missing", "msg": "Field required"}))

        data = None
        try:
            data = self.schema.model_validate(payload)
        except ValidationError as e:
            for error in e.errors():
                field = str(error["loc"][0]) if error["loc"] else "body"
                message = self.message_for(field, error)
                if message not in errors[field]:
                    errors[field].append(message)

        for field, model in self.exists.items():
            if field in errors or payload.get(field) is None:
                continue
            if not await self._exists(db, model, payload[field]):
                errors[field].append(self.messages.get(f"{field}.exists", f"The selected {field} is invalid."))

        if errors:
            logger.info(f"{self.schema.__name__} validation failed: {dict(errors)}")
            raise ValidationFailedError(dict(errors))
        return data

    async def _exists(self, db: AsyncSession, model: Any, value: Any) -> bool:
        try:
            id = int(value)
        except (TypeError, ValueError):
            return False
        result = await db.execute(
            select(model.id).where(model.id == id, model.deleted_at.is_(None)))
        return result.scalar_one_or_none() is not None


async def read_payload(request: Request) -> Any:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        form = await request.form()
        return dict(form)
    body = await request.body()
    if not body:
        return {}
    try:
        return await request.json()
    except ValueError:
        raise ValidationFailedError({"body": ["The request body must be valid JSON."]})


def validated(validator: RequestValidator[SchemaT]):
    """FastAPI dependency that runs `validator` on the request body."""
    async def dependency(request: Request, db: AsyncSession = Depends(getDB_session)):
        payload = await read_payload(request)
        return await validator.validate(payload, db)
    return dependency
