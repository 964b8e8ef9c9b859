from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class EntryOut(BaseModel):
    category: str
    amount: Decimal
    date: datetime


class SummaryOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entries: list[EntryOut]
    tz: str
    generated_at: datetime = Field(alias="generatedAt")


class ClearRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    u: Any = None


class ClearOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    cleared: bool = True
    count_before: int = Field(alias="countBefore")


class FeedbackIn(BaseModel):
    """Loose body: type problems surface as 400s from the feedback service."""

    model_config = ConfigDict(extra="ignore")

    u: Any = None
    message: Any = None
    page: Any = None
    at: Any = None


class FeedbackCreatedOut(BaseModel):
    ok: bool = True
    id: str


class FeedbackItemOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    token: Optional[str] = None
    page: str
    message: str
    at_server: datetime = Field(alias="atServer")
    at_client: Optional[str] = Field(default=None, alias="atClient")


class FeedbackListOut(BaseModel):
    total: int
    offset: int
    limit: int
    items: list[FeedbackItemOut]
