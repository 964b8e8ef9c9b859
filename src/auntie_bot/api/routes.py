from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import PlainTextResponse, Response

from auntie_bot.config import Settings
from auntie_bot.feedback import list_feedback, submit_feedback
from auntie_bot.ledger.queries import clear_ledger, fetch_ledger_snapshot
from auntie_bot.ledger.store import LedgerStore

from .schemas import (
    ClearOut,
    ClearRequest,
    EntryOut,
    FeedbackCreatedOut,
    FeedbackIn,
    FeedbackItemOut,
    FeedbackListOut,
    SummaryOut,
)

router = APIRouter(prefix="/api", tags=["ledger"])
health_router = APIRouter(tags=["health"])


def get_store(request: Request) -> LedgerStore:
    """FastAPI dependency returning the store attached at startup."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/summary", response_model=SummaryOut)
def read_summary(
    u: str | None = Query(default=None),
    store: LedgerStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> SummaryOut:
    snapshot = fetch_ledger_snapshot(store, u, timezone=settings.timezone)
    return SummaryOut(
        entries=[
            EntryOut(category=entry.category, amount=entry.amount, date=entry.recorded_at)
            for entry in snapshot.entries
        ],
        tz=snapshot.timezone,
        generated_at=snapshot.generated_at,
    )


@router.post("/clear", response_model=ClearOut)
def clear_entries(
    payload: ClearRequest | None = None,
    store: LedgerStore = Depends(get_store),
) -> ClearOut:
    token = payload.u if payload is not None else None
    removed = clear_ledger(store, token)
    return ClearOut(count_before=removed)


@router.post(
    "/feedback",
    response_model=FeedbackCreatedOut,
    status_code=status.HTTP_201_CREATED,
)
def create_feedback(
    payload: FeedbackIn,
    request: Request,
    store: LedgerStore = Depends(get_store),
) -> FeedbackCreatedOut:
    record = submit_feedback(
        store,
        message=payload.message,
        token=payload.u,
        page=payload.page,
        at_client=payload.at,
        ip=_client_ip(request),
    )
    return FeedbackCreatedOut(id=record.id)


@router.get("/feedback", response_model=FeedbackListOut)
def read_feedback(
    offset: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    store: LedgerStore = Depends(get_store),
) -> FeedbackListOut:
    page = list_feedback(store, offset=_lenient_int(offset), limit=_lenient_int(limit))
    return FeedbackListOut(
        total=page.total,
        offset=page.offset,
        limit=page.limit,
        items=[
            FeedbackItemOut(
                id=record.id,
                token=record.token,
                page=record.page,
                message=record.message,
                at_server=record.at_server,
                at_client=record.at_client,
            )
            for record in page.items
        ],
    )


@health_router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Auntie Can Count One is online 👵"


@health_router.get("/health")
def health_check() -> Response:
    return Response(status_code=status.HTTP_200_OK)


def _client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip() or None
    return request.client.host if request.client else None


def _lenient_int(value: str | None) -> int | None:
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None
