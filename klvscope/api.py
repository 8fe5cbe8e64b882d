"""FastAPI application for klvscope."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .builder import build
from .config import settings
from .directory import CURRENCY_TABLE, FIELD_DIRECTORY
from .entries import BuildEntry, Entry
from .exporter import ExportFormat, export
from .logging_conf import configure_logging
from .mcc_codes import MCC_TABLE
from .middleware import RequestLoggingMiddleware, route_path
from .monitoring import metrics_payload, record_parse, record_service_error
from .parser import parse, validate
from .schemas import (
    BatchResponse,
    BatchResultSchema,
    BuildRequest,
    BuildResponse,
    CurrencyEntrySchema,
    EntrySchema,
    ExportRequest,
    HistoryEntrySchema,
    HistoryRequest,
    KLVRequest,
    MccEntrySchema,
    ParseResponse,
    StatisticsSchema,
    ValidateResponse,
)
from .services.batch import process_batch
from .services.errors import ServiceError
from .services.history import HistoryEntry, HistoryStore
from .stats import filter_entries, summarize

logger = logging.getLogger("klvscope.api")

_EXPORT_FILES = {
    ExportFormat.STRUCTURED: ("klv-export.json", "application/json"),
    ExportFormat.TABULAR: ("klv-export.csv", "text/csv"),
    ExportFormat.FIXED_WIDTH: ("klv-export.txt", "text/plain"),
}

history_store = HistoryStore(limit=settings.history_limit)


def _warn_insecure_defaults() -> None:
    if settings.api_key == "dev-secret-key" and settings.environment != "development":
        logger.warning(
            "api key is using the default value",
            extra={"config_key": "api_key", "environment": settings.environment},
        )


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    _warn_insecure_defaults()
    yield


app = FastAPI(title="klvscope", version="0.1.0", lifespan=lifespan)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CORSMiddleware, allow_origins=settings.allowed_origins, allow_methods=["*"], allow_headers=["*"])


async def require_api_key(x_api_key: str = Header(...)) -> None:
    if x_api_key != settings.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def get_history() -> HistoryStore:
    return history_store


def _entry_schema(entry: Entry) -> EntrySchema:
    return EntrySchema.model_validate(entry.to_dict())


def _history_schema(entry: HistoryEntry) -> HistoryEntrySchema:
    return HistoryEntrySchema(
        id=entry.id,
        label=entry.label,
        data=entry.data,
        created_at=entry.created_at,
        result_count=entry.result_count,
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    path = route_path(request)
    logger.warning(
        "service error",
        extra={"code": exc.code, "path": path, "method": request.method},
    )
    record_service_error(exc.code, path)
    return JSONResponse(status_code=exc.status_code, content={"code": exc.code, "message": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled exception",
        extra={"path": route_path(request), "method": request.method},
    )
    return JSONResponse(status_code=500, content={"code": "ERR_INTERNAL", "message": "Internal server error"})


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metrics", tags=["system"])
async def metrics() -> Response:
    payload, content_type = metrics_payload()
    return Response(content=payload, media_type=content_type)


@app.post("/v1/parse", response_model=ParseResponse, tags=["klv"], dependencies=[Depends(require_api_key)])
async def parse_buffer(
    payload: KLVRequest,
    record: bool = False,
    search: str | None = None,
    history: HistoryStore = Depends(get_history),
) -> ParseResponse:
    outcome = parse(payload.data)
    record_parse(outcome.errors)
    entries = filter_entries(outcome.entries, search)
    stats = summarize(entries)

    history_id = None
    if record and payload.data.strip():
        history_id = history.add(payload.data).id

    return ParseResponse(
        entries=[_entry_schema(entry) for entry in entries],
        errors=outcome.errors,
        statistics=StatisticsSchema(
            total=stats.total,
            known_keys=stats.known_keys,
            unknown_keys=stats.unknown_keys,
            total_value_length=stats.total_value_length,
        ),
        history_id=history_id,
    )


@app.post("/v1/validate", response_model=ValidateResponse, tags=["klv"], dependencies=[Depends(require_api_key)])
async def validate_buffer(payload: KLVRequest) -> ValidateResponse:
    outcome = validate(payload.data)
    record_parse(outcome.errors)
    return ValidateResponse(
        valid=outcome.valid,
        entry_count=outcome.entry_count,
        errors=outcome.errors,
        total_length=outcome.total_length,
    )


@app.post("/v1/build", response_model=BuildResponse, tags=["klv"], dependencies=[Depends(require_api_key)])
async def build_buffer(payload: BuildRequest) -> BuildResponse:
    data = build(BuildEntry(key=item.key, value=item.value) for item in payload.entries)
    return BuildResponse(data=data, length=len(data))


@app.post("/v1/export", tags=["klv"], dependencies=[Depends(require_api_key)])
async def export_buffer(payload: ExportRequest) -> PlainTextResponse:
    fmt = ExportFormat.resolve(payload.format.value if payload.format else settings.default_export_format)
    outcome = parse(payload.data)
    record_parse(outcome.errors)
    filename, media_type = _EXPORT_FILES[fmt]
    return PlainTextResponse(
        content=export(filter_entries(outcome.entries, payload.search), fmt),
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.post("/v1/batch", response_model=BatchResponse, tags=["klv"], dependencies=[Depends(require_api_key)])
async def batch(payload: KLVRequest) -> BatchResponse:
    results = process_batch(payload.data, max_lines=settings.batch_max_lines)
    for result in results:
        record_parse(result.errors)
    return BatchResponse(
        processed=len(results),
        valid=sum(1 for result in results if result.valid),
        results=[
            BatchResultSchema(
                line=result.line,
                input=result.input,
                valid=result.valid,
                entries=[_entry_schema(entry) for entry in result.entries],
                errors=result.errors,
            )
            for result in results
        ],
    )


@app.get("/v1/history", response_model=list[HistoryEntrySchema], tags=["history"], dependencies=[Depends(require_api_key)])
async def list_history(history: HistoryStore = Depends(get_history)) -> list[HistoryEntrySchema]:
    return [_history_schema(entry) for entry in history.list()]


@app.post(
    "/v1/history",
    response_model=HistoryEntrySchema,
    status_code=status.HTTP_201_CREATED,
    tags=["history"],
    dependencies=[Depends(require_api_key)],
)
async def add_history(payload: HistoryRequest, history: HistoryStore = Depends(get_history)) -> HistoryEntrySchema:
    return _history_schema(history.add(payload.data, label=payload.label))


@app.get("/v1/history/{entry_id}", response_model=HistoryEntrySchema, tags=["history"], dependencies=[Depends(require_api_key)])
async def get_history_entry(entry_id: str, history: HistoryStore = Depends(get_history)) -> HistoryEntrySchema:
    return _history_schema(history.get(entry_id))


@app.delete(
    "/v1/history",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["history"],
    dependencies=[Depends(require_api_key)],
)
async def clear_history(history: HistoryStore = Depends(get_history)) -> Response:
    history.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/v1/directory/fields", tags=["directory"], dependencies=[Depends(require_api_key)])
async def list_fields() -> dict[str, str]:
    return dict(FIELD_DIRECTORY)


@app.get(
    "/v1/directory/currencies",
    response_model=list[CurrencyEntrySchema],
    tags=["directory"],
    dependencies=[Depends(require_api_key)],
)
async def list_currencies() -> list[CurrencyEntrySchema]:
    return [
        CurrencyEntrySchema(
            numeric_code=code,
            iso_code=currency.iso_code,
            display_name=currency.display_name,
            flag_glyph=currency.flag_glyph,
        )
        for code, currency in CURRENCY_TABLE.items()
    ]


@app.get("/v1/directory/mcc", response_model=list[MccEntrySchema], tags=["directory"], dependencies=[Depends(require_api_key)])
async def list_mcc() -> list[MccEntrySchema]:
    return [MccEntrySchema(code=code, description=description) for code, description in MCC_TABLE.items()]
