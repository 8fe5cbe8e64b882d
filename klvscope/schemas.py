"""Pydantic schemas for API contracts."""
from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ExportFormatEnum(str, Enum):
    STRUCTURED = "structured"
    TABULAR = "tabular"
    FIXED_WIDTH = "fixed-width"
    JSON = "json"
    CSV = "csv"
    TABLE = "table"


class CurrencyDetailSchema(BaseModel):
    iso_code: str
    display_name: str
    flag_glyph: str


class MccDetailSchema(BaseModel):
    code: str
    description: str


class EntrySchema(BaseModel):
    key: str
    length: int
    value: str
    offset: int
    field_name: str
    annotated_value: str | None = None
    currency_detail: CurrencyDetailSchema | None = None
    mcc_detail: MccDetailSchema | None = None


class StatisticsSchema(BaseModel):
    total: int
    known_keys: int
    unknown_keys: int
    total_value_length: int


class KLVRequest(BaseModel):
    data: str = Field(description="Raw KLV buffer; whitespace is ignored")


class ParseResponse(BaseModel):
    entries: list[EntrySchema]
    errors: list[str]
    statistics: StatisticsSchema
    history_id: str | None = None


class ValidateResponse(BaseModel):
    valid: bool
    entry_count: int
    errors: list[str]
    total_length: int


class BuildEntrySchema(BaseModel):
    key: str = ""
    value: str = ""


class BuildRequest(BaseModel):
    entries: list[BuildEntrySchema]


class BuildResponse(BaseModel):
    data: str
    length: int


class ExportRequest(BaseModel):
    data: str
    format: ExportFormatEnum | None = None
    search: str | None = Field(default=None, description="Only export entries matching this term")


class BatchResultSchema(BaseModel):
    line: int
    input: str
    valid: bool
    entries: list[EntrySchema]
    errors: list[str]


class BatchResponse(BaseModel):
    processed: int
    valid: int
    results: list[BatchResultSchema]


class HistoryRequest(BaseModel):
    data: str
    label: str | None = Field(default=None, max_length=128)


class HistoryEntrySchema(BaseModel):
    id: str
    label: str
    data: str
    created_at: datetime
    result_count: int


class CurrencyEntrySchema(CurrencyDetailSchema):
    numeric_code: str


class MccEntrySchema(BaseModel):
    code: str
    description: str
