"""Pydantic models for document editing and contextual suggestions."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CursorPayload(BaseModel):
    """Either a run-relative position or a flat `cursor_offset` into the document text."""

    model_config = ConfigDict(populate_by_name=True)

    run_index: Optional[int] = Field(default=None, alias="run_index")
    offset: Optional[int] = None
    focus: Optional[int] = None
    cursor_offset: Optional[int] = Field(default=None, alias="cursor_offset", ge=0)
    # Flat selection end when `cursor_offset` is used.
    selection_end: Optional[int] = Field(default=None, alias="selection_end", ge=0)


class CreateDocumentRequest(BaseModel):
    text: str = ""


class EditRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    run_index: int = Field(alias="run_index", ge=0)
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    text: str = ""
    cursor: Optional[CursorPayload] = None


class AcceptRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    note_id: str = Field(alias="note_id")


class DocumentPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    document_id: str = Field(alias="document_id")
    revision: int
    runs: List[str] = Field(default_factory=list)
    text: str = ""


class SuggestionPayload(BaseModel):
    id: str
    content: str
    preview: str
    timestamp: int


class AnchorPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    run_index: int = Field(alias="run_index")
    offset: int


class SuggestionsResponsePayload(BaseModel):
    suggestions: List[SuggestionPayload] = Field(default_factory=list)
    anchor: Optional[AnchorPayload] = None


class EditResponsePayload(BaseModel):
    document: DocumentPayload
    suggestions: Optional[SuggestionsResponsePayload] = None


class AcceptResponsePayload(BaseModel):
    applied: bool
    document: DocumentPayload
    cursor: Optional[CursorPayload] = None
