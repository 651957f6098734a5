"""FastAPI entrypoint for the Scrappr backend."""

from __future__ import annotations

import logging

from config import Settings

_settings = Settings.from_env()

logging.basicConfig(
    level=getattr(logging, _settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

import uvicorn  # noqa: E402
from fastapi import FastAPI, HTTPException  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from app_state import ScrapprAppState  # noqa: E402
from context_models import (  # noqa: E402
    AcceptRequest,
    AcceptResponsePayload,
    CreateDocumentRequest,
    CursorPayload,
    DocumentPayload,
    EditRequest,
    EditResponsePayload,
    SuggestionsResponsePayload,
)
from models import CreateNoteRequest, NotesResponsePayload, SavedNotePayload  # noqa: E402

logger = logging.getLogger(__name__)

app = FastAPI(title="Scrappr Backend", description="Saved notes and contextual note suggestions")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

state = ScrapprAppState(settings=_settings)


@app.get("/", tags=["health"])
async def root():
    return {"status": "ok", "message": "Scrappr backend is running"}


@app.get("/health", tags=["health"])
async def health():
    return {"status": "ok", "message": "Scrappr backend is running"}


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


@app.get("/notes", response_model=NotesResponsePayload, tags=["notes"])
async def list_notes():
    try:
        with state.lock:
            notes = state.notes.list_notes()
        return NotesResponsePayload(notes=[SavedNotePayload.from_note(note) for note in notes])
    except Exception as exc:
        logger.exception("Listing notes failed")
        raise HTTPException(status_code=500, detail=str(exc))


@app.post("/notes", response_model=SavedNotePayload, tags=["notes"])
async def create_note(request: CreateNoteRequest):
    try:
        with state.lock:
            note = state.notes.save_note(request.content)
        return SavedNotePayload.from_note(note)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.exception("Saving note failed")
        raise HTTPException(status_code=500, detail=str(exc))


@app.get("/notes/{note_id}", response_model=SavedNotePayload, tags=["notes"])
async def get_note(note_id: str):
    try:
        with state.lock:
            note = state.notes.get_note(note_id)
        return SavedNotePayload.from_note(note)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Note not found")
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@app.delete("/notes/{note_id}", tags=["notes"])
async def delete_note(note_id: str):
    try:
        with state.lock:
            deleted = state.notes.delete_note(note_id)
        return {"success": True, "deleted": deleted}
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Note not found")
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc))


# ---------------------------------------------------------------------------
# Documents and suggestions
# ---------------------------------------------------------------------------


@app.post("/documents", response_model=DocumentPayload, tags=["documents"])
async def create_document(request: CreateDocumentRequest = CreateDocumentRequest()):
    try:
        with state.lock:
            return state.editor.create_document(request.text)
    except Exception as exc:
        logger.exception("Opening document failed")
        raise HTTPException(status_code=500, detail=str(exc))


@app.get("/documents/{document_id}", response_model=DocumentPayload, tags=["documents"])
async def get_document(document_id: str):
    try:
        with state.lock:
            return state.editor.get_document(document_id)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@app.delete("/documents/{document_id}", tags=["documents"])
async def close_document(document_id: str):
    try:
        with state.lock:
            state.editor.close_document(document_id)
        return {"success": True}
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@app.post("/documents/{document_id}/edit", response_model=EditResponsePayload, tags=["documents"])
async def edit_document(document_id: str, request: EditRequest):
    try:
        with state.lock:
            return state.editor.edit(document_id, request)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.exception("Edit failed for %s", document_id)
        raise HTTPException(status_code=500, detail=str(exc))


@app.post(
    "/documents/{document_id}/context",
    response_model=SuggestionsResponsePayload,
    tags=["suggestions"],
)
async def document_context(document_id: str, request: CursorPayload):
    try:
        with state.lock:
            return state.editor.context(document_id, request)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except Exception as exc:
        logger.exception("Suggestion lookup failed for %s", document_id)
        raise HTTPException(status_code=500, detail=str(exc))


@app.post(
    "/documents/{document_id}/accept",
    response_model=AcceptResponsePayload,
    tags=["suggestions"],
)
async def accept_suggestion(document_id: str, request: AcceptRequest):
    try:
        with state.lock:
            return state.editor.accept(document_id, request.note_id)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except Exception as exc:
        logger.exception("Accepting suggestion failed for %s", document_id)
        raise HTTPException(status_code=500, detail=str(exc))


@app.post("/documents/{document_id}/dismiss", tags=["suggestions"])
async def dismiss_suggestions(document_id: str):
    try:
        with state.lock:
            state.editor.dismiss(document_id)
        return {"success": True}
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Document not found")
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc))


if __name__ == "__main__":
    uvicorn.run(app, host=_settings.host, port=_settings.port)
