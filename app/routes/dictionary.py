"""Dictionary lookup routes."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.services.dictionary import (
    DictionaryService,
    InvalidEntryError,
    WordNotFoundError,
    normalize_entry,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["dictionary"])


def get_dictionary_service(request: Request) -> DictionaryService:
    """Return the service created at application startup."""
    service: DictionaryService = request.app.state.dictionary_service
    return service


@router.get("/oxford/{entry}", response_class=JSONResponse)
async def lookup_entry(
    entry: str,
    service: DictionaryService = Depends(get_dictionary_service),
) -> JSONResponse:
    """Look up a word and return its definitions, pronunciations and verb forms."""
    try:
        word = normalize_entry(entry)
    except InvalidEntryError:
        return JSONResponse({"error": "Invalid entry parameter"}, status_code=400)

    try:
        record = await service.lookup(word)
    except WordNotFoundError:
        return JSONResponse({"error": "Word not found"}, status_code=404)
    except Exception as e:
        logger.error(f"Lookup failed for '{word}': {e}", exc_info=True)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    return JSONResponse(record.to_dict(), status_code=200)
