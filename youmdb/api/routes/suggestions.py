"""
YouMDB API — Suggestion and channel import routes.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from youmdb.api.deps import get_import_service, get_suggestion_service
from youmdb.core.identity import Identity, get_identity, require_interactive
from youmdb.schemas.schemas import ChannelImportRequest, Creator, Suggestion, SuggestionCreate
from youmdb.services.importer.import_service import ImportService
from youmdb.services.suggestions.suggestion_service import SuggestionService

router = APIRouter(tags=["Suggestions"])


@router.post("/suggestions", response_model=Suggestion, status_code=201)
async def submit_suggestion(
    data: SuggestionCreate,
    identity: Identity = Depends(get_identity),
    suggestions: SuggestionService = Depends(get_suggestion_service),
):
    return await suggestions.submit(identity, data.url, data.extra_info, data.notes)


@router.post("/suggestions/{suggestion_id}/import", response_model=Suggestion)
async def import_suggestion(
    suggestion_id: str,
    identity: Identity = Depends(get_identity),
    suggestions: SuggestionService = Depends(get_suggestion_service),
    importer: ImportService = Depends(get_import_service),
):
    """Resolve the suggested channel on YouTube and add it as a creator. Guests get 403."""
    require_interactive(identity, "import channels")
    return await suggestions.import_suggestion(suggestion_id, importer)


@router.post("/imports/channels", response_model=Creator)
async def import_channel(
    data: ChannelImportRequest,
    identity: Identity = Depends(get_identity),
    importer: ImportService = Depends(get_import_service),
):
    require_interactive(identity, "import channels")
    return await importer.import_channel(data.identifier)
