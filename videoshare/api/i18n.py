"""String table endpoints for the web client."""
from typing import Dict, List
from fastapi import APIRouter

from videoshare.core.i18n import SUPPORTED_LANGUAGES, TRANSLATIONS, normalize_language

router = APIRouter(prefix="/i18n", tags=["Localization"])


@router.get("", response_model=List[str])
async def list_languages():
    """Supported language codes."""
    return list(SUPPORTED_LANGUAGES)


@router.get("/{language}", response_model=Dict[str, str])
async def get_translations(language: str):
    """Full string table; unknown languages fall back to English."""
    return TRANSLATIONS[normalize_language(language)]
