"""Dictionary management endpoints: table status, reload and result cache reset."""
from fastapi import APIRouter, Depends
import logging

from lexibridge.core.dependencies import get_engine
from lexibridge.schemas.base import Envelope, Message, ok
from lexibridge.schemas.translation import DictionaryStatusResponse
from lexibridge.services.translation_engine import DictionaryTranslationEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/dictionary", tags=["dictionary"])


def _status(engine: DictionaryTranslationEngine) -> DictionaryStatusResponse:
    store_status = engine.store.status()
    return DictionaryStatusResponse(
        ready=engine.is_ready(),
        ttl_seconds=store_status["ttl_seconds"],
        tables=store_status["tables"],
        cache=engine.get_cache_stats(),
    )


@router.get("/status", response_model=Envelope[DictionaryStatusResponse])
async def dictionary_status(engine: DictionaryTranslationEngine = Depends(get_engine)):
    return ok(_status(engine))


@router.post("/refresh", response_model=Envelope[DictionaryStatusResponse])
async def refresh_dictionary(engine: DictionaryTranslationEngine = Depends(get_engine)):
    """Reload every table from the source and drop cached results."""
    await engine.refresh()
    logger.info("Dictionary refreshed on request")
    return ok(_status(engine))


@router.delete("/cache", response_model=Envelope[Message])
async def clear_result_cache(engine: DictionaryTranslationEngine = Depends(get_engine)):
    cleared = len(engine.cache)
    engine.clear_cache()
    return ok(Message(message=f"Cleared {cleared} cached translations"))
