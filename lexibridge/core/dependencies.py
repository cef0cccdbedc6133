"""
Dependency injection setup for FastAPI.
Builds the dictionary store, fallback client and translation engine from
settings and hands them to request handlers.
"""

from fastapi import Depends, Request, HTTPException
from typing import Optional
import logging
import asyncio

from sqlalchemy.engine import Engine

from lexibridge.config.settings import Settings, get_settings
from lexibridge.core.db import create_db_engine, create_session_factory
from lexibridge.services.dictionary_store import (
    DictionarySource,
    DictionaryStore,
    SQLAlchemyDictionarySource,
    StaticDictionarySource,
)
from lexibridge.services.fallback_client import BaseFallbackTranslator, HttpFallbackTranslator
from lexibridge.services.translation_engine import DictionaryTranslationEngine


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Owns the application's long-lived services.

    Args:
        settings: Application settings; the global instance when omitted
        source: Dictionary source override; otherwise chosen from settings
        fallback: Fallback translator override; otherwise chosen from settings
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        source: Optional[DictionarySource] = None,
        fallback: Optional[BaseFallbackTranslator] = None,
    ):
        self._settings = settings
        self._source_override = source
        self._fallback_override = fallback
        self._db_engine: Optional[Engine] = None
        self._store: Optional[DictionaryStore] = None
        self._engine: Optional[DictionaryTranslationEngine] = None
        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def _build_source(self) -> DictionarySource:
        if self._source_override is not None:
            return self._source_override

        database = self.settings.database
        if database.url:
            self._db_engine = create_db_engine(database.url, echo=database.echo)
            logger.info("Using persistent dictionary store")
            return SQLAlchemyDictionarySource(create_session_factory(self._db_engine))

        logger.info("No database configured, using the bundled starter dictionary")
        return StaticDictionarySource()

    def _build_fallback(self) -> Optional[BaseFallbackTranslator]:
        if self._fallback_override is not None:
            return self._fallback_override
        if self.settings.engine.enable_fallback and self.settings.fallback.base_url:
            return HttpFallbackTranslator.from_settings(self.settings.fallback)
        return None

    async def initialize_services(self) -> None:
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info("Initializing service container")

            try:
                engine_settings = self.settings.engine
                self._store = DictionaryStore(
                    self._build_source(),
                    ttl_seconds=engine_settings.dictionary_ttl_seconds,
                    phrase_row_limit=engine_settings.phrase_row_limit,
                    table_row_limit=engine_settings.table_row_limit,
                )
                self._engine = DictionaryTranslationEngine(
                    self._store,
                    settings=engine_settings,
                    fallback=self._build_fallback(),
                )
                await self._engine.init()

                self._initialized = True
                logger.info("Service container initialization completed")

            except Exception as e:
                logger.error(f"Service container initialization failed: {e}", exc_info=True)
                raise

    async def cleanup_services(self) -> None:
        logger.info("Cleaning up service container")

        try:
            if self._engine:
                self._engine.clear_cache()
            if self._db_engine is not None:
                self._db_engine.dispose()

            self._engine = None
            self._store = None
            self._db_engine = None

            logger.info("Service container cleanup completed")

        except Exception as e:
            logger.error(f"Service container cleanup failed: {e}", exc_info=True)
        finally:
            self._initialized = False

    def get_store(self) -> DictionaryStore:
        """Get dictionary store instance."""
        if not self._initialized or self._store is None:
            raise RuntimeError("Service container not initialized")
        return self._store

    def get_engine(self) -> DictionaryTranslationEngine:
        """Get translation engine instance."""
        if not self._initialized or self._engine is None:
            raise RuntimeError("Service container not initialized")
        return self._engine


def get_service_container(request: Request) -> ServiceContainer:
    """
    Get the service container from application state.

    Raises:
        HTTPException: If service container is not available
    """
    if not hasattr(request.app.state, 'service_container'):
        logger.error("Service container not initialized")
        raise HTTPException(
            status_code=503,
            detail="Service container not available"
        )

    return request.app.state.service_container


def get_engine(
    container: ServiceContainer = Depends(get_service_container)
) -> DictionaryTranslationEngine:
    """
    Dependency provider for the translation engine.

    Raises:
        HTTPException: If the engine is not available
    """
    try:
        return container.get_engine()
    except RuntimeError as e:
        logger.error(f"Translation engine not available: {e}")
        raise HTTPException(
            status_code=503,
            detail="Translation engine not available"
        )


def get_store(
    container: ServiceContainer = Depends(get_service_container)
) -> DictionaryStore:
    """Dependency provider for the dictionary store."""
    try:
        return container.get_store()
    except RuntimeError as e:
        logger.error(f"Dictionary store not available: {e}")
        raise HTTPException(
            status_code=503,
            detail="Dictionary store not available"
        )
