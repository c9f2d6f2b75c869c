"""
==============================================================================
Catalog Search - Application Entry Point
==============================================================================

FastAPI application exposing the product catalog:
- Catalog listing and statistics
- Combined name/category/brand search
- Scan vs indexed strategy comparison

Usage:
------
    # Development
    uvicorn catalog_search.main:app --reload
    
    # Production
    uvicorn catalog_search.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_search import __version__
from catalog_search.api.router import api_router
from catalog_search.catalog.catalog import get_store, init_store
from catalog_search.config import Settings, get_settings
from catalog_search.core.exceptions import register_exception_handlers
from catalog_search.schemas import MessageResponse


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.
    
    Handles application lifecycle including:
    - Catalog loading on startup
    - Middleware configuration
    - Router and exception handler registration
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._app = self._create_app()
    
    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="Product catalog indexed by name, category and brand",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )
        
        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        self._register_root(app)
        
        return app
    
    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        logger.info("🛑 Shutting down")
    
    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info(f"🚀 Starting {self._settings.app_name}")
        
        if get_store() is None:
            self._load_catalog()
        
        logger.info(
            f"✅ {self._settings.app_name} ready "
            f"(strategy={self._settings.search_strategy.value})"
        )
    
    def _load_catalog(self) -> None:
        """Load product catalog; the API reports CATALOG_NOT_LOADED on failure."""
        products_path = self._settings.products_path
        if not products_path.exists():
            logger.warning(f"⚠️ Products file not found: {products_path}")
            return
        
        try:
            init_store(
                products_path,
                strategy=self._settings.search_strategy,
                verify_equivalence=self._settings.verify_equivalence,
            )
        except (OSError, ValueError) as e:
            logger.error(f"❌ Failed to load catalog: {e}")
    
    def _configure_middleware(self, app: FastAPI) -> None:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    
    def _register_root(self, app: FastAPI) -> None:
        
        @app.get("/", response_model=MessageResponse)
        async def root():
            return MessageResponse(message=f"{self._settings.app_name} v{__version__}")
    
    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "catalog_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
