"""
FastAPI application entry point.

Population Builder - build a population estimate for an arbitrary set of
small areas in Great Britain.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from popbuilder.config import Settings, settings
from popbuilder.database import PopulationDatabase
from popbuilder.exceptions import PopBuilderError, QueryError, RenderError
from popbuilder.rendering import TemplateRenderer, ERROR_TEMPLATE, NOT_FOUND_PAGE
from popbuilder.routers import home, results, download

logger = logging.getLogger(__name__)


def error_page(request: Request, status_code: int = 500) -> HTMLResponse:
    """Generic error page; the message never includes internal details."""
    message = request.app.state.settings.DEFAULT_ERROR_MESSAGE
    try:
        content = request.app.state.renderer.render(ERROR_TEMPLATE, message=message)
    except RenderError:
        logger.exception("Could not render the error page")
        return PlainTextResponse(message, status_code=status_code)
    return HTMLResponse(content, status_code=status_code)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load templates and open the population stores; close the stores on shutdown."""
    app.state.renderer.load()
    app.state.results_db.open()
    try:
        app.state.download_db.open()
        logger.info(f"{app.title} {app.version} ready")
        yield
    finally:
        app.state.download_db.close()
        app.state.results_db.close()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.
    
    The population stores and templates are created here and opened by
    the lifespan hook; failure to open any of them stops the process.
    """
    app_settings = app_settings or settings
    
    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        version=app_settings.VERSION,
        description="""
        Select small areas in Great Britain on a map and see their combined
        population by age band and sex, or download it per area as CSV.
        """,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan
    )
    
    app.state.settings = app_settings
    app.state.results_db = PopulationDatabase(app_settings.RESULTS_DATABASE_PATH, "results")
    app.state.download_db = PopulationDatabase(app_settings.DOWNLOAD_DATABASE_PATH, "download")
    app.state.renderer = TemplateRenderer(app_settings.TEMPLATE_DIR)
    
    # Pages
    app.include_router(home.router, tags=["Home"])
    app.include_router(results.router, tags=["Results"])
    app.include_router(download.router, tags=["Download"])
    
    # Static files
    app.mount("/resources", StaticFiles(directory=app_settings.RESOURCES_DIR), name="resources")
    
    # Health check
    @app.get("/health", tags=["Health"])
    def health_check(request: Request):
        """Health check endpoint."""
        stores = {
            "results": request.app.state.results_db.ping(),
            "download": request.app.state.download_db.ping(),
        }
        return {
            "status": "healthy" if all(stores.values()) else "degraded",
            "version": app_settings.VERSION,
            "stores": {name: "healthy" if ok else "unhealthy" for name, ok in stores.items()}
        }
    
    # Exception handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            try:
                return HTMLResponse(request.app.state.renderer.page(NOT_FOUND_PAGE), status_code=404)
            except RenderError:
                logger.exception("Could not serve the not found page")
                return PlainTextResponse("Not found", status_code=404)
        return error_page(request, exc.status_code)
    
    @app.exception_handler(QueryError)
    async def query_exception_handler(request: Request, exc: QueryError):
        logger.exception(f"Could not get population data for {request.url.path}", exc_info=exc)
        return error_page(request)
    
    @app.exception_handler(RenderError)
    async def render_exception_handler(request: Request, exc: RenderError):
        logger.exception(f"Could not render {request.url.path}", exc_info=exc)
        return error_page(request)
    
    @app.exception_handler(PopBuilderError)
    async def app_exception_handler(request: Request, exc: PopBuilderError):
        logger.exception(f"Error handling {request.url.path}", exc_info=exc)
        return error_page(request)
    
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error for {request.url.path}", exc_info=exc)
        return error_page(request)
    
    return app


app = create_app()
