"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from analyze_article.errors import AnalyzerError, ContentExtractionError, MissingUrlError
from analyzer_api.config import get_config
from analyzer_api.routers import analyze, health, ui
from common.cli_helpers import setup_logging

logger = logging.getLogger(__name__)

CLIENT_ERRORS = (MissingUrlError, ContentExtractionError)

app = FastAPI(
    title="News Company Analyzer",
    description="Sentiment and organization mentions for news articles",
    version="1.0.0",
)

# Register routers
app.include_router(health.router)
app.include_router(analyze.router)
app.include_router(ui.router)


def error_payload(exc: AnalyzerError) -> tuple[int, dict[str, str]]:
    """Map an analyzer exception to an HTTP status and error body."""
    if isinstance(exc, CLIENT_ERRORS):
        return 400, {"error": str(exc)}
    message = str(exc)
    if not message:
        return 500, {"error": "Internal server error"}
    return 500, {"error": f"Analysis error: {message}"}


@app.exception_handler(AnalyzerError)
async def analyzer_error_handler(request: Request, exc: AnalyzerError) -> JSONResponse:
    status_code, body = error_payload(exc)
    if status_code >= 500:
        logger.error("Analysis error for %s: %s", request.url.path, exc, exc_info=exc)
    else:
        logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Covers failures raised while resolving dependencies, outside the route body
    status_code, body = error_payload(AnalyzerError(str(exc)))
    logger.error("Unexpected error for %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=status_code, content=body)


def main():
    """Run the API server."""
    import uvicorn

    setup_logging()
    config = get_config()
    uvicorn.run(
        "analyzer_api.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
    )


if __name__ == "__main__":
    main()
