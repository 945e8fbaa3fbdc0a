"""
FastAPI server exposing product ID extraction.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from product_ids.analysis import BatchProcessor
from product_ids.api.models import (
    BatchRequest,
    BatchResponse,
    BatchResult,
    ProductIdsResponse,
)
from product_ids.config import get_config
from product_ids.errors import InvalidUrlError
from product_ids.registry import get_registry

# Configure logging
logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    Builds the store registry on startup so requests never pay for it.
    """
    logger.info("Starting up: building store registry...")
    registry = get_registry()
    logger.info(f"Store registry ready ({len(registry)} stores)")

    yield

    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Product IDs API",
    description="Normalize e-commerce URLs and extract product identifiers",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Product IDs API is running"}


@app.get("/v1/product-ids", response_model=ProductIdsResponse)
async def get_product_ids(
    url: str = Query(..., min_length=1, description="Product URL"),
    store_id: str | None = Query(None, description="Store ID for store-specific rules"),
) -> ProductIdsResponse:
    """
    Normalize a URL and extract its product IDs.

    Raises:
        400: If the URL cannot be parsed
    """
    try:
        analysis = BatchProcessor().analyze(url, store_id)
    except InvalidUrlError as e:
        logger.warning(f"Rejected URL of length {len(url)} ({type(e).__name__})")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error in get_product_ids: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    return ProductIdsResponse(
        url=url,
        domain=analysis.domain,
        href=analysis.href,
        key=analysis.key,
        product_ids=list(analysis.ids),
        count=len(analysis.ids),
    )


@app.post("/v1/url-analysis/batch", response_model=BatchResponse)
async def create_batch_url_analysis(request: BatchRequest) -> BatchResponse:
    """
    Analyze up to 100 URLs. Unparseable URLs are reported per item and do not
    fail the batch.
    """
    processor = BatchProcessor()
    results: list[BatchResult] = []

    try:
        for item in request.urls:
            try:
                analysis = processor.analyze(item.url, item.store_id)
            except InvalidUrlError as e:
                results.append(
                    BatchResult(
                        url=item.url,
                        success=False,
                        error=type(e).__name__,
                        message=str(e),
                    )
                )
                continue

            results.append(
                BatchResult(
                    url=item.url,
                    success=True,
                    domain=analysis.domain,
                    href=analysis.href,
                    key=analysis.key,
                    product_ids=list(analysis.ids),
                    count=len(analysis.ids),
                )
            )
    except Exception as e:
        logger.error(f"Error in create_batch_url_analysis: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    successful = sum(1 for result in results if result.success)
    logger.info(
        f"Batch URL analysis completed: {len(results)} total, "
        f"{successful} successful, {len(results) - successful} failed"
    )

    return BatchResponse(
        results=results,
        total=len(results),
        successful=successful,
        failed=len(results) - successful,
    )


@app.exception_handler(500)
async def internal_error_handler(request, exc):
    """Custom 500 handler."""
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def main():
    """Run the server (for development)."""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")


if __name__ == "__main__":
    main()
