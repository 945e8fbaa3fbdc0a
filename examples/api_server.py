"""
Example: API Server

Demonstrates running the FastAPI server for product ID extraction.

Start the server and query it:
```bash
# Start the server
python examples/api_server.py

# In another terminal, query the API:
curl "http://localhost:8000/v1/product-ids?url=https://www.target.com/p/lamp/-/A-54191097"
curl -X POST http://localhost:8000/v1/url-analysis/batch \
    -H "Content-Type: application/json" \
    -d '{"urls": [{"url": "https://www.nike.com/t/shoe/AH8050-001"}, {"url": "https://example.com/?sku=1234", "store_id": 5246}]}'
```
"""

import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    """Run the API server."""
    import uvicorn

    from product_ids.api.server import app

    print("=" * 80)
    print("Starting Product IDs API Server")
    print("=" * 80)
    print()
    print("The server will start on http://0.0.0.0:8000")
    print()
    print("API Endpoints:")
    print("  GET  /                              - Health check")
    print("  GET  /v1/product-ids?url=&store_id= - Extract IDs from one URL")
    print("  POST /v1/url-analysis/batch         - Analyze 1-100 URLs")
    print()
    print("=" * 80)
    print()

    # Run server
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")


if __name__ == "__main__":
    main()
