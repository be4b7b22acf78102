"""
Basic storefront example.

Demonstrates:
- Building the app with the default CORS + access-log pipeline
- Catalog routes backed by the in-memory store
- Uniform error envelopes for failing handlers
"""

from storefront_pipeline import HandlerFailure, Settings, configure_logging, create_app

settings = Settings(log_response_bodies=True)
configure_logging(settings.log_level)

app = create_app(settings)


@app.get("/api/health")
async def health():
    """Liveness probe."""
    return {"status": "ok"}


@app.get("/api/flaky")
async def flaky():
    """Always fails with an explicit status."""
    raise HandlerFailure("Upstream catalog unavailable", status_code=503)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_config=None)

    # Test commands:
    #   curl -i -X OPTIONS http://localhost:8000/api/products
    #   curl http://localhost:8000/api/products?featured=true
    #   curl http://localhost:8000/api/products/nope
    #   curl http://localhost:8000/api/flaky
