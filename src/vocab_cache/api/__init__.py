"""HTTP API: FastAPI app and its lifespan wiring."""
