"""HTTP layer: FastAPI app, schemas and routes."""
