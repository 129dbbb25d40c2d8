"""Application bootstrap for the Embeddings API.

This module wires the FastAPI application, attaches middleware, and exposes small lifecycle utilities.

Functions:
    health_check(): Lightweight readiness probe used by monitoring and local smoke tests.
    run(): Configure logging and serve the app with uvicorn on the configured host and port.
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from embedding_api.api import api_router
from embedding_api.core.config import get_settings

settings = get_settings()


app = FastAPI(
    title=settings.app_name,
    version="1.0",
    description="API for managing and comparing text embeddings",
    docs_url="/swagger-ui",
    openapi_url="/api-docs/openapi.json",
    openapi_tags=[{"name": "embeddings", "description": "Embedding management endpoints"}],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}


def run() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
