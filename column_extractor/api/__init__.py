"""
FastAPI application for the Excel Column Extractor.

This module sets up the FastAPI app with CORS middleware and includes
all route modules.
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from column_extractor import __version__
from column_extractor.api.routes import extraction, export
from column_extractor.logging_setup import setup_logging

setup_logging()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",  # Vite dev server
    "http://localhost:3000",  # Alternative React port
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]

# Create FastAPI app
app = FastAPI(
    title="Excel Column Extractor API",
    description="Extract fixed columns from Excel files and convert list literals to arrays",
    version=__version__,
)

cors_origins = os.getenv("CORS_ORIGINS")
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins.split(",") if cors_origins else DEFAULT_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include route modules
app.include_router(extraction.router, prefix="/api", tags=["extraction"])
app.include_router(export.router, prefix="/api", tags=["export"])


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
