"""
main.py - Main FastAPI Application

This file is the entry point for the backend server.
It creates the FastAPI application and includes all API routes.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime

from .config import get_settings
from .api.v1 import assist, export, health, history, mappings, transliterate
from dotenv import load_dotenv

# Explicitly load .env file to ensure os.getenv works everywhere
load_dotenv()

# Load settings from .env file
settings = get_settings()

# Create the FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Singlish to Sinhala Unicode typing with AI writing tools",
    version=settings.VERSION
)

# Add CORS middleware to allow frontend to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(health.router, prefix=settings.API_V1_STR, tags=["Health"])
app.include_router(transliterate.router, prefix=settings.API_V1_STR, tags=["Transliteration"])
app.include_router(mappings.router, prefix=settings.API_V1_STR, tags=["Alphabet"])
app.include_router(history.router, prefix=settings.API_V1_STR, tags=["History"])
app.include_router(assist.router, prefix=settings.API_V1_STR, tags=["AI Tools"])
app.include_router(export.router, prefix=settings.API_V1_STR, tags=["Export"])


@app.get("/")
def root():
    """Root endpoint - returns welcome message."""
    print("[main] Root endpoint called")
    return {
        "message": "HelaType Sinhala Transliteration API",
        "version": settings.VERSION,
        "docs": "/docs"
    }


@app.on_event("startup")
async def startup_event():
    """Runs when the application starts."""
    print("=" * 50)
    print("HelaType Sinhala Transliteration API")
    print("=" * 50)
    print(f"Started at: {datetime.now()}")
    print("Endpoints available at: http://localhost:8000")
    print("API Documentation: http://localhost:8000/docs")
    print("=" * 50)


@app.on_event("shutdown")
async def shutdown_event():
    """Runs when the application shuts down."""
    print("Shutting down HelaType API...")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("helatype.main:app", host="0.0.0.0", port=8000, reload=True)
