"""
FastAPI Application
==================
Main entry point for the C# Review API.

Run with:
    uvicorn csharp_review.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from csharp_review import __version__
from csharp_review.web_api.config import settings
from csharp_review.web_api.routers import analysis, health

# Create application
app = FastAPI(
    title="C# Review API",
    description="Heuristic static analysis for C# source code",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(analysis.router, tags=["Analysis"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "C# Review API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m csharp_review.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
