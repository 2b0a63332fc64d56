from fastapi import FastAPI
from evenue import __version__
from evenue.config import settings

# Import API routers
from evenue.api.reports import router as reports_router

# Create FastAPI app
app = FastAPI(
    title=settings.project_name,
    version=__version__,
    description="Read-only reports over the Evenue party database"
)

# Include API routers
app.include_router(reports_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Evenue Party Database API",
        "version": __version__,
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "reports": f"{settings.api_v1_prefix}/reports",
            "accounts": f"{settings.api_v1_prefix}/accounts/verify"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.project_name}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
