"""
Openverse Proxy - Main Application
FastAPI server that signs Openverse searches with OAuth2 client credentials
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from app.config import settings, validate_settings
from app.errors import ProxyError
from app.routes import health, search

# Validate settings on startup
validate_settings()

# Create FastAPI app
app = FastAPI(
    title="Openverse Proxy",
    description="Keeps the Openverse client secret on the server for browser searches",
    version="1.0.0"
)

# CORS: every origin, every route
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message}
    )

# Include routers
app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(search.router, prefix="/api", tags=["Search"])

# Startup event
@app.on_event("startup")
async def startup_event():
    print(f"""
🚀 Openverse Proxy
   Running at http://localhost:{settings.PORT}

🌐 Upstream: {settings.OPENVERSE_API_URL}

📡 Available endpoints:
   GET  /api/search     - Openverse search (q, mediaType, license)
   GET  /api/health     - Health check
""")

# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    print("🛑 Gracefully shutting down server...")


def run():
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
