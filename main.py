"""
Color Tools MCP Server - FastAPI implementation
Provides endpoints for color parsing and conversion
"""

import logging
import sys
from pathlib import Path
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for package imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

# Routers and settings
from colorconvert import ServerSettings
from routers import colorTools_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Color Tools MCP Server",
    description="A FastAPI server for color parsing and conversion",
    version="1.1.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

# Mount routers (paths unchanged)
app.include_router(colorTools_router)

if __name__ == "__main__":
    settings = ServerSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    logger.info("Starting Color Tools MCP Server on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
