"""
OKLCH Color Tools MCP Server - FastAPI implementation
Provides endpoints for parsing, converting and formatting colors
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

from routers import colorTools_router
from settings import Settings

logger = logging.getLogger(__name__)

app = FastAPI(
    title="OKLCH Color Tools MCP Server",
    description="Convert colors between OKLCH, hex, RGB and HSL and parse CSS color text",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(colorTools_router)


def run(settings: Settings) -> None:
    """Configure logging, mount the MCP endpoint and serve the app."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.mount_mcp:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
        logger.info("MCP endpoint mounted")
    logger.info("Serving on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run(Settings.from_env())
