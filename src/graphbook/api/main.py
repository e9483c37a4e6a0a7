"""
ASGI entry point: `uvicorn graphbook.api.main:app`
"""

from .app import create_app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    from ..config import settings

    uvicorn.run(
        "graphbook.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
