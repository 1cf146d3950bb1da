"""
Main module entry point.

This allows running the HTTP service as: python -m homegraph_bridge.main
"""

import uvicorn

from homegraph_bridge.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "homegraph_bridge.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
