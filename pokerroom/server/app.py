"""
FastAPI Application Entry Point for PokerRoom.

This module creates and configures the FastAPI application with:
- HTTP routes for accounts, room setup, play and the leaderboard
- One account store and one game room per application instance
- CORS middleware for development
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokerroom import __version__
from pokerroom.core.accounts import AccountManager
from pokerroom.room import GameRoom
from pokerroom.server.routes import router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="PokerRoom",
        description="Single-table poker simulation with HTTP API",
        version=__version__,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    accounts = AccountManager()
    app.state.accounts = accounts
    app.state.room = GameRoom(accounts)

    app.include_router(router)
    logger.info("PokerRoom application created")

    return app


# Create the application instance
app = create_app()


def main(host: str = "0.0.0.0", port: int = 8000, reload: bool = False, log_level: str = "info"):
    """Serve the application with uvicorn (also the `pokerroom-server` entry point)."""
    import uvicorn
    uvicorn.run(
        "pokerroom.server.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
