"""
PokerRoom Server - FastAPI HTTP Layer
"""

from pokerroom.server.app import app, create_app

__all__ = ["app", "create_app"]
