"""
FastAPI transport for solapi.

Install: pip install solapi
Usage:   uvicorn solapi.fastapi.app:app

Example:
    from solapi.fastapi import create_app

    app = create_app()
"""

from solapi.fastapi.app import create_app

__all__ = ["create_app"]
