#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - API Server Entry Point
# =============================================================================
# Starts the Study App API under uvicorn.
#
# Usage:
#   python scripts/start_server.py
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --reload --port 3000
#
# Prerequisites:
#   - DATABASE_URL must be set (.env file or environment)
#
# Uvicorn handles SIGINT/SIGTERM: in-flight requests finish, then the
# application lifespan closes the database pool.
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from app.config import get_settings


def main():
    """Start the API server."""
    settings = get_settings()

    print("=" * 60)
    print("Study App API")
    print("=" * 60)
    print()
    print(f"Health check: http://localhost:{settings.API_PORT}/health")
    print(f"Users API:    http://localhost:{settings.API_PORT}/api/users")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
