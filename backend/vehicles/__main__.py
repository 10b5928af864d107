"""
Run the vehicles service.

Usage:
    python -m vehicles
    python -m vehicles --port 8080
"""

import argparse

import uvicorn

from vehicles.config import settings


def main():
    parser = argparse.ArgumentParser(description="Run the vehicles API")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()
    uvicorn.run("vehicles.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
