"""
Run the maps service.

Usage:
    python -m maps
    python -m maps --port 9191
"""

import argparse

import uvicorn

from maps.config import settings


def main():
    parser = argparse.ArgumentParser(description="Run the maps API")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    args = parser.parse_args()
    uvicorn.run("maps.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
