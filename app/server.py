#!/usr/bin/env python3
import argparse
import sys

import uvicorn

from core.config import get_settings


def main(argv=None):
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the video API server")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
