from __future__ import annotations

import argparse

import uvicorn

from .settings import get_settings


def main() -> None:
    settings = get_settings()

    ap = argparse.ArgumentParser(prog="todo_api", description="Run the todo backend.")
    ap.add_argument("--host", default=settings.host)
    ap.add_argument("--port", type=int, default=settings.port)
    ap.add_argument(
        "--reload",
        action="store_true",
        help="Reload server on code changes (dev mode)",
    )
    args = ap.parse_args()

    uvicorn.run(
        "todo_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
