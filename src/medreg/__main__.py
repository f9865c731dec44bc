from __future__ import annotations

import argparse
from dataclasses import replace

from .core.settings import Settings
from .runtime.server import serve


def main(argv: list[str] | None = None) -> None:
    env = Settings.from_env()

    p = argparse.ArgumentParser(prog="medreg", description="medreg: in-memory medication registry over HTTP")
    p.add_argument("--host", default=env.host)
    p.add_argument("--port", type=int, default=env.port)
    p.add_argument("--log-level", default=env.log_level)
    p.add_argument("--access-log", action="store_true", default=env.access_log)
    args = p.parse_args(argv)

    settings = replace(
        env,
        host=args.host,
        port=args.port,
        log_level=str(args.log_level).upper(),
        access_log=bool(args.access_log),
    )
    serve(settings)


if __name__ == "__main__":
    main()
