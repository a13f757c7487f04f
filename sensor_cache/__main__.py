"""Entry point for the sensor cache HTTP service."""

import argparse
import logging

import uvicorn

from sensor_cache.core.config import Settings, get_settings
from sensor_cache.main import create_app


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sensor reading cache service")
    parser.add_argument("--redis-url", help="Redis server address (host:port)")
    parser.add_argument("--redis-password", help="Redis server password")
    parser.add_argument("--host", help="Interface to bind the HTTP server to")
    parser.add_argument("--port", type=int, help="Port to bind the HTTP server to")
    parser.add_argument("--log-level", help="Logging level")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {
        "redis_address": args.redis_url,
        "redis_password": args.redis_password,
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return settings
    return Settings(**{**settings.model_dump(), **updates})


def main(argv: list[str] | None = None) -> None:
    settings = apply_overrides(get_settings(), parse_args(argv))
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
