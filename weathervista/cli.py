"""CLI entry point for the WeatherVista dashboard and proxy gateway."""

import argparse
import asyncio
import logging

from weathervista.client import history
from weathervista.client.app import WeatherApp
from weathervista.config.loader import load_config
from weathervista.gateway.upstream import UpstreamConfigError
from weathervista.storage.database import storage_session


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathervista",
        description="Weather dashboard with a credential-hiding proxy gateway",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--db", default=None, help="Local storage DB path")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the proxy gateway")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    # search
    search_p = sub.add_parser("search", help="Show weather for a city")
    search_p.add_argument(
        "city", nargs="*", help="City name (default: last searched city)"
    )
    search_p.add_argument(
        "--fahrenheit", action="store_true", help="Display temperatures in °F"
    )

    # recent
    sub.add_parser("recent", help="List recent searches")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Request URLs carry the upstream credential
    logging.getLogger("httpx").setLevel(logging.WARNING)

    config = load_config(args.config)
    if args.db:
        config = config.model_copy(
            update={"client": config.client.model_copy(update={"storage_path": args.db})}
        )

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "search":
        return _cmd_search(config, args)
    elif args.command == "recent":
        return _cmd_recent(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    from weathervista.gateway.app import serve

    updates = {k: v for k, v in (("host", args.host), ("port", args.port)) if v is not None}
    gateway_config = config.gateway.model_copy(update=updates)
    try:
        serve(gateway_config)
    except UpstreamConfigError as e:
        print(f"Error: {e}")
        return 1
    return 0


def _cmd_search(config, args) -> int:
    with storage_session(config.client.storage_path) as conn:
        app = WeatherApp(config.client, conn)
        if args.fahrenheit:
            app.toggle_unit()
        if args.city:
            app.load()
            asyncio.run(app.fetch_weather(" ".join(args.city)))
        else:
            asyncio.run(app.start())
            if app.state.conditions is None and app.state.error is None:
                print("No city given and no previous search to restore")
                return 1
        print(app.render())
        return 1 if app.state.error else 0


def _cmd_recent(config) -> int:
    with storage_session(config.client.storage_path) as conn:
        cities = history.load_recent_cities(conn, config.client.max_recent_cities)
        last_city = history.load_last_city(conn)
    if not cities:
        print("No recent searches")
        return 0
    for name in cities:
        marker = "*" if name == last_city else " "
        print(f"{marker} {name}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
