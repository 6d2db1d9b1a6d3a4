"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import logging

from weatherboard.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherboard.config.schema import DashboardConfig
from weatherboard.ingest.openweather_client import OpenWeatherClient, OpenWeatherClientError
from weatherboard.reporting.formatters import format_cities_json, format_city_text
from weatherboard.state.store import DashboardState

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherboard",
        description="Multi-city weather dashboard",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # show
    show_p = sub.add_parser("show", help="Fetch and print weather for cities")
    show_p.add_argument("cities", nargs="+", help="City names")
    show_p.add_argument("--json", action="store_true", help="Emit JSON")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP dashboard")
    serve_p.add_argument("--host", help="Bind address (overrides config)")
    serve_p.add_argument("--port", type=int, help="Port (overrides config)")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=config.logging.level.upper(),
        format=config.logging.format,
    )

    if args.command == "show":
        return _cmd_show(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _build_client(config: DashboardConfig) -> OpenWeatherClient:
    return OpenWeatherClient(
        api_key=config.provider.api_key.get_secret_value(),
        base_url=config.provider.base_url,
        timeout=config.provider.timeout_seconds,
    )


def _cmd_show(config: DashboardConfig, args) -> int:
    try:
        client = _build_client(config)
    except OpenWeatherClientError as e:
        print(f"Error: {e}")
        return 1

    state = DashboardState(client)

    async def _collect():
        for name in args.cities:
            state.add_city(name)
        await state.wait_pending()
        return state.view()

    view = asyncio.run(_collect())
    pairs = [(name, view.snapshot_for(name)) for name in view.cities]

    if args.json:
        print(format_cities_json(pairs))
    else:
        print("\n\n".join(format_city_text(name, snap) for name, snap in pairs))
    return 0 if all(snap is not None for _, snap in pairs) else 1


def _cmd_serve(config: DashboardConfig, args) -> int:
    import uvicorn

    from weatherboard.dashboard import create_app

    try:
        client = _build_client(config)
    except OpenWeatherClientError as e:
        print(f"Error: {e}")
        return 1

    app = create_app(DashboardState(client), initial_cities=config.cities)
    uvicorn.run(
        app,
        host=args.host or config.server.host,
        port=args.port or config.server.port,
    )
    return 0


def _cmd_config(config: DashboardConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            key = key.strip()
            new_config = set_config_value(config, key, value.strip())
            save_config(
                new_config, args.config,
                include_api_key=True if key == "provider.api_key" else None,
            )
            print(f"Set {key} = {get_config_value(new_config, key)} in {args.config}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
