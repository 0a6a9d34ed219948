"""CLI entry point for the weather lookup app."""

import argparse
import json
import logging

import yaml

from weatherapp.config.loader import get_config_value, load_config, redacted_dict, redacted_json
from weatherapp.config.schema import AppConfig
from weatherapp.ingest.owm_client import ProviderError
from weatherapp.models.common import UnitSystem
from weatherapp.models.view import Phase
from weatherapp.reporting.formatters import format_report_text

DEFAULT_CONFIG = "config.yaml"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="City weather lookup: current conditions and 5-day forecast",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Look up weather for a city")
    lookup_p.add_argument("city", help="City name")
    lookup_p.add_argument(
        "--units", choices=[u.value for u in UnitSystem], default=None,
        help="Unit system (defaults to config)",
    )

    # serve
    serve_p = sub.add_parser("serve", help="Run the web app")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. provider.country_code")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (ValueError, yaml.YAMLError) as e:
        # pydantic ValidationError is a ValueError
        print(f"Error: invalid config: {e}")
        return 1

    if args.command == "lookup":
        return _cmd_lookup(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_lookup(config: AppConfig, args) -> int:
    from weatherapp.app import build_lookup

    try:
        lookup = build_lookup(config)
    except ProviderError as e:
        print(f"Error: {e}")
        return 1
    if args.units:
        lookup.set_unit(UnitSystem(args.units))
    state = lookup.submit(args.city)
    print(format_report_text(state))
    return 0 if state.phase == Phase.SUCCESS else 1


def _cmd_serve(config: AppConfig, args) -> int:
    import uvicorn

    from weatherapp.app import create_app

    try:
        app = create_app(config)
    except ProviderError as e:
        print(f"Error: {e}")
        return 1
    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info("Serving on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(redacted_json(config))
        return 0
    elif args.config_command == "get":
        if args.key.strip() == "provider.api_key":
            print("Error: refusing to print the API key")
            return 1
        try:
            value = get_config_value(redacted_dict(config), args.key.strip())
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        print(json.dumps(value, indent=2) if isinstance(value, dict) else value)
        return 0
    else:
        print("Use: config show | config get key")
        return 1
