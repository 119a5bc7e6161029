"""CLI entry point for mountain weather and avalanche forecasts."""

import argparse
import logging

import httpx
import yaml
from pydantic import BaseModel

from summit.app import Services, build_services
from summit.config.loader import get_config_value, load_config
from summit.config.schema import AppConfig
from summit.errors import NoZoneMatch, SummitError
from summit.models.common import to_json
from summit.models.location import Coordinates


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="summit",
        description="Mountain weather and avalanche forecasts",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")

    sub = parser.add_subparsers(dest="command")

    point_p = sub.add_parser("point", help="Resolve elevation and place for a coordinate")
    _add_location_args(point_p)

    forecast_p = sub.add_parser("forecast", help="Multi-model weather forecast")
    _add_location_args(forecast_p)
    forecast_p.add_argument("--days", type=int, default=None, help="Forecast days (1-16)")

    avy_p = sub.add_parser("avalanche", help="Avalanche forecast for the enclosing zone")
    _add_location_args(avy_p)

    afd_p = sub.add_parser("discussion", help="Latest NWS area forecast discussion")
    _add_location_args(afd_p)

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. forecast.forecast_days")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except (OSError, KeyError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log.level.upper(), logging.INFO),
        format=config.log.format,
    )

    if args.command == "config":
        return _cmd_config(config, args)

    if args.command == "forecast" and args.days is not None and not 1 <= args.days <= 16:
        print("Error: --days must be between 1 and 16")
        return 1

    try:
        coordinates = _resolve_coordinates(config, args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    services = build_services(config)
    try:
        if args.command == "point":
            return _cmd_point(services, coordinates)
        elif args.command == "forecast":
            return _cmd_forecast(services, coordinates, args.days)
        elif args.command == "avalanche":
            return _cmd_avalanche(services, coordinates)
        elif args.command == "discussion":
            return _cmd_discussion(services, coordinates)
    except (SummitError, httpx.HTTPError) as e:
        print(f"Error: {e}")
        return 1

    parser.print_help()
    return 1


def _add_location_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("latitude", nargs="?", type=float, help="Latitude in decimal degrees")
    p.add_argument("longitude", nargs="?", type=float, help="Longitude in decimal degrees")
    p.add_argument("--point", dest="point_slug", default=None, help="Named point slug")


def _resolve_coordinates(config: AppConfig, args) -> Coordinates:
    if args.point_slug is not None:
        named = config.find_point(args.point_slug)
        if named is None:
            raise ValueError(f"unknown point: {args.point_slug}")
        return Coordinates(named.latitude, named.longitude)
    if args.latitude is None or args.longitude is None:
        raise ValueError("give LAT LON or --point SLUG")
    return Coordinates(args.latitude, args.longitude)


def _cmd_point(services: Services, coordinates: Coordinates) -> int:
    point = services.location.get_forecast_point(coordinates)
    print(to_json(point))
    return 0


def _cmd_forecast(services: Services, coordinates: Coordinates, days: int | None) -> int:
    point = services.location.get_forecast_point(coordinates)
    forecast = services.weather.get_forecast(point, days)
    print(to_json(forecast))
    return 0


def _cmd_avalanche(services: Services, coordinates: Coordinates) -> int:
    try:
        forecast = services.avalanche.get_forecast(coordinates)
    except NoZoneMatch as e:
        print(str(e))
        return 1
    print(to_json(forecast))
    return 0


def _cmd_discussion(services: Services, coordinates: Coordinates) -> int:
    print(services.weather.get_forecast_discussion(coordinates))
    return 0


def _plain(value):
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(to_json(_plain(value)))
        return 0
    else:
        print("Use: config show | config get KEY")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
