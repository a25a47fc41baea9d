import argparse

import uvicorn

from codeed.main import create_app
from codeed.platform.config import Settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Codeed API server")
    parser.add_argument("-a", "--address", help="host:port to listen on")
    parser.add_argument("-c", "--config", help="path to a JSON config file")
    parser.add_argument("-d", "--database", help="database URL")
    parser.add_argument("--access-exp", type=int, help="access token lifetime in minutes")
    parser.add_argument("--refresh-exp", type=int, help="refresh token lifetime in minutes")
    parser.add_argument("--access-secret", help="access token signing secret")
    parser.add_argument("--refresh-secret", help="refresh token signing secret")
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        "CONFIG": args.config,
        "SERVER_ADDRESS": args.address,
        "DATABASE_URL": args.database,
        "ACCESS_TOKEN_EXPIRE_MINUTES": args.access_exp,
        "REFRESH_TOKEN_EXPIRE_MINUTES": args.refresh_exp,
        "ACCESS_TOKEN_SECRET": args.access_secret,
        "REFRESH_TOKEN_SECRET": args.refresh_secret,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def split_address(address: str) -> tuple[str, int]:
    host, _, port = address.rpartition(":")
    return host or "0.0.0.0", int(port)


if __name__ == "__main__":
    settings = settings_from_args(parse_args())
    host, port = split_address(settings.SERVER_ADDRESS)
    uvicorn.run(create_app(settings), host=host, port=port)
