"""
Command line entry point: find the host IP, launch ngrok, print its URL
"""
import argparse
import logging
import sys
import time
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from . import __version__
from .config import (
    CONTAINER_NAME,
    IMAGE,
    DEFAULT_PORT,
    MAX_RETRIES,
    RETRY_DELAY_MS,
    API_URL,
    LOG_LEVEL,
    LOG_FORMAT,
)
from .exceptions import CommandError, ConfigError, MaxRetriesExceeded
from .models.schemas import TunnelConfig
from .services.container import ContainerLauncher
from .services.commands import CommandRunner, SubprocessRunner
from .services.network import find_host_ip
from .services.ngrok_api import NgrokApiClient
from .services.poller import display_public_url

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ngrok-docker",
        description="Expose a local port through ngrok running in docker"
    )
    # No type=, so a bad port is reported by config validation
    parser.add_argument("port", nargs="?", default=DEFAULT_PORT,
                        help=f"local port to expose (default: {DEFAULT_PORT})")
    parser.add_argument("--name", default=CONTAINER_NAME,
                        help=f"container name (default: {CONTAINER_NAME})")
    parser.add_argument("--image", default=IMAGE,
                        help=f"ngrok image (default: {IMAGE})")
    parser.add_argument("--max-retries", type=int, default=MAX_RETRIES,
                        help=f"status polls before giving up (default: {MAX_RETRIES})")
    parser.add_argument("--retry-delay", type=int, default=RETRY_DELAY_MS, metavar="MS",
                        help=f"delay between polls in ms (default: {RETRY_DELAY_MS})")
    parser.add_argument("--api-url", default=API_URL,
                        help="query a published ngrok API instead of using docker exec")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config(args: argparse.Namespace, host_ip: Optional[str]) -> TunnelConfig:
    """Validate CLI arguments and the discovered host address"""
    try:
        return TunnelConfig(
            host_ip=host_ip,
            port=args.port,
            container_name=args.name,
            image=args.image,
            max_retries=args.max_retries,
            retry_delay_ms=args.retry_delay,
            api_url=args.api_url,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(problems) from e


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVEL,
        format=LOG_FORMAT,
        stream=sys.stderr
    )


def main(
    argv: Optional[List[str]] = None,
    runner: Optional[CommandRunner] = None,
    sleep: Callable[[float], Any] = time.sleep
) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = build_config(args, find_host_ip())
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG

    runner = runner or SubprocessRunner()
    try:
        ContainerLauncher(runner).launch(config)
    except CommandError as e:
        logger.error(f"Could not start {config.container_name}: {e}")
        return EXIT_FAILURE

    print(f"proxying for {config.binding}. make sure process is listening on host 0.0.0.0 and port {config.port}.")
    print("localhost is not the same as 0.0.0.0")
    print("generating public url...")
    sys.stdout.flush()

    client = NgrokApiClient(config.container_name, api_url=config.status_api_url, runner=runner)
    try:
        display_public_url(
            client,
            max_retries=config.max_retries,
            delay=config.retry_delay,
            sleep=sleep
        )
    except MaxRetriesExceeded as e:
        logger.error(f"{e}: ngrok did not report a public URL for {config.container_name}")
        return EXIT_FAILURE
    return EXIT_OK


def run():
    """Console script entry point"""
    sys.exit(main())
