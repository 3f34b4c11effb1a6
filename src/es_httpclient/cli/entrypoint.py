"""CLI entrypoint execution flow."""

from __future__ import annotations

import logging

import httpx

from es_httpclient.cli.argument_parser import build_parser
from es_httpclient.cli.common_runtime import apply_proxy_environment, configure_logging, emit_payload
from es_httpclient.errors import HttpClientError

_logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return a process exit code.

    Args:
        argv (list[str] | None): Optional command-line arguments.

    Returns:
        int: Process exit code.

    """
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 1

    configure_logging(str(args.log_level))
    apply_proxy_environment(getattr(args, "proxy_url", None))
    try:
        payload = handler(args)
    except (HttpClientError, httpx.HTTPError) as exc:
        _logger.error("%s failed: %s", args.command, exc)  # noqa: TRY400
        return 1
    except (ValueError, OSError) as exc:
        _logger.error("Invalid arguments for %s: %s", args.command, exc)  # noqa: TRY400
        return 1

    emit_payload(payload=payload, output=args.output)
    return 0
