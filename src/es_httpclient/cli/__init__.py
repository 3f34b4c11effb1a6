"""Unified CLI package exports."""

from es_httpclient.cli.argument_parser import build_parser
from es_httpclient.cli.entrypoint import main

__all__ = ["build_parser", "main"]
