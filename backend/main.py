from __future__ import annotations

import argparse
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from server.app import create_app


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the checkers rules engine HTTP adapter.")
	parser.add_argument("--host", default="127.0.0.1", help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=8000, help="Port for the API server.")
	parser.add_argument("--log-level", default="info", help="Log level for the engine and uvicorn.")
	parser.add_argument(
		"--allow-occupied-landing",
		action="store_true",
		help="Accept jumps onto occupied squares, as the legacy engine did.",
	)
	return parser.parse_args(argv)


def build_app(args: argparse.Namespace) -> FastAPI:
	return create_app(require_empty_landing=not args.allow_occupied_landing)


def main() -> None:
	args = parse_args()
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	uvicorn.run(build_app(args), host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
	main()
