import argparse
import logging
import sys
from typing import List, Optional

import httpx

from .config import Settings, settings
from .errors import ArgumentError, QuoteSubmitError
from .schemas import SubmitArgs
from .service import QuoteSubmitter

logger = logging.getLogger("quote_submitter")


class _ArgumentParser(argparse.ArgumentParser):
	def error(self, message: str) -> None:  # type: ignore[override]
		# main() decides the exit status
		raise ArgumentError(message)


def build_parser(config: Optional[Settings] = None) -> argparse.ArgumentParser:
	config = config or settings
	parser = _ArgumentParser(
		prog="quote-submit",
		description="Submit a quote to the quote site API.",
		allow_abbrev=False,
	)
	parser.add_argument("--added-by", default="", help="Name of person adding the quote.")
	parser.add_argument("--title", default="", help="Title for the quote.")
	parser.add_argument("--filename", default="", help="File containing the quote itself.")
	parser.add_argument("--url", default="", help="URL to the quote site API.")
	parser.add_argument("--image", default="", help="Path to the file containing an image (optional).")
	parser.add_argument("--timeout", type=float, default=config.timeout, help="Request timeout in seconds.")
	parser.add_argument(
		"--accept-any-status",
		action="store_true",
		help="Print the response body whatever the HTTP status.",
	)
	parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
	return parser


def parse_args(argv: Optional[List[str]] = None, config: Optional[Settings] = None) -> SubmitArgs:
	config = config or settings
	ns = build_parser(config).parse_args(argv)

	if not ns.added_by:
		raise ArgumentError("you must specify who is adding the quote")
	if not ns.title:
		raise ArgumentError("you must specify a title for the quote")
	if not ns.filename:
		raise ArgumentError("you must specify the file containing the quote")
	if not ns.url:
		raise ArgumentError("you must specify the URL to the quote site")
	if ns.timeout <= 0:
		raise ArgumentError("timeout must be a positive number of seconds")

	return SubmitArgs(
		added_by=ns.added_by,
		title=ns.title,
		filename=ns.filename,
		url=ns.url,
		image=ns.image or None,
		timeout=ns.timeout,
		require_ok_status=config.require_ok_status and not ns.accept_any_status,
		verbose=ns.verbose,
	)


def configure_logging(level: str, verbose: bool = False) -> None:
	resolved = logging.INFO if verbose else getattr(logging, level.upper(), logging.WARNING)
	logging.basicConfig(level=resolved, format="%(asctime)s %(levelname)s %(name)s %(message)s")
	logger.setLevel(resolved)


def main(
	argv: Optional[List[str]] = None,
	transport: Optional[httpx.BaseTransport] = None,
	config: Optional[Settings] = None,
) -> int:
	config = config or settings

	try:
		args = parse_args(argv, config)
	except ArgumentError as e:
		print(f"Invalid argument: {e}", file=sys.stderr)
		build_parser(config).print_help(sys.stderr)
		return 1

	configure_logging(config.log_level, verbose=args.verbose)

	try:
		result = QuoteSubmitter(config, transport=transport).submit(args)
	except QuoteSubmitError as e:
		logger.debug("submit_failed", exc_info=True)
		print(f"Unable to add quote: {e}", file=sys.stderr)
		return 1

	sys.stdout.flush()
	sys.stdout.buffer.write(result.body + b"\n")
	sys.stdout.buffer.flush()
	return 0


if __name__ == "__main__":
	sys.exit(main())
