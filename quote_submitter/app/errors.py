from typing import Optional


class QuoteSubmitError(Exception):
	"""Base for every failure that aborts a submission."""


class ArgumentError(QuoteSubmitError):
	pass


class FileReadError(QuoteSubmitError):
	def __init__(self, message: str, path: str, cause: Optional[BaseException] = None) -> None:
		super().__init__(f"{message}: {path}: {cause}")
		self.path = path
		self.cause = cause


class SerializationError(QuoteSubmitError):
	def __init__(self, cause: BaseException) -> None:
		super().__init__(f"unable to create JSON payload: {cause}")
		self.cause = cause


class TransportError(QuoteSubmitError):
	def __init__(self, url: str, cause: BaseException) -> None:
		super().__init__(f"unable to make HTTP request to {url}: {cause}")
		self.url = url
		self.cause = cause


class ResponseReadError(QuoteSubmitError):
	def __init__(self, cause: BaseException) -> None:
		super().__init__(f"unable to read response body: {cause}")
		self.cause = cause


class HTTPStatusError(QuoteSubmitError):
	def __init__(self, status_code: int, body: bytes) -> None:
		super().__init__(f"unexpected HTTP status {status_code}: {body.decode('utf-8', errors='replace')}")
		self.status_code = status_code
		self.body = body


class StreamCloseError(QuoteSubmitError):
	def __init__(self, cause: BaseException) -> None:
		super().__init__(f"problem closing response body: {cause}")
		self.cause = cause
