import logging
import time
from typing import List, Optional, Tuple

import httpx
from pydantic_core import PydanticSerializationError

from .config import Settings, settings
from .errors import (
	HTTPStatusError,
	ResponseReadError,
	SerializationError,
	StreamCloseError,
	TransportError,
)
from .schemas import QuotePayload, SubmitArgs, SubmitResult
from .utils.files import read_image_base64, read_quote_text

logger = logging.getLogger("quote_submitter")

SUBMIT_QUERY = "?version=1&object=quote"


def build_submit_url(base_url: str) -> str:
	return f"{base_url}{SUBMIT_QUERY}"


def build_payload(args: SubmitArgs) -> QuotePayload:
	quote = read_quote_text(args.filename)
	image = read_image_base64(args.image) if args.image else None
	return QuotePayload(added_by=args.added_by, title=args.title, quote=quote, image=image)


def serialize_payload(payload: QuotePayload) -> bytes:
	"""Compact JSON in field order; `image` is left out when absent."""
	try:
		return payload.model_dump_json(exclude_none=True).encode("utf-8")
	except (PydanticSerializationError, ValueError) as e:
		raise SerializationError(e) from e


class QuoteSubmitter:
	def __init__(self, config: Optional[Settings] = None, transport: Optional[httpx.BaseTransport] = None) -> None:
		self.settings = config or settings
		self.transport = transport

	def _client(self, timeout: float) -> httpx.Client:
		return httpx.Client(
			timeout=timeout,
			transport=self.transport,
			follow_redirects=False,
			headers={"User-Agent": self.settings.user_agent},
		)

	def submit(self, args: SubmitArgs) -> SubmitResult:
		payload = build_payload(args)
		body = serialize_payload(payload)
		url = build_submit_url(args.url)
		logger.info(
			"submit_start url=%s has_image=%s quote_len=%d bytes=%d timeout=%.1f",
			url, payload.image is not None, len(payload.quote), len(body), args.timeout,
		)
		start = time.time()
		with self._client(args.timeout) as client:
			try:
				request = client.build_request("POST", url, content=body, headers={"Content-Type": "application/json"})
				response = client.send(request, stream=True)
			except (httpx.HTTPError, httpx.InvalidURL) as e:
				raise TransportError(url, e) from e
			content, close_error = self._read(response)
			if args.require_ok_status and response.status_code != httpx.codes.OK:
				response.close()
				raise HTTPStatusError(response.status_code, content)
			if close_error is not None:
				raise StreamCloseError(close_error) from close_error
			try:
				response.close()
			except httpx.HTTPError as e:
				raise StreamCloseError(e) from e
		logger.info(
			"submit_done status=%d bytes=%d ms=%.2f",
			response.status_code, len(content), (time.time() - start) * 1000,
		)
		return SubmitResult(url=url, status_code=response.status_code, body=content)

	@staticmethod
	def _read(response: httpx.Response) -> Tuple[bytes, Optional[httpx.CloseError]]:
		# httpx closes the stream once the body is drained, so a failing
		# close surfaces here; it is reported only if the status is accepted
		chunks: List[bytes] = []
		try:
			for chunk in response.iter_bytes():
				chunks.append(chunk)
		except httpx.CloseError as e:
			return b"".join(chunks), e
		except httpx.HTTPError as e:
			response.close()
			raise ResponseReadError(e) from e
		return b"".join(chunks), None
