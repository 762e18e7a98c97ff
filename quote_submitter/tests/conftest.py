from typing import Callable, List

import httpx
import pytest

from quote_submitter.app.config import Settings


class RecordingTransport(httpx.MockTransport):
	"""MockTransport that keeps every request it was handed."""

	def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
		self.requests: List[httpx.Request] = []

		def record(request: httpx.Request) -> httpx.Response:
			self.requests.append(request)
			return handler(request)

		super().__init__(record)


@pytest.fixture
def config() -> Settings:
	return Settings(timeout=5.0, require_ok_status=True, log_level="warning", user_agent="quote-submitter-tests")


@pytest.fixture
def quote_file(tmp_path):
	path = tmp_path / "q.txt"
	path.write_text("Life is short.", encoding="utf-8")
	return path


@pytest.fixture
def image_file(tmp_path):
	path = tmp_path / "pic.png"
	path.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x01\xfe\xff")
	return path


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
	def factory(status_code: int = 200, content: bytes = b'{"id":1}', headers=None) -> RecordingTransport:
		return RecordingTransport(lambda request: httpx.Response(status_code, headers=headers, content=content))

	return factory
