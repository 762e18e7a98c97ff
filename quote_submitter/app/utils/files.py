import base64
from pathlib import Path

from ..errors import FileReadError


def read_quote_text(path: str) -> str:
	try:
		data = Path(path).read_bytes()
	except OSError as e:
		raise FileReadError("unable to read quote from file", path, e) from e
	# JSON carries text only; undecodable bytes become U+FFFD
	return data.decode("utf-8", errors="replace")


def read_image_base64(path: str) -> str:
	try:
		data = Path(path).read_bytes()
	except OSError as e:
		raise FileReadError("error reading image", path, e) from e
	return base64.b64encode(data).decode("utf-8")
