from typing import Optional
from pydantic import BaseModel


class SubmitArgs(BaseModel):
	added_by: str
	title: str
	filename: str
	url: str
	image: Optional[str] = None
	timeout: float = 30.0
	require_ok_status: bool = True
	verbose: bool = False


class QuotePayload(BaseModel):
	added_by: str
	title: str
	quote: str
	image: Optional[str] = None


class SubmitResult(BaseModel):
	url: str
	status_code: int
	body: bytes

	@property
	def text(self) -> str:
		return self.body.decode("utf-8", errors="replace")
