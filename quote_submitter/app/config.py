from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
	# Seconds allowed for the whole POST exchange (connect, write, read)
	timeout: float = Field(default=30.0)
	# When false any completed response counts as success
	require_ok_status: bool = Field(default=True)
	log_level: str = Field(default="warning")
	user_agent: str = Field(default="quote-submitter/1.0")

	class Config:
		env_prefix = "QUOTE_"
		case_sensitive = False


settings = Settings()
