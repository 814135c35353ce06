"""Settings for aztags"""
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aztags.azgraph.azgraph import DEFAULT_API_VERSION, DEFAULT_BASE_URL
from aztags.search.paginate import PAGE_SIZE


class Settings(BaseSettings):
	"""Settings for aztags, read from `AZTAGS_*` environment variables"""

	model_config = SettingsConfigDict(env_prefix="AZTAGS_")

	page_size: int = Field(default=PAGE_SIZE, ge=1, le=PAGE_SIZE)
	subscription_id: Optional[str] = None
	base_url: str = DEFAULT_BASE_URL
	api_version: str = DEFAULT_API_VERSION
	log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

	# Service Principal, used when there is no Azure CLI session
	tenant_id: Optional[str] = None
	client_id: Optional[str] = None
	client_secret: Optional[str] = None

	@field_validator("log_level", mode="before")
	@classmethod
	def upper_log_level(cls, v):
		return v.upper() if isinstance(v, str) else v

	def has_service_principal(self) -> bool:
		return bool(self.tenant_id and self.client_id and self.client_secret)
