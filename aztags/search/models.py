"""Models for searching resources by tag"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchMode(enum.Enum):
	"""Whether we are matching on the tag's key or its value"""

	NAME = "name"
	VALUE = "value"


@dataclass(frozen=True)
class SearchRequest:
	"""A validated request to search for tagged resources"""

	mode: SearchMode
	tag_name: Optional[str] = None
	tag_value: Optional[str] = None
	tenant_scope: bool = False

	@property
	def term(self) -> str:
		"""The tag name or value being searched for"""
		term = self.tag_name if self.mode is SearchMode.NAME else self.tag_value
		assert term is not None
		return term


class ResultRecord(BaseModel):
	"""A resource matching a tag search"""

	model_config = ConfigDict(frozen=True, populate_by_name=True)

	name: str
	resourceType: str = Field(alias="type")
	resourceGroup: Optional[str] = None
	location: Optional[str] = None
	subscriptionId: Optional[str] = None
	tagKey: str
	tagValue: Optional[str] = None
	id: str


class UsageError(Exception):
	"""The command line arguments do not describe a valid search"""


class NoModeSelected(UsageError):
	def __init__(self):
		super().__init__("Specify either --search-by-value or --search-by-name")


class ConflictingModes(UsageError):
	def __init__(self):
		super().__init__("Cannot use both --search-by-value and --search-by-name at the same time")


class MissingValueForValueMode(UsageError):
	def __init__(self):
		super().__init__("--tag-value is required when using --search-by-value")


class MissingNameForNameMode(UsageError):
	def __init__(self):
		super().__init__("--tag-name is required when using --search-by-name")
