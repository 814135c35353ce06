"""Models for the Azure Resource Graph"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Req:
	"""Azure Resource Graph request"""

	query: str
	subscriptions: Optional[Tuple[str, ...]] = None

	managementGroupId: Optional[str] = None
	options: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Res:
	"""Azure Resource Graph response"""

	totalRecords: int
	count: int
	resultTruncated: Any
	data: Any


@dataclass(frozen=True)
class ResErr:
	"""Azure Resource Graph error response"""

	code: str
	message: str
	details: Any = None


class QueryExecutionError(Exception):
	"""A query to the Azure Resource Graph failed"""

	def __init__(self, message: str, error: Optional[ResErr] = None):
		super().__init__(message)
		self.error = error

	@classmethod
	def from_res_err(cls, err: ResErr) -> QueryExecutionError:
		"""Wrap an error returned by the Resource Graph"""
		msg = f"{err.code}: {err.message}"
		for detail in err.details or []:
			if isinstance(detail, dict) and detail.get("message"):
				msg += f"; {detail.get('code')}: {detail['message']}"
		return cls(msg, err)
