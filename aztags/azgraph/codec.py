"""Codec for serialising and deserialising for Azure"""

import dataclasses
import json
from typing import Any, Dict, Union

from aztags.azgraph.models import Res, ResErr


class Encoder(json.JSONEncoder):
	"""Encode Req for JSON for Azure"""

	def default(self, o: Any) -> Any:
		if dataclasses.is_dataclass(o):
			# Azure treats an absent `subscriptions` as "everything the caller can see"
			return {k: v for k, v in dataclasses.asdict(o).items() if v is not None}
		return super().default(o)


class Decoder:
	"""Decode Res from JSON from Azure"""

	def decode(self, o: Dict) -> Union[Res, ResErr]:
		"""Decode Res from JSON from Azure"""
		o = dict(o)
		error = o.pop("error", None)
		if error:
			return ResErr(code=error.get("code", ""), message=error.get("message", ""), details=error.get("details"))

		return Res(
			totalRecords=o.get("totalRecords", 0),
			count=o.get("count", 0),
			resultTruncated=o.get("resultTruncated"),
			data=o.get("data", []),
		)
