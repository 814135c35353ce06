"""Test encoding Req and decoding Res and ResErr"""

import json

from aztags.azgraph.codec import Decoder, Encoder
from aztags.azgraph.models import Req, Res, ResErr


class TestEncoder:
	"""Test the Encoder"""

	def test_encode_subscription(self):
		req = Req("Resources", ("00000000-0000-0000-0000-000000000000",), options={"$top": 1000, "$skip": 0})
		enc = json.dumps(req, cls=Encoder)
		assert enc == '{"query": "Resources", "subscriptions": ["00000000-0000-0000-0000-000000000000"], "options": {"$top": 1000, "$skip": 0}}'

	def test_encode_tenant(self):
		"""No subscriptions means the whole tenant, so the key must be absent"""
		req = Req("Resources", options={"$top": 1000, "$skip": 2000})
		enc = json.loads(json.dumps(req, cls=Encoder))
		assert "subscriptions" not in enc
		assert enc["options"]["$skip"] == 2000


class TestDecoder:
	"""Test the Decoder"""

	def test_decode_syntax_error(self):
		body = {
			"error": {
				"code": "BadRequest",
				"message": "Please provide below info when asking for support: timestamp = 2023-02-19T03:50:34.1908792Z, correlationId = 00000000-0000-0000-0000-000000000000.",
				"details": [
					{
						"code": "InvalidQuery",
						"message": "Query is invalid. Please refer to the documentation for the Azure Resource Graph service and fix the error before retrying.",
					},
					{"code": "ParserFailure", "message": "ParserFailure", "line": 1, "characterPositionInLine": 12, "token": "syntax"},
				],
			}
		}
		res = Decoder().decode(body)

		assert isinstance(res, ResErr)
		assert res.code == "BadRequest"
		assert len(res.details) == 2

	def test_decode_success(self):
		body = {
			"totalRecords": 7,
			"count": 3,
			"data": [
				{"id": "/subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/it-azgraph/providers/Microsoft.Network/networkInterfaces/nic-0"},
				{"id": "/subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/it-azgraph/providers/Microsoft.Network/networkInterfaces/nic-1"},
				{"id": "/subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/it-azgraph/providers/Microsoft.Network/networkInterfaces/nic-2"},
			],
			"facets": [],
			"resultTruncated": "false",
			"$skipToken": "ew0KICAiJGlkIjogIjEiLA0KICAiTWF4Um93cyI6IDMsDQogICJSb3dzVG9Ta2lwIjogNCwNCiAgIkt1c3RvQ2x1c3RlclVybCI6ICJodHRwczovL2FyZy1ldXMtbmluZS1zZi5hcmcuY29yZS53aW5kb3dzLm5ldCINCn0=",  # noqa: E501
		}
		res = Decoder().decode(body)

		assert isinstance(res, Res)
		assert len(res.data) == 3
		assert res.count == 3
		assert not hasattr(res, "skipToken"), "offset paging doesn't follow skip tokens"
		assert "$skipToken" in body, "decoding should not consume the body"

	def test_decode_empty(self):
		res = Decoder().decode({"totalRecords": 0, "count": 0, "data": [], "facets": [], "resultTruncated": "false"})

		assert isinstance(res, Res)
		assert res.data == []
		assert res.totalRecords == 0
