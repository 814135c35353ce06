"""Interface to the Azure Resource Graph"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Union

import requests
from azure.core.exceptions import ClientAuthenticationError

from aztags.azgraph import codec
from aztags.azgraph.models import QueryExecutionError, Req, Res, ResErr

l = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://management.azure.com"
DEFAULT_API_VERSION = "2021-03-01"
TOKEN_SCOPE = "https://management.azure.com//.default"


class QueryService(ABC):
	"""Something which can run a single page of a Resource Graph query"""

	@abstractmethod
	def execute(self, query: str, page_size: int, offset: int, tenant_scoped: bool) -> List[Dict]:
		"""Run one page of `query`, returning at most `page_size` rows starting at `offset`"""


class Graph(QueryService):
	"""
	Access the Azure Resource Graph

	The easiest way to instantiate this is with the `from_credential` method.

	>>> from azure.identity import AzureCliCredential
	>>> graph = Graph.from_credential(AzureCliCredential())

	Fetch a single page of a query with `execute`:
	>>> graph.execute("Resources | project id, name | order by name asc", page_size=5, offset=0, tenant_scoped=False)
	[{'id': '/subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/rg0/providers/Microsoft.Storage/storageAccounts/sa0', 'name': 'sa0'}]

	If you want to provide options to the query, use a `Req` and the `query_single` function

	>>> from aztags.azgraph.models import Req
	>>> graph.query_single(Req(
	... 	query="Resources | project id, name, type, location",
	... 	subscriptions=("00000000-0000-0000-0000-000000000001",),
	... 	options={"$top": 5},
	... ))
	"""

	def __init__(
		self,
		session: requests.Session,
		subscription: Optional[str],
		base_url: str = DEFAULT_BASE_URL,
		api_version: str = DEFAULT_API_VERSION,
	):
		self.session = session
		self.subscription = subscription
		self.base_url = base_url
		self.api_version = api_version

	@classmethod
	def from_credential(
		cls,
		credential,
		subscription: Optional[str] = None,
		base_url: str = DEFAULT_BASE_URL,
		api_version: str = DEFAULT_API_VERSION,
	) -> Graph:
		"""
		Create from an Azure credential

		If no subscription is given, the first subscription visible to the credential is used as the current one.
		"""
		try:
			token = credential.get_token(TOKEN_SCOPE)
		except ClientAuthenticationError as e:
			raise QueryExecutionError(f"could not authenticate to Azure: {e.message}") from e
		session = requests.Session()
		session.headers["Authorization"] = f"Bearer {token.token}"
		session.headers["Content-Type"] = "application/json"

		if subscription is None:
			subscriptions = cls._get_subscriptions(session, base_url)
			if not subscriptions:
				raise QueryExecutionError("no subscriptions are visible to the current credential")
			subscription = subscriptions[0]
			l.info(f"no subscription configured, using subscription={subscription}")

		return cls(session, subscription, base_url=base_url, api_version=api_version)

	@staticmethod
	def _get_subscriptions(session: requests.Session, base_url: str) -> Tuple[str, ...]:
		try:
			res = session.get(f"{base_url}/subscriptions", params={"api-version": "2020-01-01"})
			res.raise_for_status()
		except requests.RequestException as e:
			raise QueryExecutionError(f"could not list subscriptions: {e}") from e
		return tuple(s["subscriptionId"] for s in res.json()["value"])

	def execute(self, query: str, page_size: int, offset: int, tenant_scoped: bool) -> List[Dict]:
		"""Run one page of a query, scoped to the current subscription or to the whole tenant"""
		req = Req(
			query=query,
			subscriptions=None if tenant_scoped else (self.subscription,),
			options={"$top": page_size, "$skip": offset, "resultFormat": "objectArray"},
		)
		res = self.query_single(req)
		if isinstance(res, ResErr):
			l.warning(f"query returned error code={res.code} offset={offset}")
			raise QueryExecutionError.from_res_err(res)
		return list(res.data)

	def query_single(self, req: Req) -> Union[Res, ResErr]:
		"""Make a graph query for a single page"""
		l.debug(f"making req options={req.options} subscriptions={req.subscriptions}")
		return codec.Decoder().decode(self._exec_query(req))

	def _exec_query(self, req: Req) -> Dict:
		"""Send the request over HTTP, returning the raw JSON body"""
		try:
			raw = self.session.post(
				f"{self.base_url}/providers/Microsoft.ResourceGraph/resources",
				params={"api-version": self.api_version},
				data=json.dumps(req, cls=codec.Encoder),
			)
		except requests.RequestException as e:
			raise QueryExecutionError(f"request to Azure Resource Graph failed: {e}") from e

		try:
			body = raw.json()
		except ValueError as e:
			raise QueryExecutionError(f"Azure Resource Graph returned an unreadable response status={raw.status_code}") from e

		if not raw.ok and "error" not in body:
			raise QueryExecutionError(f"Azure Resource Graph returned status={raw.status_code}")
		return body
