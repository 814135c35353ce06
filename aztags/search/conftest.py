"""
Helpers for testing tag searches

`FakeGraph` stands in for the Azure Resource Graph, serving pages of generated rows and recording what it was asked for.
"""
import string
from typing import Dict, List, Optional, Sequence

from hypothesis.strategies import booleans, builds, text

from aztags.azgraph.azgraph import QueryService
from aztags.search.models import SearchMode, SearchRequest

tag_term = text(alphabet=list(string.ascii_letters + string.digits + " -_.:/"), min_size=1).filter(lambda s: s.strip())
any_term = text(min_size=1).filter(lambda s: s.strip())

st_name_request = builds(lambda name, tenant: SearchRequest(SearchMode.NAME, tag_name=name, tenant_scope=tenant), tag_term, booleans())
st_value_request = builds(lambda value, tenant: SearchRequest(SearchMode.VALUE, tag_value=value, tenant_scope=tenant), tag_term, booleans())


def make_row(i: int, tag_key: str = "Environment", tag_value: Optional[str] = "Production") -> Dict:
	"""A row as returned by the tag search queries"""
	return {
		"name": f"res{i:05d}",
		"type": "microsoft.storage/storageaccounts",
		"resourceGroup": "rg0",
		"location": "canadacentral",
		"subscriptionId": "00000000-0000-0000-0000-000000000000",
		"tagKey": tag_key,
		"tagValue": tag_value,
		"id": f"/subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/rg0/providers/Microsoft.Storage/storageAccounts/res{i:05d}",
	}


class FakeGraph(QueryService):
	"""Serve pages of the given sizes, in order"""

	def __init__(self, page_sizes: Sequence[int]):
		self.page_sizes = list(page_sizes)
		self.calls: List[Dict] = []
		self._served = 0

	def execute(self, query: str, page_size: int, offset: int, tenant_scoped: bool) -> List[Dict]:
		self.calls.append({"query": query, "page_size": page_size, "offset": offset, "tenant_scoped": tenant_scoped})
		size = self.page_sizes[len(self.calls) - 1]
		page = [make_row(self._served + i) for i in range(size)]
		self._served += size
		return page

	@property
	def offsets(self) -> List[int]:
		return [c["offset"] for c in self.calls]
