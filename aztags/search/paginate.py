"""Fetch every page of a tag search"""
import logging
from typing import Callable, List, Optional

from pydantic import ValidationError

from aztags.azgraph.azgraph import QueryService
from aztags.azgraph.models import QueryExecutionError
from aztags.search.models import ResultRecord

l = logging.getLogger(__name__)

PAGE_SIZE = 1000  # the most rows the Resource Graph returns per request

Progress = Callable[[int, int], None]


def fetch_all(service: QueryService, query: str, tenant_scope: bool, page_size: int = PAGE_SIZE, progress: Optional[Progress] = None) -> List[ResultRecord]:
	"""
	Run `query` page by page until the service runs out of results.

	Offsets advance by `page_size` each call. A page shorter than `page_size` is taken to be the last one,
	so a service returning 1000 records followed by a short page of 400 is asked 2 times, not 3.
	Any error from the service propagates; records already fetched are discarded along with it.

	:param progress: called with (batch size, running total) after every page
	"""
	acc: List[ResultRecord] = []
	offset = 0
	while True:
		l.debug(f"fetching page offset={offset} page_size={page_size} tenant_scope={tenant_scope}")
		page = service.execute(query, page_size, offset, tenant_scope)
		try:
			acc.extend(ResultRecord.model_validate(row) for row in page)
		except ValidationError as e:
			l.warning(f"unexpected row in page offset={offset}")
			raise QueryExecutionError(f"Azure Resource Graph returned a malformed row: {e}") from e

		if progress:
			progress(len(page), len(acc))
		l.debug(f"fetched page offset={offset} size={len(page)} total={len(acc)}")

		if len(page) < page_size:
			return acc
		offset += page_size
