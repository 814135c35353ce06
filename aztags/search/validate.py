"""Turn command line input into a SearchRequest"""
from typing import Optional

from aztags.search.models import ConflictingModes, MissingNameForNameMode, MissingValueForValueMode, NoModeSelected, SearchMode, SearchRequest


def is_blank(s: Optional[str]) -> bool:
	return s is None or not s.strip()


def validate(tag_value: Optional[str], tag_name: Optional[str], search_by_value: bool, search_by_name: bool, tenant_scope: bool = False) -> SearchRequest:
	"""
	Build a SearchRequest, raising a UsageError if the input doesn't select exactly one mode with its term.

	The term is kept verbatim; whitespace only matters for deciding whether it is blank.
	"""
	if not search_by_value and not search_by_name:
		raise NoModeSelected()
	if search_by_value and search_by_name:
		raise ConflictingModes()

	if search_by_value:
		if is_blank(tag_value):
			raise MissingValueForValueMode()
		return SearchRequest(SearchMode.VALUE, tag_value=tag_value, tenant_scope=tenant_scope)
	else:
		if is_blank(tag_name):
			raise MissingNameForNameMode()
		return SearchRequest(SearchMode.NAME, tag_name=tag_name, tenant_scope=tenant_scope)
