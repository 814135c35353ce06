"""Build Resource Graph queries for tag searches"""
from textwrap import dedent

from aztags.search.models import SearchMode, SearchRequest


def quote_kql(s: str) -> str:
	"""Render a string as a single-quoted KQL string literal"""
	escaped = s.replace("\\", "\\\\").replace("'", "\\'")
	return f"'{escaped}'"


def query_by_name(tag_name: str) -> str:
	"""Resources which have a tag with this exact key"""
	key = quote_kql(tag_name)
	return dedent(
		f"""\
		Resources
		| where bag_has_key(tags, {key})
		| project name, type, resourceGroup, location, subscriptionId, tagKey = {key}, tagValue = tostring(tags[{key}]), id
		| order by name asc"""
	)


def query_by_value(tag_value: str) -> str:
	"""Resources with any tag whose value is exactly this"""
	value = quote_kql(tag_value)
	return dedent(
		f"""\
		Resources
		| mv-expand tags
		| extend tagKey = tostring(bag_keys(tags)[0])
		| extend tagValue = tostring(tags[tagKey])
		| where tagValue == {value}
		| project name, type, resourceGroup, location, subscriptionId, tagKey, tagValue, id
		| order by name asc"""
	)


def build_query(req: SearchRequest) -> str:
	"""Build the query for a search"""
	if req.mode is SearchMode.NAME:
		return query_by_name(req.term)
	else:
		return query_by_value(req.term)
