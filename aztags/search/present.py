"""Print the results of a tag search"""
from typing import List

import click
from tabulate import tabulate

from aztags.search.models import ResultRecord, SearchMode, SearchRequest

COLUMNS = ("Name", "TagKey", "TagValue", "Type", "ResourceGroup", "Location")


def describe(req: SearchRequest) -> str:
	"""eg `tag name 'Environment'`"""
	mode = "tag name" if req.mode is SearchMode.NAME else "tag value"
	return f"{mode} '{req.term}'"


def to_row(r: ResultRecord) -> List:
	return [r.name, r.tagKey, r.tagValue, r.resourceType, r.resourceGroup, r.location]


def present(results: List[ResultRecord], req: SearchRequest):
	"""Print a header and a table of the results, in the order they were given"""
	mode = "TAG NAME" if req.mode is SearchMode.NAME else "TAG VALUE"
	click.echo()
	click.secho(f"RESOURCES WITH {mode}: {req.term}", fg="cyan", bold=True)
	click.secho("=" * 60, fg="cyan")

	if not results:
		click.secho(f"No resources found with {describe(req)}", fg="yellow")
		return

	click.secho(f"Found {len(results)} resources with {describe(req)}", fg="green")
	click.echo()
	click.echo(tabulate([to_row(r) for r in results], headers=COLUMNS, tablefmt="simple", disable_numparse=True))
	click.echo()
	click.secho(f"Total: {len(results)} resources", fg="green")
