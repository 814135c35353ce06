"""Find Azure resources by tag name or tag value"""
import logging
from textwrap import dedent

import click
from pydantic import ValidationError

from aztags.azgraph.azgraph import Graph
from aztags.azgraph.models import QueryExecutionError
from aztags.config import Settings
from aztags.credentials import load_credential
from aztags.search.models import UsageError
from aztags.search.paginate import fetch_all
from aztags.search.present import present
from aztags.search.query import build_query
from aztags.search.validate import validate

l = logging.getLogger(__name__)

EXAMPLES = dedent(
	"""\
	Examples:
	  aztags-search --search-by-value --tag-value "Production"
	  aztags-search --search-by-name --tag-name "Environment"
	  aztags-search --search-by-name --tag-name "CostCenter" --use-tenant-scope"""
)


class SearchUsageError(click.ClickException):
	"""Report an invalid combination of options, with examples of valid ones"""

	exit_code = 1

	def format_message(self) -> str:
		return f"{self.message}\n\n{EXAMPLES}"


def configure_logging(verbose: int, settings: Settings):
	if verbose >= 2:
		level = logging.DEBUG
	elif verbose == 1:
		level = logging.INFO
	else:
		level = logging.getLevelName(settings.log_level.upper())
	logging.basicConfig(level=level, format="%(levelname)s %(name)s %(message)s")


def echo_progress(batch_size: int, total: int):
	click.secho(f"Retrieved batch of {batch_size} resources (total: {total})", fg="bright_black", err=True)


@click.command()
@click.option("--tag-value", help="The tag value to search for.")
@click.option("--tag-name", help="The tag name (key) to search for.")
@click.option("--search-by-value", is_flag=True, help="Find resources with any tag whose value is TAG_VALUE.")
@click.option("--search-by-name", is_flag=True, help="Find resources with a tag whose key is TAG_NAME.")
@click.option("--use-tenant-scope", is_flag=True, help="Search every subscription in the tenant instead of the current one.")
@click.option("-v", "--verbose", count=True, help="Log more. Repeat for debug logging.")
def search(tag_value, tag_name, search_by_value: bool, search_by_name: bool, use_tenant_scope: bool, verbose: int):
	"""Find Azure resources by tag name or tag value"""
	try:
		settings = Settings()
	except ValidationError as e:
		raise click.ClickException(f"Invalid AZTAGS_* settings: {e}") from e
	configure_logging(verbose, settings)

	try:
		req = validate(tag_value, tag_name, search_by_value, search_by_name, use_tenant_scope)
	except UsageError as e:
		raise SearchUsageError(str(e)) from e

	query = build_query(req)
	l.debug(f"built query mode={req.mode.value} query={query!r}")

	scope = "tenant" if req.tenant_scope else "current subscription"
	click.secho(f"Searching Azure Resource Graph ({scope})...", fg="cyan", err=True)

	try:
		graph = Graph.from_credential(
			load_credential(settings),
			subscription=settings.subscription_id,
			base_url=settings.base_url,
			api_version=settings.api_version,
		)
		results = fetch_all(graph, query, req.tenant_scope, page_size=settings.page_size, progress=echo_progress)
	except QueryExecutionError as e:
		l.error(f"query failed: {e}")
		raise click.ClickException(f"Error querying Azure Resource Graph: {e}") from e

	present(results, req)


if __name__ == "__main__":
	search()  # pylint: disable=no-value-for-parameter
