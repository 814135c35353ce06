from aztags.cli import search

search(prog_name="aztags-search")  # pylint: disable=no-value-for-parameter
