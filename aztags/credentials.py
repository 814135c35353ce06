"""Establish an Azure credential"""
import logging

from azure.core.exceptions import ClientAuthenticationError
from azure.identity import AzureCliCredential, ClientSecretCredential, InteractiveBrowserCredential

from aztags.azgraph.azgraph import TOKEN_SCOPE
from aztags.config import Settings

l = logging.getLogger(__name__)


def load_credential(settings: Settings):
	"""
	Load a credential, preferring an existing session

	Tries the Azure CLI login, then a Service Principal from settings, and finally logs in interactively.
	"""
	try:
		cli_credential = AzureCliCredential()
		cli_credential.get_token(TOKEN_SCOPE)
		l.debug("using Azure CLI credential")
		return cli_credential
	except ClientAuthenticationError:
		l.debug("no Azure CLI session")

	if settings.has_service_principal():
		l.debug(f"using Service Principal client_id={settings.client_id}")
		return ClientSecretCredential(tenant_id=settings.tenant_id, client_id=settings.client_id, client_secret=settings.client_secret)

	l.info("no existing session, logging in interactively")
	return InteractiveBrowserCredential(tenant_id=settings.tenant_id) if settings.tenant_id else InteractiveBrowserCredential()
