from solana.rpc.async_api import AsyncClient

from cre_setup.settings import Settings


def connect(settings: Settings) -> AsyncClient:
    """Open a client for the configured RPC node. Nothing is sent until first use."""
    return AsyncClient(settings.rpc_url, commitment=settings.commitment)
