from types import SimpleNamespace

from solders.hash import Hash
from solders.signature import Signature

from cre_setup.disc import account_discriminator
from cre_setup.params import DEFAULT_PARAMS


def resp(value):
    return SimpleNamespace(value=value)


class FakeClient:
    """Stands in for solana.rpc.async_api.AsyncClient; records every call."""

    def __init__(self, balance=0, accounts=None, airdrop_error=None):
        self.balance = balance
        self.accounts = dict(accounts or {})
        self.airdrop_error = airdrop_error
        self.airdrops = []
        self.confirmed = []
        self.sent = []
        self.lookups = []
        self.closed = False

    async def get_balance(self, pubkey, commitment=None):
        return resp(self.balance)

    async def request_airdrop(self, pubkey, lamports, commitment=None):
        if self.airdrop_error:
            raise self.airdrop_error
        self.airdrops.append((pubkey, lamports))
        return resp(Signature.default())

    async def confirm_transaction(self, tx_sig, commitment=None, *args, **kwargs):
        self.confirmed.append(tx_sig)
        return resp([])

    async def get_minimum_balance_for_rent_exemption(self, usize, commitment=None):
        return resp(1_461_600)

    async def get_latest_blockhash(self, commitment=None):
        return resp(SimpleNamespace(blockhash=Hash.default()))

    async def send_transaction(self, txn, opts=None):
        self.sent.append(txn)
        return resp(Signature.default())

    async def get_account_info(self, pubkey, commitment=None, *args, **kwargs):
        self.lookups.append(pubkey)
        return resp(self.accounts.get(pubkey))

    async def close(self):
        self.closed = True


class FakeProgram:
    """Just enough of anchorpy.Program for the bootstrap flow."""

    def __init__(self, program_id, keypair, record=None, rpc_error=None, fetch_error=None):
        self.program_id = program_id
        self.provider = SimpleNamespace(
            wallet=SimpleNamespace(public_key=keypair.pubkey(), payer=keypair)
        )
        self.record = record
        self.rpc_error = rpc_error
        self.fetch_error = fetch_error
        self.rpc_calls = []
        self.fetches = []
        self.rpc = {"initialize": self._initialize}
        self.account = {"PlatformConfig": SimpleNamespace(fetch=self._fetch)}

    async def _initialize(self, *args, ctx=None):
        self.rpc_calls.append((args, ctx))
        if self.rpc_error:
            raise self.rpc_error
        return Signature.default()

    async def _fetch(self, address):
        self.fetches.append(address)
        if self.fetch_error:
            raise self.fetch_error
        return self.record


def config_record(params=DEFAULT_PARAMS, **extra):
    fields = dict(params.__dict__)
    fields.update(extra)
    return SimpleNamespace(**fields)


def config_account(owner, data=None):
    if data is None:
        data = account_discriminator("PlatformConfig") + bytes(128)
    return SimpleNamespace(owner=owner, data=data, lamports=2_000_000)
