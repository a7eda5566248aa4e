# cre_setup/program.py

from pathlib import Path

from anchorpy import Idl, Program, Provider, Wallet
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment, Confirmed
from solana.rpc.types import TxOpts
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from cre_setup.errors import IdlUnreadable


def load_idl(idl_path: Path) -> Idl:
    """Load the IDL `anchor build` writes to target/idl/."""
    try:
        return Idl.from_json(Path(idl_path).read_text())
    except Exception as err:
        raise IdlUnreadable(
            f"Error loading IDL from {idl_path}: {err}",
            hint='Make sure you have built the program with "anchor build"',
        ) from err


def bind_program(
    client: AsyncClient,
    keypair: Keypair,
    program_id: Pubkey,
    idl_path: Path,
    commitment: Commitment = Confirmed,
) -> Program:
    """
    Wrap the connection and the local wallet into a Provider, load the IDL,
    and return an AnchorPy Program client for loan_core.
    """
    idl      = load_idl(idl_path)
    opts     = TxOpts(preflight_commitment=commitment)
    provider = Provider(client, Wallet(keypair), opts)
    return Program(idl, program_id, provider)
