# cre_setup/provision.py
"""
Create a test USDC token on a local Solana validator.
This is for development purposes only: every run mints a brand-new token.
"""

import asyncio
import re
import sys
import traceback
from decimal import Decimal
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Confirmed
from solana.rpc.core import RPCException
from solana.rpc.types import TxOpts
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.system_program import CreateAccountParams, create_account
from solders.transaction import Transaction
from spl.token.constants import MINT_LEN
from spl.token.instructions import (
    InitializeMintParams,
    MintToParams,
    create_associated_token_account,
    initialize_mint,
    mint_to,
)

from cre_setup.connection import connect
from cre_setup.constants import (
    AIRDROP_AMOUNT,
    LAMPORTS_PER_SOL,
    MIN_BALANCE,
    SPL_TOKEN_PROGRAM_ID,
    TEST_MINT_SUPPLY,
    USDC_DECIMALS,
    USDC_SYMBOL,
)
from cre_setup.errors import SetupError
from cre_setup.outcome import Outcome
from cre_setup.pda import find_associated_token_address
from cre_setup.settings import Settings
from cre_setup.units import format_decimal, to_ui_amount
from cre_setup.wallet import load_keypair


# ─── Transactions ─────────────────────────────────────────────────────────────

async def send_and_confirm(
    client: AsyncClient,
    instructions: Sequence[Instruction],
    payer: Keypair,
    signers: Iterable[Keypair] = (),
) -> Signature:
    blockhash = (await client.get_latest_blockhash()).value.blockhash
    tx = Transaction.new_signed_with_payer(
        list(instructions), payer.pubkey(), [payer, *signers], blockhash
    )
    resp = await client.send_transaction(tx, opts=TxOpts(preflight_commitment=Confirmed))
    await client.confirm_transaction(resp.value, Confirmed)
    return resp.value


# ─── Steps ────────────────────────────────────────────────────────────────────

async def ensure_funded(client: AsyncClient, owner: Pubkey) -> Optional[Signature]:
    """Airdrop 2 SOL if the wallet holds less than 1 SOL. Only works on local/dev clusters."""
    balance = (await client.get_balance(owner)).value
    print(f"Wallet balance: {format_decimal(Decimal(balance) / LAMPORTS_PER_SOL)} SOL")
    if balance >= MIN_BALANCE:
        return None

    print("Warning: Wallet balance is low. Airdropping SOL...", file=sys.stderr)
    try:
        resp = await client.request_airdrop(owner, AIRDROP_AMOUNT)
        await client.confirm_transaction(resp.value, Confirmed)
    except RPCException as err:
        raise SetupError(f"Error requesting airdrop: {err}") from err
    print("Airdrop successful!")
    return resp.value


async def create_mint(client: AsyncClient, payer: Keypair, decimals: int = USDC_DECIMALS) -> Pubkey:
    """
    Allocate a rent-exempt mint account and initialize it in one transaction.
    The payer is both mint and freeze authority.
    """
    mint_kp = Keypair()
    mint    = mint_kp.pubkey()
    print(f"Creating mint: {mint}")

    rent = (await client.get_minimum_balance_for_rent_exemption(MINT_LEN)).value
    instructions = [
        create_account(
            CreateAccountParams(
                from_pubkey=payer.pubkey(),
                to_pubkey=mint,
                lamports=rent,
                space=MINT_LEN,
                owner=SPL_TOKEN_PROGRAM_ID,
            )
        ),
        initialize_mint(
            InitializeMintParams(
                decimals=decimals,
                program_id=SPL_TOKEN_PROGRAM_ID,
                mint=mint,
                mint_authority=payer.pubkey(),
                freeze_authority=payer.pubkey(),
            )
        ),
    ]
    await send_and_confirm(client, instructions, payer, signers=[mint_kp])
    print(f"Token mint created: {mint}")
    return mint


async def mint_to_owner(
    client: AsyncClient,
    payer: Keypair,
    mint: Pubkey,
    amount: int,
    owner: Optional[Pubkey] = None,
) -> Pubkey:
    """Create the owner's ATA if needed, then mint `amount` raw units into it."""
    owner = owner or payer.pubkey()
    token_account = find_associated_token_address(owner, mint)

    acct_info = await client.get_account_info(token_account, commitment=Confirmed)
    if acct_info.value is None:
        await send_and_confirm(
            client, [create_associated_token_account(payer.pubkey(), owner, mint)], payer
        )
        print(f"Token account created: {token_account}")
    else:
        print(f"Token account found: {token_account}")

    ix = mint_to(
        MintToParams(
            program_id=SPL_TOKEN_PROGRAM_ID,
            mint=mint,
            dest=token_account,
            mint_authority=payer.pubkey(),
            amount=amount,
        )
    )
    await send_and_confirm(client, [ix], payer)
    print(f"Minted {format_decimal(to_ui_amount(amount))} tokens to {token_account}")
    return token_account


def propagate_mint(env_files: Iterable[Tuple[Path, str]], mint: Pubkey) -> List[Path]:
    """
    Point KEY=... in each existing env file at the new mint.
    Missing files, and files without the key, are skipped; read/write and
    decoding errors are printed and do not fail the run.
    """
    updated = []
    for path, key in env_files:
        try:
            if not path.exists():
                continue
            with path.open(newline="") as f:
                text = f.read()
            pattern = re.compile(rf"^{re.escape(key)}=[^\r\n]*", re.MULTILINE)
            text, count = pattern.subn(lambda _: f"{key}={mint}", text, count=1)
            if not count:
                continue
            with path.open("w", newline="") as f:
                f.write(text)
        except (OSError, UnicodeError) as err:
            print(f"Error updating {path}: {err}", file=sys.stderr)
            continue
        updated.append(path)
        print(f"Updated {key} in {path}")
    return updated


# ─── Flow ─────────────────────────────────────────────────────────────────────

async def run_provisioning(settings: Settings) -> Outcome:
    print("Creating test USDC token on local Solana validator...")

    try:
        payer = load_keypair(settings.wallet_path)
    except SetupError as err:
        return Outcome.failure(err)
    print(f"Using wallet: {payer.pubkey()}")

    client = connect(settings)
    try:
        await ensure_funded(client, payer.pubkey())
        mint = await create_mint(client, payer)
        token_account = await mint_to_owner(client, payer, mint, TEST_MINT_SUPPLY)
    except SetupError as err:
        return Outcome.failure(err)
    except Exception as err:
        traceback.print_exc()
        return Outcome.failure(err)
    finally:
        await client.close()

    print("\nTest USDC token created successfully!")
    print(f"Token Mint Address: {mint}")
    print(f"Token Account: {token_account}")
    print(f"Balance: {format_decimal(to_ui_amount(TEST_MINT_SUPPLY))} {USDC_SYMBOL}")

    propagate_mint(settings.env_files, mint)

    print("\nRemember: This is a test token for development purposes only!")
    return Outcome.success("minted", value=mint)


# ─── Entry point ──────────────────────────────────────────────────────────────

async def main() -> int:
    outcome = await run_provisioning(Settings.load())
    return outcome.report()


def cli():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
