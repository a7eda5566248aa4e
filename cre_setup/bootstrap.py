# cre_setup/bootstrap.py
"""
Initialize the loan_core PlatformConfig on-chain, once.

Running this twice never double-initializes: if the PlatformConfig PDA
already holds an account, the current values are fetched and printed and
nothing is submitted.
"""

import asyncio
import sys
import traceback
from enum import Enum
from typing import Optional

from anchorpy import Context, Program
from anchorpy.error import ProgramError
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Confirmed
from solana.rpc.core import RPCException
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.system_program import ID as SYS_PROGRAM_ID

from cre_setup.connection import connect
from cre_setup.constants import INITIALIZE_IX, PLATFORM_CONFIG_ACCOUNT
from cre_setup.disc import is_platform_config
from cre_setup.errors import SetupError
from cre_setup.outcome import Outcome
from cre_setup.params import DEFAULT_PARAMS, PlatformParams
from cre_setup.pda import find_associated_token_address, find_platform_config_address
from cre_setup.program import bind_program
from cre_setup.settings import Settings
from cre_setup.wallet import load_keypair


class PlatformState(Enum):
    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"


# ─── Helpers ──────────────────────────────────────────────────────────────────

def print_report(title: str, lines):
    print(f"\n{title}:")
    for line in lines:
        print(line)


def already_initialized(err: Exception) -> bool:
    """True if `initialize` was rejected because the PDA is already allocated."""
    logs = getattr(err, "logs", None) or []
    text = " ".join([str(err), *map(str, logs)])
    return "already in use" in text


async def fetch_state(client: AsyncClient, program_id: Pubkey, config_pda: Pubkey) -> PlatformState:
    acct_info = await client.get_account_info(config_pda, commitment=Confirmed)
    account = acct_info.value
    if account is None:
        return PlatformState.UNCONFIGURED

    if account.owner != program_id or not is_platform_config(account.data):
        raise SetupError(
            f"Account {config_pda} exists but is not a {PLATFORM_CONFIG_ACCOUNT} owned by {program_id}",
            hint="Check LOAN_CORE_PROGRAM_ID in api/.env",
        )
    return PlatformState.CONFIGURED


async def report_existing(program: Program, config_pda: Pubkey) -> Outcome:
    config = await program.account[PLATFORM_CONFIG_ACCOUNT].fetch(config_pda)
    params = PlatformParams.from_record(config)

    lines = params.report_lines()
    for label, attr in (
        ("Authority", "authority"),
        ("Treasury", "treasury"),
        ("Treasury Token Account", "treasury_token_account"),
        ("Paused", "paused"),
    ):
        if hasattr(config, attr):
            lines.append(f"{label}: {getattr(config, attr)}")

    print_report("Current Configuration", lines)
    return Outcome.success("already configured", value=params)


async def submit_initialize(
    program: Program,
    config_pda: Pubkey,
    treasury_token_account: Pubkey,
    params: PlatformParams,
) -> Optional[Signature]:
    """
    Send loan_core's `initialize`. The admin wallet is both authority and
    treasury. Returns None when another actor created the PDA first.
    """
    wallet = program.provider.wallet
    try:
        return await program.rpc[INITIALIZE_IX](
            *params.instruction_args(),
            ctx=Context(
                accounts={
                    "authority":              wallet.public_key,
                    "treasury":               wallet.public_key,
                    "treasury_token_account": treasury_token_account,
                    "platform_config":        config_pda,
                    "system_program":         SYS_PROGRAM_ID,
                },
            ),
        )
    except (RPCException, ProgramError) as err:
        if already_initialized(err):
            return None
        raise


# ─── State machine ────────────────────────────────────────────────────────────

async def bootstrap_platform(
    program: Program,
    client: AsyncClient,
    usdc_mint: Pubkey,
    params: PlatformParams = DEFAULT_PARAMS,
) -> Outcome:
    try:
        params.validate()
    except ValueError as err:
        raise SetupError(f"Invalid platform parameters: {err}") from err

    admin = program.provider.wallet.public_key
    print(f"Loan Core Program: {program.program_id}")
    print(f"Admin Wallet: {admin}")
    print(f"USDC Mint: {usdc_mint}")

    treasury_ata = find_associated_token_address(admin, usdc_mint)
    print(f"Treasury Token Account: {treasury_ata}")

    config_pda, _ = find_platform_config_address(program.program_id)
    print(f"Platform Config PDA: {config_pda}")

    if await fetch_state(client, program.program_id, config_pda) is PlatformState.CONFIGURED:
        print("Platform configuration already exists!")
        print("If you want to re-initialize, consider updating instead.")
        return await report_existing(program, config_pda)

    print("Initializing platform configuration...")
    tx_sig = await submit_initialize(program, config_pda, treasury_ata, params)
    if tx_sig is None:
        print("Platform configuration was initialized concurrently by another process.")
        return await report_existing(program, config_pda)

    print(f"Transaction signature: {tx_sig}")
    print("Platform configuration initialized successfully!")
    print_report("Configuration", params.report_lines())
    return Outcome.success("initialized", value=tx_sig)


async def run_bootstrap(settings: Settings, params: PlatformParams = DEFAULT_PARAMS) -> Outcome:
    print("Initializing CRE-Debt-Solana platform configuration...")

    # Nothing touches the network until these are known to be present.
    try:
        program_id = settings.require_program_id()
        usdc_mint  = settings.require_usdc_mint()
        keypair    = load_keypair(settings.wallet_path)
    except SetupError as err:
        return Outcome.failure(err)

    client = connect(settings)
    try:
        program = bind_program(client, keypair, program_id, settings.idl_path, settings.commitment)
        return await bootstrap_platform(program, client, usdc_mint, params)
    except SetupError as err:
        return Outcome.failure(err)
    except Exception as err:
        traceback.print_exc()
        return Outcome.failure(err)
    finally:
        await client.close()


# ─── Entry point ──────────────────────────────────────────────────────────────

async def main() -> int:
    outcome = await run_bootstrap(Settings.load())
    return outcome.report()


def cli():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
