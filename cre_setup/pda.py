# cre_setup/pda.py

from typing import Tuple

from solders.pubkey import Pubkey

from cre_setup.constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    PLATFORM_CONFIG_SEED,
    SPL_TOKEN_PROGRAM_ID,
)


def find_platform_config_address(program_id: Pubkey) -> Tuple[Pubkey, int]:
    """
    Derive the same PDA loan_core uses on-chain:
      seeds = [b"platform-config"], bump
    """
    return Pubkey.find_program_address([PLATFORM_CONFIG_SEED], program_id)


def find_associated_token_address(owner: Pubkey, mint: Pubkey) -> Pubkey:
    """Derive the Associated Token Account (ATA) for a given owner and mint."""
    seeds = [bytes(owner), bytes(SPL_TOKEN_PROGRAM_ID), bytes(mint)]
    (ata, _) = Pubkey.find_program_address(seeds, ASSOCIATED_TOKEN_PROGRAM_ID)
    return ata
