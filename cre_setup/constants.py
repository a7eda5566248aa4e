# cre_setup/constants.py

from pathlib import Path

from solders.pubkey import Pubkey

# ─── Network ──────────────────────────────────────────────────────────────────

# Change this if you run against a different cluster (or set SOLANA_RPC_URL).
DEFAULT_RPC_URL     = "http://localhost:8899"
DEFAULT_WALLET_PATH = Path.home() / ".config" / "solana" / "id.json"

# ─── Project layout (relative to the repo root) ──────────────────────────────

API_ENV_PATH = Path("api") / ".env"
APP_ENV_PATH = Path("app") / ".env"
IDL_PATH     = Path("target") / "idl" / "loan_core.json"

# ─── Token ───────────────────────────────────────────────────────────────────

USDC_DECIMALS     = 6                                  # same as real USDC
USDC_SYMBOL       = "USDC"
TEST_MINT_SUPPLY  = 1_000_000 * 10**USDC_DECIMALS      # 1 million USDC

# ─── Native currency ─────────────────────────────────────────────────────────

LAMPORTS_PER_SOL  = 10**9
MIN_BALANCE       = 1 * LAMPORTS_PER_SOL
AIRDROP_AMOUNT    = 2 * LAMPORTS_PER_SOL

# ─── Programs ────────────────────────────────────────────────────────────────

# Classic SPL token program (not Token-2022) and the ATA program.
SPL_TOKEN_PROGRAM_ID        = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
ASSOCIATED_TOKEN_PROGRAM_ID = Pubkey.from_string("ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL")

# Seed used by loan_core for the PlatformConfig PDA:
#   seeds = [b"platform-config"]
PLATFORM_CONFIG_SEED = b"platform-config"
PLATFORM_CONFIG_ACCOUNT = "PlatformConfig"
INITIALIZE_IX = "initialize"

# ─── Basis points ────────────────────────────────────────────────────────────

BPS_PER_PERCENT = 100
MAX_BPS         = 10_000
