# cre_setup/settings.py

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values
from solana.rpc.commitment import Commitment, Confirmed
from solders.pubkey import Pubkey

from cre_setup.constants import (
    API_ENV_PATH,
    APP_ENV_PATH,
    DEFAULT_RPC_URL,
    DEFAULT_WALLET_PATH,
    IDL_PATH,
)
from cre_setup.errors import MissingSetting


@dataclass(frozen=True)
class Settings:
    """Everything the two flows read from the outside world, built once."""

    root: Path
    rpc_url: str = DEFAULT_RPC_URL
    wallet_path: Path = DEFAULT_WALLET_PATH
    program_id: Optional[str] = None
    usdc_mint: Optional[str] = None
    commitment: Commitment = field(default=Confirmed)

    @property
    def idl_path(self) -> Path:
        return self.root / IDL_PATH

    @property
    def env_files(self):
        """(path, key) pairs that receive a freshly minted USDC address."""
        return [
            (self.root / API_ENV_PATH, "USDC_MINT"),
            (self.root / APP_ENV_PATH, "REACT_APP_USDC_MINT"),
        ]

    @classmethod
    def load(cls, root: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read api/.env under `root` and overlay the process environment on top
        of it (real environment variables win, like dotenv.config does).
        """
        root = Path(root or Path.cwd())
        values = {k: v for k, v in dotenv_values(root / API_ENV_PATH).items() if v}
        values.update({k: v for k, v in (os.environ if environ is None else environ).items() if v})

        wallet = values.get("SOLANA_WALLET")
        return cls(
            root=root,
            rpc_url=values.get("SOLANA_RPC_URL", DEFAULT_RPC_URL),
            wallet_path=Path(wallet).expanduser() if wallet else DEFAULT_WALLET_PATH,
            program_id=values.get("LOAN_CORE_PROGRAM_ID"),
            usdc_mint=values.get("USDC_MINT"),
        )

    def require_program_id(self) -> Pubkey:
        return _require_pubkey("LOAN_CORE_PROGRAM_ID", self.program_id)

    def require_usdc_mint(self) -> Pubkey:
        return _require_pubkey("USDC_MINT", self.usdc_mint)


def _require_pubkey(name: str, value: Optional[str]) -> Pubkey:
    if not value:
        raise MissingSetting(f"{name} is not defined in .env")
    try:
        return Pubkey.from_string(value)
    except ValueError as err:
        raise MissingSetting(f"{name} is not a valid address: {value!r}") from err
