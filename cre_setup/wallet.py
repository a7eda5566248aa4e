import json
from pathlib import Path

from solders.keypair import Keypair

from cre_setup.errors import CredentialNotFound, SetupError


def load_keypair(json_path) -> Keypair:
    """Load a solana-keygen style JSON byte array into a Keypair."""
    path = Path(json_path)
    if not path.exists():
        raise CredentialNotFound(path)

    try:
        data = json.loads(path.read_text())
        if not isinstance(data, list):
            raise TypeError(f"expected a JSON array of bytes, got {type(data).__name__}")
        return Keypair.from_bytes(bytes(data[:64]))
    except (OSError, ValueError, TypeError) as err:
        raise SetupError(f"Wallet keypair at {path} is not a valid key file: {err}") from err
