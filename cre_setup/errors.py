from typing import Optional


class SetupError(Exception):
    """A fatal, user-actionable setup failure.

    `hint` carries the remediation printed after the error line, if known.
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.hint = hint


class CredentialNotFound(SetupError):
    def __init__(self, path):
        super().__init__(
            f"Wallet keypair not found at {path}",
            hint=f"Create a wallet using: solana-keygen new --no-bip39-passphrase -o {path}",
        )
        self.path = path


class MissingSetting(SetupError):
    pass


class IdlUnreadable(SetupError):
    pass
