import hashlib

from cre_setup.constants import INITIALIZE_IX, PLATFORM_CONFIG_ACCOUNT

DISCRIMINATOR_LEN = 8


def instruction_discriminator(instruction_name: str) -> bytes:
    """
    Compute the 8-byte discriminator for an instruction.
    Anchor uses the first 8 bytes of the SHA-256 hash of "global:<instruction_name>".
    """
    data = f"global:{instruction_name}".encode("utf-8")
    return hashlib.sha256(data).digest()[:DISCRIMINATOR_LEN]


def account_discriminator(account_name: str) -> bytes:
    """
    Compute the 8-byte discriminator for an account.
    Anchor uses the first 8 bytes of the SHA-256 hash of "account:<account_name>".
    """
    data = f"account:{account_name}".encode("utf-8")
    return hashlib.sha256(data).digest()[:DISCRIMINATOR_LEN]


def is_platform_config(data: bytes) -> bool:
    return bytes(data[:DISCRIMINATOR_LEN]) == account_discriminator(PLATFORM_CONFIG_ACCOUNT)


if __name__ == '__main__':
    print("Instruction Discriminators:")
    print(f"{INITIALIZE_IX}:      {instruction_discriminator(INITIALIZE_IX).hex()}")

    print("\nAccount Discriminators:")
    print(f"{PLATFORM_CONFIG_ACCOUNT}: {account_discriminator(PLATFORM_CONFIG_ACCOUNT).hex()}")
