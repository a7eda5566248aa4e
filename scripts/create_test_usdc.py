# scripts/create_test_usdc.py
#
# Usage (from the repo root, with solana-test-validator running):
#   python scripts/create_test_usdc.py

from cre_setup.provision import cli

if __name__ == "__main__":
    cli()
