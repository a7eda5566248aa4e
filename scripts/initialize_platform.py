# scripts/initialize_platform.py
#
# Usage (from the repo root, after `anchor build` and deploying loan_core):
#   python scripts/initialize_platform.py
#
# Needs LOAN_CORE_PROGRAM_ID and USDC_MINT in api/.env (or the environment).

from cre_setup.bootstrap import cli

if __name__ == "__main__":
    cli()
