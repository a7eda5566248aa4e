"""Setup scripts for the CRE-Debt-Solana lending platform.

`cre_setup.provision` mints a test USDC token on a local validator,
`cre_setup.bootstrap` writes (or reports) the loan_core PlatformConfig.
"""

__version__ = "0.1.0"
