"""In-memory fungible token with balances, allowances, metadata and a simulated ledger environment."""

__version__ = "0.0.6"
__all__ = ["admin", "allowance", "balance", "contract", "env", "metadata", "storage_types"]