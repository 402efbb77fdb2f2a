"""The token contract: minting, transfers, allowances and burning."""

from __future__ import annotations

from typing import Any

from .admin import read_administrator, write_administrator
from .allowance import read_allowance, spend_allowance, write_allowance
from .balance import read_balance, receive_balance, spend_balance
from .env import Address, ContractError, Env
from .metadata import TokenMetadata, read_decimal, read_name, read_symbol, write_metadata
from .storage_types import (
    INSTANCE_BUMP_AMOUNT,
    INSTANCE_LIFETIME_THRESHOLD,
    AllowanceDataKey,
    AllowanceKey,
    AllowanceValue,
)

MAX_DECIMAL = 18


def check_nonnegative_amount(amount: int) -> None:
    """Raise ContractError if ``amount`` is negative."""
    if amount < 0:
        raise ContractError(f"negative amount is not allowed: {amount}")


class Token:
    """A fungible token deployed in an environment."""

    def __init__(
        self, env: Env, admin: Address, decimal: int, name: str, symbol: str
    ) -> None:
        if decimal > MAX_DECIMAL:
            raise ContractError("Decimal must not be greater than 18")
        self.env = env
        self.address = env.generate_address()
        write_administrator(env, admin)
        write_metadata(env, TokenMetadata(decimal=decimal, name=name, symbol=symbol))

    def _require_auth(self, address: Address, function: str, args: tuple) -> None:
        self.env.require_auth(address, self.address, function, args)

    def _bump_instance(self) -> None:
        self.env.instance.extend_ttl(INSTANCE_LIFETIME_THRESHOLD, INSTANCE_BUMP_AMOUNT)

    def _publish(self, topics: tuple, data: Any) -> None:
        self.env.publish_event(self.address, topics, data)

    def mint(self, to: Address, amount: int) -> None:
        check_nonnegative_amount(amount)
        admin = read_administrator(self.env)
        self._require_auth(admin, "mint", (to, amount))
        self._bump_instance()
        receive_balance(self.env, to, amount)
        self._publish(("mint", admin, to), amount)

    def set_admin(self, new_admin: Address) -> None:
        admin = read_administrator(self.env)
        self._require_auth(admin, "set_admin", (new_admin,))
        self._bump_instance()
        write_administrator(self.env, new_admin)
        self._publish(("set_admin", admin), new_admin)

    def get_allowance(self, from_: Address, spender: Address) -> AllowanceValue | None:
        """The stored allowance entry, or None if none is stored."""
        return self.env.temporary.get(AllowanceKey(AllowanceDataKey(from_, spender)))

    def allowance(self, from_: Address, spender: Address) -> int:
        self._bump_instance()
        return read_allowance(self.env, from_, spender).amount

    def approve(
        self, from_: Address, spender: Address, amount: int, expiration_ledger: int
    ) -> None:
        self._require_auth(from_, "approve", (from_, spender, amount, expiration_ledger))
        check_nonnegative_amount(amount)
        self._bump_instance()
        write_allowance(self.env, from_, spender, amount, expiration_ledger)
        self._publish(("approve", from_, spender), (amount, expiration_ledger))

    def balance(self, id_: Address) -> int:
        self._bump_instance()
        return read_balance(self.env, id_)

    def transfer(self, from_: Address, to: Address, amount: int) -> None:
        self._require_auth(from_, "transfer", (from_, to, amount))
        check_nonnegative_amount(amount)
        self._bump_instance()
        spend_balance(self.env, from_, amount)
        receive_balance(self.env, to, amount)
        self._publish(("transfer", from_, to), amount)

    def transfer_from(
        self, spender: Address, from_: Address, to: Address, amount: int
    ) -> None:
        self._require_auth(spender, "transfer_from", (spender, from_, to, amount))
        check_nonnegative_amount(amount)
        self._bump_instance()
        spend_allowance(self.env, from_, spender, amount)
        spend_balance(self.env, from_, amount)
        receive_balance(self.env, to, amount)
        self._publish(("transfer", from_, to), amount)

    def burn(self, from_: Address, amount: int) -> None:
        self._require_auth(from_, "burn", (from_, amount))
        check_nonnegative_amount(amount)
        self._bump_instance()
        spend_balance(self.env, from_, amount)
        self._publish(("burn", from_), amount)

    def burn_from(self, spender: Address, from_: Address, amount: int) -> None:
        self._require_auth(spender, "burn_from", (spender, from_, amount))
        check_nonnegative_amount(amount)
        self._bump_instance()
        spend_allowance(self.env, from_, spender, amount)
        spend_balance(self.env, from_, amount)
        self._publish(("burn", from_), amount)

    def decimals(self) -> int:
        return read_decimal(self.env)

    def name(self) -> str:
        return read_name(self.env)

    def symbol(self) -> str:
        return read_symbol(self.env)