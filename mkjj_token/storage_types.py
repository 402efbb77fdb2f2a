"""Storage keys, stored values and lifetime constants of the token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .env import Address

DAY_IN_LEDGERS = 17280
INSTANCE_BUMP_AMOUNT = 7 * DAY_IN_LEDGERS
INSTANCE_LIFETIME_THRESHOLD = INSTANCE_BUMP_AMOUNT - DAY_IN_LEDGERS
BALANCE_BUMP_AMOUNT = 30 * DAY_IN_LEDGERS
BALANCE_LIFETIME_THRESHOLD = BALANCE_BUMP_AMOUNT - DAY_IN_LEDGERS


@dataclass(frozen=True)
class AllowanceDataKey:
    from_: Address
    spender: Address


@dataclass(frozen=True)
class AllowanceValue:
    amount: int
    expiration_ledger: int


@dataclass(frozen=True)
class AllowanceKey:
    key: AllowanceDataKey


@dataclass(frozen=True)
class BalanceKey:
    address: Address


@dataclass(frozen=True)
class StateKey:
    address: Address


@dataclass(frozen=True)
class AdminKey:
    pass


DataKey = Union[AllowanceKey, BalanceKey, StateKey, AdminKey]