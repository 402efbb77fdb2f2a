"""Account balances kept in persistent storage."""

from __future__ import annotations

from .env import Address, ContractError, Env
from .storage_types import BALANCE_BUMP_AMOUNT, BALANCE_LIFETIME_THRESHOLD, BalanceKey


def read_balance(env: Env, addr: Address) -> int:
    key = BalanceKey(addr)
    balance = env.persistent.get(key)
    if balance is None:
        return 0
    env.persistent.extend_ttl(key, BALANCE_LIFETIME_THRESHOLD, BALANCE_BUMP_AMOUNT)
    return balance


def _write_balance(env: Env, addr: Address, amount: int) -> None:
    key = BalanceKey(addr)
    env.persistent.set(key, amount)
    env.persistent.extend_ttl(key, BALANCE_LIFETIME_THRESHOLD, BALANCE_BUMP_AMOUNT)


def receive_balance(env: Env, addr: Address, amount: int) -> None:
    _write_balance(env, addr, read_balance(env, addr) + amount)


def spend_balance(env: Env, addr: Address, amount: int) -> None:
    balance = read_balance(env, addr)
    if balance < amount:
        raise ContractError("insufficient balance")
    _write_balance(env, addr, balance - amount)