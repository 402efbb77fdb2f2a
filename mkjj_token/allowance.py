"""Allowances that let a spender move an owner's tokens until a ledger."""

from __future__ import annotations

from .env import Address, ContractError, Env
from .storage_types import AllowanceDataKey, AllowanceKey, AllowanceValue


def _key(from_: Address, spender: Address) -> AllowanceKey:
    return AllowanceKey(AllowanceDataKey(from_, spender))


def read_allowance(env: Env, from_: Address, spender: Address) -> AllowanceValue:
    """The allowance, with a zero amount once it has expired."""
    allowance = env.temporary.get(_key(from_, spender))
    if allowance is None:
        return AllowanceValue(amount=0, expiration_ledger=0)
    if allowance.expiration_ledger < env.ledger.sequence:
        return AllowanceValue(amount=0, expiration_ledger=allowance.expiration_ledger)
    return allowance


def write_allowance(
    env: Env, from_: Address, spender: Address, amount: int, expiration_ledger: int
) -> None:
    sequence = env.ledger.sequence
    if amount > 0 and expiration_ledger < sequence:
        raise ContractError("expiration_ledger is less than ledger seq when amount > 0")

    key = _key(from_, spender)
    env.temporary.set(key, AllowanceValue(amount, expiration_ledger))

    if amount > 0:
        live_for = expiration_ledger - sequence
        env.temporary.extend_ttl(key, live_for, live_for)


def spend_allowance(env: Env, from_: Address, spender: Address, amount: int) -> None:
    allowance = read_allowance(env, from_, spender)
    if allowance.amount < amount:
        raise ContractError("insufficient allowance")
    if amount > 0:
        write_allowance(
            env,
            from_,
            spender,
            allowance.amount - amount,
            allowance.expiration_ledger,
        )