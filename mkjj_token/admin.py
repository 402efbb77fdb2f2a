"""Reading and writing the token administrator."""

from __future__ import annotations

from .env import Address, ContractError, Env
from .storage_types import AdminKey


def read_administrator(env: Env) -> Address:
    admin = env.instance.get(AdminKey())
    if admin is None:
        raise ContractError("administrator is not set")
    return admin


def write_administrator(env: Env, address: Address) -> None:
    env.instance.set(AdminKey(), address)