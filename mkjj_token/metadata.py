"""Token metadata: decimals, name and symbol."""

from __future__ import annotations

from dataclasses import dataclass

from .env import ContractError, Env

_METADATA_KEY = "METADATA"


@dataclass(frozen=True)
class TokenMetadata:
    """Descriptive properties of a token."""

    decimal: int
    name: str
    symbol: str


def _read_metadata(env: Env) -> TokenMetadata:
    metadata = env.instance.get(_METADATA_KEY)
    if metadata is None:
        raise ContractError("token metadata is not set")
    return metadata


def read_decimal(env: Env) -> int:
    return _read_metadata(env).decimal


def read_name(env: Env) -> str:
    return _read_metadata(env).name


def read_symbol(env: Env) -> str:
    return _read_metadata(env).symbol


def write_metadata(env: Env, metadata: TokenMetadata) -> None:
    env.instance.set(_METADATA_KEY, metadata)