"""An in-memory ledger environment: storage with lifetimes, auth and events."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Hashable

MIN_TEMPORARY_TTL = 16
MIN_PERSISTENT_TTL = 4096


class ContractError(Exception):
    """Raised when a contract call aborts."""


class AuthError(ContractError):
    """Raised when an address has not authorised a call."""


@dataclass(frozen=True, order=True)
class Address:
    id: str

    def __str__(self) -> str:
        return self.id


@dataclass
class Ledger:
    sequence: int = 0


@dataclass(frozen=True)
class AuthorizedInvocation:
    address: Address
    contract: Address
    function: str
    args: tuple


@dataclass(frozen=True)
class Event:
    contract: Address
    topics: tuple
    data: Any


@dataclass
class _Entry:
    value: Any
    live_until: int


def _extended(live_until: int, sequence: int, threshold: int, extend_to: int) -> int:
    if threshold < 0 or extend_to < 0:
        raise ContractError("ttl values must not be negative")
    if threshold > extend_to:
        raise ContractError("threshold must not be greater than extend_to")
    if live_until - sequence < threshold:
        return max(live_until, sequence + extend_to)
    return live_until


class Storage:
    """Keyed storage with per-entry lifetimes; temporary entries expire."""

    def __init__(self, ledger: Ledger, temporary: bool = False) -> None:
        self._ledger = ledger
        self.temporary = temporary
        self._min_ttl = MIN_TEMPORARY_TTL if temporary else MIN_PERSISTENT_TTL
        self._entries: dict[Hashable, _Entry] = {}

    def _live(self, key: Hashable) -> _Entry | None:
        entry = self._entries.get(key)
        if entry and self.temporary and entry.live_until < self._ledger.sequence:
            del self._entries[key]
            return None
        return entry

    def _require(self, key: Hashable) -> _Entry:
        entry = self._live(key)
        if entry is None:
            raise ContractError(f"no storage entry for {key!r}")
        return entry

    def get(self, key: Hashable, default: Any = None) -> Any:
        entry = self._live(key)
        return default if entry is None else entry.value

    def set(self, key: Hashable, value: Any) -> None:
        entry = self._live(key)
        if entry is None:
            self._entries[key] = _Entry(value, self._ledger.sequence + self._min_ttl - 1)
        else:
            entry.value = value

    def has(self, key: Hashable) -> bool:
        return self._live(key) is not None

    def remove(self, key: Hashable) -> None:
        self._entries.pop(key, None)

    def extend_ttl(self, key: Hashable, threshold: int, extend_to: int) -> None:
        entry = self._require(key)
        entry.live_until = _extended(
            entry.live_until, self._ledger.sequence, threshold, extend_to
        )

    def ttl(self, key: Hashable) -> int:
        return self._require(key).live_until - self._ledger.sequence


class InstanceStorage:
    """Storage tied to the contract instance, sharing one lifetime."""

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger
        self._values: dict[Hashable, Any] = {}
        self._live_until = ledger.sequence + MIN_PERSISTENT_TTL - 1

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: Hashable, value: Any) -> None:
        self._values[key] = value

    def has(self, key: Hashable) -> bool:
        return key in self._values

    def extend_ttl(self, threshold: int, extend_to: int) -> None:
        self._live_until = _extended(
            self._live_until, self._ledger.sequence, threshold, extend_to
        )

    def ttl(self) -> int:
        return self._live_until - self._ledger.sequence


class Env:
    """The environment a contract runs in."""

    def __init__(self, sequence: int = 0) -> None:
        self.ledger = Ledger(sequence)
        self.persistent = Storage(self.ledger)
        self.temporary = Storage(self.ledger, temporary=True)
        self.instance = InstanceStorage(self.ledger)
        self._mock_auths = False
        self._auths: list[AuthorizedInvocation] = []
        self._events: list[Event] = []
        self._counter = itertools.count(1)

    def generate_address(self) -> Address:
        return Address(f"address-{next(self._counter)}")

    def mock_all_auths(self) -> None:
        self._mock_auths = True

    def require_auth(
        self, address: Address, contract: Address, function: str, args: tuple
    ) -> None:
        if not self._mock_auths:
            raise AuthError(f"{address} has not authorised {function}")
        self._auths = [AuthorizedInvocation(address, contract, function, tuple(args))]

    def auths(self) -> list[AuthorizedInvocation]:
        """Authorisations recorded by the most recent authorising call."""
        return list(self._auths)

    def publish_event(self, contract: Address, topics: tuple, data: Any) -> None:
        self._events.append(Event(contract, tuple(topics), data))

    def events(self) -> list[Event]:
        return list(self._events)