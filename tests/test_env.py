import pytest

from mkjj_token.env import (
    MIN_PERSISTENT_TTL,
    MIN_TEMPORARY_TTL,
    Address,
    AuthError,
    AuthorizedInvocation,
    ContractError,
    Env,
    Event,
)


def test_generated_addresses_are_unique():
    env = Env()
    addresses = {env.generate_address() for _ in range(20)}
    assert len(addresses) == 20


def test_require_auth_without_mock_raises():
    env = Env()
    user = env.generate_address()
    contract = env.generate_address()
    with pytest.raises(AuthError):
        env.require_auth(user, contract, "mint", (user, 5))
    assert env.auths() == []


def test_require_auth_records_last_invocation():
    env = Env()
    env.mock_all_auths()
    user = env.generate_address()
    other = env.generate_address()
    contract = env.generate_address()
    env.require_auth(user, contract, "burn", (user, 5))
    env.require_auth(other, contract, "transfer", (other, user, 7))
    assert env.auths() == [
        AuthorizedInvocation(other, contract, "transfer", (other, user, 7))
    ]


def test_events_are_published_in_order():
    env = Env()
    contract = env.generate_address()
    env.publish_event(contract, ("mint",), 1)
    env.publish_event(contract, ("burn",), 2)
    assert env.events() == [
        Event(contract, ("mint",), 1),
        Event(contract, ("burn",), 2),
    ]


def test_storage_round_trip_and_default():
    env = Env()
    env.persistent.set("k", 42)
    assert env.persistent.get("k") == 42
    assert env.persistent.get("missing", "fallback") == "fallback"
    assert env.persistent.has("k")
    env.persistent.remove("k")
    assert not env.persistent.has("k")


def test_new_entries_get_minimum_ttl():
    env = Env(sequence=10)
    env.temporary.set("t", 1)
    env.persistent.set("p", 1)
    assert env.temporary.ttl("t") == MIN_TEMPORARY_TTL - 1
    assert env.persistent.ttl("p") == MIN_PERSISTENT_TTL - 1


def test_temporary_entry_expires():
    env = Env()
    env.temporary.set("t", 1)
    env.ledger.sequence = MIN_TEMPORARY_TTL
    assert env.temporary.get("t") is None
    assert not env.temporary.has("t")


def test_persistent_entry_outlives_ttl():
    env = Env()
    env.persistent.set("p", 9)
    env.ledger.sequence = MIN_PERSISTENT_TTL * 2
    assert env.persistent.get("p") == 9


def test_extend_ttl_below_threshold():
    env = Env()
    env.temporary.set("t", 1)
    env.temporary.extend_ttl("t", 100, 100)
    assert env.temporary.ttl("t") == 100


def test_extend_ttl_above_threshold_keeps_ttl():
    env = Env()
    env.temporary.set("t", 1)
    before = env.temporary.ttl("t")
    env.temporary.extend_ttl("t", 0, 50)
    assert env.temporary.ttl("t") == before


def test_set_keeps_existing_lifetime():
    env = Env()
    env.temporary.set("t", 1)
    env.temporary.extend_ttl("t", 100, 100)
    env.temporary.set("t", 2)
    assert env.temporary.get("t") == 2
    assert env.temporary.ttl("t") == 100


def test_extend_ttl_errors():
    env = Env()
    with pytest.raises(ContractError):
        env.persistent.extend_ttl("missing", 1, 2)
    env.persistent.set("p", 1)
    with pytest.raises(ContractError):
        env.persistent.extend_ttl("p", 5, 2)
    with pytest.raises(ContractError):
        env.persistent.ttl("missing")


def test_instance_storage():
    env = Env()
    env.instance.set("a", Address("x"))
    assert env.instance.get("a") == Address("x")
    assert env.instance.has("a")
    assert env.instance.get("b", 3) == 3
    env.instance.extend_ttl(MIN_PERSISTENT_TTL + 10, MIN_PERSISTENT_TTL + 20)
    assert env.instance.ttl() == MIN_PERSISTENT_TTL + 20
    with pytest.raises(ContractError):
        env.instance.extend_ttl(3, 1)


def test_auth_error_is_contract_error():
    env = Env()
    with pytest.raises(ContractError):
        env.require_auth(Address("a"), Address("c"), "f", ())