# mkjj-token

A fungible token with an administrator, balances, allowances and token
metadata. It runs against a small in-memory environment that models a
ledger sequence number, storage entries with a time-to-live, a record of
which address authorised the latest call, and the events published by the
token.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the token

```python
from mkjj_token.env import Env
from mkjj_token.contract import Token

env = Env()              # ledger sequence starts at 0
env.mock_all_auths()     # treat every required authorisation as given

admin = env.generate_address()
alice = env.generate_address()
bob = env.generate_address()

token = Token(env, admin, 7, "name", "symbol")

token.mint(alice, 1000)
token.transfer(alice, bob, 600)
assert token.balance(alice) == 400
assert token.balance(bob) == 600

token.approve(bob, alice, 500, 200)          # valid up to ledger 200
token.transfer_from(alice, bob, alice, 400)  # alice spends bob's tokens
assert token.allowance(bob, alice) == 100
assert token.balance(alice) == 800

token.burn(alice, 100)
print(token.decimals(), token.name(), token.symbol())
```

`env.auths()` returns the authorisation recorded by the most recent call
that required one, as a list of `AuthorizedInvocation` (address, contract,
function name and arguments). `env.events()` lists every `Event` published
so far; its topics start with the event name (`"mint"`, `"transfer"`,
`"approve"`, `"burn"`, `"set_admin"`).

The ledger sequence can be moved forward with `env.ledger.sequence = n`;
allowances and temporary storage entries expire against it.
`token.get_allowance(from_, spender)` returns the stored `AllowanceValue`,
or `None` when no entry is stored.

## Modules

- `mkjj_token.env` – `Env`, `Address`, `Ledger`, `Storage`,
  `InstanceStorage`, `AuthorizedInvocation`, `Event`, and the exceptions
  `ContractError` and `AuthError`.
- `mkjj_token.contract` – the `Token` class and `check_nonnegative_amount`.
- `mkjj_token.balance`, `mkjj_token.allowance`, `mkjj_token.admin`,
  `mkjj_token.metadata` – the storage operations the token is built on.
- `mkjj_token.storage_types` – storage keys, `AllowanceValue` and the
  lifetime constants.

## Rules

- The number of decimals may not exceed 18.
- Amounts may not be negative.
- `mint` and `set_admin` need the administrator's authorisation; `transfer`,
  `approve` and `burn` need the owner's; `transfer_from` and `burn_from` need
  the spender's.
- An allowance reads as zero once the ledger sequence has passed its
  expiration ledger. A positive allowance cannot be set with an expiration
  ledger already in the past.
- Spending more than the balance or the allowance raises `ContractError`
  with the message "insufficient balance" or "insufficient allowance".

## What it does not do

Everything lives in memory for the life of one `Env`; nothing is saved to
disk or sent over a network, and there is no command-line program.
Authorisation is all or nothing: unless `env.mock_all_auths()` has been
called, every call that needs an authorisation raises `AuthError`, and
there is no way to authorise single addresses or check signatures.