# chaumpedersen

Password authentication based on the Chaum-Pedersen zero-knowledge proof.
The client proves that it knows a secret `x` without sending `x`. The
service stores only two public values computed when the user registers.

## How it works

The protocol uses a prime `p`, a prime `q` that divides `p - 1`, and two
generators `alpha` and `beta` of the subgroup of order `q`. The standard
constants are the 1024-bit group with a 160-bit subgroup from RFC 5114;
`beta` is derived from `alpha` by raising it to a fixed exponent.

1. **Register.** The client turns the password into an integer `x` and sends
   `y1 = alpha^x mod p` and `y2 = beta^x mod p`.
2. **Commit.** For each login the client picks a random `k < q` and sends
   `r1 = alpha^k mod p` and `r2 = beta^k mod p`.
3. **Challenge.** The service answers with a random `c < q` and a
   12-character authentication ID.
4. **Respond.** The client sends `s = k - c*x mod q`.
5. **Verify.** The service checks `r1 == alpha^s * y1^c mod p` and
   `r2 == beta^s * y2^c mod p`. If both hold, it issues a 12-character
   session ID.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Using the protocol directly (`chaumpedersen.zkp`)

```python
from chaumpedersen.zkp import ZKP, random_below

zkp = ZKP.standard()              # RFC 5114 constants

x = random_below(zkp.q)           # the secret
y1, y2 = zkp.compute_pair(x)      # public values from registration

k = random_below(zkp.q)           # per-login nonce
r1, r2 = zkp.compute_pair(k)      # commitments
c = random_below(zkp.q)           # the verifier's challenge
s = zkp.solve(k, c, x)            # the prover's answer

assert zkp.verify(r1, r2, y1, y2, c, s)
```

`ZKP` is a frozen dataclass with fields `p`, `q`, `alpha` and `beta`, so it
can also be built from your own parameters, which is handy for working
through small examples by hand:

```python
zkp = ZKP(p=11, q=5, alpha=2, beta=4)
```

Other helpers in the module:

- `get_constants()` returns the standard `(alpha, beta, p, q)`.
- `random_below(bound)` returns a cryptographically random integer in
  `[0, bound)`.
- `random_string(size)` returns a random string of ASCII letters and digits.

## The authentication service (`chaumpedersen.server`)

`AuthService` keeps registered users and pending challenges in memory,
guarded by a lock. It takes an optional `ZKP` instance and uses
`ZKP.standard()` when none is given; the instance is available as
`service.zkp`. It implements the three protocol steps:

- `register(user, y1, y2)` stores the public pair, replacing any earlier
  registration of the same user.
- `create_authentication_challenge(user, r1, r2)` records the commitments and
  returns `(auth_id, c)`; it raises `NotFoundError` for an unknown user.
- `verify_authentication(auth_id, s)` returns a new session ID; it raises
  `NotFoundError` for an unknown authentication ID and
  `PermissionDeniedError` when the proof does not verify.

Both errors derive from `AuthError`. Per-user state is kept in `UserInfo`
records (`user_name`, `y1`, `y2`, `r1`, `r2`, `c`, `s`, `session_id`) in the
`user_info` dictionary; `auth_id_to_user` maps authentication IDs to user
names. Progress is reported through the standard `logging` module at INFO
level.

## The client (`chaumpedersen.client`)

The client functions drive a service through the whole exchange:

```python
from chaumpedersen.server import AuthService
from chaumpedersen.client import register, authenticate

service = AuthService()
password = "password"
register(service, "alice", password)
session_id = authenticate(service, "alice", password)
```

`password_to_secret(password)` shows how a password becomes the secret
integer: its UTF-8 bytes, after stripping surrounding whitespace, are read as
one big-endian number.

An interactive session is available from the command line:

```
chaumpedersen-client
```

It asks for a username and a password to register, then for the password
again to log in, and prints the session ID on success (exit status 0). If
the proof is rejected, for example because the second password differs, or
if input ends early, it prints an error to standard error and exits with
status 1.

## What it does not do

- There is no network server or network client. `AuthService` is an
  ordinary Python object, and `chaumpedersen-client` creates its own service
  in the same process, so registration and login happen within one run.
- Nothing is stored on disk: users, challenges and sessions are lost when
  the process ends. Session IDs are returned but not recorded or checked
  afterwards.

## Caveats

This is an educational implementation. Secrets are derived directly from
passwords without any key-stretching.