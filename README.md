# keyden

A small command-line tool and library for managing, rotating and generating
secret keys.

Keys live in a plain text file, one key per line:

```
<kid>:<secret>:<created_at_unix>
```

Blank lines are ignored. Any other line that does not match this shape makes
reading the file fail with `keyden.commons.InvalidFormatError`.

## Installation

```
pip install keyden
```

## Command line

Commands that work on a key file take its path as a positional argument. If
it is left out, the path comes from the `KEYDEN_FILE` environment variable;
if neither is given, the command fails. The key file must already exist
(it may be empty).

Rotate keys: when the file holds no keys, a new key named `key-<nanoseconds>`
is generated and the file is rewritten. Otherwise nothing changes.

```
keyden rotate keys.txt --size 64
```

Print the secret of the current (most recently added) key. If the file holds
no keys, `No active key found.` goes to standard error.

```
keyden current keys.txt
```

List all stored keys with their creation times, one per line as
`<kid> (created at <created_at_unix>)`:

```
keyden list keys.txt
```

Generate a one-time secret and print it without storing it:

```
keyden generate --size 32
```

`--size` defaults to 128 characters. When a key file cannot be read or parsed,
the command prints `Error: ...` to standard error and exits with status 1.

## Library

```python
from datetime import timedelta

from keyden.file_store import FileKeyStore
from keyden.key_manager import KeyManager

store = FileKeyStore("keys.txt")
manager = KeyManager(store, size=64, count=2, reload_interval=timedelta(seconds=10))

manager.rotate_keys()
key = manager.current_key()
print(key.kid, key.created_at_unix)

for item in manager.list_keys():
    print(item.kid)
```

`KeyManager(store, size=128, count=1, ttl_secs=86400,
reload_interval=timedelta(seconds=30))` loads the keys from the store when it
is created. Its methods:

- `get_key(kid)` returns the key with that identifier, or `None`.
- `current_key()` returns the most recently inserted key, or `None`.
- `list_keys()` returns all keys in insertion order.
- `can_reload()` tells whether `reload_interval` has passed since the last load.
- `reload()` re-reads the store, but only once `reload_interval` has passed.
- `generate_key(kid)` adds a new key in memory only; call `save_keys()`
  afterwards to write it to the store.
- `save_keys()` writes every key held in memory to the store.
- `rotate_keys()` reloads if due, then adds and saves one new key when fewer
  than `count` keys exist; it returns `True` when a key was added.
- `KeyManager.generate_temp_key(size)` returns a key named
  `temp-<created_at_unix>` that is not stored anywhere.

Keys are `keyden.commons.KeyMaterial` values with `kid`, `secret` and
`created_at_unix`. You can back the manager with your own storage by
subclassing `keyden.commons.KeyStore` and implementing `read_keys()` and
`write_keys(keys)`. Store failures raise `keyden.commons.KeyStoreError`;
malformed data raises its subclass `InvalidFormatError`.

Secrets come from Python's `secrets` module.
`keyden.utils.generate_secret(length)` draws them from letters, digits and the
characters `!@#$%^&*(-_=+)`. `keyden.utils.recommended_rotation_interval(ttl_secs, count)`
returns `timedelta(seconds=(ttl_secs * 2) // count)`.

## Limitations

- `ttl_secs` is kept in the manager's configuration but nothing acts on it:
  old keys are never expired or removed, and rotation only tops the key list
  up to `count`.
- The command line always rotates with a count of 1; there is no option to
  change the count or TTL.
- The key file is written with the default file permissions; nothing
  restricts or checks who can read it.