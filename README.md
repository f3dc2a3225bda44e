# oauthcred

Building blocks for a git credential helper that keeps passwords and OAuth
tokens in a local SQLite database: reading the helper's JSON configuration,
finding where its data lives, preparing the database from the configured SQL,
and holding the helper's settings.

## Modules

- `oauthcred.app_config` – `AppConfig` and `load_config`. `AppConfig.from_text`
  parses the first JSON value in a string or bytes (trailing data is ignored,
  empty input raises `ValueError`). `AppConfig.lookup("db", "init", ...)` walks
  nested object keys and returns `None` as soon as a key is missing.
- `oauthcred.user_resource` – where the credential data lives.
  `credential_data_directory(home)` gives `<home>/.oauth-cred/`,
  `credential_data_path(home)` gives `<home>/.oauth-cred/credential.db`, and
  `create_credential_data_directory(home)` creates the directory with mode
  `0700` if needed, raising `NotADirectoryError` if a file is in the way.
  With `home=None` the `HOME` variable is used, then the password database;
  `LookupError` is raised if neither gives a home directory.
- `oauthcred.sql_statements` – runs the SQL held in the configuration on an
  `sqlite3.Connection`. `statement_text(lines)` joins a statement written as a
  list of lines. `init_db` runs every script under `db/init/statements`;
  `init_tables` runs each table initialiser under `db/init-tables/statements`,
  where `init_table_statement` inserts each `name-value` pair whose
  `condition` query yields zero. Failures raise `StatementError`.
- `oauthcred.helper_settings` – the `HelperSettings` dataclass (client id and
  secret, tokens, service, verbose level, generator mode, which token
  generators to run, whether usage was requested) with `update_tokens`, and the
  `CredentialOperation` enum, whose `from_word` maps `get`, `store` and `erase`
  and gives `UNKNOWN` for anything else.
- `oauthcred.httpbody` – `find_body(response)` returns a `str` or `bytes`
  response from its `\r\n\r\n` header separator onwards, or `None`.

## Example

```python
import sqlite3

from oauthcred.app_config import AppConfig
from oauthcred.sql_statements import init_db, init_tables
from oauthcred.user_resource import (
    create_credential_data_directory,
    credential_data_path,
)

with open("config.json", encoding="utf-8") as stream:
    config = AppConfig.from_text(stream.read())

create_credential_data_directory()
connection = sqlite3.connect(credential_data_path())
init_db(connection, config)
init_tables(connection, config)
```

## The `cred-default` command

`cred-default` prints the default locations used by the helper; with no
option it prints its help.

```
cred-default --data-path     # path of the credential database
cred-default --res-dir       # directory holding it
cred-default -d --no-newline # without the trailing blank lines
cred-default --help
```

Unambiguous prefixes of the long options are accepted; unknown options are
reported on standard error and otherwise ignored.

## What this package does not do

It prepares the credential database but has no operations to look up, store
or remove passwords in it. It has no credential helper command: nothing reads
a credential request from git, parses the helper's command-line options into
`HelperSettings`, or obtains OAuth tokens.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```