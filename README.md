# relaydb

A small SQLite data access layer that keeps per-relay close counters, creates
its tables on first use and runs retention policies on a timer. It also ships
a few supporting utilities: error codes with messages, variable-length and
ring buffers, a connection pool, reconnect back-off settings and stream
unpacking settings.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Usage

### The data access layer

`Dal` opens one SQLite connection per data source (`Dsn`), creates the given
tables that belong to that source if they do not exist yet, builds a
`RelayCountDao` on the main database and starts a `DaoDeleter` that runs the
retention policies every `interval_ms` milliseconds on a background thread.
Use it as a context manager, or call `open()` and `close()`.

```python
from relaydb.dal import Dal
from relaydb.dsn import Dsn
from relaydb.schema import Table

tables = [
    Table(
        table_name="pcu_relay_cnt",
        create_table_stmt=(
            "create table pcu_relay_cnt("
            "relay_id integer primary key, close_cnt integer)"
        ),
        dsn=Dsn.MAIN,
    ),
]

with Dal(tables, {Dsn.MAIN: "main.db"}, 600_000) as dal:
    dal.relay_count.create(...)
```

When no path is given for a data source, `dsn_to_string` supplies the
default (`"../../db/main.db"` for `Dsn.MAIN`, relative to the working
directory). The default interval is ten minutes
(`relaydb.deleter.DAO_DELETER_TIMEOUT_10MIN`). Calling `open()` on a layer
that is already open raises `RuntimeError`.

### Relay close counts

`RelayCountDao` works on a plain `sqlite3` connection:

```python
import sqlite3
from relaydb.relay_count import RelayCount, RelayCountDao

connection = sqlite3.connect(":memory:")
connection.execute(
    "create table pcu_relay_cnt(relay_id integer primary key, close_cnt integer)"
)
dao = RelayCountDao(connection)
dao.create(RelayCount(relay_id=1, close_cnt=0))
dao.update_by_relay_id(1, RelayCount(relay_id=1, close_cnt=5))
print(dao.get_by_relay_id(1))   # RelayCount(relay_id=1, close_cnt=5)
```

`create` inserts a record only when its relay id is not stored yet and
returns the number of rows inserted (0 if the relay already exists).
`get_by_relay_id` returns `None` when there is no row. The update and delete
methods return the number of rows they changed. `retain()` is the table's
retention policy and keeps every row.

### Tables

`schema.create_table(dao, table)` checks the `sqlite_master` catalogue
through a `SqliteMasterDao` and creates the table inside a transaction. It
returns `True` when it created the table and `False` when the table already
existed; a failing statement is rolled back and its `sqlite3.Error` raised.
`schema.create_database(dao, tables)` does this for every table of the dao's
data source and returns the tables that could not be created.

### Retention

`DaoDeleter(policies, interval_ms)` holds callables that return `True` on
success. `run_once()` calls each in order and returns the indices of those
that returned false or raised. `start()` and `stop()` control the timer
thread; it is also a context manager.

## Modules

- `relaydb.errors`: `ErrorCode` (with a `message` property) and `strerror`,
  which also maps codes 1 to 133 to the operating system's messages.
- `relaydb.buffers`: `VariableBuffer`, a growable buffer with
  `push_front`, `push_back`, `pop_front`, `pop_back`, `remove` and `clear`;
  and `RingBuffer`, whose `alloc` hands out contiguous `memoryview` slices in
  FIFO order (raising `BufferError` when full) and whose `free` releases the
  oldest bytes.
- `relaydb.pool`: `ConnPool`, a FIFO pool of connections; `get` raises
  `IndexError` when empty.
- `relaydb.reconnect`: `ReconnectSetting`, with fixed (`delay_policy=0`),
  linear (`1`) and exponential (any other value) back-off, clamped to
  `[min_delay, max_delay]`; `max_retry_cnt=None` retries forever.
- `relaydb.unpack`: `UnpackSetting`, `UnpackMode`, `LengthCoding` and
  `LoadBalance`. `UnpackSetting` validates its fields on construction.
- `relaydb.dsn`: `Dsn` and `dsn_to_string`.
- `relaydb.options`: `DaoType`, `DaoOption` and `new_option_list`.
- `relaydb.schema`: `Table`, `SqliteMasterDao`, `create_table` and
  `create_database`.
- `relaydb.relay_count`: `RelayCount` and `RelayCountDao`.
- `relaydb.deleter`: `DaoDeleter`.
- `relaydb.dal`: `Dal`, which ties these pieces together.

## What this package does not do

There is no command-line program and no server: the package is a library to
be imported. The buffers, connection pool, reconnect and unpack settings are
standalone data structures; nothing in the package performs network I/O,
runs an event loop or splits a real stream into packages with them. The only
stored data is the relay close-count table, and its retention policy never
deletes rows.