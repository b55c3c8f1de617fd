# deskkit

This package holds a few small interactive console tools:

- a route optimiser for a network of healthcare facilities
- a random question generator
- a product and expense ledger
- a line-based TCP echo server and client

Each tool can be run as a command or used from Python code.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Medical equipment allocation (`deskkit.allocation`)

```
deskkit-allocation [--data-file PATH]
```

The command models facilities as nodes numbered `0` to `n - 1` and transport routes as weighted edges. It first asks how many facilities there are. It then shows a menu with these choices:

1. add a route
2. optimise, which finds the minimum spanning tree with Kruskal's algorithm
3. show the plan
4. reset
5. show all routes
6. save
7. show the stored data
8. add facilities
9. exit

Adding a route, optimising and adding facilities each append the current state to the data file. The data file is `medical_equipment_allocation_data.txt` in the current directory unless you pass `--data-file`. Reset and save overwrite the file.

From code:

```python
from deskkit.allocation import MedicalEquipmentAllocation, format_edge

plan = MedicalEquipmentAllocation(4, "routes.txt")
plan.add_edge(0, 1, 10)
plan.add_edge(1, 2, 5)
plan.add_edge(0, 2, 7)
for edge in plan.optimize():
    print(format_edge(edge))   # e.g. "Facility 1 - Facility 2 : Weight = 5"
print(plan.stored_data())
```

`MedicalEquipmentAllocation` has these methods and properties:

- **Methods:** `add_edge`, `increase_facilities`, `optimize`, `reset`, `save(append=False)` and `stored_data`.
- **Properties:** `num_facilities`, `data_file`, `edges` and `result`.

It raises `ValueError` in these cases:

- the facility count is not positive
- `increase_facilities` is given a number that is not positive
- `optimize` meets a route whose end lies outside the network

## Question generator (`deskkit.questions`)

```
deskkit-questions [-n COUNT] [--seed SEED]
```

This prints `COUNT` random English questions, one per line. The default is ten. Each question takes one of three shapes:

- auxiliary, subject, verb, object (for example "can he read the book?")
- wh-word, auxiliary, subject, verb
- wh-word, verb, subject

`generate_question(rng)` accepts any object with a `choice` method, such as `random.Random`, so seeded output can be reproduced. With no argument it uses the `random` module.

## Product and expense ledger (`deskkit.erp`)

```
deskkit-erp
```

This is a menu for adding, listing, searching and repricing products, adding and listing expenses, and showing a finance summary. The summary gives total revenue (price × quantity), total expenses and profit.

From code:

```python
from deskkit.erp import ManagementSystem

system = ManagementSystem()
system.add_product(1, "Pens", 10.0, 50)
system.add_expense("Rent", 200.0)
summary = system.finance_summary()
print(summary.profit)   # 300.0
print(summary)
```

Capacity defaults to 100 products and 100 expenses. You can change it with `ManagementSystem(max_products=..., max_expenses=...)`. Adding beyond the capacity raises `CapacityError`. `find_product` and `update_price` raise `ProductNotFoundError`, a `LookupError`, when no product has the given id.

## Line echo server and client

```
deskkit-server [--host HOST] [--port PORT] [--log-file PATH]
deskkit-client [--host HOST] [--port PORT]
```

The server (`deskkit.chat_server.ChatServer`) listens on `0.0.0.0:12345` by default and gives each client its own thread. It echoes back whatever a client sends, then sends a `Real-time data: <nanosecond timestamp>` line. Logins and logouts are appended to `server_log.txt` by default, through `log_time`. `ChatServer` can be used as a context manager. Call `serve_forever()` to run it and `shutdown()` to stop it accepting new connections.

The client (`deskkit.chat_client`) connects to `127.0.0.1:12345` by default and sends each line read from standard input. It prints every line the server sends as `Received: <line>`. Type `logout`, or end the input, to leave. `run_client(host, port, input_stream, output)` does the same with any iterable of lines and any text stream.

## What is not included

- The ledger keeps everything in memory. Nothing is saved between runs.
- The allocation data file is a running log that you can display. It is never read back to restore routes.
- The server only echoes to the sender. It does not relay messages between clients.
- There is no authentication and no encryption.