# rustcraft

A collection of small, self-contained programs and helpers. Each module in the
package does one job:

| Module | What it does |
| --- | --- |
| `rustcraft.basics` | `collatz_length`, `fib`, `transpose`, `magnitude`, `normalize`, `smallest`, `offset_differences`, `luhn` |
| `rustcraft.counter` | `Counter`, which counts how often each value has been seen |
| `rustcraft.rot` | `RotDecoder`, a readable binary stream that rotates ASCII letters, and `rotate` for plain bytes |
| `rustcraft.loggers` | `Logger`, `StderrLogger`, `VerbosityFilter` and the predicate-driven `Filter` |
| `rustcraft.expressions` | Expression trees (`Operation`, `Value`, `Op`) and `evaluate`, which raises `DivideByZeroError` |
| `rustcraft.protobuf` | A minimal protobuf wire-format reader: `parse_varint`, `unpack_tag`, `parse_field`, `parse_message`, with `Person` and `PhoneNumber` messages; errors raise `ProtobufError` |
| `rustcraft.tree` | `BinaryTree`, a set of ordered values stored in a binary search tree |
| `rustcraft.packages` | `Package`, `Dependency`, `Language` and a chainable `PackageBuilder` |
| `rustcraft.widgets` | A text GUI: `Label`, `Button` and `Window` widgets |
| `rustcraft.elevator` | Elevator events and the functions that build them |
| `rustcraft.directory` | `DirectoryIterator`, which lists a directory's entries including `.` and `..` |
| `rustcraft.linkchecker` | A multi-threaded link checker built on `requests` and BeautifulSoup |
| `rustcraft.philosophers` | Dining philosophers with threads |
| `rustcraft.async_philosophers` | Dining philosophers with asyncio |
| `rustcraft.chat_server` / `rustcraft.chat_client` | A broadcast chat over websockets |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from rustcraft.basics import collatz_length, luhn, normalize, offset_differences
from rustcraft.counter import Counter
from rustcraft.tree import BinaryTree
from rustcraft.packages import Language, PackageBuilder

collatz_length(11)                     # 15
luhn("4263 9826 4026 9299")            # True
offset_differences(1, [1, 3, 5, 7])    # [2, 2, 2, -6]
normalize([3.0, 4.0])                  # [0.6, 0.8] (a new list)

counter = Counter()
counter.count("apple")
counter.count("apple")
counter.times_seen("apple")            # 2

tree = BinaryTree()
tree.insert(2)
tree.insert(1)
tree.insert(2)
len(tree)                              # 2
1 in tree                              # True

base64 = PackageBuilder("base64").version("0.13").build()
log = PackageBuilder("log").version("0.4").language(Language.RUST).build()
serde = (
    PackageBuilder("serde")
    .version("4.0")
    .dependency(base64.as_dependency())
    .dependency(log.as_dependency())
    .build()
)
```

Evaluating an expression tree:

```python
from rustcraft.expressions import Op, Operation, Value, evaluate

evaluate(Op(Operation.SUB, Value(20), Value(10)))   # 10
evaluate(Op(Operation.DIV, Value(99), Value(0)))    # raises DivideByZeroError
```

Division truncates toward zero.

Reading a protobuf-encoded person:

```python
from rustcraft.protobuf import Person, parse_message

person = parse_message(bytes([0x0A, 0x04, 0x45, 0x76, 0x61, 0x6E, 0x10, 0x16]), Person)
person.name   # "Evan"
person.id     # 22
```

Decoding ROT13 text from a stream:

```python
import io
from rustcraft.rot import RotDecoder

RotDecoder(io.BytesIO(b"Gb trg gb gur bgure fvqr!"), 13).read()
# b"To get to the other side!"
```

## Commands

| Command | What it does |
| --- | --- |
| `rustcraft-widgets` | Draws a small demo window with a label and a button |
| `rustcraft-elevator` | Prints a sequence of elevator events |
| `rustcraft-ls [PATH]` | Lists the entries of a directory (the current one by default) |
| `rustcraft-linkcheck URL [--threads N]` | Crawls pages on the start URL's domain and reports links that could not be fetched (16 worker threads by default) |
| `rustcraft-philosophers [NAME ...] [--rounds N]` | Runs the threaded dining philosophers |
| `rustcraft-async-philosophers [NAME ...] [--rounds N]` | Runs the asyncio dining philosophers |
| `rustcraft-chat-server [--host HOST] [--port PORT]` | Starts the chat server, on 127.0.0.1 port 2000 by default |
| `rustcraft-chat-client [URI]` | Connects to `ws://127.0.0.1:2000` (or URI) and sends each line typed on standard input |

For example:

```
rustcraft-chat-server
rustcraft-chat-client
rustcraft-linkcheck https://example.com
```

Every text message a chat client sends is broadcast to all connected clients,
including the sender, and each client is greeted with
"Welcome to chat! Type a message".

## What it does not do

- The protobuf reader only decodes; it cannot encode messages, and it knows
  only the varint and length-delimited wire types.
- The chat server keeps no history, has no user names or authentication and
  does not use TLS. A client that falls more than 16 messages behind the
  broadcast is disconnected.
- The link checker does not read `robots.txt`, limit its request rate or
  retry failed requests.