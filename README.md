# noname_engine

The core of a small engine. It has nodes, a base class for systems that update
every frame, and an event dispatcher. The dispatcher sends events to callbacks
registered for a given node and event type.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Events (`noname_engine.events`)

```python
from noname_engine.events import Dispatcher, Event
from noname_engine.node import Node

dispatcher = Dispatcher()
node = Node()

def on_event(event):
    print("event received")
    event.stop_propagation()

connection = dispatcher.connect(node, 0, on_event)
dispatcher.dispatch(node, 0, Event())

dispatcher.disconnect(connection)
```

- `Dispatcher.connect(node, event_type, callback)` registers a callback and
  returns a `Connection`. Connection ids start at 1 and go up by one.
- `Dispatcher.dispatch(target, event_type, event)` calls the matching handlers
  in the order they were connected. A handler matches when its node is the
  target object itself and its event type is equal to the one dispatched. If
  `event.handled()` is true after a handler returns, no later handler runs.
- `Dispatcher.disconnect(connection)` removes that subscription. A
  `Connection()` with the default id 0 is not valid (`is_valid()` returns
  false), and `disconnect` ignores it.
- `Event` has a `mode` field that holds a `PropagationMode`: `BUBBLE_UP` (the
  default), `CAPTURE_DOWN` or `DIRECT`. `stop_propagation()` marks the event
  as handled. `handled()` reports whether that has happened. You can subclass
  `Event` to carry your own data.

## Nodes and systems (`noname_engine.node`)

- `Node` is the object that handlers attach to. It holds no data.
- `NodeHandle(node=None)` is a lightweight reference to a node.
  - `is_valid()` reports whether it refers to a node.
  - `get()` returns the node, or `None`.
  - Two handles compare equal when they refer to the same node object.
- `System(scene)` is an abstract base class. It stores the scene it is given as
  `scene`. Subclasses must implement `on_update(dt)`.

## Logging (`noname_engine.debug`)

`log_info`, `log_warn` and `log_error` write to the standard `logging` logger
named `noname_engine`. Configure that logger to see the output.

## Sample (`noname_engine.sample`)

The sample connects a handler to each of two nodes. It waits, dispatches an
event to the first node, waits again, and dispatches the same event to the
second node. Each handler logs a message and stops propagation.

```
noname-engine-sample --first-delay 2 --second-delay 1
```

Both delays are in seconds and default to 2 and 1. From Python,
`run_event_sample(first_delay=2.0, second_delay=1.0)` returns the list of
messages that the handlers logged.

## What it does not do

There are no scenes, components, rendering or physics. `System` is a base class
only, and nothing in the package drives a frame loop. Events go only to the
handlers on the dispatch target. The propagation mode is stored on the event,
but dispatch does not use it to walk a node hierarchy.