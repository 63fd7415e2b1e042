"""Event sample: two nodes receive a dispatched event after a delay."""

import argparse
import logging
import time

from noname_engine.debug import log_info
from noname_engine.events import Dispatcher, Event
from noname_engine.node import Node


def run_event_sample(first_delay=2.0, second_delay=1.0):
    """Dispatch one event to two nodes after the given delays; return messages logged."""
    dispatcher = Dispatcher()
    node = Node()
    node_2 = Node()
    some_event = Event()
    received = []

    def _handler(message):
        def callback(event):
            log_info(message)
            received.append(message)
            event.stop_propagation()

        return callback

    dispatcher.connect(node, 0, _handler("Event received"))
    dispatcher.connect(node_2, 0, _handler("Event_2 received"))

    time.sleep(first_delay)
    dispatcher.dispatch(node, 0, some_event)
    time.sleep(second_delay)
    dispatcher.dispatch(node_2, 0, some_event)
    return received


def main(argv=None):
    """Run the event sample from the command line."""
    parser = argparse.ArgumentParser(description="Run the event dispatch sample.")
    parser.add_argument("--first-delay", type=float, default=2.0)
    parser.add_argument("--second-delay", type=float, default=1.0)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    run_event_sample(args.first_delay, args.second_delay)
    return 0