"""Shared counting and message passing across threads."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Iterable


def count_with_threads(workers: int = 10) -> int:
    """Start ``workers`` threads that each add one to a shared counter; return the total."""
    counter = 0
    lock = threading.Lock()

    def increment() -> None:
        nonlocal counter
        with lock:
            counter += 1

    threads = [threading.Thread(target=increment) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    with lock:
        return counter


def collect_messages(batches: Iterable[Iterable[str]], delay: float = 1.0) -> list[str]:
    """Send each batch from its own thread, pausing ``delay`` seconds after each message.

    Returns every message in the order it was received.
    """
    if delay < 0:
        raise ValueError("delay must not be negative")

    channel: queue.Queue[object] = queue.Queue()
    finished = object()

    def send_all(messages: list[str]) -> None:
        try:
            for message in messages:
                channel.put(message)
                time.sleep(delay)
        finally:
            channel.put(finished)

    senders = [
        threading.Thread(target=send_all, args=(list(batch),), daemon=True)
        for batch in batches
    ]
    for sender in senders:
        sender.start()

    received: list[str] = []
    remaining = len(senders)
    while remaining:
        item = channel.get()
        if item is finished:
            remaining -= 1
        else:
            received.append(item)

    for sender in senders:
        sender.join()
    return received