"""Basic usage example for linkedarray."""

import logging

import coloredlogs

from linkedarray import EndOfSequenceError, LinkedList, dumps

logger = logging.getLogger(__name__)


def main() -> None:
    """Demonstrate basic list operations."""
    coloredlogs.install(level=logging.DEBUG)

    print("=== Array-like API ===\n")

    tasks = LinkedList[str]()
    tasks.push("send_email", "process_data")
    tasks.unshift("warm_cache")
    print(f"Tasks: {tasks} (length {tasks.length})")
    print(f"Index of 'process_data': {tasks.index_of('process_data')}")
    print(f"Last task: {tasks.get(tasks.length - 1)}\n")

    # Work through the queue from the front
    while tasks:
        task = tasks.shift()
        logger.info("Processing %s", task)

    print("\n=== Conversion ===\n")

    numbers = LinkedList(range(5))
    print(f"Squares: {numbers.map(lambda value, index: value * value)}")
    print(f"JSON: {dumps({'numbers': numbers})}")

    copy = numbers.clone()
    copy.pop()
    print(f"Original: {numbers}, clone after pop: {copy}\n")

    print("=== Cursor ===\n")

    cursor = numbers.cursor()
    while True:
        try:
            print(f"  position {cursor.position + 1}: {cursor.next()}")
        except EndOfSequenceError:
            break
    cursor.reset()


if __name__ == "__main__":
    main()
