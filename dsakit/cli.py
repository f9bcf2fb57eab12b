"""Interactive menus for the stack, the two-stack queue and 3-D vectors."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Optional, TextIO

from dsakit.stacks import ArrayStack, QueueEmptyError, QueueFullError, TwoStackQueue
from dsakit.vectors import Vector3

__all__ = ["main"]


class _Session:
    """Token-based prompting over a pair of text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._tokens = self._split(stdin)
        self._out = stdout

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def write(self, text: str) -> None:
        self._out.write(text)

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        self._out.flush()
        token = next(self._tokens, None)
        if token is None:
            raise EOFError
        return token

    def ask_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self.ask(prompt))
        except ValueError:
            return None

    def ask_float(self, prompt: str) -> float:
        while True:
            try:
                return float(self.ask(prompt))
            except ValueError:
                self.write("Please enter a number\n")


_STACK_MENU = "1. Push\n2. Pop\n3. Display\n4. Exit\n"


def _run_stack(session: _Session, args: argparse.Namespace) -> int:
    stack = ArrayStack(args.capacity)
    while True:
        session.write(_STACK_MENU)
        choice = session.ask_int("\nEnter your choice: ")
        if choice == 1:
            value = session.ask_int("Enter the value to be insert: ")
            if value is None:
                session.write("\nInvalid value\n")
            elif stack.is_full():
                session.write("\nStack is Full\n")
            else:
                stack.push(value)
                session.write("\nInsertion success\n")
        elif choice == 2:
            if stack.is_empty():
                session.write("\nStack is Empty\n")
            else:
                session.write(f"\nDeleted : {stack.pop()}\n")
        elif choice == 3:
            if stack.is_empty():
                session.write("\nStack is Empty\n")
            else:
                session.write("\nStack elements are:\n")
                session.write("".join(f"{value}\n" for value in stack))
        elif choice == 4:
            return 0
        else:
            session.write("\nWrong selection\n")


_QUEUE_MENU = (
    "Enter ur choice\t 1.Add to queue\t 2.Remove from queue\t 3.Display\t 4.Exit\t: "
)


def _run_queue(session: _Session, args: argparse.Namespace) -> int:
    size = args.size
    if size is None:
        size = session.ask_int("Enter the size of the Queue:")
    if size is None or size < 0:
        session.write("Invalid size\n")
        return 1
    queue = TwoStackQueue(size)
    while True:
        choice = session.ask_int(_QUEUE_MENU)
        if choice == 1:
            value = session.ask_int("Enter the element to be added to queue : ")
            if value is None:
                session.write("Invalid\n")
                continue
            try:
                queue.enqueue(value)
            except QueueFullError:
                session.write("Queue is full\n")
        elif choice == 2:
            try:
                queue.dequeue()
            except QueueEmptyError:
                session.write("Queue is empty\n")
        elif choice == 3:
            session.write("".join(f"{value}  " for value in queue) + "\n")
        elif choice == 4:
            return 0
        else:
            session.write("Invalid\n")


_VECTOR_MENU = (
    "Enter the operation you want to perform\n"
    "[1]-Magnitude of A vector\n"
    "[2]-Dot product\n"
    "[3]-cross product\n"
    "[4]- A-B\n"
    "[5]- A+B\n"
    "[q] quit this program\n"
)


def _read_vector(session: _Session) -> Vector3:
    session.write("Enter the values of Vector\n")
    i = session.ask_float("Enter the value of i \n")
    j = session.ask_float("Enter the value of j \n")
    k = session.ask_float("Enter the value of k \n")
    return Vector3(i, j, k)


def _run_vector(session: _Session, args: argparse.Namespace) -> int:
    while True:
        choice = session.ask(_VECTOR_MENU)
        if choice == "q":
            session.write("Thanks for using my program\n")
            return 0
        if choice == "1":
            a = _read_vector(session)
            session.write(f"mod of vector is = {a.magnitude():g}\n")
        elif choice in ("2", "3", "4", "5"):
            a = _read_vector(session)
            b = _read_vector(session)
            if choice == "2":
                session.write(f"Dot product of two vector = {a.dot(b):g}\n")
            elif choice == "3":
                session.write(f"cross product of two vector = {a.cross(b)}\n\n")
            elif choice == "4":
                session.write(f"A-B = {a - b}\n\n")
            else:
                session.write(f"A+B = {a + b}\n\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Interactive data-structure menus."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    stack = commands.add_parser("stack", help="a fixed-size stack")
    stack.add_argument("--capacity", type=int, default=10)
    stack.set_defaults(handler=_run_stack)

    queue = commands.add_parser("queue", help="a queue made of two stacks")
    queue.add_argument("--size", type=int, default=None)
    queue.set_defaults(handler=_run_queue)

    vector = commands.add_parser("vector", help="3-D vector calculations")
    vector.set_defaults(handler=_run_vector)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the menu named on the command line, reading choices from stdin."""
    args = _build_parser().parse_args(argv)
    if getattr(args, "capacity", 0) < 0:
        sys.stderr.write("capacity must not be negative\n")
        return 1
    session = _Session(sys.stdin, sys.stdout)
    try:
        return args.handler(session, args)
    except EOFError:
        session.write("\n")
        return 0


if __name__ == "__main__":
    sys.exit(main())