"""Derivation paths such as ``m/44'/0'/0'/0/1``."""
import re
import typing

import attr

from . import bip32
from .bip32 import MAX_INDEX
from .exceptions import IndexOutOfRange, InvalidPathSyntax
from .key import HARDENED_FLAG

SEGMENT_RE = re.compile(r"([0-9]+)(['hH]?)")


def _check_index(instance, attribute, value):
    if not 0 <= value <= MAX_INDEX:
        raise IndexOutOfRange(f"Index {value} out of range 0..{MAX_INDEX}")


@attr.s(auto_attribs=True, frozen=True)
class DerivationStep:
    index: int = attr.ib(validator=_check_index)
    hardened: bool = False

    @property
    def child_number(self):
        return (self.index | HARDENED_FLAG) if self.hardened else self.index

    @classmethod
    def from_child_number(cls, child_number):
        if not 0 <= child_number <= 0xFFFF_FFFF:
            raise IndexOutOfRange(
                f"Child number {child_number} does not fit in 32 bits"
            )
        return cls(
            index=child_number & MAX_INDEX,
            hardened=bool(child_number & HARDENED_FLAG),
        )

    def __str__(self):
        return f"{self.index}'" if self.hardened else str(self.index)


@attr.s(auto_attribs=True, frozen=True)
class DerivationPath:
    steps: typing.Tuple[DerivationStep, ...] = attr.ib(converter=tuple, default=())

    @property
    def child_numbers(self):
        return [step.child_number for step in self.steps]

    def __iter__(self):
        return iter(self.steps)

    def __len__(self):
        return len(self.steps)

    def __str__(self):
        return "/".join(["m"] + [str(step) for step in self.steps])


def parse_path(text):
    """Parse ``m/0/1'/2`` into a :class:`DerivationPath`.

    Hardened segments are marked with an apostrophe, or ``h`` as an
    alternative spelling.
    """
    segments = text.split("/")
    if segments[0] != "m":
        raise InvalidPathSyntax(f"Path must start with 'm': {text!r}")

    steps = []
    for segment in segments[1:]:
        match = SEGMENT_RE.fullmatch(segment)
        if match is None:
            raise InvalidPathSyntax(f"Invalid path segment {segment!r} in {text!r}")
        digits, marker = match.groups()
        steps.append(DerivationStep(index=int(digits), hardened=bool(marker)))
    return DerivationPath(steps)


def from_steps(steps):
    """Build a path from steps, ``(index, hardened)`` pairs or raw child numbers."""
    result = []
    for step in steps:
        if isinstance(step, int):
            step = DerivationStep.from_child_number(step)
        elif not isinstance(step, DerivationStep):
            index, hardened = step
            step = DerivationStep(index=index, hardened=bool(hardened))
        result.append(step)
    return DerivationPath(result)


def from_child_numbers(child_numbers):
    return DerivationPath(
        DerivationStep.from_child_number(n) for n in child_numbers
    )


def to_path(path):
    if isinstance(path, DerivationPath):
        return path
    if isinstance(path, str):
        return parse_path(path)
    return from_steps(path)


def derive_path(node, path, skip_invalid=False):
    for step in to_path(path):
        node = bip32.derive_child(
            node, step.index, hardened=step.hardened, skip_invalid=skip_invalid
        )
    return node
