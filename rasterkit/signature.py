"""Signatures drawn as a set of Bezier curves."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

ControlPoint = tuple[float, float]


@dataclass
class Curve:
    """A Bezier curve and the number of samples it is drawn with."""

    control_points: list[ControlPoint]
    sample_count: int = 0


@dataclass
class Signature:
    """The curves of a signature, in file order."""

    curves: list[Curve] = field(default_factory=list)


def _parse_control_point(token: str) -> ControlPoint:
    parts = token.split(",")
    if len(parts) != 2:
        raise ValueError(f"invalid control point {token!r}: expected x,y")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"invalid control point {token!r}: expected x,y") from None


def parse_signature(lines: Iterable[str]) -> Signature:
    """Build a signature from the lines of a signature description.

    ``#`` lines are comments. A line starting with ``S`` announces a sample
    count on the next line, used by every following curve. Every other line is
    a curve given as space separated ``x,y`` control points.
    """
    signature = Signature()
    read_sample = False
    samples = 0
    for raw in lines:
        if raw.startswith("#"):
            continue
        if raw.startswith("S"):
            read_sample = True
            continue
        if read_sample:
            tokens = raw.split()
            if not tokens:
                raise ValueError("missing sample count")
            try:
                samples = int(tokens[0])
            except ValueError:
                raise ValueError(f"invalid sample count {tokens[0]!r}") from None
            read_sample = False
            continue
        tokens = raw.split()
        if not tokens:
            continue
        points = [_parse_control_point(token) for token in tokens]
        signature.curves.append(Curve(points, samples))
    return signature


def load_signature(path) -> Signature:
    """Read a signature description from a file."""
    with open(path, "r", encoding="utf-8") as handle:
        return parse_signature(handle)