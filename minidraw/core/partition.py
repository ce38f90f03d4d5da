"""Alphabetic bucket partitioning for long, sorted label lists.

A font menu with hundreds of families is unusable as one flat list. The
partitioner regroups the labels into letter-range buckets ("A", "B to D", ...)
of roughly ``MAX_BUCKET`` entries. Short trailing ranges are merged forward so
the last group is never a handful of stragglers, which means a bucket may end
up larger than ``MAX_BUCKET``.

The input must already be sorted case-insensitively; an unsorted list still
round-trips losslessly but the letter ranges are meaningless.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .constants import ALPHABET_FIRST, ALPHABET_LAST, FLAT_THRESHOLD, MAX_BUCKET, MIN_TAIL


@dataclass(frozen=True, slots=True)
class PartitionLeaf:
    label: str


@dataclass(frozen=True, slots=True)
class PartitionGroup:
    range_label: str
    children: List[PartitionLeaf] = field(default_factory=list)


PartitionNode = Union[PartitionLeaf, PartitionGroup]


def _leading(label: str) -> str:
    # "" sorts below every letter, so an empty label joins the first bucket.
    return label[:1].upper()


def _range_label(start: str, end: str) -> str:
    if start == end:
        return end
    return f"{start} to {end}"


def partition_labels(
    labels: Sequence[str],
    flat_threshold: int = FLAT_THRESHOLD,
    max_bucket: int = MAX_BUCKET,
    min_tail: int = MIN_TAIL,
) -> List[PartitionNode]:
    if len(labels) <= flat_threshold:
        return [PartitionLeaf(label) for label in labels]

    out: List[PartitionNode] = []
    n = len(labels)
    i = 0
    start = ch = ALPHABET_FIRST
    bucket: List[PartitionLeaf] = []
    while i < n:
        while i < n and (_leading(labels[i]) <= ch or ch == ALPHABET_LAST):
            bucket.append(PartitionLeaf(labels[i]))
            i += 1
        remaining = n - i
        if remaining == 0 or (len(bucket) >= max_bucket and remaining >= min_tail):
            out.append(PartitionGroup(_range_label(start, ch), bucket))
            bucket = []
            ch = chr(ord(ch) + 1)
            start = ch
        else:
            ch = chr(ord(ch) + 1)
    return out


def flatten_partition(nodes: Sequence[PartitionNode]) -> List[str]:
    """Return every leaf label in display order."""
    out: List[str] = []
    for node in nodes:
        if isinstance(node, PartitionGroup):
            out.extend(leaf.label for leaf in node.children)
        else:
            out.append(node.label)
    return out
