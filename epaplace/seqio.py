"""Reading and writing aligned sequences in FASTA and PHYLIP formats."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

_LINE_LENGTH = 80
_SITE_PATTERN = re.compile(r"[A-Za-z\-?.*]*")


@dataclass(frozen=True)
class SeqRecord:
    """A labelled sequence of alignment sites."""

    label: str
    sites: str

    def __len__(self) -> int:
        return len(self.sites)


def _clean_sites(text: str) -> str:
    sites = "".join(text.split())
    if not _SITE_PATTERN.fullmatch(sites):
        raise ValueError(f"invalid characters in sequence data: {sites!r}")
    return sites


def _parse_fasta(text: str) -> list[SeqRecord]:
    records: list[SeqRecord] = []
    label: str | None = None
    parts: list[str] = []

    def finish() -> None:
        sites = "".join(parts)
        if not sites:
            raise ValueError(f"sequence {label!r} is empty")
        records.append(SeqRecord(label, sites))

    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(">"):
            if label is not None:
                finish()
            label = line[1:].strip()
            if not label:
                raise ValueError(f"empty sequence label at line {lineno}")
            parts = []
        elif label is None:
            raise ValueError("FASTA input must start with '>'")
        else:
            parts.append(_clean_sites(line))
    if label is not None:
        finish()
    return records


def _split_label(line: str) -> tuple[str, str]:
    fields = line.split(None, 1)
    return fields[0], _clean_sites(fields[1] if len(fields) > 1 else "")


def _parse_phylip(text: str, interleaved: bool) -> list[SeqRecord]:
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("empty PHYLIP input")
    header = lines[0].split()
    if len(header) < 2:
        raise ValueError("PHYLIP header must give sequence count and length")
    try:
        count, length = int(header[0]), int(header[1])
    except ValueError:
        raise ValueError("PHYLIP header must hold two integers") from None
    body = lines[1:]

    labels: list[str] = []
    chunks: list[list[str]] = []
    if interleaved:
        if len(body) < count:
            raise ValueError("PHYLIP input holds fewer sequences than declared")
        for line in body[:count]:
            label, sites = _split_label(line)
            labels.append(label)
            chunks.append([sites])
        for offset, line in enumerate(body[count:]):
            chunks[offset % count].append(_clean_sites(line))
    else:
        lines_left: Iterator[str] = iter(body)
        for _ in range(count):
            line = next(lines_left, None)
            if line is None:
                raise ValueError("PHYLIP input holds fewer sequences than declared")
            label, sites = _split_label(line)
            parts = [sites]
            total = len(sites)
            while total < length:
                more = next(lines_left, None)
                if more is None:
                    raise ValueError(f"sequence {label!r} is shorter than declared")
                sites = _clean_sites(more)
                parts.append(sites)
                total += len(sites)
            labels.append(label)
            chunks.append(parts)
        if next(lines_left, None) is not None:
            raise ValueError("PHYLIP input holds trailing data")

    records = [SeqRecord(label, "".join(parts)) for label, parts in zip(labels, chunks)]
    for record in records:
        if len(record) != length:
            raise ValueError(
                f"sequence {record.label!r} has {len(record)} sites, expected {length}"
            )
    return records


def read_fasta(path: str | os.PathLike) -> list[SeqRecord]:
    """Read all records of a FASTA file."""
    return _parse_fasta(Path(path).read_text())


def read_phylip(path: str | os.PathLike, interleaved: bool = False) -> list[SeqRecord]:
    """Read a sequential or interleaved PHYLIP file."""
    return _parse_phylip(Path(path).read_text(), interleaved)


def read_any_seqfile(path: str | os.PathLike) -> list[SeqRecord]:
    """Read FASTA, sequential PHYLIP or interleaved PHYLIP, in that order of trial."""
    text = Path(path).read_text()
    attempts = (
        _parse_fasta,
        lambda t: _parse_phylip(t, False),
        lambda t: _parse_phylip(t, True),
    )
    for attempt in attempts:
        try:
            return attempt(text)
        except ValueError:
            continue
    raise ValueError(
        "Cannot parse sequence file(s): Invalid file format? (only phylip and fasta allowed)"
    )


def _fasta_lines(records: Iterable[SeqRecord]) -> Iterator[str]:
    for record in records:
        yield f">{record.label}\n"
        for start in range(0, len(record.sites), _LINE_LENGTH):
            yield record.sites[start:start + _LINE_LENGTH] + "\n"


def write_fasta(records: Iterable[SeqRecord], path: str | os.PathLike) -> None:
    """Write the records to ``path`` in FASTA format."""
    with open(path, "w") as out:
        out.writelines(_fasta_lines(records))