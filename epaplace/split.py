"""Splitting a combined query alignment into reference and query files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from epaplace.seqio import SeqRecord, _fasta_lines, read_any_seqfile, write_fasta

logger = logging.getLogger(__name__)


def write_subset(
    records: Iterable[SeqRecord],
    labels: Iterable[str],
    output_file: str | os.PathLike,
) -> None:
    """Write the records whose labels are in ``labels``; all must be present."""
    wanted = set(labels)
    subset: list[SeqRecord] = []
    for record in records:
        if not wanted:
            break
        if record.label in wanted:
            subset.append(record)
            wanted.discard(record.label)

    if wanted:
        raise ValueError(
            "Could not find all references in the query file to produce an "
            "appropriate reference.fasta!"
        )
    write_fasta(subset, output_file)


def split(
    ref_msa: str | os.PathLike,
    query_files: Sequence[str | os.PathLike],
    outdir: str | os.PathLike = "",
) -> None:
    """Write ``reference.fasta`` and ``query.fasta`` into ``outdir``.

    The references are taken from the first query file, so that they share its
    alignment width; every query file contributes its non-reference sequences
    to ``query.fasta``.
    """
    out = Path(outdir)
    ref_set = read_any_seqfile(ref_msa)
    if not ref_set:
        raise ValueError(f"Reference file '{ref_msa}' holds no sequences")
    ref_labels = {record.label for record in ref_set}
    ref_width = len(ref_set[0])

    qry_width = 0
    first_iteration = True
    with open(out / "query.fasta", "w") as outstream:
        for qry_file in query_files:
            qry_set = read_any_seqfile(qry_file)
            if not qry_set:
                raise ValueError(f"Query file '{qry_file}' holds no sequences")
            cur_qry_width = len(qry_set[0])

            if qry_width and cur_qry_width != qry_width:
                raise ValueError(
                    f"Query file '{qry_file}' appears to have an alignment width "
                    "that differs from previous query alignments. Aborting!"
                )
            qry_width = cur_qry_width

            if cur_qry_width != ref_width:
                logger.warning(
                    "The query alignment file '%s' appears to have an alignment width "
                    "that differs from the reference (%d vs. %d).\n"
                    "This is likely due to the alignment tool stripping gap-only "
                    "columns, or adding columns to the reference. Please consider "
                    "using the produced 'reference.fasta' during placement!",
                    qry_file,
                    cur_qry_width,
                    ref_width,
                )

            if first_iteration:
                write_subset(qry_set, ref_labels, out / "reference.fasta")
                first_iteration = False

            queries = [r for r in qry_set if r.label not in ref_labels]
            outstream.writelines(_fasta_lines(queries))