# epaplace

Building blocks for phylogenetic placement workflows, in plain Python with no
runtime dependencies.

## What it offers

- **Model file parsing** (`epaplace.parse_model`): `parse_model(path)` reads a
  RAxML 8 info file, a raxml-ng `.bestModel` file or an IQ-TREE report and
  returns a model description string, for example
  `GTR{0.787874/1.821672/1.294006/0.698421/3.034135/1.000000}+FU{0.256465/0.222535/0.308594/0.212406}+G4{0.478218}`.
  `guess_filetype(path)` reports which format a file is as a `ModelfileType`
  value (`IQTREE` if the first line starts with `IQ-TREE `, `RAXML8` if the
  file mentions RAxML version 8, otherwise `RAXMLNG`). Missing fields raise
  `ValueError`.
- **Alignment splitting** (`epaplace.split`): `split(ref_msa, query_files, outdir)`
  takes a reference alignment and one or more query alignments that also hold
  the reference sequences. It writes `reference.fasta` into `outdir`, holding
  the reference sequences as they appear in the first query file, and
  `query.fasta`, holding the sequences of every query file whose labels are not
  in the reference. All query files must share one alignment width, otherwise
  `ValueError` is raised; a width that differs from the reference only logs a
  warning. `write_subset(records, labels, output_file)` writes the records with
  the given labels and raises `ValueError` if any label is missing.
- **Sequence I/O** (`epaplace.seqio`): `read_fasta`, `read_phylip`
  (sequential, or interleaved with `interleaved=True`), `read_any_seqfile`
  (tries FASTA, then sequential and interleaved PHYLIP) and `write_fasta`, all
  working with frozen `SeqRecord(label, sites)` objects.
- **Helpers**:
  - `epaplace.range`: `Range(begin, span)` and `get_valid_range(sequence)`,
    which finds the part of a sequence outside its leading and trailing `-` gaps.
  - `epaplace.tree_numbers`: `TreeNumbers.from_tips(n)` gives node and branch
    counts of an unrooted binary tree; `large_tree()` is true above 2000 tips.
    `DEFAULT_BRANCH_LENGTH` is `-log(0.9)`.
  - `epaplace.matrix`: a dense row-major `Matrix` with checked `at`,
    `m[row, col]` indexing, `row`, `col` and `swap`.
  - `epaplace.timer`: a `Timer` that records start/stop intervals in seconds,
    with `pause`/`resume`, `sum`, `average` and `insert`.
  - `epaplace.options`: the `Options` dataclass of placement settings with
    their defaults, and the `NumericalScaling` enum.
  - `epaplace.maps`: the IUPAC nucleotide table `NT_MAP` (indexed by 4-bit
    ACGT code) and the amino-acid table `AA_MAP`.
  - `epaplace.stringify`: `stringify`, `stringify_sizes` and
    `split_by_delimiter`.

## Example

```python
from epaplace.parse_model import parse_model
from epaplace.split import split
from epaplace.range import get_valid_range

model = parse_model("RAxML_info.run")
split("reference.phy", ["aligned_queries.fasta"], "out/")

valid = get_valid_range("---ATAGCT--")
print(valid.begin, valid.span)  # 3 6
```

## What it does not do

This package does not place sequences on a tree. It has no tree reading, no
likelihood computation, no branch-length optimisation, no jplace output and no
command-line program; `Options` only holds settings for such a run.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```