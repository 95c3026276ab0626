import pytest

from epaplace.seqio import (
    SeqRecord,
    read_any_seqfile,
    read_fasta,
    read_phylip,
    write_fasta,
)


def test_fasta_round_trip(tmp_path):
    records = [
        SeqRecord("alpha", "ACGT-ACGT"),
        SeqRecord("beta", "A" * 200),
        SeqRecord("gamma", "NNNN-TTTT"),
    ]
    path = tmp_path / "out.fasta"
    write_fasta(records, path)
    assert read_fasta(path) == records


def test_fasta_multiline_sequences(tmp_path):
    path = tmp_path / "in.fasta"
    path.write_text(">one\nACGT\nAC\n\n>two\nGG--\nTT\n")
    records = read_fasta(path)
    assert [r.label for r in records] == ["one", "two"]
    assert [r.sites for r in records] == ["ACGTAC", "GG--TT"]
    assert len(records[0]) == 6


def test_fasta_without_header_raises(tmp_path):
    path = tmp_path / "bad.fasta"
    path.write_text("ACGT\n")
    with pytest.raises(ValueError):
        read_fasta(path)


def test_fasta_empty_sequence_raises(tmp_path):
    path = tmp_path / "bad.fasta"
    path.write_text(">one\n>two\nACGT\n")
    with pytest.raises(ValueError):
        read_fasta(path)


def test_phylip_sequential(tmp_path):
    path = tmp_path / "seq.phy"
    path.write_text("2 8\nfirst ACGT\nACGT\nsecond GGGGCCCC\n")
    records = read_phylip(path)
    assert records == [SeqRecord("first", "ACGTACGT"), SeqRecord("second", "GGGGCCCC")]


def test_phylip_interleaved(tmp_path):
    path = tmp_path / "inter.phy"
    path.write_text("2 8\nfirst ACGT\nsecond GGGG\n\nACGT\nCCCC\n")
    records = read_phylip(path, interleaved=True)
    assert records == [SeqRecord("first", "ACGTACGT"), SeqRecord("second", "GGGGCCCC")]


def test_phylip_wrong_length_raises(tmp_path):
    path = tmp_path / "bad.phy"
    path.write_text("1 10\nfirst ACGT\n")
    with pytest.raises(ValueError):
        read_phylip(path)


def test_read_any_detects_fasta(tmp_path):
    path = tmp_path / "in.fasta"
    path.write_text(">x\nAC-T\n")
    assert read_any_seqfile(path) == [SeqRecord("x", "AC-T")]


def test_read_any_falls_back_to_interleaved_phylip(tmp_path):
    path = tmp_path / "inter.phy"
    path.write_text("2 8\nfirst ACGT\nsecond GGGG\nACGT\nCCCC\n")
    records = read_any_seqfile(path)
    assert records == read_phylip(path, interleaved=True)
    assert [r.label for r in records] == ["first", "second"]


def test_read_any_rejects_garbage(tmp_path):
    path = tmp_path / "garbage.txt"
    path.write_text("this is not an alignment\n")
    with pytest.raises(ValueError, match="only phylip and fasta allowed"):
        read_any_seqfile(path)