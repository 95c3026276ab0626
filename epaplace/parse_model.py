"""Extract a model description string from RAxML 8, raxml-ng or IQ-TREE output."""

from __future__ import annotations

import enum
import logging
import os
from itertools import combinations
from pathlib import Path

logger = logging.getLogger(__name__)

_DNA_CHARS = "ACGT"
_AA_CHARS = "ARNDCQEGHILKMFPSTWYV"


class ModelfileType(enum.Enum):
    RAXML8 = "raxml8"
    RAXMLNG = "raxmlng"
    IQTREE = "iqtree"
    UNKNOWN = "unknown"


def _parse(full: str, qry: str, pos: int) -> tuple[str, int]:
    """Rest of the line after ``qry``, searching from ``pos``; returns new pos."""
    start = full.find(qry, pos)
    if start == -1:
        raise ValueError(f"Couldn't parse model file! (can't find '{qry}'!)")
    start += len(qry)
    end = full.find("\n", start)
    if end == -1:
        raise ValueError("couldnt find terminating newline?!")
    return full[start:end], end


def _parse_between(full: str, lhs: str, rhs: str, pos: int) -> tuple[str, int]:
    tail, pos = _parse(full, lhs, pos)
    rhs_begin = tail.find(rhs)
    if rhs_begin == -1:
        raise ValueError(f"Couldn't parse model file! (can't find '{rhs}'!)")
    if rhs_begin == 0:
        raise ValueError(f"Nothing inbetween '{rhs}' and '{lhs}'?")
    return tail[:rhs_begin], pos


def _rest_has(full: str, qry: str, pos: int) -> bool:
    return full.find(qry, pos) != -1


def _parse_values(full: str, queries: list[str], pos: int) -> tuple[str, int]:
    values = []
    for qry in queries:
        value, pos = _parse(full, qry, pos)
        values.append(value)
    return "/".join(values), pos


def _from_raxml_8(full: str) -> str:
    pos = 0
    data_type, pos = _parse(full, "DataType: ", pos)
    dna = data_type == "DNA"

    sub_mat, pos = _parse(full, "Substitution Matrix: ", pos)
    if not dna and sub_mat == "GTR":
        sub_mat = "PROTGTR"

    alpha = ""
    if _rest_has(full, "alpha: ", pos):
        value, pos = _parse(full, "alpha: ", pos)
        alpha = f"+G4{{{value}}}"

    p_inv = ""
    if _rest_has(full, "invar: ", pos):
        value, pos = _parse(full, "invar: ", pos)
        p_inv = f"+IU{{{value}}}"

    chars = _DNA_CHARS if dna else _AA_CHARS
    rates, pos = _parse_values(
        full, [f"rate {a} <-> {b}: " for a, b in combinations(chars, 2)], pos
    )
    freqs, pos = _parse_values(full, [f"freq pi({c}): " for c in chars], pos)

    return f"{sub_mat}{{{rates}}}+FU{{{freqs}}}{p_inv}{alpha}"


def _first_line(full: str) -> str:
    return full.split("\n", 1)[0]


def _from_raxml_ng(full: str) -> str:
    parts = [part for part in _first_line(full).split(",") if part]
    if len(parts) <= 1:
        raise ValueError("Model string in provided file seems wrong.")
    return parts[0]


def _from_iqtree(full: str) -> str:
    pos = 0
    model_string, pos = _parse(full, "Model of substitution: ", pos)
    sub_mat = model_string.split("+")[0]
    dna = sub_mat == "GTR"

    chars = _DNA_CHARS if dna else _AA_CHARS
    rates, pos = _parse_values(
        full, [f"{a}-{b}: " for a, b in combinations(chars, 2)], pos
    )
    freqs, pos = _parse_values(full, [f"pi({c}) = " for c in chars], pos)
    model_desc = f"{sub_mat}{{{rates}}}+FU{{{freqs}}}"

    gamma = _rest_has(full, "Gamma with ", pos)
    gamma_cats = ""
    if gamma:
        gamma_cats, pos = _parse_between(full, "Gamma with ", " categories", pos)

    if _rest_has(full, "Proportion of invariable sites: ", pos):
        value, pos = _parse(full, "Proportion of invariable sites: ", pos)
        model_desc += f"+IU{{{value}}}"

    if gamma:
        value, pos = _parse(full, "Gamma shape alpha: ", pos)
        model_desc += f"+G{gamma_cats}{{{value}}}"

    return model_desc


def _guess(full: str) -> ModelfileType:
    if _first_line(full).startswith("IQ-TREE "):
        logger.debug("Detected IQ-TREE infofile")
        return ModelfileType.IQTREE
    if "This is RAxML version 8." in full:
        logger.debug("Detected RAxML 8 infofile")
        return ModelfileType.RAXML8
    return ModelfileType.RAXMLNG


def guess_filetype(path: str | os.PathLike) -> ModelfileType:
    """Which program wrote the model file at ``path``."""
    return _guess(Path(path).read_text())


def parse_model(path: str | os.PathLike) -> str:
    """Model description string from a RAxML 8, raxml-ng or IQ-TREE file."""
    full = Path(path).read_text()
    filetype = _guess(full)
    if filetype is ModelfileType.RAXMLNG:
        return _from_raxml_ng(full)
    if filetype is ModelfileType.RAXML8:
        return _from_raxml_8(full)
    if filetype is ModelfileType.IQTREE:
        return _from_iqtree(full)
    raise ValueError(
        "Could not detect type of model file! Please supply either a RAxML_info file "
        "generated with RAxML v8 (-f e option) or the .bestModel file generated by raxml-ng!"
    )