"""Run-time settings for placement."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class NumericalScaling(enum.Enum):
    ON = "on"
    OFF = "off"
    AUTO = "auto"


@dataclass
class Options:
    """All tunable settings, with their default values."""

    prescoring: bool = True
    opt_model: bool = False
    opt_branches: bool = False
    sliding_blo: bool = True
    support_threshold: float = 0.01
    acc_threshold: bool = False
    filter_min: int = 1
    filter_max: int = 7
    prescoring_by_percentage: bool = False
    prescoring_threshold: float = 0.99999
    ranged: bool = False
    dump_binary_mode: bool = False
    load_binary_mode: bool = False
    chunk_size: int = 5000
    num_threads: int = 0
    repeats: bool = False
    premasking: bool = True
    baseball: bool = False
    tmp_dir: str = ""
    precision: int = 10
    scaling: NumericalScaling = NumericalScaling.AUTO
    preserve_rooting: bool = True