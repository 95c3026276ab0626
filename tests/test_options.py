from dataclasses import replace

from epaplace.options import NumericalScaling, Options


def test_defaults():
    o = Options()
    assert o.prescoring is True
    assert o.opt_branches is False
    assert o.sliding_blo is True
    assert o.support_threshold == 0.01
    assert o.filter_min == 1
    assert o.filter_max == 7
    assert o.prescoring_threshold == 0.99999
    assert o.chunk_size == 5000
    assert o.precision == 10
    assert o.premasking is True
    assert o.preserve_rooting is True
    assert o.scaling is NumericalScaling.AUTO
    assert o.tmp_dir == ""


def test_instances_are_independent():
    a = Options()
    b = Options()
    a.repeats = not a.repeats
    assert b.repeats is False
    assert a != b


def test_replace_toggles_single_field():
    base = Options()
    changed = replace(base, premasking=not base.premasking)
    assert changed.premasking is not base.premasking
    assert replace(changed, premasking=base.premasking) == base