import pytest

from hwhash.targets import Target, foreach_target, target_name


@pytest.mark.parametrize(
    "target, name",
    [
        (Target.PORTABLE, "Portable"),
        (Target.SSE41, "SSE41"),
        (Target.AVX2, "AVX2"),
        (Target.VSX, "VSX"),
        (Target.NEON, "NEON"),
    ],
)
def test_target_name_single_bits(target, name):
    assert target_name(target) == name


@pytest.mark.parametrize("bits", [0, 3, Target.AVX2 | Target.NEON, 32, 1 << 20])
def test_target_name_zero_multiple_or_unknown(bits):
    assert target_name(bits) is None


@pytest.mark.parametrize(
    "value, name",
    [(1, "Portable"), (2, "SSE41"), (4, "AVX2"), (8, "VSX"), (16, "NEON")],
)
def test_target_bit_values_match_names(value, name):
    assert target_name(value) == name
    assert list(foreach_target(value)) == [value]


def test_each_target_is_a_single_distinct_bit():
    names = set()
    for target in Target:
        assert list(foreach_target(target)) == [target]
        name = target_name(target)
        assert name is not None
        names.add(name)
    assert len(names) == len(list(Target))


def test_foreach_target_lowest_first():
    bits = Target.SSE41 | Target.AVX2 | Target.NEON
    assert list(foreach_target(bits)) == [Target.SSE41, Target.AVX2, Target.NEON]


def test_foreach_target_empty():
    assert list(foreach_target(0)) == []


def test_foreach_target_reassembles_bits():
    bits = 0b1011011
    parts = list(foreach_target(bits))
    total = 0
    for part in parts:
        total |= part
    assert total == bits
    assert sum(parts) == bits
    assert parts == sorted(parts)


def test_foreach_target_names_each_known_bit():
    all_bits = 0
    for target in Target:
        all_bits |= target
    names = [target_name(b) for b in foreach_target(all_bits)]
    assert names == ["Portable", "SSE41", "AVX2", "VSX", "NEON"]


def test_negative_bits_rejected():
    with pytest.raises(ValueError):
        target_name(-1)
    with pytest.raises(ValueError):
        list(foreach_target(-4))