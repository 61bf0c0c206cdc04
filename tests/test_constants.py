import pytest

from poseidon_merkle.constants import mds_matrix, round_constants

BN254_SCALAR_MODULUS = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)
LOW_MASK = (1 << 64) - 1


def test_round_constants_count():
    assert len(round_constants()) == 195


def test_mds_matrix_shape():
    matrix = mds_matrix()
    assert len(matrix) == 3
    assert [len(row) for row in matrix] == [3, 3, 3]


def test_all_values_are_reduced_field_elements():
    values = list(round_constants()) + [v for row in mds_matrix() for v in row]
    assert all(0 < value < BN254_SCALAR_MODULUS for value in values)


def test_first_round_constant_matches_circom():
    assert round_constants()[0] == int(
        "0ee9a592ba9a9518d05986d656f40c2114c4993c11bb29938d21d47304cd8e6e", 16
    )


def test_first_mds_entry_matches_circom():
    assert mds_matrix()[0][0] == int(
        "109b7f411ba0e4c9b2b70caf5c36a7b194be7c11ad24378bfedb68592ba8118b", 16
    )


def test_last_round_constant_limbs():
    last = round_constants()[-1]
    assert last & LOW_MASK == 17910303629776146785
    assert (last >> 64) & LOW_MASK == 4333503720265116478
    assert (last >> 128) & LOW_MASK == 5349829146288687643
    assert last >> 192 == 2136215616631132703


def test_last_mds_entry_limbs():
    entry = mds_matrix()[2][2]
    assert entry & LOW_MASK == 8297773286174348768
    assert entry >> 192 == 1847597393482099700


def test_round_constants_are_distinct():
    constants = round_constants()
    assert len(set(constants)) == len(constants)


def test_mds_entries_are_distinct():
    entries = [v for row in mds_matrix() for v in row]
    assert len(set(entries)) == 9


def test_repeated_calls_agree():
    first = round_constants()
    second = round_constants()
    assert len(second) == 195
    assert list(first) == list(second)
    assert second[1] & LOW_MASK == 6239455757362194532
    assert second[1] >> 192 == 67910589270332556

    matrix_first = mds_matrix()
    matrix_second = mds_matrix()
    assert [list(row) for row in matrix_first] == [list(row) for row in matrix_second]
    assert matrix_second[1][1] & LOW_MASK == 3004517874245172771
    assert matrix_second[1][1] >> 192 == 3324810986103434297


def test_round_constants_are_immutable():
    with pytest.raises(TypeError):
        round_constants()[0] = 1  # type: ignore[index]


def test_mds_rows_are_immutable():
    with pytest.raises(TypeError):
        mds_matrix()[0][0] = 1  # type: ignore[index]