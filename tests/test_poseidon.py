import pytest

from poseidon_merkle.constants import mds_matrix, round_constants
from poseidon_merkle.poseidon import (
    FIELD_MODULUS,
    Poseidon,
    PoseidonError,
    PoseidonParameters,
    circom_t3,
)

ZERO_0 = bytes(
    [
        0x28, 0x94, 0x0D, 0xEE, 0xAC, 0xD1, 0xCA, 0x28, 0x31, 0x33, 0x68, 0x74, 0xE8, 0x74,
        0x29, 0xDB, 0x0E, 0x72, 0x8A, 0x67, 0xA4, 0x72, 0xB7, 0xAC, 0x81, 0x95, 0xC4, 0x3C,
        0x2F, 0xB1, 0x30, 0x09,
    ]
)
ZERO_1 = bytes(
    [
        0x13, 0x8B, 0xFD, 0xB7, 0x91, 0xD8, 0xBA, 0xD9, 0x8A, 0x50, 0xC8, 0x2E, 0xA1, 0xEF,
        0x62, 0x4F, 0xEB, 0x03, 0xED, 0x9B, 0x7B, 0xBD, 0xB3, 0x48, 0x55, 0x1A, 0x6B, 0x34,
        0x7F, 0xFD, 0x56, 0x1C,
    ]
)
ZERO_2 = bytes(
    [
        0x00, 0x5E, 0xF3, 0xBB, 0xA3, 0x6E, 0x2D, 0x71, 0x45, 0x75, 0xEF, 0x75, 0xC6, 0xEC,
        0x27, 0xC6, 0x0E, 0x05, 0x93, 0xFB, 0x7B, 0xD4, 0x01, 0x2A, 0x33, 0x0B, 0xC0, 0x65,
        0xFB, 0x79, 0x08, 0x37,
    ]
)

CIRCOM_HASH_1_2 = 7853200120776062878684798364095072458815029376092732009249414926327459813530


@pytest.fixture(scope="module")
def hasher():
    return circom_t3()


def test_known_circom_vector(hasher):
    assert hasher.hash([1, 2]) == CIRCOM_HASH_1_2


def test_bytes_matches_integer_hash(hasher):
    result = hasher.hash_bytes_be([(1).to_bytes(32, "big"), (2).to_bytes(32, "big")])
    assert result == CIRCOM_HASH_1_2.to_bytes(32, "big")


def test_zero_chain_levels(hasher):
    assert hasher.hash_bytes_be([ZERO_0, ZERO_0]) == ZERO_1
    assert hasher.hash_bytes_be([ZERO_1, ZERO_1]) == ZERO_2


def test_short_inputs_are_left_padded(hasher):
    short = hasher.hash_bytes_be([b"\x01", b"\x02"])
    full = hasher.hash_bytes_be([(1).to_bytes(32, "big"), (2).to_bytes(32, "big")])
    assert short == full


def test_output_is_canonical_and_deterministic(hasher):
    leaf = bytes([1]) * 32
    first = hasher.hash_bytes_be([leaf, leaf])
    second = hasher.hash_bytes_be([leaf, leaf])
    assert first == second
    assert len(first) == 32
    assert int.from_bytes(first, "big") < FIELD_MODULUS


def test_input_order_matters(hasher):
    forward = hasher.hash([1, 2])
    backward = hasher.hash([2, 1])
    assert forward == CIRCOM_HASH_1_2
    assert backward != forward


@pytest.mark.parametrize("inputs", [[], [1], [1, 2, 3]])
def test_wrong_input_count(hasher, inputs):
    with pytest.raises(PoseidonError):
        hasher.hash(inputs)


def test_integer_out_of_field(hasher):
    with pytest.raises(PoseidonError):
        hasher.hash([FIELD_MODULUS, 0])
    with pytest.raises(PoseidonError):
        hasher.hash([-1, 0])


def test_empty_bytes_input(hasher):
    with pytest.raises(PoseidonError, match="empty"):
        hasher.hash_bytes_be([b"", b"\x01"])


def test_too_long_bytes_input(hasher):
    with pytest.raises(PoseidonError):
        hasher.hash_bytes_be([bytes(33), b"\x01"])


def test_bytes_not_below_modulus(hasher):
    with pytest.raises(PoseidonError, match="modulus"):
        hasher.hash_bytes_be([b"\xff" * 32, b"\x01"])


def test_error_is_value_error(hasher):
    with pytest.raises(ValueError):
        hasher.hash([1])


def test_parameters_reject_wrong_ark_length():
    with pytest.raises(PoseidonError):
        PoseidonParameters(
            ark=round_constants()[:-1],
            mds=mds_matrix(),
            full_rounds=8,
            partial_rounds=57,
            width=3,
            alpha=5,
        )


def test_parameters_reject_bad_mds():
    with pytest.raises(PoseidonError):
        PoseidonParameters(
            ark=round_constants(),
            mds=mds_matrix()[:2],
            full_rounds=8,
            partial_rounds=57,
            width=3,
            alpha=5,
        )


def test_explicit_parameters_match_circom_instance(hasher):
    params = PoseidonParameters(
        ark=round_constants(),
        mds=mds_matrix(),
        full_rounds=8,
        partial_rounds=57,
        width=3,
        alpha=5,
    )
    assert Poseidon(params).hash([1, 2]) == hasher.hash([1, 2])
    assert Poseidon(params).domain_tag == 0