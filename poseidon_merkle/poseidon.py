"""Poseidon permutation-based hash over the BN254 scalar field."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from .constants import mds_matrix, round_constants

FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
"""Order of the BN254 scalar field."""

_FIELD_BYTES = 32


class PoseidonError(ValueError):
    """Raised for invalid Poseidon parameters or hash inputs."""


@dataclass(frozen=True)
class PoseidonParameters:
    """Parameters describing one Poseidon instance."""

    ark: tuple[int, ...]
    mds: tuple[tuple[int, ...], ...]
    full_rounds: int
    partial_rounds: int
    width: int
    alpha: int

    def __post_init__(self) -> None:
        if self.width < 2:
            raise PoseidonError("width must be at least 2")
        if self.full_rounds % 2:
            raise PoseidonError("full_rounds must be even")
        expected = self.width * (self.full_rounds + self.partial_rounds)
        if len(self.ark) != expected:
            raise PoseidonError(
                f"expected {expected} round constants, got {len(self.ark)}"
            )
        if len(self.mds) != self.width or any(len(row) != self.width for row in self.mds):
            raise PoseidonError(f"MDS matrix must be {self.width}x{self.width}")


class Poseidon:
    """A Poseidon hasher with a zero domain tag, as used by circom."""

    def __init__(self, params: PoseidonParameters) -> None:
        self.params = params
        self.domain_tag = 0

    def _add_round_constants(self, state: list[int], round_number: int) -> list[int]:
        width = self.params.width
        offset = round_number * width
        constants = self.params.ark[offset : offset + width]
        return [(value + constant) % FIELD_MODULUS for value, constant in zip(state, constants)]

    def _full_sbox(self, state: list[int]) -> list[int]:
        return [pow(value, self.params.alpha, FIELD_MODULUS) for value in state]

    def _partial_sbox(self, state: list[int]) -> list[int]:
        return [pow(state[0], self.params.alpha, FIELD_MODULUS), *state[1:]]

    def _mix(self, state: list[int]) -> list[int]:
        return [
            sum(coefficient * value for coefficient, value in zip(row, state)) % FIELD_MODULUS
            for row in self.params.mds
        ]

    def hash(self, inputs: Sequence[int]) -> int:
        """Hash field elements given as integers and return a field element."""
        params = self.params
        if len(inputs) != params.width - 1:
            raise PoseidonError(
                f"expected {params.width - 1} inputs, got {len(inputs)}"
            )
        for value in inputs:
            if not 0 <= value < FIELD_MODULUS:
                raise PoseidonError("input is not a canonical field element")

        state = [self.domain_tag, *inputs]
        half = params.full_rounds // 2
        partial_end = half + params.partial_rounds
        total = params.full_rounds + params.partial_rounds

        for round_number in range(total):
            state = self._add_round_constants(state, round_number)
            if half <= round_number < partial_end:
                state = self._partial_sbox(state)
            else:
                state = self._full_sbox(state)
            state = self._mix(state)
        return state[0]

    def hash_bytes_be(self, inputs: Sequence[bytes]) -> bytes:
        """Hash big-endian encoded field elements and return 32 big-endian bytes."""
        elements = [_element_from_bytes_be(item) for item in inputs]
        return self.hash(elements).to_bytes(_FIELD_BYTES, "big")


def _element_from_bytes_be(data: bytes) -> int:
    if len(data) == 0:
        raise PoseidonError("input is empty")
    if len(data) > _FIELD_BYTES:
        raise PoseidonError(
            f"input is {len(data)} bytes, at most {_FIELD_BYTES} are allowed"
        )
    value = int.from_bytes(data, "big")
    if value >= FIELD_MODULUS:
        raise PoseidonError("input is larger than the field modulus")
    return value


@lru_cache(maxsize=None)
def _circom_t3_parameters() -> PoseidonParameters:
    return PoseidonParameters(
        ark=round_constants(),
        mds=mds_matrix(),
        full_rounds=8,
        partial_rounds=57,
        width=3,
        alpha=5,
    )


def circom_t3() -> Poseidon:
    """Return the circom-compatible two-input Poseidon hasher."""
    return Poseidon(_circom_t3_parameters())