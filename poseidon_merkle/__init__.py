"""Incremental Merkle tree hashed with the circom-compatible Poseidon function over BN254."""

__version__ = "0.1.0"
__all__ = ["constants", "poseidon", "tree"]