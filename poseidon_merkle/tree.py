"""Incremental Poseidon Merkle tree with a bounded history of recent roots."""

from __future__ import annotations

import struct
from functools import lru_cache

from .poseidon import Poseidon, circom_t3

MAX_LEVELS = 20
"""Deepest tree supported; also the number of roots kept in the history."""

_NODE_BYTES = 32
_EMPTY_NODE = bytes(_NODE_BYTES)
_U32 = struct.Struct("<I")

_ZEROS = (
    bytes.fromhex("28940deeacd1ca2831336874e87429db0e728a67a472b7ac8195c43c2fb13009"),
    bytes.fromhex("138bfdb791d8bad98a50c82ea1ef624feb03ed9b7bbdb348551a6b347ffd561c"),
    bytes.fromhex("005ef3bba36e2d714575ef75c6ec27c60e0593fb7bd4012a330bc065fb790837"),
    bytes.fromhex("10c7036d8a63d140d77c6ac121c2ef502ca83703913d3497481754311cf812a1"),
    bytes.fromhex("1e54df3158cf89802f13f72265f26c3f2813914657cce8fe1c68c81c6f84b5e3"),
    bytes.fromhex("07f87907f48e617a184d93596450b3a68a30c0dfdf93164a0af963ddccc04cc7"),
    bytes.fromhex("1bcabd635e6f845b5039cbf827b528121ec34a2a3f680f27f88456c47662ec32"),
    bytes.fromhex("032d930e156cce797fcd3f4a11dc4170315f8f830ca6b0f3bb711e5337d6773d"),
    bytes.fromhex("170abe4947c1195a40a48811e6b362a0a9c8685733c17f6150c196b939fc21f8"),
    bytes.fromhex("03d9e648d67427d0a6e0a30aad5d18af05b9e04b41b4985fd4062de2711cbec1"),
    bytes.fromhex("04a4fe1221c0d21b27b49a23b75347fec6903bbad2f61299b936bfb7b783fcd7"),
    bytes.fromhex("1432aa335fccaeeded9505a5a142e8568af62ccc908114bfdcbe956e1172ad98"),
    bytes.fromhex("18919059fd2a3d7ba6c4049f42b77b0ecc6a2301e66536387f11aa522b3ed27b"),
    bytes.fromhex("06962f229c6f6e307a60224933cb0d9c9b61cf442ed5b036e9cf3670a5aff8d2"),
    bytes.fromhex("01821e95e53493448e2d599cb045cd8e8d21f3d2d7e8acf5c909681ee20a6926"),
    bytes.fromhex("0ec5b29ad4609efd69bd9230c89f82f3fc1503f38c2115073e82226191926296"),
    bytes.fromhex("164c522ec8d8d064e9ac535c6a1b34fc41a505d870ebc0ad551672171b75f34c"),
    bytes.fromhex("252a2acfa22ca09d7f965d015b01cf3cd59ff89d5b4f229564c228f25020edf1"),
    bytes.fromhex("2f729ab9994d06f1e6c077c5eadbc451e721d029159a30e47e32b15cc6e28ab7"),
    bytes.fromhex("19bf0a91f2852d3a5bd3565d9f77e04fb6de7bc318753fa5281700d786e8abd1"),
    bytes.fromhex("28c6d155c4ef4f87095323e8832ec054fa7dab72a6fd22956b39e3db1840296f"),
)


class PoseidonMerkleTreeError(Exception):
    """Base class for Merkle tree errors."""


class InvalidLevelsError(PoseidonMerkleTreeError):
    """Raised when a tree is requested with an unsupported number of levels."""

    def __init__(self, message: str = "Invalid levels") -> None:
        super().__init__(message)


class MerkleTreeFullError(PoseidonMerkleTreeError):
    """Raised when inserting into a tree that has no free leaves left."""

    def __init__(self, message: str = "Merkle tree is full") -> None:
        super().__init__(message)


def zeros(level: int) -> bytes:
    """Return the hash of an empty subtree at the given level (0 to MAX_LEVELS)."""
    if not 0 <= level < len(_ZEROS):
        raise ValueError(f"zero value index out of bounds: {level}")
    return _ZEROS[level]


@lru_cache(maxsize=None)
def _hasher() -> Poseidon:
    return circom_t3()


class PoseidonMerkleTree:
    """Append-only Merkle tree that remembers the last MAX_LEVELS roots."""

    SIZE = 4 + 32 * MAX_LEVELS + 32 * MAX_LEVELS + 4 + 4

    levels: int
    filled_subtrees: list[bytes]
    roots: list[bytes]
    current_root_index: int
    next_index: int

    def __init__(self, levels: int) -> None:
        if not 1 <= levels <= MAX_LEVELS:
            raise InvalidLevelsError()
        self.levels = levels
        self.filled_subtrees = [zeros(level) for level in range(levels)]
        self.roots = [_EMPTY_NODE] * MAX_LEVELS
        self.roots[0] = zeros(levels - 1)
        self.current_root_index = 0
        self.next_index = 0

    def insert(self, leaf: bytes) -> int:
        """Append a 32-byte leaf and return the new number of leaves."""
        leaf = bytes(leaf)
        if len(leaf) != _NODE_BYTES:
            raise ValueError(f"leaf must be {_NODE_BYTES} bytes, got {len(leaf)}")
        if self.next_index == 2**self.levels:
            raise MerkleTreeFullError()

        hasher = _hasher()
        index = self.next_index
        node = leaf
        subtrees = list(self.filled_subtrees)
        for level in range(self.levels):
            if index % 2 == 0:
                left, right = node, zeros(level)
            else:
                left, right = subtrees[level], node
            node = hasher.hash_bytes_be([left, right])
            subtrees[level] = left
            index //= 2

        self.filled_subtrees = subtrees
        self.current_root_index = (self.current_root_index + 1) % MAX_LEVELS
        self.roots[self.current_root_index] = node
        self.next_index += 1
        return self.next_index

    def is_known_root(self, root: bytes) -> bool:
        """Tell whether root is one of the roots kept in the history."""
        root = bytes(root)
        if root == _EMPTY_NODE:
            return False
        start = self.current_root_index
        return any(
            self.roots[(start - step) % MAX_LEVELS] == root for step in range(MAX_LEVELS)
        )

    def to_bytes(self) -> bytes:
        """Serialise the tree in its compact binary layout."""
        parts = [_U32.pack(self.levels)]
        for nodes in (self.filled_subtrees, self.roots):
            parts.append(_U32.pack(len(nodes)))
            parts.extend(nodes)
        parts.append(_U32.pack(self.current_root_index))
        parts.append(_U32.pack(self.next_index))
        return b"".join(parts)

    @classmethod
    def from_bytes(cls, data: bytes) -> PoseidonMerkleTree:
        """Rebuild a tree from bytes produced by to_bytes."""
        reader = _Reader(bytes(data))
        tree = cls.__new__(cls)
        tree.levels = reader.u32()
        tree.filled_subtrees = reader.nodes()
        tree.roots = reader.nodes()
        tree.current_root_index = reader.u32()
        tree.next_index = reader.u32()
        reader.finish()
        return tree

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PoseidonMerkleTree):
            return NotImplemented
        return (
            self.levels == other.levels
            and self.filled_subtrees == other.filled_subtrees
            and self.roots == other.roots
            and self.current_root_index == other.current_root_index
            and self.next_index == other.next_index
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(levels={self.levels}, "
            f"next_index={self.next_index}, "
            f"current_root_index={self.current_root_index})"
        )


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def _take(self, count: int) -> bytes:
        end = self._offset + count
        if end > len(self._data):
            raise ValueError("unexpected end of data")
        chunk = self._data[self._offset : end]
        self._offset = end
        return chunk

    def u32(self) -> int:
        (value,) = _U32.unpack(self._take(_U32.size))
        return value

    def nodes(self) -> list[bytes]:
        count = self.u32()
        return [self._take(_NODE_BYTES) for _ in range(count)]

    def finish(self) -> None:
        if self._offset != len(self._data):
            raise ValueError("trailing bytes after tree data")