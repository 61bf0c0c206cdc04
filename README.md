# poseidon-merkle

This package provides an append-only (incremental) Merkle tree. Its
nodes are hashed with Poseidon over the BN254 scalar field. It uses the
circom parameters for two inputs: width 3, 8 full rounds, 57 partial
rounds and the S-box x^5. The hashes match the ones circom circuits
produce, so roots computed here can be checked against proofs made with
those circuits.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The tree: `poseidon_merkle.tree`

```python
from poseidon_merkle.tree import PoseidonMerkleTree, MerkleTreeFullError

tree = PoseidonMerkleTree(3)      # room for 2**3 leaves
count = tree.insert(bytes([1]) * 32)
print(count)                      # 1

root = tree.roots[tree.current_root_index]
print(tree.is_known_root(root))   # True
```

- `PoseidonMerkleTree(levels)` creates an empty tree with `levels`
  levels. `levels` must be from 1 to `MAX_LEVELS` (20). Any other value
  raises `InvalidLevelsError`.
- `insert(leaf)` appends a 32-byte big-endian leaf and returns the
  number of leaves now in the tree.
  - A leaf of any other length raises `ValueError`.
  - If the tree already holds `2 ** levels` leaves, it raises
    `MerkleTreeFullError`.
- `is_known_root(root)` tells whether `root` is one of the last
  `MAX_LEVELS` roots the tree has had. The all-zero value is never a
  known root.
- The tree has these public attributes:
  - `levels`
  - `filled_subtrees`: the latest left node at each level
  - `roots`: a ring of `MAX_LEVELS` roots
  - `current_root_index`: where the newest root sits in `roots`
  - `next_index`: the number of leaves inserted so far
- Two trees compare equal when all of these attributes are equal.
- `to_bytes()` writes the tree's state in a compact little-endian
  binary layout, in this order:
  1. `levels` as a u32
  2. `filled_subtrees`, prefixed with its length as a u32
  3. `roots`, prefixed with its length as a u32
  4. `current_root_index` as a u32
  5. `next_index` as a u32
- `PoseidonMerkleTree.from_bytes(data)` reads that layout back. It
  raises `ValueError` when the data is truncated or has trailing bytes.

### Empty subtrees

Empty subtrees are filled with fixed values. `zeros(level)` returns the
root of an empty subtree of the given height. It takes levels from 0
(the value of an empty leaf) up to 20. Any other level raises
`ValueError`.

`InvalidLevelsError` and `MerkleTreeFullError` both derive from
`PoseidonMerkleTreeError`.

## The hash: `poseidon_merkle.poseidon`

```python
from poseidon_merkle.poseidon import circom_t3

hasher = circom_t3()
digest = hasher.hash_bytes_be([bytes([1]) * 32, bytes([2]) * 32])
value = hasher.hash([1, 2])
```

- `circom_t3()` returns a `Poseidon` hasher that takes two inputs.
- `Poseidon.hash(inputs)` takes field elements as integers and returns
  an integer. It needs exactly `width - 1` inputs, each in the range
  `0 <= x < FIELD_MODULUS`.
- `Poseidon.hash_bytes_be(inputs)` takes big-endian byte strings and
  returns the 32-byte big-endian digest. Each input must be 1 to 32
  bytes long and below the field modulus.
- Bad inputs raise `PoseidonError`, which is a subclass of
  `ValueError`.

`PoseidonParameters` holds the following fields:

- `ark`
- `mds`
- `full_rounds`
- `partial_rounds`
- `width`
- `alpha`

It checks them when it is created and raises `PoseidonError` in these
cases:

- `width` is below 2.
- `full_rounds` is odd.
- The number of round constants is not `width * (full_rounds + partial_rounds)`.
- The MDS matrix is not `width` by `width`.

You can pass your own parameters to `Poseidon(params)`.

## The parameters: `poseidon_merkle.constants`

- `round_constants()` returns the 195 round constants as integers.
- `mds_matrix()` returns the 3×3 MDS matrix as a tuple of rows.

## What the package does not do

- The tree keeps only `filled_subtrees` and the recent roots. It does
  not store the inserted leaves.
- It cannot produce inclusion proofs (Merkle paths) for a leaf.
- There is no command-line tool.
- Persistence is limited to `to_bytes` and `from_bytes`. Writing the
  bytes to a file or database is up to the caller.