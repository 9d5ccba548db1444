# kbiolib

A small collection of self-contained utilities with no dependencies outside
the standard library:

- `kbiolib.rmqtree.RMQTree`: a balanced (AVL) ordered tree with rank queries
  and range-minimum queries over the stored values.
- `kbiolib.rng`: `splitmix64` and `Krng`, a seedable 64-bit xoroshiro128+
  style generator with a `jump` operation for independent streams.
- `kbiolib.seqio`: a streaming FASTA/FASTQ reader that also reads
  gzip-compressed files, plus a small command-line printer.
- `kbiolib.sorting`: merge sort, introsort, comb sort, heap sort, k-th
  smallest selection, shuffling, sampling and radix sort, each working in
  place on a mutable sequence.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install .[test]
pytest
```

## Range-minimum tree

Items are ordered by `key(item)` and compared for minima by `value(item)`;
without these functions the item itself is used. Queries take keys, not
items. Keys are unique: `insert` returns the item already stored under an
equal key instead of adding a second one.

```python
from kbiolib.rmqtree import RMQTree

tree = RMQTree(key=lambda item: item[0], value=lambda item: item[1])
for pair in [("c", 5), ("a", 9), ("b", 2), ("d", 7)]:
    tree.insert(pair)

tree.range_min("a", "c")       # ("b", 2), smallest value with key in ["a", "c"]
tree.rank("c")                 # 3, number of keys <= "c"
tree.find("d")                 # ("d", 7)
tree.interval("bb")            # (("b", 2), ("c", 5))
"a" in tree                    # True
[item[0] for item in tree]     # ["a", "b", "c", "d"]
[item[0] for item in reversed(tree)]          # ["d", "c", "b", "a"]
[item[0] for item in tree.iter_from("b")]     # ["b", "c", "d"]
tree.erase("b")                # ("b", 2)
tree.erase_first()             # ("a", 9)
len(tree)                      # 2
tree.validate()                # 2; raises ValueError if the tree is inconsistent
```

## Random numbers

```python
from kbiolib.rng import Krng, splitmix64

rng = Krng(11)
rng.next_u64()   # 64-bit unsigned integer
rng.random()     # float in [0, 1) with 52 random bits
rng.jump()       # advance by 2**64 steps to an independent stream
rng.seed(42)     # reset the state
rng.state        # the two 64-bit state words
splitmix64(1)    # one SplitMix64 step
```

A `Krng` can be passed as the `rng` argument of `sorting.shuffle` and
`sorting.sample`.

## Reading sequences

```python
from kbiolib.seqio import open_seq, read_records

for record in read_records("reads.fq.gz"):
    print(record.name, record.comment, len(record.seq), record.qual)

with open_seq("genome.fa") as reader:
    first = reader.read()   # a SeqRecord, or None at the end of the input
```

`open_seq` detects gzip input by its magic bytes. `SeqReader` also accepts
any binary or text stream with a `read(n)` method. Each `SeqRecord` has
`name`, `comment`, `seq` and `qual` (empty for FASTA). A FASTQ record whose
quality string is missing or of a different length than its sequence raises
`SeqFormatError`, a subclass of `ValueError`.

The reader is also available from the command line. It prints each
record's name, comment (if any), sequence and quality (if any), then
`return value: -1` after a clean end of input or `return value: -2` after a
malformed quality string:

```
kbiolib-seq reads.fasta
```

It exits with status 1 when no file is given or the file cannot be read.

## Sorting

Every routine takes an optional `less(a, b)` function, defaulting to `<`.

```python
from kbiolib.sorting import (
    combsort, heap_make, heap_sort, introsort, ksmall,
    mergesort, radix_sort, sample, shuffle,
)

data = [5, 3, 9, 1]
introsort(data)                          # [1, 3, 5, 9]
mergesort(data, lambda a, b: a > b)      # stable; [9, 5, 3, 1]
combsort(data)

heap_make(data)                          # build a max-heap first ...
heap_sort(data)                          # ... then sort it

ksmall([5, 3, 9, 1], 1)                  # 3; raises IndexError if k is out of range

words = ["bb", "a", "ccc"]
radix_sort(words, key=len, key_bytes=1)  # unsigned integer keys only

shuffle(data)                            # Fisher-Yates, in place
sample(data, 2)                          # random 2 items moved to the front
```

`heap_adjust(items, i, n)` sifts one element down within `items[:n]`.
`radix_sort` raises `ValueError` for a negative key or one that does not fit
in `key_bytes` bytes; `sample` raises `ValueError` unless
`0 <= r <= len(items)`.

## Limits

- The sequence module reads FASTA/FASTQ only; it does not write records.
- The tree stores one item per key and has no bulk-loading or
  interval-update operations.