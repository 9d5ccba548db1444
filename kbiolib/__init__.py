"""Range-minimum AVL tree, xoroshiro128+ style RNG, FASTA/FASTQ reading and in-place sorting."""

__version__ = "0.1.0"
__all__ = ["rmqtree", "rng", "seqio", "sorting"]