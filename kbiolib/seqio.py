"""Streaming reader for FASTA and FASTQ records, plain or gzip-compressed."""

from __future__ import annotations

import gzip
import re
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO, Iterator, Optional, Sequence, Union

_CHUNK_SIZE = 16384
_SPACE = re.compile(rb"[ \t\n\v\f\r]")
_LINE = re.compile(rb"\n")

_NL = ord("\n")
_CR = ord("\r")
_GT = ord(">")
_AT = ord("@")
_PLUS = ord("+")


@dataclass
class SeqRecord:
    """One sequence record; ``qual`` is empty for FASTA input."""

    name: str
    comment: str = ""
    seq: str = ""
    qual: str = ""


class SeqFormatError(ValueError):
    """Raised when a FASTQ quality string is missing or of the wrong length."""


def _text(data: Union[bytes, bytearray]) -> str:
    return bytes(data).decode("utf-8", "surrogateescape")


class _CharStream:
    """Buffered byte reader over any object with a ``read(n)`` method."""

    def __init__(self, stream) -> None:
        self._stream = stream
        self._buf = b""
        self._pos = 0
        self._eof = False

    def _refill(self) -> bool:
        if self._eof:
            return False
        chunk = self._stream.read(_CHUNK_SIZE)
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8", "surrogateescape")
        self._pos = 0
        if not chunk:
            self._eof = True
            self._buf = b""
            return False
        self._buf = chunk
        return True

    def getc(self) -> int:
        """Next byte, or -1 at end of stream."""
        if self._pos >= len(self._buf) and not self._refill():
            return -1
        c = self._buf[self._pos]
        self._pos += 1
        return c

    def getuntil(self, pattern: "re.Pattern[bytes]") -> tuple[Optional[bytes], int]:
        """Read up to a delimiter matching ``pattern`` and consume it.

        Returns the bytes read and the delimiter (0 if the stream ended),
        or ``(None, 0)`` if the stream was already exhausted.
        """
        parts: list[bytes] = []
        gotany = False
        while self._pos < len(self._buf) or self._refill():
            gotany = True
            match = pattern.search(self._buf, self._pos)
            if match is None:
                parts.append(self._buf[self._pos:])
                self._pos = len(self._buf)
                continue
            end = match.start()
            parts.append(self._buf[self._pos:end])
            self._pos = end + 1
            return b"".join(parts), self._buf[end]
        if not gotany:
            return None, 0
        return b"".join(parts), 0


class SeqReader:
    """Read FASTA/FASTQ records one at a time from a binary or text stream."""

    def __init__(self, stream) -> None:
        self._chars = _CharStream(stream)
        self._last_char = 0

    def _append_line(self, target: bytearray) -> bool:
        data, _ = self._chars.getuntil(_LINE)
        if data is None:
            return False
        target += data
        if len(target) > 1 and target[-1] == _CR:
            del target[-1]
        return True

    def read(self) -> Optional[SeqRecord]:
        """Return the next record, or None at the end of the input.

        Raises SeqFormatError for a truncated or mismatched quality string.
        """
        chars = self._chars
        if not self._last_char:
            while True:
                c = chars.getc()
                if c < 0:
                    return None
                if c in (_GT, _AT):
                    break
            self._last_char = c

        name, c = chars.getuntil(_SPACE)
        if name is None:
            return None
        comment = bytearray()
        if c != _NL:
            self._append_line(comment)

        seq = bytearray()
        while True:
            c = chars.getc()
            if c < 0 or c in (_GT, _PLUS, _AT):
                break
            if c == _NL:
                continue
            seq.append(c)
            self._append_line(seq)
        if c in (_GT, _AT):
            self._last_char = c
        if c != _PLUS:
            return SeqRecord(_text(name), _text(comment), _text(seq))

        while True:
            c = chars.getc()
            if c < 0 or c == _NL:
                break
        if c < 0:
            raise SeqFormatError(f"record {_text(name)!r}: missing quality string")
        qual = bytearray()
        while self._append_line(qual) and len(qual) < len(seq):
            continue
        self._last_char = 0
        if len(qual) != len(seq):
            raise SeqFormatError(
                f"record {_text(name)!r}: quality length {len(qual)} "
                f"differs from sequence length {len(seq)}"
            )
        return SeqRecord(_text(name), _text(comment), _text(seq), _text(qual))

    def __iter__(self) -> Iterator[SeqRecord]:
        while True:
            record = self.read()
            if record is None:
                return
            yield record


@contextmanager
def open_seq(path: Union[str, PathLike]) -> Iterator[SeqReader]:
    """Open a FASTA/FASTQ file, decompressing gzip input when detected."""
    with open(path, "rb") as raw:
        magic = raw.read(2)
        raw.seek(0)
        if magic == b"\x1f\x8b":
            with gzip.GzipFile(fileobj=raw) as unzipped:
                yield SeqReader(unzipped)
        else:
            yield SeqReader(raw)


def read_records(path: Union[str, PathLike]) -> Iterator[SeqRecord]:
    """Yield every record of the file at ``path``."""
    with open_seq(path) as reader:
        yield from reader


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every record of a sequence file, then the final read status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: seqio <in.fasta>", file=sys.stderr)
        return 1
    status = -1
    try:
        with open_seq(args[0]) as reader:
            try:
                for record in reader:
                    print(f"name: {record.name}")
                    if record.comment:
                        print(f"comment: {record.comment}")
                    print(f"seq: {record.seq}")
                    if record.qual:
                        print(f"qual: {record.qual}")
            except SeqFormatError:
                status = -2
    except OSError as exc:
        print(f"cannot read {args[0]}: {exc}", file=sys.stderr)
        return 1
    print(f"return value: {status}")
    return 0