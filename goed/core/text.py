"""Text helpers: line counting, line-break detection, character matrices and encodings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Union

LINE_SEP = b"\n"
_CHUNK = 8192
_CRLF_SAMPLE = 1000
_TEXT_SAMPLE = 1024
_SMALL_FILE = 1000
_LONE_LF = re.compile(rb"(?<!\r)\n")


@dataclass(frozen=True)
class _Codec:
    """Converts between a file encoding and UTF-8 bytes.

    ``bom`` is stripped on decoding and written on encoding; a leading
    ``alt_bom`` switches decoding to ``alt_codec``.
    """

    name: str
    codec: str
    bom: bytes = b""
    alt_codec: str = ""
    alt_bom: bytes = b""

    def decode(self, data: bytes) -> bytes:
        codec = self.codec
        if self.alt_bom and data.startswith(self.alt_bom):
            data, codec = data[len(self.alt_bom):], self.alt_codec
        elif self.bom and data.startswith(self.bom):
            data = data[len(self.bom):]
        return data.decode(codec, errors="replace").encode("utf-8")

    def encode(self, data: bytes) -> bytes:
        text = data.decode("utf-8", errors="replace")
        return self.bom + text.encode(self.codec, errors="replace")


UTF8 = _Codec("utf-8", "utf-8")
UTF16_LE = _Codec("utf-16-le", "utf-16-le", b"\xff\xfe", "utf-16-be", b"\xfe\xff")
UTF16_BE = _Codec("utf-16-be", "utf-16-be", b"\xfe\xff", "utf-16-le", b"\xff\xfe")
UTF32_LE = _Codec("utf-32-le", "utf-32-le", b"\xff\xfe\x00\x00", "utf-32-be", b"\x00\x00\xfe\xff")
UTF32_BE = _Codec("utf-32-be", "utf-32-be", b"\x00\x00\xfe\xff", "utf-32-le", b"\xff\xfe\x00\x00")
GB18030 = _Codec("gb18030", "gb18030")


def count_lines(stream: IO) -> int:
    """Count the newlines in a binary or text stream, reading it in chunks."""
    count = 0
    while chunk := stream.read(_CHUNK):
        count += chunk.count(LINE_SEP if isinstance(chunk, bytes) else "\n")
    return count


def uses_crlf(path: str | Path) -> bool:
    """Whether a file appears to use CRLF line breaks, judging by its first bytes."""
    try:
        with open(path, "rb") as f:
            sample = f.read(_CRLF_SAMPLE)
    except OSError:
        return False  # a new file uses "\n"
    return sample.count(b"\r\n") > sample.count(LINE_SEP) // 2


def string_to_runes(s: str) -> list[list[str]]:
    """Split a string into a matrix of characters, one row per line."""
    lines = s.split("\n")
    last = len(lines) - 1
    rows = []
    for i, line in enumerate(lines):
        line = line.removesuffix("\r")
        if i != last or line or s.endswith("\n"):
            rows.append(list(line))
    return rows


def runes_to_string(runes: list[list[str]]) -> str:
    """Join a matrix of characters back into a string."""
    return "\n".join("".join(line) for line in runes)


def drop_crlf(data: bytes) -> bytes:
    """Replace Windows "\\r\\n" line breaks with plain "\\n"."""
    return data.replace(b"\r\n", b"\n")


def add_crlf(data: bytes) -> bytes:
    """Replace plain "\\n" line breaks with "\\r\\n", leaving existing ones alone."""
    return _LONE_LF.sub(b"\r\n", data)


@dataclass(frozen=True)
class CrLfEncoding:
    """Translates "\\r\\n" to "\\n" on decoding and back on encoding.

    Optionally chained with a character encoding.
    """

    chain_with: _Codec | None = None

    def decode(self, data: bytes) -> bytes:
        if self.chain_with is not None:
            data = self.chain_with.decode(data)
        return drop_crlf(data)

    def encode(self, data: bytes) -> bytes:
        data = add_crlf(data)
        if self.chain_with is not None:
            data = self.chain_with.encode(data)
        return data


Encoding = Union[_Codec, CrLfEncoding]


@dataclass(frozen=True)
class TextInfo:
    """What is known of a text file: the encoding to read it with (None: as is)."""

    encoding: Encoding | None


def crlf_text_info(encoding: _Codec | None, uses_crlf: bool) -> TextInfo:
    """Build a TextInfo, wrapping the encoding with CRLF handling if needed."""
    if not uses_crlf:
        return TextInfo(encoding)
    return TextInfo(CrLfEncoding(encoding))


def bom_encoding(path: str | Path) -> _Codec | None:
    """Return the encoding given by the file's byte order mark, or None."""
    try:
        with open(path, "rb") as f:
            head = f.read(4)
    except OSError:
        return None
    if len(head) >= 4:
        if head == b"\x00\x00\xfe\xff":
            return UTF32_BE
        if head == b"\xff\xfe\x00\x00":
            return UTF32_LE
        if head == b"\x84\x31\x95\x33":
            return GB18030
    if head.startswith(b"\xef\xbb\xbf"):
        return UTF8
    if head.startswith(b"\xfe\xff"):
        return UTF16_BE
    if head.startswith(b"\xff\xfe"):
        return UTF16_LE
    return None


def _is_utf8(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def read_text_info(path: str | Path, uses_crlf: bool) -> TextInfo | None:
    """Guess whether a file is text and in which encoding.

    Returns None if the file looks binary or uses an unsupported encoding.
    """
    p = Path(path)
    try:
        size = p.stat().st_size
    except FileNotFoundError:
        size = 0
    if size == 0:
        return crlf_text_info(None, uses_crlf)

    bom = bom_encoding(p)
    if bom is not None:
        return crlf_text_info(bom, uses_crlf)

    try:
        f = p.open("rb")
    except OSError:
        return crlf_text_info(None, uses_crlf)
    with f:
        try:
            sample = f.read(_TEXT_SAMPLE)
        except OSError:
            return crlf_text_info(UTF8, uses_crlf)

    if _is_utf8(sample):
        return crlf_text_info(UTF8, uses_crlf)

    # Either UTF-16 without a BOM, or binary.
    le_newlines = be_newlines = nulls = 0
    for i, (prev, cur) in enumerate(zip(sample, sample[1:]), start=1):
        if i % 2 == 0 and cur == 0:
            nulls += 1
        if prev == 0x0A and cur == 0x00:
            le_newlines += 1
        elif prev == 0x00 and cur == 0x0A:
            be_newlines += 1

    if le_newlines >= 4:
        return crlf_text_info(UTF16_LE, uses_crlf)
    if be_newlines >= 4:
        return crlf_text_info(UTF16_BE, uses_crlf)
    if nulls > len(sample) // 2:
        return crlf_text_info(UTF16_LE, uses_crlf)
    if len(sample) < _SMALL_FILE:
        # Probably binary, but small enough to be worth trying as text.
        return crlf_text_info(UTF8, uses_crlf)
    return None