"""Tests for fileformat.identify.rules -- the built-in signature table.

Covers literal identification cases, precedence of specific over generic
signatures on shared containers (ZIP, RIFF, Ogg, ISO BMFF, EBML), boundary
behaviour for truncated buffers, and the table-wide invariants.
"""

from __future__ import annotations

import os

import pytest

from fileformat.common.safe_io import MAX_BYTES
from fileformat.common.signatures import DEFAULT_FORMAT, FormatId
from fileformat.identify.identifier import classify
from fileformat.identify.rules import RULES

PNG_HEADER = b"\x89PNG\r\n\x1a\n"
ZIP_HEADER = b"PK\x03\x04"
GB_LOGO = b"\xce\xed\x66\x66\xcc\x0d\x00\x0b"


def _at(offset: int, pattern: bytes, prefix: bytes = b"") -> bytes:
    """Return *prefix* zero-padded up to *offset*, followed by *pattern*."""
    assert len(prefix) <= offset
    return prefix + b"\x00" * (offset - len(prefix)) + pattern


def _zip_mimetype(media_type: bytes) -> bytes:
    """A ZIP local header whose first entry is an uncompressed 'mimetype'."""
    return _at(30, b"mimetype" + media_type, ZIP_HEADER)


# ---------------------------------------------------------------------------
# Table invariants
# ---------------------------------------------------------------------------


class TestTableInvariants:
    """Verify the built-in table is well-formed."""

    def test_rule_count(self) -> None:
        """The table should cover well over a hundred formats."""
        assert len(RULES) >= 100, f"Only {len(RULES)} rules"

    def test_every_rule_has_parts(self) -> None:
        for rule in RULES:
            assert rule.alternatives, f"{rule.result} has no alternatives"
            for alt in rule.alternatives:
                assert alt.parts, f"{rule.result} has an empty alternative"

    def test_window_fits_max_bytes(self) -> None:
        """No rule may look beyond the bounded read window."""
        assert RULES.window <= MAX_BYTES

    def test_default_is_not_a_rule(self) -> None:
        assert DEFAULT_FORMAT not in RULES.results()

    def test_each_format_declared_once(self) -> None:
        """A format's alternatives live in a single rule."""
        results = [rule.result for rule in RULES]
        assert len(results) == len(set(results))

    def test_identifiers_are_ascii(self) -> None:
        for fmt in RULES.results():
            assert fmt.media_type.isascii() and fmt.media_type == fmt.media_type.lower()
            assert fmt.extension.isascii() and fmt.extension

    def test_mp4_brand_family(self) -> None:
        """MP4 carries the largest alternative family (ftyp brands)."""
        mp4 = next(r for r in RULES if r.result == FormatId("video/mp4", "mp4"))
        assert len(mp4.alternatives) >= 20
        assert max(len(r.alternatives) for r in RULES) == len(mp4.alternatives)


# ---------------------------------------------------------------------------
# Literal cases
# ---------------------------------------------------------------------------


class TestLiteralCases:
    """Known headers should resolve to their exact format."""

    def test_png(self) -> None:
        assert classify(PNG_HEADER) == FormatId("image/png", "png")

    def test_apng_takes_precedence_over_png(self) -> None:
        data = _at(0x25, b"acTL", PNG_HEADER) + b"\x00" * 16
        assert classify(data) == FormatId("image/apng", "apng")

    @pytest.mark.parametrize(
        ("subtype", "expected"),
        [
            (b"WAVE", FormatId("audio/vnd.wave", "wav")),
            (b"WEBP", FormatId("image/webp", "webp")),
            (b"\x41\x56\x49\x20", FormatId("video/avi", "avi")),
        ],
    )
    def test_riff_subtypes(self, subtype: bytes, expected: FormatId) -> None:
        data = b"RIFF" + b"\x24\x08\x01\x00" + subtype + b"fmt "
        assert classify(data) == expected

    def test_riff_unknown_subtype(self) -> None:
        """RIFF alone is not a format in the table."""
        assert classify(b"RIFF\x24\x08\x01\x00RMID") == DEFAULT_FORMAT

    @pytest.mark.parametrize("header", [b"GIF87a", b"GIF89a"])
    def test_gif_alternatives(self, header: bytes) -> None:
        assert classify(header) == FormatId("image/gif", "gif")

    def test_jpeg_jfif(self) -> None:
        data = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00"
        assert classify(data) == FormatId("image/jpeg", "jpg")

    def test_jpeg_exif_needs_both_parts(self) -> None:
        exif = b"\xff\xd8\xff\xe1\x1c\x45Exif\x00\x00"
        assert classify(exif) == FormatId("image/jpeg", "jpg")
        assert classify(exif[:4] + b"\x1c\x45XMP\x00\x00\x00") == DEFAULT_FORMAT

    def test_pdf(self) -> None:
        assert classify(b"%PDF-1.7\n%\xe2\xe3\xcf\xd3") == FormatId("application/pdf", "pdf")

    def test_sqlite(self) -> None:
        data = b"SQLite format 3\x00\x10\x00\x01\x01"
        assert classify(data) == FormatId("application/vnd.sqlite3", "sqlite")

    def test_gzip(self) -> None:
        assert classify(b"\x1f\x8b\x08\x00") == FormatId("application/gzip", "gz")

    def test_elf(self) -> None:
        assert classify(b"\x7fELF\x02\x01\x01") == FormatId("application/x-executable", "elf")

    def test_tar_at_offset_257(self) -> None:
        assert classify(_at(257, b"ustar\x0000")) == FormatId("application/x-tar", "tar")
        assert classify(_at(257, b"ustar  \x00")) == FormatId("application/x-tar", "tar")

    def test_iso9660_deepest_offset(self) -> None:
        """The deepest signature ends exactly at the read window."""
        data = _at(0x9001, b"CD001")
        assert len(data) == MAX_BYTES
        assert classify(data) == FormatId("application/x-iso9660-image", "iso")

    @pytest.mark.parametrize(
        ("brand", "expected"),
        [
            (b"isom", FormatId("video/mp4", "mp4")),
            (b"mp42", FormatId("video/mp4", "mp4")),
            (b"M4A ", FormatId("audio/x-m4a", "m4a")),
            (b"M4V ", FormatId("video/x-m4v", "m4v")),
            (b"avif", FormatId("image/avif", "avif")),
            (b"heic", FormatId("image/heic", "heic")),
            (b"3gp4", FormatId("video/3gpp", "3gp")),
        ],
    )
    def test_iso_bmff_brands(self, brand: bytes, expected: FormatId) -> None:
        data = b"\x00\x00\x00\x18ftyp" + brand + b"\x00\x00\x00\x00"
        assert classify(data) == expected

    def test_quicktime(self) -> None:
        data = b"\x00\x00\x00\x14ftypqt  \x20\x05\x03\x00"
        assert classify(data) == FormatId("video/quicktime", "mov")

    def test_mpeg_transport_stream(self) -> None:
        assert classify(_at(188, b"\x47", b"\x47")) == FormatId("video/mp2t", "m2ts")
        # M2TS: 4-byte timecode before each 188-byte packet.
        m2ts = _at(196, b"\x47", b"\x00\x00\x00\x00\x47")
        assert classify(m2ts) == FormatId("video/mp2t", "m2ts")

    def test_game_boy_color_flag(self) -> None:
        """The CGB flag at 0x143 separates Game Boy Color from Game Boy."""
        gb = _at(0x104, GB_LOGO)
        assert classify(_at(0x143, b"\x80", gb)) == FormatId(
            "application/x-gameboy-color-rom", "gbc"
        )
        assert classify(_at(0x143, b"\xc0", gb)) == FormatId(
            "application/x-gameboy-color-rom", "gbc"
        )
        assert classify(_at(0x143, b"\x00", gb)) == FormatId(
            "application/x-gameboy-rom", "gb"
        )

    def test_unix_compress_extension(self) -> None:
        assert classify(b"\x1f\x9d\x90").extension == "Z"


# ---------------------------------------------------------------------------
# Precedence on shared containers
# ---------------------------------------------------------------------------


class TestPrecedence:
    """Specific signatures must beat the generic container they build on."""

    @pytest.mark.parametrize(
        ("media_type", "extension"),
        [
            (b"application/vnd.oasis.opendocument.text", "odt"),
            (b"application/vnd.oasis.opendocument.spreadsheet", "ods"),
            (b"application/vnd.oasis.opendocument.presentation", "odp"),
            (b"application/vnd.oasis.opendocument.graphics", "odg"),
            (b"application/epub+zip", "epub"),
        ],
    )
    def test_zip_based_documents(self, media_type: bytes, extension: str) -> None:
        fmt = classify(_zip_mimetype(media_type))
        assert fmt.extension == extension
        assert fmt.media_type == media_type.decode("ascii")

    def test_plain_zip(self) -> None:
        assert classify(ZIP_HEADER + b"\x14\x00\x00\x00") == FormatId("application/zip", "zip")
        assert classify(_zip_mimetype(b"text/plain")) == FormatId("application/zip", "zip")

    def test_truncated_document_falls_back_to_zip(self) -> None:
        """Without the full media-type string only the ZIP rule matches."""
        data = _zip_mimetype(b"application/vnd.oasis.opendocument.text")
        assert classify(data[:-1]) == FormatId("application/zip", "zip")

    def test_apng_truncated_is_png(self) -> None:
        """One byte short of acTL, the buffer is plain PNG."""
        data = _at(0x25, b"acTL", PNG_HEADER)
        assert classify(data[:-1]) == FormatId("image/png", "png")

    @pytest.mark.parametrize(
        ("offset", "codec", "expected"),
        [
            (28, b"OpusHead", FormatId("audio/opus", "opus")),
            (29, b"vorbis", FormatId("audio/ogg", "ogg")),
            (29, b"theora", FormatId("video/ogg", "ogv")),
            (28, b"Speex   ", FormatId("audio/ogg", "spx")),
            (29, b"FLAC", FormatId("audio/ogg", "oga")),
            (29, b"video", FormatId("video/ogg", "ogm")),
        ],
    )
    def test_ogg_codecs(self, offset: int, codec: bytes, expected: FormatId) -> None:
        assert classify(_at(offset, codec, b"OggS\x00\x02")) == expected

    def test_generic_ogg(self) -> None:
        assert classify(_at(28, b"\x01unknown", b"OggS")) == FormatId("application/ogg", "ogx")

    def test_ebml_doc_types(self) -> None:
        ebml = b"\x1a\x45\xdf\xa3"
        assert classify(_at(24, b"matroska", ebml)) == FormatId("video/x-matroska", "mkv")
        assert classify(_at(24, b"webm", ebml)) == FormatId("video/webm", "webm")
        assert classify(ebml + b"\x00" * 40) == DEFAULT_FORMAT

    def test_deb_before_ar(self) -> None:
        assert classify(b"!<arch>\ndebian-binary   ") == FormatId(
            "application/vnd.debian.binary-package", "deb"
        )
        assert classify(b"!<arch>\nlibfoo.o/       ") == FormatId("application/x-archive", "ar")

    def test_aiff_needs_form_type(self) -> None:
        assert classify(b"FORM\x00\x00\x10\x00AIFF") == FormatId("audio/aiff", "aif")
        assert classify(b"FORM\x00\x00\x10\x00ILBM") == DEFAULT_FORMAT


# ---------------------------------------------------------------------------
# Boundaries, totality and determinism
# ---------------------------------------------------------------------------


class TestBoundaries:
    """Short, empty and arbitrary buffers never raise."""

    def test_empty_buffer(self) -> None:
        assert classify(b"") == DEFAULT_FORMAT

    @pytest.mark.parametrize("size", [1, 2, 7, 64, 1024, MAX_BYTES])
    def test_zeroed_buffers(self, size: int) -> None:
        assert classify(b"\x00" * size) == DEFAULT_FORMAT

    def test_every_alternative_one_byte_short(self) -> None:
        """A buffer ending one byte before an alternative's deepest part
        does not satisfy that alternative, and classifying it is safe."""
        for rule in RULES:
            for alt in rule.alternatives:
                data = bytearray(alt.end)
                for part in alt.parts:
                    data[part.offset:part.end] = part.pattern
                truncated = bytes(data[:-1])

                assert not alt.matches(truncated)
                others = [o for o in rule.alternatives if o is not alt]
                if not any(o.matches(truncated) for o in others):
                    assert classify(truncated) != rule.result, (
                        f"{rule.result} matched a truncated buffer"
                    )

    def test_no_alternative_is_shadowed(self) -> None:
        """Each alternative, written into a zeroed buffer, is recognised as
        its own format rather than by an earlier rule."""
        for rule in RULES:
            for alt in rule.alternatives:
                data = bytearray(alt.end)
                for part in alt.parts:
                    data[part.offset:part.end] = part.pattern
                assert classify(bytes(data)) == rule.result, (
                    f"{alt} shadowed by an earlier rule"
                )

    def test_random_buffers_are_total(self) -> None:
        for size in (0, 1, 3, 8, 100, 4096, MAX_BYTES):
            fmt = classify(os.urandom(size))
            assert isinstance(fmt, FormatId)

    def test_determinism(self) -> None:
        data = os.urandom(2048)
        first = classify(data)
        assert all(classify(data) == first for _ in range(10))

    def test_only_window_matters(self) -> None:
        """Bytes past the table window cannot change the result."""
        data = _at(0x25, b"acTL", PNG_HEADER)
        padded = data + b"\x00" * (RULES.window - len(data))
        assert classify(padded + os.urandom(1000)) == classify(padded)
