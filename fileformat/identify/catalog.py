"""Display metadata for every format the identifier can report.

The matcher only produces a :class:`~fileformat.common.signatures.FormatId`
(media type + extension).  This catalog maps each of those identities to a
human-facing name, a short name and a broad :class:`Kind`.  It is consulted
after classification, never during matching.

The mapping is closed: every result of the built-in rule table, plus the
default ``application/octet-stream`` / ``bin`` identity, has exactly one
entry.

Usage:
    from fileformat.identify.catalog import lookup
    from fileformat.identify.identifier import classify

    info = lookup(classify(data))
    print(info.name, info.kind.value)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fileformat.common.signatures import FormatId


class Kind(Enum):
    """Broad family a format belongs to."""

    APPLICATION = "application"
    AUDIO = "audio"
    FONT = "font"
    IMAGE = "image"
    MODEL = "model"
    TEXT = "text"
    VIDEO = "video"


@dataclass(frozen=True, slots=True)
class FormatInfo:
    """Human-facing description of one file format."""

    name: str
    """Full display name (e.g. 'Portable Network Graphics')."""

    short_name: str
    """Abbreviation (e.g. 'PNG').  Equal to *name* when none is in use."""

    media_type: str
    extension: str
    kind: Kind

    @property
    def format_id(self) -> FormatId:
        return FormatId(self.media_type, self.extension)


# ---------------------------------------------------------------------------
# Catalog entries (alphabetical by name)
# ---------------------------------------------------------------------------

_ENTRIES: list[FormatInfo] = [
    FormatInfo(
        "3rd Generation Partnership Project 2", "3GPP2",
        "video/3gpp2", "3g2", Kind.VIDEO,
    ),
    FormatInfo(
        "3rd Generation Partnership Project", "3GPP",
        "video/3gpp", "3gp", Kind.VIDEO,
    ),
    FormatInfo("7-Zip", "7Z", "application/x-7z-compressed", "7z", Kind.APPLICATION),
    FormatInfo("Adaptive Multi-Rate", "AMR", "audio/amr", "amr", Kind.AUDIO),
    FormatInfo(
        "Adobe InDesign Document", "INDD",
        "application/x-indesign", "indd", Kind.APPLICATION,
    ),
    FormatInfo(
        "Adobe Photoshop Document", "PSD",
        "image/vnd.adobe.photoshop", "psd", Kind.IMAGE,
    ),
    FormatInfo("Advanced Audio Coding", "AAC", "audio/aac", "aac", Kind.AUDIO),
    FormatInfo(
        "Animated Portable Network Graphics", "APNG",
        "image/apng", "apng", Kind.IMAGE,
    ),
    FormatInfo(
        "Apple Disk Image", "DMG",
        "application/x-apple-diskimage", "dmg", Kind.APPLICATION,
    ),
    FormatInfo("Apple Icon Image", "ICNS", "image/icns", "icns", Kind.IMAGE),
    FormatInfo("Apple iTunes Audio", "M4A", "audio/x-m4a", "m4a", Kind.AUDIO),
    FormatInfo("Apple iTunes Video", "M4V", "video/x-m4v", "m4v", Kind.VIDEO),
    FormatInfo("Apple QuickTime", "MOV", "video/quicktime", "mov", Kind.VIDEO),
    FormatInfo(
        "Arbitrary Binary Data", "BIN",
        "application/octet-stream", "bin", Kind.APPLICATION,
    ),
    FormatInfo("Au", "Au", "audio/basic", "au", Kind.AUDIO),
    FormatInfo("Audio Codec 3", "AC3", "audio/vnd.dolby.dd-raw", "ac3", Kind.AUDIO),
    FormatInfo(
        "Audio Interchange File Format", "AIFF",
        "audio/aiff", "aif", Kind.AUDIO,
    ),
    FormatInfo("Audio Video Interleave", "AVI", "video/avi", "avi", Kind.VIDEO),
    FormatInfo("AV1 Image File Format", "AVIF", "image/avif", "avif", Kind.IMAGE),
    FormatInfo("Better Portable Graphics", "BPG", "image/bpg", "bpg", Kind.IMAGE),
    FormatInfo("Blender", "BLEND", "application/x-blender", "blend", Kind.APPLICATION),
    FormatInfo("bzip2", "BZ2", "application/x-bzip2", "bz2", Kind.APPLICATION),
    FormatInfo(
        "Cabinet", "CAB",
        "application/vnd.ms-cab-compressed", "cab", Kind.APPLICATION,
    ),
    FormatInfo("Cineon", "CIN", "image/cineon", "cin", Kind.IMAGE),
    FormatInfo(
        "Dalvik Executable", "DEX",
        "application/vnd.android.dex", "dex", Kind.APPLICATION,
    ),
    FormatInfo(
        "Debian Binary Package", "DEB",
        "application/vnd.debian.binary-package", "deb", Kind.APPLICATION,
    ),
    FormatInfo(
        "Digital Imaging and Communications in Medicine", "DICOM",
        "application/dicom", "dcm", Kind.APPLICATION,
    ),
    FormatInfo("Digital Picture Exchange", "DPX", "image/x-dpx", "dpx", Kind.IMAGE),
    FormatInfo(
        "Electronic Publication", "EPUB",
        "application/epub+zip", "epub", Kind.APPLICATION,
    ),
    FormatInfo(
        "Embedded OpenType", "EOT",
        "application/vnd.ms-fontobject", "eot", Kind.APPLICATION,
    ),
    FormatInfo(
        "Executable and Linkable Format", "ELF",
        "application/x-executable", "elf", Kind.APPLICATION,
    ),
    FormatInfo(
        "Experimental Computing Facility", "XCF",
        "image/x-xcf", "xcf", Kind.IMAGE,
    ),
    FormatInfo(
        "Extensible Archive", "XAR",
        "application/x-xar", "xar", Kind.APPLICATION,
    ),
    FormatInfo("Flash Video", "FLV", "video/x-flv", "flv", Kind.VIDEO),
    FormatInfo(
        "Flexible Image Transport System", "FITS",
        "image/fits", "fits", Kind.IMAGE,
    ),
    FormatInfo("Free Lossless Audio Codec", "FLAC", "audio/x-flac", "flac", Kind.AUDIO),
    FormatInfo("Free Lossless Image Format", "FLIF", "image/flif", "flif", Kind.IMAGE),
    FormatInfo(
        "Game Boy Advance ROM", "GBA",
        "application/x-gba-rom", "gba", Kind.APPLICATION,
    ),
    FormatInfo(
        "Game Boy Color ROM", "GBC",
        "application/x-gameboy-color-rom", "gbc", Kind.APPLICATION,
    ),
    FormatInfo(
        "Game Boy ROM", "GB",
        "application/x-gameboy-rom", "gb", Kind.APPLICATION,
    ),
    FormatInfo(
        "GL Transmission Format Binary", "GLB",
        "model/gltf-binary", "glb", Kind.MODEL,
    ),
    FormatInfo(
        "Google Chrome Extension", "CRX",
        "application/x-google-chrome-extension", "crx", Kind.APPLICATION,
    ),
    FormatInfo("Graphics Interchange Format", "GIF", "image/gif", "gif", Kind.IMAGE),
    FormatInfo("gzip", "GZ", "application/gzip", "gz", Kind.APPLICATION),
    FormatInfo(
        "High Efficiency Image Coding", "HEIC",
        "image/heic", "heic", Kind.IMAGE,
    ),
    FormatInfo(
        "ISO 9660", "ISO",
        "application/x-iso9660-image", "iso", Kind.APPLICATION,
    ),
    FormatInfo("Java Class", "Class", "application/java-vm", "class", Kind.APPLICATION),
    FormatInfo(
        "Joint Photographic Experts Group", "JPEG",
        "image/jpeg", "jpg", Kind.IMAGE,
    ),
    FormatInfo("JPEG 2000 Part 1", "JP2", "image/jp2", "jp2", Kind.IMAGE),
    FormatInfo("JPEG Extended Range", "JXR", "image/jxr", "jxr", Kind.IMAGE),
    FormatInfo("JPEG XL", "JXL", "image/jxl", "jxl", Kind.IMAGE),
    FormatInfo("Khronos Texture 2", "KTX2", "image/ktx2", "ktx2", Kind.IMAGE),
    FormatInfo("Khronos Texture", "KTX", "image/ktx", "ktx", Kind.IMAGE),
    FormatInfo(
        "Long Range ZIP", "LRZIP",
        "application/x-lrzip", "lrz", Kind.APPLICATION,
    ),
    FormatInfo("LZ4", "LZ4", "application/x-lz4", "lz4", Kind.APPLICATION),
    FormatInfo("lzip", "LZ", "application/x-lzip", "lz", Kind.APPLICATION),
    FormatInfo("lzop", "LZO", "application/x-lzop", "lzo", Kind.APPLICATION),
    FormatInfo(
        "Material Exchange Format", "MXF",
        "application/mxf", "mxf", Kind.APPLICATION,
    ),
    FormatInfo("Matroska Video", "MKV", "video/x-matroska", "mkv", Kind.VIDEO),
    FormatInfo(
        "Microsoft Software Installer", "MSI",
        "application/x-ole-storage", "msi", Kind.APPLICATION,
    ),
    FormatInfo(
        "Mobipocket", "MOBI",
        "application/x-mobipocket-ebook", "mobi", Kind.APPLICATION,
    ),
    FormatInfo("Monkey's Audio", "APE", "audio/x-ape", "ape", Kind.AUDIO),
    FormatInfo("MPEG-1 Video", "MPG", "video/mpeg", "mpg", Kind.VIDEO),
    FormatInfo("MPEG-1/2 Audio Layer 3", "MP3", "audio/mpeg", "mp3", Kind.AUDIO),
    FormatInfo("MPEG-2 Transport Stream", "MTS", "video/mp2t", "m2ts", Kind.VIDEO),
    FormatInfo("MPEG-4 Part 14 Video", "MP4", "video/mp4", "mp4", Kind.VIDEO),
    FormatInfo(
        "MS-DOS Executable", "EXE",
        "application/x-msdownload", "exe", Kind.APPLICATION,
    ),
    FormatInfo("Musepack", "MPC", "audio/x-musepack", "mpc", Kind.AUDIO),
    FormatInfo(
        "Musical Instrument Digital Interface", "MIDI",
        "audio/midi", "mid", Kind.AUDIO,
    ),
    FormatInfo(
        "Nintendo 64 ROM", "Z64",
        "application/x-n64-rom", "z64", Kind.APPLICATION,
    ),
    FormatInfo(
        "Nintendo DS ROM", "NDS",
        "application/x-nintendo-ds-rom", "nds", Kind.APPLICATION,
    ),
    FormatInfo(
        "Nintendo Entertainment System ROM", "NES",
        "application/x-nintendo-nes-rom", "nes", Kind.APPLICATION,
    ),
    FormatInfo("Ogg FLAC", "OGA", "audio/ogg", "oga", Kind.AUDIO),
    FormatInfo("Ogg Media", "OGM", "video/ogg", "ogm", Kind.VIDEO),
    FormatInfo(
        "Ogg Multiplexed Media", "OGX",
        "application/ogg", "ogx", Kind.APPLICATION,
    ),
    FormatInfo("Ogg Opus", "Opus", "audio/opus", "opus", Kind.AUDIO),
    FormatInfo("Ogg Speex", "Speex", "audio/ogg", "spx", Kind.AUDIO),
    FormatInfo("Ogg Theora", "Theora", "video/ogg", "ogv", Kind.VIDEO),
    FormatInfo("Ogg Vorbis", "Vorbis", "audio/ogg", "ogg", Kind.AUDIO),
    FormatInfo("Olympus Raw Format", "ORF", "image/x-olympus-orf", "orf", Kind.IMAGE),
    FormatInfo(
        "OpenDocument Graphics", "ODG",
        "application/vnd.oasis.opendocument.graphics", "odg", Kind.APPLICATION,
    ),
    FormatInfo(
        "OpenDocument Presentation", "ODP",
        "application/vnd.oasis.opendocument.presentation", "odp", Kind.APPLICATION,
    ),
    FormatInfo(
        "OpenDocument Spreadsheet", "ODS",
        "application/vnd.oasis.opendocument.spreadsheet", "ods", Kind.APPLICATION,
    ),
    FormatInfo(
        "OpenDocument Text", "ODT",
        "application/vnd.oasis.opendocument.text", "odt", Kind.APPLICATION,
    ),
    FormatInfo("OpenEXR", "EXR", "image/x-exr", "exr", Kind.IMAGE),
    FormatInfo("OpenType", "OTF", "font/otf", "otf", Kind.FONT),
    FormatInfo(
        "PCAP Dump", "PCAP",
        "application/vnd.tcpdump.pcap", "pcap", Kind.APPLICATION,
    ),
    FormatInfo(
        "PCAP Next Generation Dump", "PCAPNG",
        "application/x-pcapng", "pcapng", Kind.APPLICATION,
    ),
    FormatInfo(
        "Portable Document Format", "PDF",
        "application/pdf", "pdf", Kind.APPLICATION,
    ),
    FormatInfo("Portable Network Graphics", "PNG", "image/png", "png", Kind.IMAGE),
    FormatInfo(
        "Red Hat Package Manager", "RPM",
        "application/x-rpm", "rpm", Kind.APPLICATION,
    ),
    FormatInfo("Roshal Archive", "RAR", "application/vnd.rar", "rar", Kind.APPLICATION),
    FormatInfo("Shapefile", "SHP", "application/x-esri-shape", "shp", Kind.APPLICATION),
    FormatInfo(
        "SketchUp", "SKP",
        "application/vnd.sketchup.skp", "skp", Kind.APPLICATION,
    ),
    FormatInfo(
        "Small Web Format", "SWF",
        "application/x-shockwave-flash", "swf", Kind.APPLICATION,
    ),
    FormatInfo(
        "SQLite 3", "SQLite 3",
        "application/vnd.sqlite3", "sqlite", Kind.APPLICATION,
    ),
    FormatInfo("Tag Image File Format", "TIFF", "image/tiff", "tiff", Kind.IMAGE),
    FormatInfo("Tape Archive", "TAR", "application/x-tar", "tar", Kind.APPLICATION),
    FormatInfo("TrueType", "TTF", "font/ttf", "ttf", Kind.FONT),
    FormatInfo(
        "UNIX archiver", "archiver",
        "application/x-archive", "ar", Kind.APPLICATION,
    ),
    FormatInfo(
        "UNIX compress", "compress",
        "application/x-compress", "Z", Kind.APPLICATION,
    ),
    FormatInfo(
        "VirtualBox Virtual Disk Image", "VDI",
        "application/x-virtualbox-vdi", "vdi", Kind.APPLICATION,
    ),
    FormatInfo("Waveform Audio", "WAV", "audio/vnd.wave", "wav", Kind.AUDIO),
    FormatInfo("WavPack", "WV", "audio/wavpack", "wv", Kind.AUDIO),
    FormatInfo("Web Open Font Format 2", "WOFF2", "font/woff2", "woff2", Kind.FONT),
    FormatInfo("Web Open Font Format", "WOFF", "font/woff", "woff", Kind.FONT),
    FormatInfo(
        "WebAssembly Binary", "Wasm",
        "application/wasm", "wasm", Kind.APPLICATION,
    ),
    FormatInfo("WebM", "WebM", "video/webm", "webm", Kind.VIDEO),
    FormatInfo("WebP", "WebP", "image/webp", "webp", Kind.IMAGE),
    FormatInfo("Windows Bitmap", "BMP", "image/bmp", "bmp", Kind.IMAGE),
    FormatInfo("Windows Icon", "ICO", "image/x-icon", "ico", Kind.IMAGE),
    FormatInfo("Windows Media Video", "WMV", "video/x-ms-asf", "wmv", Kind.VIDEO),
    FormatInfo("Windows Metafile", "WMF", "image/wmf", "wmf", Kind.IMAGE),
    FormatInfo(
        "Windows Shortcut", "LNK",
        "application/x-ms-shortcut", "lnk", Kind.APPLICATION,
    ),
    FormatInfo("XZ", "XZ", "application/x-xz", "xz", Kind.APPLICATION),
    FormatInfo("ZIP", "ZIP", "application/zip", "zip", Kind.APPLICATION),
    FormatInfo("Zstandard", "zstd", "application/zstd", "zst", Kind.APPLICATION),
]

CATALOG: dict[FormatId, FormatInfo] = {entry.format_id: entry for entry in _ENTRIES}


# ---------------------------------------------------------------------------
# Public query helpers
# ---------------------------------------------------------------------------


def lookup(format_id: FormatId) -> FormatInfo:
    """Return the catalog entry for *format_id*.

    Raises
    ------
    KeyError
        If *format_id* was not produced by the built-in rule table.
    """
    try:
        return CATALOG[format_id]
    except KeyError:
        raise KeyError(f"No catalog entry for {format_id}") from None


def from_extension(extension: str) -> list[FormatInfo]:
    """Return every format whose preferred extension is *extension*.

    Matching is case-insensitive and a leading dot is ignored, so ``".PNG"``
    and ``"png"`` are equivalent.  Several formats may share an extension.
    """
    wanted = extension.lstrip(".").lower()
    return [entry for entry in _ENTRIES if entry.extension.lower() == wanted]


def from_media_type(media_type: str) -> list[FormatInfo]:
    """Return every format declared with *media_type* (case-insensitive)."""
    wanted = media_type.strip().lower()
    return [entry for entry in _ENTRIES if entry.media_type == wanted]


def get_formats_by_kind(kind: Kind | str) -> list[FormatInfo]:
    """Return all formats of the given *kind*.

    Parameters
    ----------
    kind:
        A :class:`Kind` member or its value, matched case-insensitively
        (``"image"``, ``"Image"`` and ``Kind.IMAGE`` are equivalent).

    Returns
    -------
    list[FormatInfo]
        Matching entries in catalog order.  Unknown kinds give an empty list.
    """
    value = kind.value if isinstance(kind, Kind) else kind.lower()
    return [entry for entry in _ENTRIES if entry.kind.value == value]
