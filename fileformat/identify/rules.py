"""Built-in signature table used to identify file formats.

Rules are listed in priority order.  They are grouped by the total length of
their longest alternative, longest first, so that formats built on top of a
shared container are tried before the container itself:

    * OpenDocument and EPUB before plain ZIP (``PK\\x03\\x04``).
    * Opus, Vorbis, Theora, Speex and Ogg FLAC before generic Ogg.
    * APNG before PNG.
    * WAVE, WebP and AVI each need their own RIFF sub-type.
    * Matroska and WebM are told apart by the EBML doc type at offset 24.

The table is built once at import time and never modified.  Every offset
lies inside the first :data:`~fileformat.common.safe_io.MAX_BYTES` bytes of a
file (the deepest one is the ISO 9660 volume descriptor at ``0x9001``).
"""

from __future__ import annotations

from fileformat.common.signatures import Rule, RuleTable

RULES = RuleTable([
    # -- signatures spanning 59 bytes --
    # OpenDocument packages store an uncompressed "mimetype" entry first, so
    # its name and content sit at fixed offsets after the ZIP local header.
    Rule.build(
        "application/vnd.oasis.opendocument.presentation", "odp",
        [
            (0, b"PK\x03\x04"),
            (30, b"mimetype"),
            (38, b"application/vnd.oasis.opendocument.presentation"),
        ],
    ),

    # -- signatures spanning 58 bytes --
    Rule.build(
        "application/vnd.oasis.opendocument.spreadsheet", "ods",
        [
            (0, b"PK\x03\x04"),
            (30, b"mimetype"),
            (38, b"application/vnd.oasis.opendocument.spreadsheet"),
        ],
    ),

    # -- signatures spanning 55 bytes --
    Rule.build(
        "application/vnd.oasis.opendocument.graphics", "odg",
        [
            (0, b"PK\x03\x04"),
            (30, b"mimetype"),
            (38, b"application/vnd.oasis.opendocument.graphics"),
        ],
    ),

    # -- signatures spanning 51 bytes --
    Rule.build(
        "application/vnd.oasis.opendocument.text", "odt",
        [
            (0, b"PK\x03\x04"),
            (30, b"mimetype"),
            (38, b"application/vnd.oasis.opendocument.text"),
        ],
    ),

    # -- signatures spanning 39 bytes --
    Rule.build(
        "application/x-virtualbox-vdi", "vdi",
        [(0, b"<<< Oracle VM VirtualBox Disk Image >>>")],
    ),

    # -- signatures spanning 32 bytes --
    Rule.build(
        "application/epub+zip", "epub",
        [(0, b"PK\x03\x04"), (30, b"mimetype"), (38, b"application/epub+zip")],
    ),
    Rule.build(
        "application/vnd.sketchup.skp", "skp",
        [
            (0, b"\xff\xfe\xff\x0e\x53\x00\x6b\x00\x65\x00\x74\x00\x63\x00\x68\x00"),
            (16, b"\x55\x00\x70\x00\x20\x00\x4d\x00\x6f\x00\x64\x00\x65\x00\x6c\x00"),
        ],
    ),

    # -- signatures spanning 21 bytes --
    Rule.build(
        "application/vnd.debian.binary-package", "deb",
        [(0, b"!<arch>\n"), (8, b"debian-binary")],
    ),

    # -- signatures spanning 16 bytes --
    Rule.build(
        "application/vnd.sqlite3", "sqlite",
        [(0, b"SQLite format 3\x00")],
    ),
    Rule.build(
        "application/x-indesign", "indd",
        [(0, b"\x06\x06\xed\xf5\xd8\x1d\x46\xe5\xbd\x31\xef\xe7\xfe\x74\xb7\x1d")],
    ),

    # -- signatures spanning 14 bytes --
    Rule.build(
        "application/mxf", "mxf",
        [(0, b"\x06\x0e\x2b\x34\x02\x05\x01\x01\x0d\x01\x02\x01\x01\x02")],
    ),

    # -- signatures spanning 12 bytes --
    Rule.build(
        "audio/opus", "opus",
        [(0, b"OggS"), (28, b"OpusHead")],
    ),
    Rule.build(
        "image/apng", "apng",
        [(0, b"\x89PNG\r\n\x1a\n"), (0x25, b"acTL")],
    ),
    Rule.build(
        "image/jpeg", "jpg",
        [(0, b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01")],
        [(0, b"\xff\xd8\xff\xe1"), (6, b"Exif\x00\x00")],
        [(0, b"\xff\xd8\xff\xdb")],
        [(0, b"\xff\xd8\xff\xee")],
    ),
    Rule.build(
        "image/jxl", "jxl",
        [(0, b"\x00\x00\x00\x0cJXL \r\n\x87\n")],
        [(0, b"\xff\x0a")],
    ),
    Rule.build(
        "image/ktx", "ktx",
        [(0, b"\xabKTX 11\xbb\r\n\x1a\n")],
    ),
    Rule.build(
        "image/ktx2", "ktx2",
        [(0, b"\xabKTX 20\xbb\r\n\x1a\n")],
    ),
    Rule.build(
        "video/x-matroska", "mkv",
        [(0, b"\x1a\x45\xdf\xa3"), (24, b"matroska")],
    ),

    # -- signatures spanning 10 bytes --
    Rule.build(
        "audio/ogg", "ogg",
        [(0, b"OggS"), (29, b"vorbis")],
    ),
    Rule.build(
        "image/fits", "fits",
        [(0, b"SIMPLE  = ")],
    ),
    Rule.build(
        "video/ogg", "ogv",
        [(0, b"OggS"), (29, b"theora")],
    ),
    Rule.build(
        "video/quicktime", "mov",
        [(0, b"\x00\x00\x00\x14"), (4, b"ftypqt")],
    ),
    Rule.build(
        "video/x-ms-asf", "wmv",
        [(0, b"\x30\x26\xb2\x75\x8e\x66\xcf\x11\xa6\xd9")],
    ),

    # -- signatures spanning 9 bytes --
    # Game Boy family: the Nintendo logo bitmap at 0x104, CGB flag at 0x143.
    Rule.build(
        "application/x-gameboy-color-rom", "gbc",
        [(0x104, b"\xce\xed\x66\x66\xcc\x0d\x00\x0b"), (0x143, b"\x80")],
        [(0x104, b"\xce\xed\x66\x66\xcc\x0d\x00\x0b"), (0x143, b"\xc0")],
    ),
    Rule.build(
        "application/x-lzop", "lzo",
        [(0, b"\x89LZO\x00\r\n\x1a\n")],
    ),
    Rule.build(
        "audio/ogg", "spx",
        [(0, b"OggS"), (28, b"Speex")],
    ),
    Rule.build(
        "image/x-olympus-orf", "orf",
        [(0, b"IIRO\x08\x00\x00\x00\x18")],
    ),
    Rule.build(
        "video/ogg", "ogm",
        [(0, b"OggS"), (29, b"video")],
    ),

    # -- signatures spanning 8 bytes --
    Rule.build(
        "application/vnd.rar", "rar",
        [(0, b"Rar!\x1a\x07\x01\x00")],
        [(0, b"Rar!\x1a\x07\x00")],
    ),
    Rule.build(
        "application/x-gameboy-rom", "gb",
        [(0x104, b"\xce\xed\x66\x66\xcc\x0d\x00\x0b")],
    ),
    Rule.build(
        "application/x-gba-rom", "gba",
        [(4, b"\x24\xff\xae\x51\x69\x9a\xa2\x21")],
    ),
    Rule.build(
        "application/x-mobipocket-ebook", "mobi",
        [(60, b"BOOKMOBI")],
    ),
    Rule.build(
        "application/x-ms-shortcut", "lnk",
        [(0, b"\x4c\x00\x00\x00\x01\x14\x02\x00")],
    ),
    Rule.build(
        "application/x-n64-rom", "z64",
        [(0, b"\x80\x37\x12\x40\x00\x00\x00\x0f")],
        [(0, b"\x37\x80\x40\x12\x00\x00\x0f\x00")],
        [(0, b"\x12\x40\x80\x37\x00\x0f\x00\x00")],
        [(0, b"\x40\x12\x37\x80\x0f\x00\x00\x00")],
    ),
    Rule.build(
        "application/x-nintendo-ds-rom", "nds",
        [(0xC0, b"\x24\xff\xae\x51\x69\x9a\xa2\x21")],
        [(0xC0, b"\xc8\x60\x4f\xe2\x01\x70\x8f\xe2")],
    ),
    Rule.build(
        "application/x-ole-storage", "msi",
        [(0, b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1")],
    ),
    Rule.build(
        "application/x-tar", "tar",
        [(257, b"ustar\x0000")],
        [(257, b"ustar  \x00")],
    ),
    Rule.build(
        "audio/aiff", "aif",
        [(0, b"FORM"), (8, b"AIFF")],
    ),
    Rule.build(
        "audio/ogg", "oga",
        [(0, b"OggS"), (29, b"FLAC")],
    ),
    Rule.build(
        "audio/vnd.wave", "wav",
        [(0, b"RIFF"), (8, b"WAVE")],
    ),
    Rule.build(
        "image/avif", "avif",
        [(4, b"ftypavif")],
    ),
    Rule.build(
        "image/heic", "heic",
        [(4, b"ftypheic")],
        [(4, b"ftypheix")],
    ),
    Rule.build(
        "image/png", "png",
        [(0, b"\x89PNG\r\n\x1a\n")],
    ),
    Rule.build(
        "image/webp", "webp",
        [(0, b"RIFF"), (8, b"WEBP")],
    ),
    Rule.build(
        "image/x-xcf", "xcf",
        [(0, b"gimp xcf")],
    ),
    Rule.build(
        "video/avi", "avi",
        [(0, b"RIFF"), (8, b"AVI ")],
    ),
    Rule.build(
        "video/mp4", "mp4",
        # ISO base media file format brands.
        [(4, b"ftypavc1")],
        [(4, b"ftypdash")],
        [(4, b"ftypiso2")],
        [(4, b"ftypiso3")],
        [(4, b"ftypiso4")],
        [(4, b"ftypiso5")],
        [(4, b"ftypiso6")],
        [(4, b"ftypisom")],
        [(4, b"ftypmmp4")],
        [(4, b"ftypmp41")],
        [(4, b"ftypmp42")],
        [(4, b"ftypmp4v")],
        [(4, b"ftypmp71")],
        [(4, b"ftypMSNV")],
        [(4, b"ftypNDAS")],
        [(4, b"ftypNDSC")],
        [(4, b"ftypNDSH")],
        [(4, b"ftypNDSM")],
        [(4, b"ftypNDSP")],
        [(4, b"ftypNDSS")],
        [(4, b"ftypNDXC")],
        [(4, b"ftypNDXH")],
        [(4, b"ftypNDXM")],
        [(4, b"ftypNDXP")],
        [(4, b"ftypF4V")],
        [(4, b"ftypF4P")],
    ),
    Rule.build(
        "video/webm", "webm",
        [(0, b"\x1a\x45\xdf\xa3"), (24, b"webm")],
    ),

    # -- signatures spanning 7 bytes --
    Rule.build(
        "application/x-archive", "ar",
        [(0, b"!<arch>")],
    ),
    Rule.build(
        "application/x-blender", "blend",
        [(0, b"BLENDER")],
    ),
    Rule.build(
        "audio/x-m4a", "m4a",
        [(4, b"ftypM4A")],
    ),
    Rule.build(
        "image/jp2", "jp2",
        [(16, b"ftypjp2")],
    ),
    Rule.build(
        "video/3gpp", "3gp",
        [(4, b"ftyp3gp")],
    ),
    Rule.build(
        "video/3gpp2", "3g2",
        [(4, b"ftyp3g2")],
    ),
    Rule.build(
        "video/x-m4v", "m4v",
        [(4, b"ftypM4V")],
    ),

    # -- signatures spanning 6 bytes --
    Rule.build(
        "application/x-7z-compressed", "7z",
        [(0, b"\x37\x7a\xbc\xaf\x27\x1c")],
    ),
    Rule.build(
        "application/x-xz", "xz",
        [(0, b"\xfd7zXZ\x00")],
    ),
    Rule.build(
        "image/gif", "gif",
        [(0, b"GIF87a")],
        [(0, b"GIF89a")],
    ),

    # -- signatures spanning 5 bytes --
    Rule.build(
        "application/pdf", "pdf",
        [(0, b"%PDF-")],
    ),
    Rule.build(
        "application/vnd.ms-fontobject", "eot",
        [(8, b"\x00\x00\x01"), (34, b"LP")],
        [(8, b"\x01\x00\x02"), (34, b"LP")],
        [(8, b"\x02\x00\x02"), (34, b"LP")],
    ),
    # Volume descriptor identifier, checked at the three offsets seen in the
    # wild.
    Rule.build(
        "application/x-iso9660-image", "iso",
        [(0x8001, b"CD001")],
        [(0x8801, b"CD001")],
        [(0x9001, b"CD001")],
    ),
    Rule.build(
        "audio/amr", "amr",
        [(0, b"#!AMR")],
    ),
    Rule.build(
        "font/otf", "otf",
        [(0, b"OTTO\x00")],
    ),
    Rule.build(
        "font/ttf", "ttf",
        [(0, b"\x00\x01\x00\x00\x00")],
    ),

    # -- signatures spanning 4 bytes --
    Rule.build(
        "application/dicom", "dcm",
        [(128, b"DICM")],
    ),
    Rule.build(
        "application/java-vm", "class",
        [(0, b"\xca\xfe\xba\xbe")],
    ),
    Rule.build(
        "application/ogg", "ogx",
        [(0, b"OggS")],
    ),
    Rule.build(
        "application/vnd.android.dex", "dex",
        [(0, b"dex\n")],
    ),
    Rule.build(
        "application/vnd.ms-cab-compressed", "cab",
        [(0, b"MSCF")],
        [(0, b"ISc(")],
    ),
    Rule.build(
        "application/vnd.tcpdump.pcap", "pcap",
        [(0, b"\xa1\xb2\xc3\xd4")],
        [(0, b"\xd4\xc3\xb2\xa1")],
    ),
    Rule.build(
        "application/wasm", "wasm",
        [(0, b"\x00asm")],
    ),
    Rule.build(
        "application/x-esri-shape", "shp",
        [(0, b"\x00\x00\x27\x0a")],
    ),
    Rule.build(
        "application/x-executable", "elf",
        [(0, b"\x7fELF")],
    ),
    Rule.build(
        "application/x-google-chrome-extension", "crx",
        [(0, b"Cr24")],
    ),
    Rule.build(
        "application/x-lrzip", "lrz",
        [(0, b"LRZI")],
    ),
    Rule.build(
        "application/x-lz4", "lz4",
        [(0, b"\x04\x22\x4d\x18")],
    ),
    Rule.build(
        "application/x-lzip", "lz",
        [(0, b"LZIP")],
    ),
    Rule.build(
        "application/x-nintendo-nes-rom", "nes",
        [(0, b"NES\x1a")],
    ),
    Rule.build(
        "application/x-pcapng", "pcapng",
        [(0, b"\x0a\x0d\x0d\x0a")],
    ),
    Rule.build(
        "application/x-rpm", "rpm",
        [(0, b"\xed\xab\xee\xdb")],
    ),
    Rule.build(
        "application/x-xar", "xar",
        [(0, b"xar!")],
    ),
    Rule.build(
        "application/zip", "zip",
        [(0, b"PK\x03\x04")],
        [(0, b"PK\x05\x06")],
        [(0, b"PK\x07\x08")],
    ),
    Rule.build(
        "application/zstd", "zst",
        [(0, b"\x28\xb5\x2f\xfd")],
    ),
    Rule.build(
        "audio/basic", "au",
        [(0, b".snd")],
    ),
    Rule.build(
        "audio/midi", "mid",
        [(0, b"MThd")],
    ),
    Rule.build(
        "audio/wavpack", "wv",
        [(0, b"wvpk")],
    ),
    Rule.build(
        "audio/x-ape", "ape",
        [(0, b"MAC ")],
    ),
    Rule.build(
        "audio/x-flac", "flac",
        [(0, b"fLaC")],
    ),
    Rule.build(
        "audio/x-musepack", "mpc",
        [(0, b"MPCK")],
        [(0, b"MP+")],
    ),
    Rule.build(
        "font/woff", "woff",
        [(0, b"wOFF")],
    ),
    Rule.build(
        "font/woff2", "woff2",
        [(0, b"wOF2")],
    ),
    Rule.build(
        "image/bpg", "bpg",
        [(0, b"BPG\xfb")],
    ),
    Rule.build(
        "image/cineon", "cin",
        [(0, b"\x80\x2a\x5f\xd7")],
    ),
    Rule.build(
        "image/flif", "flif",
        [(0, b"FLIF")],
    ),
    Rule.build(
        "image/icns", "icns",
        [(0, b"icns")],
    ),
    Rule.build(
        "image/tiff", "tiff",
        [(0, b"MM\x00*")],
        [(0, b"II*\x00")],
    ),
    Rule.build(
        "image/vnd.adobe.photoshop", "psd",
        [(0, b"8BPS")],
    ),
    Rule.build(
        "image/wmf", "wmf",
        [(0, b"\xd7\xcd\xc6\x9a")],
        [(0, b"\x02\x00\x09\x00")],
        [(0, b"\x01\x00\x09\x00")],
    ),
    Rule.build(
        "image/x-dpx", "dpx",
        [(0, b"SDPX")],
        [(0, b"XPDS")],
    ),
    Rule.build(
        "image/x-exr", "exr",
        [(0, b"v/1\x01")],
    ),
    Rule.build(
        "image/x-icon", "ico",
        [(0, b"\x00\x00\x01\x00")],
    ),
    Rule.build(
        "model/gltf-binary", "glb",
        [(0, b"glTF")],
    ),
    Rule.build(
        "video/mpeg", "mpg",
        [(0, b"\x00\x00\x01\xba")],
        [(0, b"\x00\x00\x01\xb3")],
    ),
    Rule.build(
        "video/x-flv", "flv",
        [(0, b"FLV\x01")],
    ),

    # -- signatures spanning 3 bytes --
    Rule.build(
        "application/x-bzip2", "bz2",
        [(0, b"BZh")],
    ),
    Rule.build(
        "application/x-shockwave-flash", "swf",
        [(0, b"CWS")],
        [(0, b"FWS")],
    ),
    Rule.build(
        "audio/mpeg", "mp3",
        [(0, b"ID3")],
    ),
    Rule.build(
        "image/jxr", "jxr",
        [(0, b"II\xbc")],
    ),

    # -- signatures spanning 2 bytes --
    Rule.build(
        "application/gzip", "gz",
        [(0, b"\x1f\x8b")],
    ),
    Rule.build(
        "application/x-apple-diskimage", "dmg",
        [(0, b"\x78\x01")],
    ),
    Rule.build(
        "application/x-compress", "Z",
        [(0, b"\x1f\xa0")],
        [(0, b"\x1f\x9d")],
    ),
    Rule.build(
        "application/x-msdownload", "exe",
        [(0, b"MZ")],
    ),
    Rule.build(
        "audio/aac", "aac",
        [(0, b"\xff\xf1")],
        [(0, b"\xff\xf9")],
    ),
    Rule.build(
        "audio/vnd.dolby.dd-raw", "ac3",
        [(0, b"\x0b\x77")],
    ),
    Rule.build(
        "image/bmp", "bmp",
        [(0, b"BM")],
    ),
    # Sync byte repeated one packet later; M2TS packets carry a 4-byte
    # timecode prefix.
    Rule.build(
        "video/mp2t", "m2ts",
        [(0, b"\x47"), (188, b"\x47")],
        [(4, b"\x47"), (196, b"\x47")],
    ),
])
