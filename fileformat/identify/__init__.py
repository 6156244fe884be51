"""File Format Identifier -- recognise file formats from their magic bytes.

The built-in rule table covers a little over a hundred formats: images,
audio, video, fonts, archives, executables, disk images and ROMs.  Content
that matches no rule is reported as ``application/octet-stream`` / ``bin``.
"""

from .catalog import CATALOG, FormatInfo, Kind, from_extension, from_media_type, lookup
from .identifier import (
    IdentifyConfig,
    IdentifyResult,
    classify,
    classify_source,
    identify_path,
    identify_paths,
)
from .rules import RULES

__all__ = [
    "CATALOG",
    "FormatInfo",
    "IdentifyConfig",
    "IdentifyResult",
    "Kind",
    "RULES",
    "classify",
    "classify_source",
    "from_extension",
    "from_media_type",
    "identify_path",
    "identify_paths",
    "lookup",
]
