"""Signature data model and matching engine for file-format identification.

A file format is recognised by one or more *magic byte* patterns located at
fixed offsets near the start of a file.  This module provides the generic
building blocks used to describe those patterns and the engine that walks
them:

    SignaturePart         one pattern at one offset.
    SignatureAlternative  parts combined with AND; every part must match.
    Rule                  alternatives combined with OR; any one suffices.
    RuleTable             an ordered, immutable sequence of rules.  The first
                          rule that matches wins, so more specific rules must
                          be declared before more generic ones.

The engine is a pure function of the buffer and the table.  Parts whose
offset lies beyond the end of the buffer simply do not match, so truncated
or empty input is never an error.

Usage:
    from fileformat.common.signatures import RuleTable, Rule

    table = RuleTable([
        Rule.build("image/gif", "gif", [(0, b"GIF87a")], [(0, b"GIF89a")]),
    ])
    fmt = table.classify(b"GIF89a...")
    print(fmt.media_type, fmt.extension)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Format identity
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FormatId:
    """Identity of a recognised file format."""

    media_type: str
    """Media type (formerly MIME type), e.g. ``'image/png'``."""

    extension: str
    """Preferred file extension without the leading dot, e.g. ``'png'``."""

    def __str__(self) -> str:
        return f"{self.media_type} (.{self.extension})"


DEFAULT_FORMAT = FormatId("application/octet-stream", "bin")
"""Arbitrary binary data.  Returned whenever no rule matches."""


# ---------------------------------------------------------------------------
# Rule building blocks
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SignaturePart:
    """A byte pattern expected at a fixed offset."""

    offset: int
    pattern: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, bytes):
            raise TypeError(
                f"pattern must be bytes, got {type(self.pattern).__name__}"
            )
        if not self.pattern:
            raise ValueError("pattern must not be empty")
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    @property
    def end(self) -> int:
        """Offset one past the last byte covered by this part."""
        return self.offset + len(self.pattern)

    def matches(self, data: bytes) -> bool:
        # startswith() returns False when the buffer is too short, which is
        # exactly the bounds-checked comparison we need without slicing.
        return data.startswith(self.pattern, self.offset)


@dataclass(frozen=True, slots=True)
class SignatureAlternative:
    """One self-sufficient combination of parts, all of which must match."""

    parts: tuple[SignaturePart, ...]

    def __post_init__(self) -> None:
        if not self.parts:
            raise ValueError("an alternative needs at least one part")

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, bytes]]) -> SignatureAlternative:
        """Build an alternative from ``(offset, pattern)`` pairs."""
        return cls(tuple(SignaturePart(offset, pattern) for offset, pattern in pairs))

    @property
    def end(self) -> int:
        return max(part.end for part in self.parts)

    def matches(self, data: bytes) -> bool:
        for part in self.parts:
            if not part.matches(data):
                return False
        return True


@dataclass(frozen=True, slots=True)
class Rule:
    """All the alternatives that identify one format.

    Any single alternative is enough to identify :attr:`result`.
    """

    result: FormatId
    alternatives: tuple[SignatureAlternative, ...]

    def __post_init__(self) -> None:
        if not self.alternatives:
            raise ValueError(f"rule for {self.result} has no alternatives")

    @classmethod
    def build(
        cls,
        media_type: str,
        extension: str,
        *alternatives: Sequence[tuple[int, bytes]],
    ) -> Rule:
        """Declarative constructor used by rule tables.

        Each positional argument after *extension* is one alternative,
        written as a list of ``(offset, pattern)`` pairs::

            Rule.build("audio/vnd.wave", "wav", [(0, b"RIFF"), (8, b"WAVE")])
        """
        return cls(
            FormatId(media_type, extension),
            tuple(SignatureAlternative.from_pairs(alt) for alt in alternatives),
        )

    @property
    def end(self) -> int:
        return max(alt.end for alt in self.alternatives)

    def matches(self, data: bytes) -> bool:
        for alternative in self.alternatives:
            if alternative.matches(data):
                return True
        return False


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


class RuleTable:
    """Ordered, immutable collection of :class:`Rule` objects.

    Rules are evaluated in declaration order and the first match wins.
    Tables cannot be modified after construction; use :meth:`extended` to
    derive a new table.
    """

    __slots__ = ("_rules", "_window")

    def __init__(self, rules: Iterable[Rule]) -> None:
        built = tuple(rules)
        for rule in built:
            if not isinstance(rule, Rule):
                raise TypeError(f"expected Rule, got {type(rule).__name__}")
        self._rules: tuple[Rule, ...] = built
        self._window: int = max((rule.end for rule in built), default=0)

    # -- read-only sequence protocol ----------------------------------------

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index: int) -> Rule:
        return self._rules[index]

    def __repr__(self) -> str:
        return f"<RuleTable rules={len(self._rules)} window={self._window}>"

    @property
    def rules(self) -> tuple[Rule, ...]:
        """The rules in priority order."""
        return self._rules

    @property
    def window(self) -> int:
        """Number of leading bytes any rule in the table can inspect."""
        return self._window

    def results(self) -> list[FormatId]:
        """Return every distinct :class:`FormatId` the table can produce,
        in priority order."""
        seen: dict[FormatId, None] = {}
        for rule in self._rules:
            seen.setdefault(rule.result, None)
        return list(seen)

    def extended(self, rules: Iterable[Rule], *, before: bool = True) -> RuleTable:
        """Return a new table with *rules* added.

        With ``before=True`` (the default) the new rules take precedence over
        the existing ones; otherwise they are appended after them.
        """
        extra = tuple(rules)
        if before:
            return RuleTable(extra + self._rules)
        return RuleTable(self._rules + extra)

    # -- matching -----------------------------------------------------------

    def match(self, data: bytes | bytearray | memoryview) -> FormatId | None:
        """Return the result of the first matching rule, or ``None``."""
        if not isinstance(data, (bytes, bytearray)):
            data = memoryview(data).tobytes()
        for rule in self._rules:
            if rule.matches(data):
                return rule.result
        return None

    def classify(self, data: bytes | bytearray | memoryview) -> FormatId:
        """Return the matching :class:`FormatId`, or :data:`DEFAULT_FORMAT`."""
        result = self.match(data)
        return DEFAULT_FORMAT if result is None else result
