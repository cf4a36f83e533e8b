from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from netmime.utils.ascii import ascii_equals_ignore_case

# Single source of truth for the data shapes shared by parser, matcher and resolver


@dataclass(frozen=True)
class MimeMapping:
    """One hard-coded type entry with its comma separated extension list."""
    mime_type: str
    extensions: str

    @property
    def extension_list(self) -> Tuple[str, ...]:
        return tuple(self.extensions.split(','))

    def has_extension(self, ext: str) -> bool:
        """Case-insensitive, whole-entry comparison against the extension list."""
        return any(ascii_equals_ignore_case(e, ext) for e in self.extension_list)


@dataclass(frozen=True)
class StandardTypeGroup:
    """Member types enumerated when a caller asks for ``leading_type*``."""
    leading_type: Optional[str]
    member_types: Tuple[str, ...] = ()


class ParsedMimeType(NamedTuple):
    top_level_type: str
    subtype: str


@dataclass(frozen=True)
class MimeTables:
    """Immutable bundle of every fixed table the resolver consults."""
    primary: Tuple[MimeMapping, ...]
    secondary: Tuple[MimeMapping, ...]
    standard_groups: Tuple[StandardTypeGroup, ...]
    default_group: StandardTypeGroup

    def group_for(self, leading_type: str) -> StandardTypeGroup:
        for group in self.standard_groups:
            if group.leading_type is not None and group.leading_type == leading_type:
                return group
        return self.default_group
