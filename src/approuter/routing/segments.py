"""Directory-name classification.

Maps one directory name to the kind of route segment it declares and
the URL fragment it contributes::

    (marketing)     group               ""        (no fragment)
    [[...slug]]     optional catch-all  "*"       param "slug"
    [...slug]       catch-all           "*"       param "slug"
    [id]            dynamic             ":id"     param "id"
    about           static              "about"

Rules are checked in that order; the first match wins.  Malformed
bracket syntax (``[id``, ``id]``) is not rejected: it falls through to
the static case and the literal name becomes the URL fragment.
"""

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    GROUP = "group"
    OPTIONAL_CATCH_ALL = "optional-catch-all"
    CATCH_ALL = "catch-all"
    DYNAMIC = "dynamic"
    STATIC = "static"


@dataclass(frozen=True, slots=True)
class SegmentInfo:
    """Classification of a single directory name.

    Attributes:
        kind: Which naming rule matched.
        fragment: URL fragment contributed (empty for groups).
        param_name: Parameter name for dynamic and catch-all kinds.
    """

    kind: SegmentKind
    fragment: str
    param_name: str | None = None

    @property
    def is_group(self) -> bool:
        return self.kind is SegmentKind.GROUP

    @property
    def is_catch_all(self) -> bool:
        return self.kind is SegmentKind.CATCH_ALL

    @property
    def is_optional_catch_all(self) -> bool:
        return self.kind is SegmentKind.OPTIONAL_CATCH_ALL

    @property
    def is_dynamic(self) -> bool:
        return self.kind is SegmentKind.DYNAMIC

    @property
    def sort_rank(self) -> int:
        """Sibling precedence: static and groups, then dynamic, then catch-alls."""
        if self.kind in (SegmentKind.CATCH_ALL, SegmentKind.OPTIONAL_CATCH_ALL):
            return 2
        if self.kind is SegmentKind.DYNAMIC:
            return 1
        return 0


def classify_segment(name: str) -> SegmentInfo:
    """Classify a directory name as a route segment."""
    if name.startswith("(") and name.endswith(")"):
        return SegmentInfo(SegmentKind.GROUP, "")

    if name.startswith("[[...") and name.endswith("]]"):
        return SegmentInfo(SegmentKind.OPTIONAL_CATCH_ALL, "*", name[5:-2])

    if name.startswith("[...") and name.endswith("]"):
        return SegmentInfo(SegmentKind.CATCH_ALL, "*", name[4:-1])

    if name.startswith("[") and name.endswith("]"):
        param = name[1:-1]
        return SegmentInfo(SegmentKind.DYNAMIC, f":{param}", param)

    return SegmentInfo(SegmentKind.STATIC, name)
