import re
from typing import List, NamedTuple, Optional, Sequence

from ..models import SuggestedSection
from .utils import unique

YEAR_RANGE = re.compile(r"((?:19|20)\d{2})\s*-\s*(\d{4}|\d{2})(?!\d)")
_MODEL_WORD = re.compile(r"models?", re.I)


class YearSegments(NamedTuple):
    year_ranges: List[str]
    product_segments: List[str]


def _full_range(start: str, end: str) -> str:
    # "2019-21" -> "2019-2021"
    if len(end) == 2:
        end = start[:2] + end
    return f"{start}-{end}"


def extract_year_segments(sections: Optional[Sequence[SuggestedSection]]) -> YearSegments:
    """
    Split suggested article sections into year ranges ("Best Value: 2014-18"
    gives "2014-2018") and, for titles without a year range, product
    segments ("SUV Models" gives "SUV").
    """
    year_ranges: List[str] = []
    product_segments: List[str] = []

    for section in sections or []:
        matches = YEAR_RANGE.findall(section.title)
        if matches:
            year_ranges.extend(_full_range(start, end) for start, end in matches)
            continue
        segment = _MODEL_WORD.sub("", section.title, count=1).strip()
        if segment:
            product_segments.append(segment)

    return YearSegments(unique(year_ranges), unique(product_segments))


def scope_indicator(sections: Optional[Sequence[SuggestedSection]]) -> str:
    """Short phrase telling the model how much ground a headline should cover."""
    if not sections or len(sections) <= 1:
        return "comprehensive guide"
    segs = extract_year_segments(sections)
    covered = segs.year_ranges + segs.product_segments
    return f"(covers {', '.join(covered)})" if covered else "comprehensive guide"
