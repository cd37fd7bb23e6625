"""Per-page audit results for documents and web pages.

Every field is optional: ``None`` means the service did not report it.
The string form lists only the fields that are present, in a fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from qosbrowser.auditing_results import SceneResultInfo

_SCENES = ("porn_info", "ads_info", "illegal_info", "abuse_info",
           "politics_info", "terrorism_info")


@dataclass
class Labels:
    """Audit scenes that were hit, each with its result."""

    porn_info: Optional[SceneResultInfo] = None
    ads_info: Optional[SceneResultInfo] = None
    illegal_info: Optional[SceneResultInfo] = None
    abuse_info: Optional[SceneResultInfo] = None
    politics_info: Optional[SceneResultInfo] = None
    terrorism_info: Optional[SceneResultInfo] = None

    def __str__(self) -> str:
        out = []
        for name in _SCENES:
            value = getattr(self, name)
            if value is not None:
                out.append(f" {name}: {{{value}}}")
        return "".join(out)


@dataclass
class PageResult:
    """Audit result for one page or sheet of a document or web page."""

    url: Optional[str] = None
    page_number: Optional[int] = None
    sheet_number: Optional[int] = None
    text: Optional[str] = None
    label: Optional[str] = None
    suggestion: Optional[int] = None
    porn_info: Optional[SceneResultInfo] = None
    ads_info: Optional[SceneResultInfo] = None
    illegal_info: Optional[SceneResultInfo] = None
    abuse_info: Optional[SceneResultInfo] = None
    politics_info: Optional[SceneResultInfo] = None
    terrorism_info: Optional[SceneResultInfo] = None

    def __str__(self) -> str:
        lines = []
        if self.url is not None:
            lines.append(f"url: {{{self.url}}}\n")
        if self.page_number is not None:
            lines.append(f"page_number: {self.page_number}\n")
        if self.sheet_number is not None:
            lines.append(f"sheet_number: {self.sheet_number}\n")
        if self.text is not None:
            lines.append(f"text: {{{self.text}}} \n")
        if self.label is not None:
            lines.append(f"label: {self.label}\n")
        if self.suggestion is not None:
            lines.append(f"suggestion: {self.suggestion}\n")
        for name in _SCENES:
            value = getattr(self, name)
            if value is not None:
                lines.append(f"{name}: {{{value}}}\n")
        return "".join(lines)


@dataclass
class PageSegment:
    """The per-page results of an audited document or web page."""

    results: Optional[List[PageResult]] = None

    def add_result(self, result: PageResult) -> None:
        """Append a page result, creating the list if needed."""
        if self.results is None:
            self.results = []
        self.results.append(result)

    def __str__(self) -> str:
        return "".join(f"\nresults: {{\n{result}}} "
                       for result in self.results or ())