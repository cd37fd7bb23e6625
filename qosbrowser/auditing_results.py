"""Result records returned by content auditing jobs.

Every field is optional: ``None`` means the service did not report it.
The string form lists only the fields that are present, in a fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


def _keywords_text(key_words: Optional[List[str]]) -> str:
    if not key_words:
        return ""
    return " keywords: " + ",".join(key_words)


@dataclass
class Location:
    """Position and size of a detection box inside an image."""

    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    rotate: Optional[float] = None

    def __str__(self) -> str:
        parts = []
        for name in ("x", "y", "width", "height", "rotate"):
            value = getattr(self, name)
            if value is not None:
                parts.append(f" {name}: {value:f}")
        return "".join(parts)


@dataclass
class OcrResult:
    """Text recognised in an image, with the keywords it hit."""

    text: Optional[str] = None
    key_words: Optional[List[str]] = None
    location: Optional[Location] = None

    def add_key_word(self, key_word: str) -> None:
        """Append a keyword, creating the list if needed."""
        if self.key_words is None:
            self.key_words = []
        self.key_words.append(key_word)

    def __str__(self) -> str:
        out = []
        if self.text is not None:
            out.append(f" text: {self.text}")
        out.append(_keywords_text(self.key_words))
        if self.location is not None:
            out.append(f" Location: {self.location}")
        return "".join(out)


@dataclass
class ObjectResults:
    """An entity recognised in an image and where it was found."""

    name: Optional[str] = None
    location: Optional[Location] = None

    def __str__(self) -> str:
        out = []
        if self.name is not None:
            out.append(f" name: {self.name}")
        if self.location is not None:
            out.append(f" location: {self.location}")
        return "".join(out)


@dataclass
class SceneResultInfo:
    """Outcome of auditing against a single scene (porn, ads and so on)."""

    code: Optional[int] = None
    msg: Optional[str] = None
    hit_flag: Optional[int] = None
    score: Optional[int] = None
    label: Optional[str] = None
    category: Optional[str] = None
    sub_label: Optional[str] = None
    count: Optional[int] = None
    ocr_results: Optional[List[OcrResult]] = None
    object_results: Optional[ObjectResults] = None
    key_words: Optional[List[str]] = None

    def add_ocr_result(self, ocr_result: OcrResult) -> None:
        """Append an OCR result, creating the list if needed."""
        if self.ocr_results is None:
            self.ocr_results = []
        self.ocr_results.append(ocr_result)

    def add_key_word(self, key_word: str) -> None:
        """Append a keyword, creating the list if needed."""
        if self.key_words is None:
            self.key_words = []
        self.key_words.append(key_word)

    def __str__(self) -> str:
        out = []
        for name in ("code", "msg", "hit_flag", "score", "label",
                     "category", "sub_label", "count"):
            value = getattr(self, name)
            if value is not None:
                out.append(f" {name}: {value}")
        for ocr in self.ocr_results or ():
            out.append(f" ocr_result: {{{ocr}}}")
        if self.object_results is not None:
            out.append(f" object_result: {{{self.object_results}}}")
        out.append(_keywords_text(self.key_words))
        return "".join(out)


@dataclass
class UserInfo:
    """Business fields attached to an auditing job by the caller."""

    token_id: Optional[str] = None
    nick_name: Optional[str] = None
    device_id: Optional[str] = None
    app_id: Optional[str] = None
    room: Optional[str] = None
    ip: Optional[str] = None
    type: Optional[str] = None

    def __str__(self) -> str:
        out = []
        for name in ("token_id", "nick_name", "device_id", "app_id",
                     "room", "ip", "type"):
            value = getattr(self, name)
            if value is not None:
                out.append(f" {name}: {value}")
        return "".join(out)


_SCENES = ("porn_info", "ads_info", "illegal_info", "abuse_info",
           "politics_info", "terrorism_info")


@dataclass
class SegmentResult:
    """Audit result for one snapshot, audio section or text fragment."""

    url: Optional[str] = None
    snap_shot_time: Optional[int] = None
    offset_time: Optional[int] = None
    duration: Optional[int] = None
    text: Optional[str] = None
    label: Optional[str] = None
    result: Optional[int] = None
    porn_info: Optional[SceneResultInfo] = None
    ads_info: Optional[SceneResultInfo] = None
    illegal_info: Optional[SceneResultInfo] = None
    abuse_info: Optional[SceneResultInfo] = None
    politics_info: Optional[SceneResultInfo] = None
    terrorism_info: Optional[SceneResultInfo] = None
    start_byte: Optional[int] = None
    _unused: List[str] = field(default_factory=list, repr=False, compare=False)

    def __str__(self) -> str:
        out = []
        for name in ("url", "snap_shot_time", "offset_time", "duration",
                     "text", "label", "result"):
            value = getattr(self, name)
            if value is not None:
                out.append(f" {name}: {value}")
        if self.start_byte is not None:
            out.append(f" start_type: {self.start_byte}")
        for name in _SCENES:
            value = getattr(self, name)
            if value is not None:
                out.append(f" {name}: {{{value}}}")
        return "".join(out)