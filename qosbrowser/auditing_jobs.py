"""Details of auditing jobs for images and videos.

Every field is optional: ``None`` means the service did not report it.
The string form lists one present field per line, in a fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from qosbrowser.auditing_results import SceneResultInfo, SegmentResult, UserInfo

_SCENES = ("porn_info", "ads_info", "illegal_info", "abuse_info",
           "politics_info", "terrorism_info")


def _scene_lines(detail: object) -> List[str]:
    lines = []
    for name in _SCENES:
        value = getattr(detail, name)
        if value is not None:
            lines.append(f"{name}: {{{value}}}\n")
    return lines


@dataclass
class AuditingJobsDetail:
    """Fields common to every auditing job."""

    code: Optional[str] = None
    message: Optional[str] = None
    data_id: Optional[str] = None
    job_id: Optional[str] = None
    state: Optional[str] = None
    creation_time: Optional[str] = None
    user_info: Optional[UserInfo] = None

    def _base_text(self) -> str:
        lines = []
        for name in ("code", "message", "data_id", "job_id", "state",
                     "creation_time"):
            value = getattr(self, name)
            if value is not None:
                lines.append(f"{name}: {value}\n")
        if self.user_info is not None:
            lines.append(f"user_info: {{{self.user_info}}}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self._base_text()


@dataclass
class ImageAuditingJobsDetail(AuditingJobsDetail):
    """Result of auditing one image."""

    object: Optional[str] = None
    url: Optional[str] = None
    compression_result: Optional[int] = None
    text: Optional[str] = None
    label: Optional[str] = None
    result: Optional[int] = None
    category: Optional[str] = None
    sub_label: Optional[str] = None
    porn_info: Optional[SceneResultInfo] = None
    ads_info: Optional[SceneResultInfo] = None
    illegal_info: Optional[SceneResultInfo] = None
    abuse_info: Optional[SceneResultInfo] = None
    politics_info: Optional[SceneResultInfo] = None
    terrorism_info: Optional[SceneResultInfo] = None

    def __str__(self) -> str:
        lines = [self._base_text()]
        for name in ("object", "url", "compression_result", "text", "label",
                     "result", "category", "sub_label"):
            value = getattr(self, name)
            if value is not None:
                lines.append(f"{name}: {value}\n")
        lines.extend(_scene_lines(self))
        return "".join(lines)


@dataclass
class VideoAuditingJobsDetail(AuditingJobsDetail):
    """Result of auditing a video, its snapshots and its sound."""

    object: Optional[str] = None
    url: Optional[str] = None
    snap_shot_count: Optional[str] = None
    label: Optional[str] = None
    result: Optional[int] = None
    porn_info: Optional[SceneResultInfo] = None
    ads_info: Optional[SceneResultInfo] = None
    illegal_info: Optional[SceneResultInfo] = None
    abuse_info: Optional[SceneResultInfo] = None
    politics_info: Optional[SceneResultInfo] = None
    terrorism_info: Optional[SceneResultInfo] = None
    snap_shot: Optional[List[SegmentResult]] = None
    audio_section: Optional[List[SegmentResult]] = None

    def add_snap_shot(self, snap_shot: SegmentResult) -> None:
        """Append a snapshot result, creating the list if needed."""
        if self.snap_shot is None:
            self.snap_shot = []
        self.snap_shot.append(snap_shot)

    def add_audio_section(self, audio_section: SegmentResult) -> None:
        """Append an audio section result, creating the list if needed."""
        if self.audio_section is None:
            self.audio_section = []
        self.audio_section.append(audio_section)

    def __str__(self) -> str:
        lines = [self._base_text()]
        if self.object is not None:
            lines.append(f"object:{self.object}\n")
        if self.url is not None:
            lines.append(f"url: {self.url}\n")
        if self.snap_shot_count is not None:
            lines.append(f"SnapShotCount: {self.snap_shot_count}\n")
        if self.label is not None:
            lines.append(f"label: {self.label}\n")
        if self.result is not None:
            lines.append(f"Result: {self.result}\n")
        lines.extend(_scene_lines(self))
        lines.extend(f"snap_shot: {{{shot}}}\n" for shot in self.snap_shot or ())
        lines.extend(f"audio_section: {section}\n"
                     for section in self.audio_section or ())
        return "".join(lines)