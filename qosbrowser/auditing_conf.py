"""Inputs and rule configuration sent when creating auditing jobs.

Optional fields hold ``None`` when they have not been set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from qosbrowser.auditing_results import UserInfo


@dataclass
class AuditingInput:
    """Content to audit: a stored object, a URL or plain text."""

    object: Optional[str] = None
    url: Optional[str] = None
    interval: Optional[int] = None
    max_frames: Optional[int] = None
    data_id: Optional[str] = None
    large_image_detect: Optional[int] = None
    user_info: Optional[UserInfo] = None
    content: Optional[str] = None
    type: Optional[str] = None


@dataclass
class SnapShotConf:
    """How frames are captured from a video for auditing."""

    mode: Optional[str] = None
    count: Optional[int] = None
    time_interval: Optional[float] = None

    def set_time_interval(self, time_interval: float) -> None:
        """Set the capture interval in seconds.

        Setting the interval replaces the whole capture rule: any mode or
        count set before is dropped.
        """
        self.mode = None
        self.count = None
        self.time_interval = time_interval

    def __str__(self) -> str:
        out = []
        if self.mode is not None:
            out.append(f"mode: {self.mode}")
        if self.count is not None:
            out.append(f" count: {self.count}")
        if self.time_interval is not None:
            out.append(f" time_interval: {self.time_interval:f}")
        return "".join(out)


def _text(value: object) -> str:
    return "" if value is None else str(value)


@dataclass
class Conf:
    """Auditing rule configuration.

    The detect type shares its storage with the biz type: setting one
    overwrites the other, and ``detect_type`` reads the same value.
    """

    biz_type: Optional[str] = None
    snap_shot: Optional[SnapShotConf] = None
    callback: Optional[str] = None
    callback_version: Optional[str] = None
    detect_content: Optional[int] = None
    return_highlight_html: Optional[bool] = None
    _detect_type_set: bool = field(default=False, init=False, repr=False,
                                   compare=False)

    def set_detect_type(self, detect_type: str) -> None:
        """Set the scene types to audit, such as ``"porn,ads"``."""
        self.biz_type = detect_type
        self._detect_type_set = True

    @property
    def detect_type(self) -> Optional[str]:
        """The detect type, which is stored as the biz type."""
        return self.biz_type

    @property
    def has_detect_type(self) -> bool:
        """Whether ``set_detect_type`` has been called."""
        return self._detect_type_set

    def __str__(self) -> str:
        snap_shot = self.snap_shot if self.snap_shot is not None else SnapShotConf()
        return (
            f"biz_type: {_text(self.biz_type)}"
            ", detect_type: "
            f", snap_shot: {snap_shot}"
            f", callback: {_text(self.callback)}"
            f", callbcak_version: {_text(self.callback_version)}"
            f", detect_content: {_text(self.detect_content)}"
        )