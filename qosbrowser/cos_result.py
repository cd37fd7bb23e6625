"""Outcome of one call to the object storage service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CosResult:
    """HTTP status and service error details of a request."""

    is_succ: bool = False
    http_status: int = -1
    err_code: str = ""
    err_msg: str = ""
    resource_addr: str = ""
    x_cos_request_id: str = ""
    x_cos_trace_id: str = ""
    x_cos_server_time: str = ""
    real_byte: int = 0
    init_mp_request_id: str = ""

    def set_succ(self) -> None:
        """Mark the call as successful."""
        self.is_succ = True

    def set_fail(self) -> None:
        """Mark the call as failed."""
        self.is_succ = False

    def clear(self) -> None:
        """Reset status and error details to their initial values."""
        self.is_succ = False
        self.http_status = -1
        self.err_code = ""
        self.err_msg = ""
        self.resource_addr = ""
        self.x_cos_request_id = ""
        self.x_cos_trace_id = ""