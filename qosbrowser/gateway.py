"""Routes API requests from the interface to the cloud manager."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from enum import IntEnum
from typing import Any, Callable, Mapping, Optional

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_CODE = 100000
UNKNOWN_ERROR_MESSAGE = "unknown error"

_EXECUTOR = ThreadPoolExecutor(thread_name_prefix="gateway")

ErrorHandler = Callable[[int, str, Mapping[str, Any]], None]


class Api(IntEnum):
    """Requests the gateway understands."""

    LOGIN_NORMAL = 1
    BUCKETS_LIST = 2
    BUCKETS_PUT = 3
    BUCKETS_DEL = 4
    OBJECTS_LIST = 5
    OBJECTS_GET = 6
    OBJECTS_PUT = 7


class GatewayError(Exception):
    """An error raised while serving a request, with its error code."""

    def __init__(self, code: int, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


class Gateway:
    """Runs requests on worker threads and reports failures."""

    def __init__(self, cloud: Any, on_error: ErrorHandler) -> None:
        self._cloud = cloud
        self._on_error = on_error

    def send(self, api: int, params: Optional[Mapping[str, Any]] = None) -> Future:
        """Serve a request in the background; errors go to ``on_error``."""
        return _EXECUTOR.submit(self._run, api, {} if params is None else params)

    def _run(self, api: int, params: Mapping[str, Any]) -> None:
        try:
            self.dispatch(api, params)
        except GatewayError as error:
            logger.error(error.msg)
            self._on_error(api, error.msg, params)
        except Exception:
            error = GatewayError(UNKNOWN_ERROR_CODE, UNKNOWN_ERROR_MESSAGE)
            logger.error(error.msg)
            self._on_error(api, error.msg, params)

    def dispatch(self, api: int, params: Optional[Mapping[str, Any]] = None) -> None:
        """Serve a request on the calling thread; unknown APIs are ignored."""
        try:
            api = Api(api)
        except ValueError:
            return
        p = {} if params is None else params

        def text(name: str) -> str:
            value = p.get(name, "")
            return value if isinstance(value, str) else ""

        cloud = self._cloud
        if api is Api.LOGIN_NORMAL:
            cloud.login(text("secretId"), text("secretKey"))
        elif api is Api.BUCKETS_LIST:
            cloud.get_buckets()
        elif api is Api.BUCKETS_PUT:
            cloud.put_bucket(text("bucketName"), text("location"))
        elif api is Api.BUCKETS_DEL:
            cloud.delete_bucket(text("bucketName"))
        elif api is Api.OBJECTS_LIST:
            cloud.get_objects(text("bucketName"), text("dir"))
        elif api is Api.OBJECTS_GET:
            cloud.get_object(text("jobId"), text("bucketName"), text("key"),
                             text("localPath"))
        elif api is Api.OBJECTS_PUT:
            cloud.put_object(text("jobId"), text("bucketName"), text("key"),
                             text("localPath"))