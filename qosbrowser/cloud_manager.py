"""Bucket and object operations that report their outcome as signals."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol

PROGRESS_STEP = 1024 * 512

ProgressCallback = Callable[[int, int, Optional[Any]], None]


class Clouds(Protocol):
    """A cloud storage backend."""

    def login(self, secret_id: str, secret_key: str) -> List[Any]: ...

    def buckets(self) -> List[Any]: ...

    def put_bucket(self, bucket_name: str, location: str) -> None: ...

    def delete_bucket(self, bucket_name: str) -> None: ...

    def get_objects(self, bucket_name: str, directory: str) -> List[Any]: ...

    def get_object(self, bucket_name: str, key: str, local_path: str,
                   callback: ProgressCallback) -> None: ...

    def put_object(self, bucket_name: str, key: str, local_path: str,
                   callback: ProgressCallback) -> None: ...


class Signals(Protocol):
    """Receiver of the outcome of cloud operations."""

    def login_success(self) -> None: ...

    def buckets_success(self, buckets: List[Any]) -> None: ...

    def objects_success(self, objects: List[Any]) -> None: ...

    def download_process(self, job_id: str, transferred: int, total: int) -> None: ...

    def download_success(self, job_id: str) -> None: ...

    def upload_process(self, job_id: str, transferred: int, total: int) -> None: ...

    def upload_success(self, job_id: str) -> None: ...


class CloudManager:
    """Runs cloud operations and remembers the bucket and directory in view."""

    def __init__(self, clouds: Clouds, signals: Signals) -> None:
        self._clouds = clouds
        self._signals = signals
        self._current_bucket_name = ""
        self._current_dir = ""

    @property
    def current_bucket_name(self) -> str:
        """Bucket whose objects were listed last."""
        return self._current_bucket_name

    @property
    def current_dir(self) -> str:
        """Directory whose objects were listed last."""
        return self._current_dir

    def login(self, secret_id: str, secret_key: str) -> None:
        buckets = self._clouds.login(secret_id, secret_key)
        self._signals.login_success()
        self._buckets_ready(buckets)

    def get_buckets(self) -> None:
        self._buckets_ready(self._clouds.buckets())

    def put_bucket(self, bucket_name: str, location: str) -> None:
        self._clouds.put_bucket(bucket_name, location)
        self.get_buckets()

    def delete_bucket(self, bucket_name: str) -> None:
        self._clouds.delete_bucket(bucket_name)
        self.get_buckets()

    def get_objects(self, bucket_name: str, directory: str = "") -> None:
        objects = self._clouds.get_objects(bucket_name, directory)
        self._current_bucket_name = bucket_name
        self._current_dir = directory
        self._signals.objects_success(objects)

    def get_object(self, job_id: str, bucket_name: str, key: str,
                   local_path: str) -> None:
        callback = self._progress(job_id, self._signals.download_process)
        self._clouds.get_object(bucket_name, key, local_path, callback)
        self._signals.download_success(job_id)

    def put_object(self, job_id: str, bucket_name: str, key: str,
                   local_path: str) -> None:
        callback = self._progress(job_id, self._signals.upload_process)
        self._clouds.put_object(bucket_name, key, local_path, callback)
        self._signals.upload_success(job_id)

    @staticmethod
    def _progress(job_id: str,
                  report: Callable[[str, int, int], None]) -> ProgressCallback:
        def callback(transferred: int, total: int,
                     user_data: Optional[Any] = None) -> None:
            if transferred > total:
                raise ValueError(
                    f"transferred size {transferred} exceeds total {total}")
            if transferred % PROGRESS_STEP == 0:
                report(job_id, transferred, total)
        return callback

    def _buckets_ready(self, buckets: List[Any]) -> None:
        self._current_bucket_name = ""
        self._current_dir = ""
        self._signals.buckets_success(buckets)