import pytest

from qosbrowser.cloud_manager import PROGRESS_STEP, CloudManager


class Recorder:
    def __init__(self):
        self.events = []

    def __getattr__(self, name):
        def record(*args):
            self.events.append((name, *args))
        return record


class FakeClouds:
    def __init__(self, progress=()):
        self.calls = []
        self.progress = progress

    def login(self, secret_id, secret_key):
        self.calls.append(("login", secret_id, secret_key))
        return ["b1"]

    def buckets(self):
        return ["b1", "b2"]

    def put_bucket(self, bucket_name, location):
        self.calls.append(("put_bucket", bucket_name, location))

    def delete_bucket(self, bucket_name):
        self.calls.append(("delete_bucket", bucket_name))

    def get_objects(self, bucket_name, directory):
        return [f"{bucket_name}/{directory}obj"]

    def get_object(self, bucket_name, key, local_path, callback):
        for transferred, total in self.progress:
            callback(transferred, total, None)

    put_object = get_object


def make(progress=()):
    signals = Recorder()
    return CloudManager(FakeClouds(progress), signals), signals


def test_login_emits_success_and_buckets():
    manager, signals = make()
    manager.login("id", "secret")
    assert signals.events == [("login_success",), ("buckets_success", ["b1"])]


def test_get_objects_sets_current():
    manager, signals = make()
    manager.get_objects("bk", "dir/")
    assert manager.current_bucket_name == "bk"
    assert manager.current_dir == "dir/"
    assert signals.events == [("objects_success", ["bk/dir/obj"])]


def test_get_buckets_clears_current():
    manager, signals = make()
    manager.get_objects("bk", "dir/")
    manager.get_buckets()
    assert (manager.current_bucket_name, manager.current_dir) == ("", "")
    assert signals.events[-1] == ("buckets_success", ["b1", "b2"])


def test_put_and_delete_bucket_refresh_list():
    manager, signals = make()
    manager.put_bucket("nb", "ap-guangzhou")
    manager.delete_bucket("nb")
    assert manager._clouds.calls == [
        ("put_bucket", "nb", "ap-guangzhou"), ("delete_bucket", "nb")]
    assert [e[0] for e in signals.events] == ["buckets_success"] * 2


def test_download_progress_only_on_step():
    total = PROGRESS_STEP * 2
    manager, signals = make([(0, total), (100, total), (PROGRESS_STEP, total)])
    manager.get_object("job", "bk", "k", "/tmp/x")
    assert signals.events == [
        ("download_process", "job", 0, total),
        ("download_process", "job", PROGRESS_STEP, total),
        ("download_success", "job"),
    ]


def test_upload_reports_success():
    manager, signals = make([(PROGRESS_STEP, PROGRESS_STEP)])
    manager.put_object("up", "bk", "k", "/tmp/x")
    assert signals.events == [
        ("upload_process", "up", PROGRESS_STEP, PROGRESS_STEP),
        ("upload_success", "up"),
    ]


def test_progress_beyond_total_raises():
    manager, signals = make([(10, 5)])
    with pytest.raises(ValueError):
        manager.get_object("job", "bk", "k", "/tmp/x")
    assert signals.events == []