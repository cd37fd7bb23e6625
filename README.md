# qosbrowser

The back-end core of a desktop browser for cloud object storage: the parts
that sit between a user interface and a storage service. It has no
third-party dependencies.

## Modules

- `qosbrowser.gateway` — `Gateway(cloud, on_error)` routes requests named by
  `Api` (`LOGIN_NORMAL`, `BUCKETS_LIST`, `BUCKETS_PUT`, `BUCKETS_DEL`,
  `OBJECTS_LIST`, `OBJECTS_GET`, `OBJECTS_PUT`) to a cloud manager.
  `send(api, params)` runs the request on a worker thread and returns a
  `concurrent.futures.Future`; `dispatch(api, params)` runs it on the calling
  thread. Parameters are read from a mapping by the keys `secretId`,
  `secretKey`, `bucketName`, `location`, `dir`, `jobId`, `key` and
  `localPath`; a missing or non-string value reads as `""`. Unknown API codes
  are ignored. When a request sent with `send` fails, `on_error(api, message,
  params)` is called: with the message of a `GatewayError`, or with
  `"unknown error"` for any other exception.
- `qosbrowser.cloud_manager` — `CloudManager(clouds, signals)` logs in,
  lists, creates and deletes buckets, lists the objects of a directory, and
  downloads or uploads objects. Results go to the `signals` object
  (`login_success`, `buckets_success`, `objects_success`,
  `download_process`, `download_success`, `upload_process`,
  `upload_success`). Transfer progress is reported whenever the transferred
  size is a multiple of 512 KiB; a progress report whose transferred size
  exceeds the total raises `ValueError`. `current_bucket_name` and
  `current_dir` name the last listed directory; listing buckets clears them.
- `qosbrowser.login_store` — `LoginStore(dao)` keeps saved `LoginInfo`
  records (name, secret id, secret key, remark, timestamp) in step with a
  storage object and raises `LoginInfoNotFound` when a lookup fails.
- `qosbrowser.cos_result` — `CosResult`, the outcome of one call to the
  storage service: success flag, HTTP status, error code and message,
  resource address, request and trace ids.
- `qosbrowser.auditing_results`, `qosbrowser.auditing_pages`,
  `qosbrowser.auditing_conf`, `qosbrowser.auditing_jobs` — dataclasses for
  content-auditing inputs, rule configuration and results: detection boxes,
  OCR and entity results, per-scene results, snapshot and audio segments,
  document and web-page page results, and job details for images and
  videos. A field left at `None` was not reported, and `str()` renders only
  the fields that are set.

## Cloud operations

```python
from qosbrowser.cloud_manager import CloudManager
from qosbrowser.gateway import Api, Gateway

manager = CloudManager(clouds, signals)   # your storage back end and receiver
gateway = Gateway(manager, on_error=lambda api, msg, params: print(api, msg))

gateway.send(Api.OBJECTS_LIST, {"bucketName": "photos", "dir": "2024/"}).result()
print(manager.current_bucket_name, manager.current_dir)
```

## Saved logins

```python
from qosbrowser.login_store import LoginStore, LoginInfoNotFound

store = LoginStore(dao)          # dao: your persistence back end
store.init()
store.save_login_info("work", "my-secret-id", "secret", "office account")

print(store.login_name_list())   # ['work']
info = store.login_info_by_name("work")

try:
    store.login_info_by_name("missing")
except LoginInfoNotFound as exc:
    print(exc)
```

A login saved with an empty name is stored under its secret id. Saving a
secret id that already exists updates the record in place; the secret id,
key and remark are stripped of surrounding whitespace.

## Auditing results

```python
from qosbrowser.auditing_results import OcrResult

ocr = OcrResult()
ocr.add_key_word("spam")
ocr.add_key_word("scam")
print(str(ocr))                  # " keywords: spam,scam"
```

## What this package does not do

- It has no user interface and no command to run.
- It does not talk to a storage service itself: `CloudManager` needs a
  back end object with `login`, `buckets`, `put_bucket`, `delete_bucket`,
  `get_objects`, `get_object` and `put_object`.
- It does not store logins on disk: `LoginStore` needs a storage object
  with `connect`, `create_table`, `select`, `exists`, `insert`, `update`
  and `remove`.
- It does not write log files; the gateway logs errors through the standard
  `logging` module only.
- Auditing job details cover images and videos only; there are no models
  for audio, text, document or web-page job details.

## Running the tests

Install the `test` extra and run `pytest` from the project root.