import pytest

from qosbrowser.auditing_conf import AuditingInput, Conf, SnapShotConf
from qosbrowser.auditing_results import UserInfo


def test_auditing_input_keeps_given_fields():
    info = UserInfo(token_id="t1", ip="127.0.0.1")
    item = AuditingInput(object="a.jpg", data_id="d1", user_info=info)
    assert item.object == "a.jpg"
    assert item.data_id == "d1"
    assert item.user_info is info
    assert item.url is None
    assert item.content is None


def test_auditing_input_equality():
    assert AuditingInput(url="u", interval=5) == AuditingInput(url="u", interval=5)
    assert AuditingInput(url="u") != AuditingInput(url="v")


def test_snapshot_empty_string():
    assert str(SnapShotConf()) == ""


def test_snapshot_mode_and_count():
    conf = SnapShotConf(mode="Interval", count=3)
    assert str(conf) == "mode: Interval count: 3"


def test_snapshot_count_only_has_leading_space():
    assert str(SnapShotConf(count=7)).startswith(" count: ")


def test_set_time_interval_drops_mode_and_count():
    conf = SnapShotConf(mode="Average", count=10)
    conf.set_time_interval(0.5)
    assert conf.mode is None
    assert conf.count is None
    assert conf.time_interval == 0.5
    assert str(conf) == " time_interval: 0.500000"


def test_set_detect_type_overwrites_biz_type():
    conf = Conf(biz_type="policy")
    assert not conf.has_detect_type
    conf.set_detect_type("porn,ads")
    assert conf.has_detect_type
    assert conf.biz_type == "porn,ads"
    assert conf.detect_type == "porn,ads"


def test_conf_empty_string():
    assert str(Conf()) == (
        "biz_type: , detect_type: , snap_shot: , callback: , "
        "callbcak_version: , detect_content: "
    )


@pytest.mark.parametrize("biz", ["b1", "policy-x"])
def test_conf_string_contains_fields(biz):
    conf = Conf(
        biz_type=biz,
        snap_shot=SnapShotConf(mode="Fps"),
        callback="cb",
        callback_version="Detail",
        detect_content=1,
    )
    text = str(conf)
    assert text.startswith(f"biz_type: {biz}, detect_type: , ")
    assert ", snap_shot: mode: Fps" in text
    assert ", callback: cb" in text
    assert ", callbcak_version: Detail" in text
    assert text.endswith(", detect_content: 1")


def test_conf_detect_type_not_printed():
    conf = Conf()
    conf.set_detect_type("ads")
    assert str(conf).startswith("biz_type: ads, detect_type: , ")