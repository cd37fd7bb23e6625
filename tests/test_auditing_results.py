import pytest

from qosbrowser.auditing_results import (
    Location,
    ObjectResults,
    OcrResult,
    SceneResultInfo,
    SegmentResult,
    UserInfo,
)


def test_empty_location_is_blank():
    assert str(Location()) == ""


def test_location_uses_six_decimals():
    assert str(Location(x=1.5)) == " x: 1.500000"


def test_location_field_order():
    text = str(Location(rotate=2.0, x=1.0, height=3.0))
    assert text.index(" x: ") < text.index(" height: ") < text.index(" rotate: ")
    assert " y: " not in text and " width: " not in text


def test_ocr_add_key_word_creates_list():
    ocr = OcrResult()
    ocr.add_key_word("alpha")
    ocr.add_key_word("beta")
    assert ocr.key_words == ["alpha", "beta"]


def test_ocr_keywords_joined_by_comma():
    ocr = OcrResult(text="hello", key_words=["alpha", "beta"])
    assert str(ocr) == " text: hello keywords: alpha,beta"


def test_ocr_empty_keyword_list_prints_nothing():
    assert str(OcrResult(key_words=[])) == ""


def test_ocr_includes_location():
    loc = Location(y=2.0)
    text = str(OcrResult(location=loc))
    assert text == " Location: " + str(loc)


def test_object_results_str():
    loc = Location(width=4.0)
    obj = ObjectResults(name="cat", location=loc)
    assert str(obj) == " name: cat location: " + str(loc)


def test_scene_add_methods():
    scene = SceneResultInfo()
    first = OcrResult(text="a")
    scene.add_ocr_result(first)
    scene.add_key_word("k")
    assert scene.ocr_results == [first]
    assert scene.key_words == ["k"]


def test_scene_str_order_and_nesting():
    ocr = OcrResult(text="t")
    obj = ObjectResults(name="n")
    scene = SceneResultInfo(code=0, msg="OK", score=95, ocr_results=[ocr],
                            object_results=obj, key_words=["x", "y"])
    text = str(scene)
    assert text.startswith(" code: 0 msg: OK score: 95")
    assert " ocr_result: {" + str(ocr) + "}" in text
    assert " object_result: {" + str(obj) + "}" in text
    assert text.endswith(" keywords: x,y")
    assert " hit_flag" not in text


def test_scene_count_printed():
    assert str(SceneResultInfo(count=3)) == " count: 3"


def test_user_info_prints_room_not_device():
    info = UserInfo(device_id="dev-1", room="room-9")
    assert str(info) == " device_id: dev-1 room: room-9"


def test_user_info_empty():
    assert str(UserInfo()) == ""


def test_segment_scene_blocks_after_start_byte():
    porn = SceneResultInfo(hit_flag=1)
    seg = SegmentResult(url="u", result=2, start_byte=7, porn_info=porn)
    text = str(seg)
    assert text.startswith(" url: u result: 2")
    assert " start_type: 7" in text
    assert text.index(" start_type: ") < text.index(" porn_info: {")
    assert text.endswith(" porn_info: {" + str(porn) + "}")


@pytest.mark.parametrize("scene", [
    "porn_info", "ads_info", "illegal_info",
    "abuse_info", "politics_info", "terrorism_info",
])
def test_segment_each_scene_named(scene):
    info = SceneResultInfo(label="L")
    seg = SegmentResult(**{scene: info})
    assert str(seg) == f" {scene}: {{{info}}}"