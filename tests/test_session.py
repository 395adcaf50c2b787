import pytest

from brief_app.questions import PLATFORMS_KEY, SECTIONS, all_questions, default_answers, question
from brief_app.session import FormSession


def test_default_answers_cover_the_question_set_in_order():
    answers = default_answers()
    assert list(answers) == [q.key for s in SECTIONS for q in s.questions]
    assert answers[PLATFORMS_KEY] == []
    assert answers["هل تمتلك تعاقدات مع شركات اخري؟"] == "لا"
    assert answers["ما هو حجم المحتوي الذي تفضله؟"] == "مختصر ومفيد"


def test_question_keys_are_unique():
    keys = [q.key for q in all_questions()]
    assert len(keys) == len(set(keys))


def test_unknown_question():
    with pytest.raises(KeyError):
        question("not asked")


def test_sessions_do_not_share_state():
    a, b = FormSession(), FormSession()
    a.toggle_option(PLATFORMS_KEY, "facebook")
    assert b.answers[PLATFORMS_KEY] == []


def test_toggle_option_adds_and_removes_in_click_order():
    sess = FormSession()
    sess.toggle_option(PLATFORMS_KEY, "tiktok")
    sess.toggle_option(PLATFORMS_KEY, "facebook")
    assert sess.answers[PLATFORMS_KEY] == ["tiktok", "facebook"]
    assert sess.toggle_option(PLATFORMS_KEY, "tiktok") == ["facebook"]


def test_choice_answers_must_be_an_option():
    sess = FormSession()
    sess.set_answer("بيان الأسعار", "نعم")
    assert sess.answers["بيان الأسعار"] == "نعم"
    with pytest.raises(ValueError):
        sess.set_answer("بيان الأسعار", "maybe")


def test_payload_is_a_copy():
    sess = FormSession()
    payload = sess.payload()
    payload[PLATFORMS_KEY].append("snapchat")
    assert sess.answers[PLATFORMS_KEY] == []


def test_required_name():
    sess = FormSession()
    assert sess.missing_required() == ["الاسم"]
    sess.set_answer("الاسم", "Acme")
    assert sess.missing_required() == []


def test_files_and_reset():
    sess = FormSession(destination="https://drive.example.com/f")
    sess.add_file("a.pdf", b"123", "application/pdf")
    sess.add_file("b.png", b"4567", "")
    assert sess.total_file_bytes() == 7
    assert sess.files[1].mime == "application/octet-stream"
    sess.remove_file(0)
    sess.remove_file(5)
    assert [f.name for f in sess.files] == ["b.png"]
    sess.set_answer("الاسم", "Acme")
    sess.mark_submitted()
    sess.reset()
    assert sess.files == [] and not sess.submitted
    assert sess.answers["الاسم"] == ""
    assert sess.destination == "https://drive.example.com/f"


def test_uploaded_files_join_the_session_immediately():
    from types import SimpleNamespace

    sess = FormSession()
    picked = [SimpleNamespace(name="logo.png", type="image/png", getvalue=lambda: b"\x89PNG"),
              SimpleNamespace(name="prices.pdf", type=None, getvalue=lambda: b"%PDF")]
    assert sess.add_uploads(picked) == 2
    assert [(f.name, f.mime) for f in sess.files] == [("logo.png", "image/png"),
                                                      ("prices.pdf", "application/octet-stream")]
    assert sess.add_uploads(None) == 0
