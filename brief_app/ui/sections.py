from __future__ import annotations
import streamlit as st
from brief_relay.links import build_share_link
from ..config import APP_TITLE, LOGO_URL, PUBLIC_BASE_URL
from ..questions import SECTIONS, Question
from ..services.relay_client import submit_brief
from ..session import FormSession
from .state import clear_uploader, init_session_state, reset_form

def toast(msg: str) -> None:
    st.toast(msg)

def _header(subtitle: str) -> None:
    st.image(LOGO_URL, width=96)
    st.title(APP_TITLE)
    st.caption(subtitle)

def _sync(sess: FormSession, qkey: str, wkey: str) -> None:
    sess.set_answer(qkey, st.session_state[wkey])

def _question_widget(sess: FormSession, q: Question, wkey: str) -> None:
    current = sess.answers.get(q.key)
    if q.kind == "choice":
        values = [v for _, v in q.options]
        labels = dict((v, label) for label, v in q.options)
        st.radio(q.prompt, values, index=values.index(current) if current in values else 0,
                 format_func=labels.get, key=wkey, horizontal=True,
                 on_change=_sync, args=(sess, q.key, wkey))
    elif q.kind == "multi":
        st.markdown(f"**{q.prompt}**")
        cols = st.columns(len(q.options))
        for col, (label, value) in zip(cols, q.options):
            with col:
                st.checkbox(label, value=value in (current or []), key=f"{wkey}_{value}",
                            on_change=sess.toggle_option, args=(q.key, value))
    elif q.kind == "textarea":
        st.text_area(q.prompt, value=current or "", placeholder=q.placeholder, key=wkey,
                     on_change=_sync, args=(sess, q.key, wkey))
    else:
        st.text_input(q.prompt, value=current or "", placeholder=q.placeholder, key=wkey,
                      on_change=_sync, args=(sess, q.key, wkey))

def _section(sess: FormSession, s_idx: int) -> None:
    section = SECTIONS[s_idx]
    with st.container(border=True):
        st.subheader(section.title)
        if section.intro:
            st.markdown(f"**{section.intro}**")
        percents = [q for q in section.questions if q.kind == "percent"]
        if percents:
            cols = st.columns(3)
            for i, q in enumerate(percents):
                with cols[i % 3]:
                    _question_widget(sess, q, f"q{s_idx}_p{i}")
        for q_idx, q in enumerate(section.questions):
            if q.kind != "percent":
                _question_widget(sess, q, f"q{s_idx}_{q_idx}")

def _take_uploads(sess: FormSession, wkey: str) -> None:
    if sess.add_uploads(st.session_state.get(wkey)):
        clear_uploader()

def _uploads(sess: FormSession) -> None:
    with st.container(border=True):
        st.subheader("أو قم بالرفع المباشر هنا")
        st.caption("سيتم إرفاق هذه الملفات مع طلبك لضمان دقة التنفيذ الإبداعي.")
        wkey = f"uploader_{st.session_state.uploader_round}"
        # picked files join the session at once; no separate add step
        st.file_uploader("الملفات", accept_multiple_files=True, key=wkey,
                         on_change=_take_uploads, args=(sess, wkey))
        for i, f in enumerate(sess.files):
            c1, c2 = st.columns([0.85, 0.15])
            c1.write(f"{f.name} ({f.size / 1024:.1f} KB)")
            if c2.button("حذف", key=f"remove_file_{i}"):
                sess.remove_file(i)
                st.rerun()

def admin_page() -> None:
    init_session_state()
    _header("Generate a link for your client's marketing briefing")
    drive_link = st.text_input("Google Drive Link", placeholder="Paste public folder link...")
    if st.button("Create Brief Link", type="primary", disabled=not drive_link.strip(), use_container_width=True):
        st.session_state.generated_link = build_share_link(PUBLIC_BASE_URL, drive_link.strip())
    if st.session_state.generated_link:
        st.caption("Access Link Ready:")
        st.code(st.session_state.generated_link, language=None)

def form_page() -> None:
    sess = init_session_state()
    _header("Transforming your brand through data-driven creativity. Let's start the journey.")

    if sess.submitted:
        st.success("تم إرسال البيانات بنجاح، شكراً لك!")
        if st.button("إرسال نموذج جديد"):
            reset_form(sess)
            st.rerun()
        return

    if sess.destination:
        st.link_button("Google Drive Folder", sess.destination)

    for s_idx in range(len(SECTIONS)):
        _section(sess, s_idx)
    _uploads(sess)

    if st.button("إرسال", type="primary", use_container_width=True):
        missing = sess.missing_required()
        if missing:
            st.error("برجاء استكمال الحقول المطلوبة: " + "، ".join(missing))
            return
        with st.spinner("جاري الإرسال..."):
            ok, err = submit_brief(sess.payload(), sess.destination, sess.files)
        if ok:
            sess.mark_submitted()
            st.balloons()
            toast("تم الإرسال")
            st.rerun()
        else:
            st.error("Server returned error. Please try again.")
            st.caption(err or "")
