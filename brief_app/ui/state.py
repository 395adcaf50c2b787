from __future__ import annotations
import streamlit as st
from brief_relay.links import reference_from_query
from ..session import FormSession

SESSION_KEY = "brief_session"

def init_session_state() -> FormSession:
    if SESSION_KEY not in st.session_state:
        # undecodable ?d= leaves the form without a folder link
        st.session_state[SESSION_KEY] = FormSession(destination=reference_from_query(st.query_params))
    st.session_state.setdefault("generated_link", "")
    st.session_state.setdefault("uploader_round", 0)
    return st.session_state[SESSION_KEY]

def clear_uploader() -> None:
    st.session_state.uploader_round += 1

def reset_form(sess: FormSession) -> None:
    sess.reset()
    # question widgets keep their own state under "q..." keys
    for key in [k for k in st.session_state if str(k).startswith("q")]:
        del st.session_state[key]
