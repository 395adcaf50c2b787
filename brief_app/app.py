from __future__ import annotations
import streamlit as st
from brief_app.config import APP_TITLE
from brief_app.ui.sections import admin_page, form_page

st.set_page_config(page_title=APP_TITLE, layout="centered")

pages = [
    st.Page(admin_page, title="Create brief link", default=True),
    st.Page(form_page, title="Brief form", url_path="form"),
]
st.navigation(pages, position="hidden").run()
