# views/control_panel.py

import pandas as pd
import streamlit as st
from utils.api import APIClient, error_message
from config import API_URL

api = APIClient(API_URL)


def _render_gate():
    st.subheader("Control panel")
    with st.form("control_login_form"):
        admin_password = st.text_input("Control-panel password", type="password")
        submitted = st.form_submit_button("Open")

        if submitted:
            result = api.open_control_panel(admin_password)
            if result["status"] == 200:
                st.session_state["admin_password"] = admin_password
                st.rerun()
            else:
                st.error(error_message(result, "Incorrect control-panel password"))


def _render_edit(admin_password: str, usernames: list[str]):
    st.markdown("#### Edit user")
    with st.form("edit_user_form"):
        target = st.selectbox("User", usernames, key="edit_target")
        new_username = st.text_input("New username (leave empty to keep)")
        new_password = st.text_input("New password (leave empty to keep)", type="password")
        submitted = st.form_submit_button("Save")

        if submitted and target:
            result = api.edit_user(admin_password, target, new_username, new_password)
            if result["status"] == 200:
                st.session_state["flash"] = f"Updated {result['data']['username']}"
                st.rerun()
            else:
                st.error(error_message(result, "Update failed"))


def _render_delete(admin_password: str, usernames: list[str]):
    st.markdown("#### Delete user")
    with st.form("delete_user_form"):
        target = st.selectbox("User", usernames, key="delete_target")
        confirm = st.checkbox("I understand this cannot be undone")
        submitted = st.form_submit_button("Delete")

        if submitted and target:
            if not confirm:
                st.warning("Please confirm the deletion")
                return
            result = api.delete_user(admin_password, target)
            if result["status"] == 200:
                st.session_state["flash"] = f"Deleted {target}"
                st.rerun()
            else:
                st.error(error_message(result, "Delete failed"))


def render():
    admin_password = st.session_state.get("admin_password")
    if not admin_password:
        _render_gate()
        return

    result = api.open_control_panel(admin_password)
    if result["status"] != 200:
        # Secret changed server-side or backend down
        st.session_state["admin_password"] = None
        st.error(error_message(result, "Control panel unavailable"))
        return

    flash = st.session_state.pop("flash", None)
    if flash:
        st.success(flash)

    data = result["data"]
    st.subheader(f"Users ({data['total']})")
    usernames = [u["username"] for u in data["users"]]
    if usernames:
        st.dataframe(pd.DataFrame({"username": usernames}), use_container_width=True, hide_index=True)
        _render_edit(admin_password, usernames)
        _render_delete(admin_password, usernames)
    else:
        st.info("No users registered yet.")

    if st.button("Lock control panel"):
        st.session_state["admin_password"] = None
        st.rerun()
