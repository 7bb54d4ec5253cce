# views/login.py

import streamlit as st
from utils.api import APIClient, error_message
from config import API_URL

api = APIClient(API_URL)


def render():
    tab1, tab2 = st.tabs(["Login", "Register"])

    with tab1:
        st.subheader("Login")
        with st.form("login_form"):
            username = st.text_input("Username")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Login")

            if submitted:
                if username and password:
                    result = api.login(username, password)
                    if result["status"] == 200:
                        st.session_state["username"] = username
                        st.success(result["data"]["message"])
                    else:
                        st.error(f"Login failed: {error_message(result, 'Login failed')}")
                else:
                    st.warning("Please enter username and password")

    with tab2:
        st.subheader("Register")
        with st.form("register_form"):
            username = st.text_input("Username", key="reg_username")
            new_password = st.text_input("Password", type="password", key="reg_password")
            confirm_password = st.text_input("Confirm Password", type="password")
            submitted = st.form_submit_button("Register")

            if submitted:
                if not all([username, new_password, confirm_password]):
                    st.warning("Please fill all fields")
                elif new_password != confirm_password:
                    st.error("Passwords do not match")
                else:
                    result = api.register(username, new_password)
                    if result["status"] in [200, 201]:
                        st.success("Registration successful! Please login.")
                    else:
                        st.error(f"Registration failed: {error_message(result, 'Registration failed')}")
