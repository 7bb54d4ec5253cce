import streamlit as st
from streamlit_option_menu import option_menu
from views import login, control_panel
from config import APP_NAME


def init_session():
    defaults = {
        "username": None,
        "admin_password": None,
        "nav_page": "Login",
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def main():
    st.set_page_config(page_title=APP_NAME, layout="centered")
    init_session()

    # --- Sidebar navigation
    with st.sidebar:
        nav_options = ["Login", "Control panel"]
        page = option_menu(
            menu_title=APP_NAME,
            options=nav_options,
            icons=["person", "gear"],
            default_index=nav_options.index(st.session_state["nav_page"]),
        )
        st.session_state["nav_page"] = page

        if st.session_state["username"]:
            st.caption(f"Logged in as {st.session_state['username']}")

    # --- Routing
    if page == "Login":
        login.render()
    elif page == "Control panel":
        control_panel.render()


if __name__ == "__main__":
    main()
