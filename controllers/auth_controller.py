"""
Authentication helpers for the Streamlit app.

This module renders the login gate in front of the games screens. Accounts
are simulated: `common.auth` keeps them in memory, so they disappear when the
server restarts.

Key functions:
    - `login_page()`: return the signed-in profile, or render the
        login / register form with a "Continue as Guest" option and stop the run.
    - `logout_button()`: place a sign-out button in the sidebar.
    - `get_auth()`: the `AuthSimulator` for the current browser session.

Implementation notes:
    - The `CredentialStore` is cached with `st.cache_resource`, so every browser
        session shares one store for the lifetime of the server process. Each
        browser session gets its own `AuthSimulator` in `st.session_state`.
    - The simulator notifies an observer on every transition; the observer
        mirrors `authenticated` and `username` into `st.session_state`, which
        the other pages read to gate access.
    - `extra_streamlit_components.CookieManager` stores only the last email
        used on this device, to prefill the form. No credentials or session
        state are kept in the cookie.
"""

# Import libraries
from __future__ import annotations
import logging
from datetime import timedelta
from typing import Dict
from uuid import uuid4
import streamlit as st
import extra_streamlit_components as stx

from common.auth import AuthError, AuthSimulator, CredentialStore
from common.config import COOKIE_DAYS, COOKIE_NAME
from common.constants import APP_ICON, APP_NAME
from common.utils import safe_rerun
from models.user_model import SessionState, UserProfile

logger = logging.getLogger(__name__)

AUTH_KEY     = "auth_simulator"
MODE_KEY     = "auth_register_mode"
FORM_KEYS    = ("auth_email", "auth_password", "auth_username")

# Unique keys for cookie components (must not collide in one run)
CM_KEY_MAIN    = "allhoops_cookie_component_main"


def _secret_accounts() -> Dict[str, str]:
    """Extra demo accounts from `[auth.accounts]` in secrets.toml (email = "username")."""
    try:
        if "auth" in st.secrets and "accounts" in st.secrets["auth"]:
            return dict(st.secrets["auth"]["accounts"])
    except Exception as e:
        # no secrets.toml is the normal case
        logger.debug("No secrets available for demo accounts: %s", e)
    return {}


@st.cache_resource(show_spinner=False)
def get_credential_store() -> CredentialStore:
    store = CredentialStore()
    for email, username in _secret_accounts().items():
        if email in store:
            logger.warning("Skipping duplicate demo account from secrets: %s", email)
            continue
        store.add(UserProfile(id=str(uuid4()), email=email, username=str(username)))
    logger.info("Credential store ready with %d account(s)", len(store))
    return store


def _mirror_session(state: SessionState) -> None:
    st.session_state["authenticated"] = state.is_authenticated
    st.session_state["username"] = state.profile.username if state.profile else None
    if not state.is_authenticated:
        st.session_state.pop("selected_game_id", None)


def get_auth() -> AuthSimulator:
    auth = st.session_state.get(AUTH_KEY)
    if auth is None:
        auth = AuthSimulator(get_credential_store())
        auth.subscribe(_mirror_session)
        st.session_state[AUTH_KEY] = auth
    return auth


def _submit(auth: AuthSimulator, register_mode: bool, email: str, password: str, username: str) -> bool:
    try:
        if register_mode:
            auth.register(email, password, username)
        else:
            auth.login(email, password)
    except AuthError:
        # the message stays on auth.last_error and is rendered below the form
        return False
    return True


def _remember_email(cm: stx.CookieManager, email: str, remember: bool) -> None:
    try:
        if remember:
            cm.set(COOKIE_NAME, email, max_age=int(timedelta(days=COOKIE_DAYS).total_seconds()))
        else:
            cm.delete(COOKIE_NAME)
    except Exception as e:
        # cookie support varies by component version; sign-in works without it
        logger.debug("Could not update email cookie: %s", e)


def login_page() -> UserProfile:
    """
    Returns the current profile when authenticated.
    Otherwise renders the auth form and stops the script run.
    """
    auth = get_auth()
    if auth.is_authenticated:
        return auth.current_profile

    cm = stx.CookieManager(key=CM_KEY_MAIN)
    try:
        cookies = cm.get_all() or {}
    except Exception:
        cookies = {}
    remembered = str(cookies.get(COOKIE_NAME, "") or "")

    # Render auth UI (hide sidebar only here)
    st.markdown("""
        <style>
          [data-testid="stSidebar"] { display: none; }
          .block-container { padding-top: 8vh; max-width: 560px; }
        </style>
    """, unsafe_allow_html=True)

    register_mode = bool(st.session_state.get(MODE_KEY, False))

    st.markdown(f"## {APP_ICON} {APP_NAME}")
    with st.form("auth_form", clear_on_submit=False):
        email = st.text_input("Email", value=remembered, key="auth_email")
        pwd = st.text_input("Password", type="password", key="auth_password")
        username = st.text_input("Username", key="auth_username") if register_mode else ""
        remember = st.checkbox("Remember my email on this device", value=bool(remembered))
        ok = st.form_submit_button("Register" if register_mode else "Login", use_container_width=True)

    if ok and _submit(auth, register_mode, email, pwd, username):
        _remember_email(cm, email, remember)
        for k in FORM_KEYS:
            st.session_state.pop(k, None)
        safe_rerun()

    if auth.last_error:
        st.error(auth.last_error)

    toggle_label = "Already have an account? Login" if register_mode else "Don't have an account? Register"
    if st.button(toggle_label, key="auth_toggle_mode"):
        st.session_state[MODE_KEY] = not register_mode
        # switching modes starts from an empty form
        for k in FORM_KEYS:
            st.session_state.pop(k, None)
        auth.clear_error()
        safe_rerun()

    st.divider()
    if st.button("Continue as Guest", key="auth_guest"):
        auth.sign_in_as_guest()
        safe_rerun()

    st.stop()  # block the rest of the app if not authenticated


def logout_button() -> None:
    with st.sidebar:
        if st.button("Sign Out", key="logout_btn"):
            get_auth().sign_out()
            safe_rerun()
