"""
frontend/app.py — Streamlit page for trying the PM2.5 shortcut intents.

Lists the intents exposed by the intent server, lets you pick one and
optionally supply a device coordinate, then shows the dialog it returns.
"""

import os

import httpx
import streamlit as st
from dotenv import load_dotenv
from pathlib import Path

load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

PM25_PORT = int(os.getenv("PM25_PORT", "8000"))
SERVER_URL = f"http://localhost:{PM25_PORT}"

st.set_page_config(page_title="PM2.5 Shortcut", page_icon="🌫", layout="centered")
st.title("🌫 PM2.5 Shortcut")


def _error_text(response: httpx.Response) -> str:
    """Error message from a failed response; the body may not be JSON."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and "error" in body:
        return body["error"]
    return f"Intent server returned {response.status_code}."


# ── Intent list ────────────────────────────────────────────────────────────────

try:
    response = httpx.get(f"{SERVER_URL}/intents", timeout=5.0)
except httpx.HTTPError:
    st.error("Could not connect to the intent server. Is it running?")
    st.stop()

if response.status_code != 200:
    st.error(_error_text(response))
    st.stop()

intents = response.json()

titles = {intent["title"]: intent["id"] for intent in intents}
choice = st.selectbox("Intent", list(titles))

# ── Optional device coordinate ─────────────────────────────────────────────────

use_fix = st.checkbox("Send a device coordinate", value=True)
payload = None
if use_fix:
    col_lat, col_lng = st.columns(2)
    latitude = col_lat.number_input("Latitude", value=13.75, format="%.6f")
    longitude = col_lng.number_input("Longitude", value=100.50, format="%.6f")
    payload = {"latitude": latitude, "longitude": longitude}

# ── Invoke ─────────────────────────────────────────────────────────────────────

if st.button(choice):
    intent_id = titles[choice]
    with st.spinner("Checking PM2.5..."):
        try:
            # Location wait and upstream request are each bounded server-side
            response = httpx.post(
                f"{SERVER_URL}/intents/{intent_id}/perform",
                json=payload,
                timeout=20.0,
            )
        except httpx.HTTPError:
            st.error("Could not connect to the intent server. Is it running?")
        else:
            if response.status_code != 200:
                st.error(_error_text(response))
            else:
                st.info(response.json()["dialog"])
