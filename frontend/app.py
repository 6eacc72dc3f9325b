#file: frontend/app.py

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio
import streamlit as st

st.set_page_config(page_title="Air Quality Dashboard", page_icon="🌍", layout="wide")

from frontend.auth_api import login
from frontend.data_fetch import fetch_cities, fetch_dashboard
from frontend.utils import get_city_names
from frontend.ui_elements import (display_charts, display_login, display_navbar, display_stats, display_table,
                                  display_window_selector)

if "user" not in st.session_state :
    st.session_state.user = None
if "login_error" not in st.session_state :
    st.session_state.login_error = None

# Login gate
if st.session_state.user is None :
    credentials = display_login(st.session_state.login_error)
    if credentials :
        user = login(*credentials)
        if user :
            st.session_state.user = user
            st.session_state.login_error = None
        else :
            st.session_state.login_error = "Invalid credentials"
        st.rerun()
    st.stop()

cities = asyncio.run(fetch_cities())
city_names = get_city_names(cities)
if not city_names :
    st.error("Failed to load air quality data")
    st.stop()

if "city" not in st.session_state :
    st.session_state.city = city_names[0]

selected_city, logout = display_navbar(city_names, st.session_state.city)
if logout :
    st.session_state.user = None
    st.rerun()
st.session_state.city = selected_city

col1, col2 = st.columns([3, 1])
with col1 :
    st.title("Air Quality Dashboard")
    st.caption(f"Real-time monitoring for {selected_city}")
with col2 :
    window = display_window_selector()

with st.spinner("Loading air quality data...") :
    view = asyncio.run(fetch_dashboard(selected_city, window))

if not view :
    st.error("Failed to load air quality data")
    st.stop()

display_stats(view["stats"])
display_charts(view)
display_table(view["table"])
