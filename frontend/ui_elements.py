#file: frontend/ui_elements.py

import streamlit as st

from frontend.charts import gas_line_figure, particulate_bar_figure, polar_area_figure, radar_figure, timeline_figure
from frontend.utils import WINDOW_OPTIONS, format_trend, table_rows_to_frame


def display_login(error = None) :
    """Login form. Returns (username, password) once submitted, otherwise None."""
    st.title("🌬️ Welcome Back")
    st.caption("Monitor air quality metrics in real-time. Use demo/demo to login.")
    if error :
        st.error(error)

    with st.form("login") :
        username = st.text_input("Username")
        password = st.text_input("Password", type = "password")
        submitted = st.form_submit_button("Sign In", use_container_width = True)

    if submitted :
        return username, password
    return None


def display_navbar(city_names, selected) :
    """Title bar with city selector and logout button. Returns (city, logout_clicked)."""
    col1, col2, col3 = st.columns([4, 2, 1])
    with col1 :
        st.markdown("### 🌬️ AirQuality")
    with col2 :
        index = city_names.index(selected) if selected in city_names else 0
        city = st.selectbox("City", city_names, index = index, label_visibility = "collapsed")
    with col3 :
        logout = st.button("Logout", use_container_width = True)
    return city, logout


def display_window_selector(selected = "24h") :
    """Return the selected window in hours."""
    options = list(WINDOW_OPTIONS)
    label = st.radio("Time range", options, index = options.index(selected), horizontal = True,
                     label_visibility = "collapsed", key = "window")
    return WINDOW_OPTIONS[label]


def display_stats(stats) :
    """Stat cards for the current hour."""
    for column, stat in zip(st.columns(len(stats)), stats) :
        value = "-" if stat["value"] is None else str(stat["value"])
        if stat.get("unit") :
            value = f"{value} {stat['unit']}"
        with column :
            with st.container(border = True) :
                st.metric(label = stat["label"], value = value, delta = format_trend(stat.get("trend")))


def chart_card(title, fig) :
    with st.container(border = True) :
        st.subheader(title)
        st.plotly_chart(fig, use_container_width = True)


def display_charts(view) :
    """All chart cards of a dashboard view."""
    chart_card("AQI Timeline", timeline_figure(view["timeline"]))

    col1, col2 = st.columns(2)
    with col1 :
        chart_card("Pollutant Distribution", radar_figure(view["distribution"]))
    with col2 :
        chart_card("Pollutant Comparison", polar_area_figure(view["comparison"]))

    col1, col2 = st.columns(2)
    with col1 :
        chart_card("PM2.5 vs PM10", particulate_bar_figure(view["particulates"]))
    with col2 :
        chart_card("Gas Pollutants", gas_line_figure(view["gases"]))


def display_table(rows) :
    with st.container(border = True) :
        st.subheader("Latest Pollutant Concentrations")
        st.dataframe(table_rows_to_frame(rows), hide_index = True, use_container_width = True, height = 400)
