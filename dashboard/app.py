#file: dashboard/app.py

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio
import logging
import streamlit as st

st.set_page_config(page_title = "Environmental Monitoring Dashboard", page_icon = "🌍", layout = "wide")

from envmonitor.config import DATA_SOURCE, LOG_FORMAT, LOG_LEVEL
from envmonitor.pipeline import LoadCycle, LoadState
from dashboard.presenter import Presenter
from dashboard.ui_elements import display_error, hide_loading, show_loading

# Configure logging
logging.basicConfig(level = LOG_LEVEL, format = LOG_FORMAT)

# Streamlit UI
st.title("Environmental Monitoring Dashboard")
status = st.empty()
show_loading(status)

stat_columns = st.columns(4)

col1, col2 = st.columns(2)
with col1 :
    st.subheader("Temperature & CO₂")
    main_target = st.empty()
with col2 :
    st.subheader("Water & Air Quality")
    quality_target = st.empty()

st.subheader("Data")
table_target = st.empty()

presenter = Presenter(stat_columns, table_target, main_target, quality_target)
cycle = asyncio.run(LoadCycle(DATA_SOURCE).run(presenter))

if cycle.state is LoadState.READY :
    hide_loading(status)
    if cycle.diagnostics :
        with st.expander(f"Parse warnings ({len(cycle.diagnostics)})") :
            st.dataframe([d.model_dump() for d in cycle.diagnostics], hide_index = True)
else :
    display_error(status, cycle.error)
