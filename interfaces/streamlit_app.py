"""
Streamlit web interface for the option chain pricer.

Interactive UI with tabs for:
- Chain table per asset price
- Price heatmap over strike and days to expiry
"""

import streamlit as st
import numpy as np
import plotly.graph_objects as go
from option_chain.api.frames import pivot_strike_by_expiry, response_to_frame
from option_chain.api.response import build_option_chain_response
from option_chain.utils.exceptions import OptionChainError
from option_chain.utils.types import ValueSpan

st.set_page_config(page_title="Option Chain Pricer", layout="wide")

st.title("Option Chain Pricer")
st.markdown("Black-Scholes prices across asset price, strike price and days to expiry")

# Sidebar parameters
st.sidebar.header("Option Parameters")
asset_name = st.sidebar.text_input("Asset Name", value="SPY")
option_type = st.sidebar.selectbox("Option Type", ["Call", "Put"])
r = st.sidebar.slider("Risk-Free Rate (%)", 0.0, 20.0, 5.0) / 100
sigma = st.sidebar.slider("Volatility (%)", 1.0, 200.0, 20.0) / 100

st.sidebar.header("Asset Price")
asset_low = st.sidebar.number_input("Asset Low", value=95.0, min_value=0.25, step=0.25)
asset_high = st.sidebar.number_input("Asset High", value=105.0, min_value=0.25, step=0.25)
asset_step = st.sidebar.number_input("Asset Step", value=5.0, min_value=0.0, step=0.25)

st.sidebar.header("Strike Price")
strike_low = st.sidebar.number_input("Strike Low", value=90.0, min_value=0.25, step=0.25)
strike_high = st.sidebar.number_input("Strike High", value=110.0, min_value=0.25, step=0.25)
strike_step = st.sidebar.number_input("Strike Step", value=2.5, min_value=0.0, step=0.25)

st.sidebar.header("Days to Expiry")
days_low = st.sidebar.number_input("Days Low", value=7.0, min_value=0.0, step=0.25)
days_high = st.sidebar.number_input("Days High", value=63.0, min_value=0.25, step=0.25)
days_step = st.sidebar.number_input("Days Step", value=7.0, min_value=0.0, step=0.25)

try:
    response = build_option_chain_response(
        asset_name,
        option_type,
        ValueSpan(asset_low, asset_high, asset_step),
        ValueSpan(strike_low, strike_high, strike_step),
        ValueSpan(days_low, days_high, days_step),
        risk_free_rate=r,
        volatility=sigma,
    )
except OptionChainError as e:
    st.error(f"Error: {e}")
    st.stop()

frame = response_to_frame(response)
asset_prices = [level.asset_price for level in response.values]
asset_price = st.select_slider("Asset Price", options=asset_prices)
table = pivot_strike_by_expiry(frame, asset_price)

# Main tabs
tab1, tab2 = st.tabs(["Chain Table", "Price Heatmap"])

with tab1:
    st.header(f"{option_type} Chain for {asset_name} at {asset_price:g}")
    st.dataframe(table, use_container_width=True)

with tab2:
    st.header("Price by Strike and Days to Expiry")

    fig = go.Figure(
        data=go.Heatmap(
            z=table.to_numpy(),
            x=np.asarray(table.columns, dtype=float),
            y=np.asarray(table.index, dtype=float),
            colorscale="Viridis",
            colorbar=dict(title="Price"),
        )
    )
    fig.update_layout(xaxis_title="Days to Expiry", yaxis_title="Strike Price")
    st.plotly_chart(fig, use_container_width=True)
