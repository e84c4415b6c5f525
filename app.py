# app.py
import logging
from datetime import date

import numpy as np
import matplotlib.pyplot as plt
import streamlit as st

from contract import Contract
from date_utils import parse_date
from rent import calculate_monthly_rent, records_in_window
from reports import schedule_dataframe, schedule_summary, build_schedule_csv

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")


# ---------------------------
# Page config
# ---------------------------
st.set_page_config(page_title="Lease Rent Schedule", page_icon="🏠", layout="wide")

st.title("🏠 Lease Rent Schedule")
st.caption(
    "Month-by-month rent due for a lease: prorated first month, periodic rent changes, and due dates clamped to short months."
)


# ========== Contract inputs ==========
def render_contract_inputs(defaults_key: str = "contract_defaults"):
    """
    Renders contract inputs and returns a dict:
      base, lease_start, window_start, window_end, due_day, freq, rate
    """
    if defaults_key not in st.session_state:
        today = date.today()
        st.session_state[defaults_key] = {
            "base": 1000.0,
            "lease_start": str(date(today.year, 1, 15)),
            "window_start": str(date(today.year, 1, 1)),
            "window_end": str(date(today.year, 12, 31)),
            "due_day": 15,
            "freq": 12,
            "rate_pct": 5.0,
        }

    s = st.session_state[defaults_key]
    key = lambda name: f"{defaults_key}__{name}"

    with st.expander("⚙️ Contract", expanded=True):
        colA, colB = st.columns(2)
        base = colA.number_input(
            "Base monthly rent",
            min_value=0.0,
            value=float(s["base"]),
            step=50.0,
            key=key("base"),
        )
        due_day = colB.number_input(
            "Day of month rent is due",
            min_value=1,
            max_value=31,
            value=int(s["due_day"]),
            step=1,
            key=key("due_day"),
            help="Days past the end of a month (e.g. 31 in April) fall on the month's last day.",
        )
        s["base"], s["due_day"] = base, due_day

        col1, col2 = st.columns(2)
        freq = col1.number_input(
            "Rent change frequency (months)",
            min_value=1,
            value=int(s["freq"]),
            step=1,
            key=key("freq"),
        )
        rate_pct = col2.number_input(
            "Rent change rate (% per change)",
            value=float(s["rate_pct"]),
            step=0.5,
            format="%.2f",
            key=key("rate_pct"),
            help="Negative values mark the unit as vacant.",
        )
        s["freq"], s["rate_pct"] = freq, rate_pct

        col3, col4, col5 = st.columns(3)
        lease_start = col3.text_input("Lease start (YYYY-MM-DD)", value=s["lease_start"], key=key("lease_start"))
        window_start = col4.text_input("Window start (YYYY-MM-DD)", value=s["window_start"], key=key("window_start"))
        window_end = col5.text_input("Window end (YYYY-MM-DD)", value=s["window_end"], key=key("window_end"))
        s["lease_start"], s["window_start"], s["window_end"] = lease_start, window_start, window_end

    return {
        "base": base,
        "lease_start": lease_start,
        "window_start": window_start,
        "window_end": window_end,
        "due_day": int(due_day),
        "freq": int(freq),
        "rate": rate_pct / 100.0,
    }


inputs = render_contract_inputs()

try:
    contract = Contract(
        base_monthly_rent=inputs["base"],
        lease_start_date=parse_date(inputs["lease_start"]),
        window_start_date=parse_date(inputs["window_start"]),
        window_end_date=parse_date(inputs["window_end"]),
        day_of_month_rent_due=inputs["due_day"],
        rent_rate_change_frequency=inputs["freq"],
        rent_change_rate=inputs["rate"],
    )
    records = calculate_monthly_rent(contract)
except ValueError as e:
    st.error(f"Input error: {e}")
    st.stop()

only_window = st.checkbox(
    "Show only due dates inside the window",
    value=False,
    help="The full schedule always starts at the lease start month.",
)
if only_window:
    records = records_in_window(records, contract.window_start_date, contract.window_end_date)

summary = schedule_summary(records)
m1, m2, m3, m4 = st.columns(4)
m1.metric("Months", summary["months"])
m2.metric("Total rent", f"{summary['total_rent']:,.2f}")
m3.metric("Rent changes", summary["escalations"])
m4.metric("Vacant", "Yes" if records and records[0].vacancy else "No")

df = schedule_dataframe(records)
st.dataframe(df, use_container_width=True)

if not df.empty:
    x = np.arange(len(df))
    fig, ax = plt.subplots()
    ax.bar(x, df["rent_amount"], label="Rent due")
    ax.set_xticks(x)
    ax.set_xticklabels([d.strftime("%Y-%m-%d") for d in df["rent_due_date"]], rotation=90, fontsize=7)
    ax.set_xlabel("Due date")
    ax.set_ylabel("Rent")
    ax.set_title("Rent due per month")
    ax.legend()
    st.pyplot(fig, use_container_width=True)

st.download_button(
    "Download rent_schedule.csv",
    data=build_schedule_csv(records),
    file_name="rent_schedule.csv",
    mime="text/csv",
)
