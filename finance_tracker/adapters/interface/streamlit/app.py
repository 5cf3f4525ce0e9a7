"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

import streamlit as st
import altair as alt

from finance_tracker.domain.constants import SUPPORTED_INTERVALS
from finance_tracker.domain.errors import InvalidArgumentError
from finance_tracker.domain.models import (
    Account,
    MonthlySummary,
    NetWorthPoint,
)
from finance_tracker.infrastructure.container import (
    build_accounts_use_case,
    build_monthly_summary_use_case,
    build_net_worth_series_use_case,
)
from finance_tracker.infrastructure.logging.logger import get_usage_logger
from finance_tracker.infrastructure.settings import FinanceSettings


def _fetch_accounts(user_id: str) -> Sequence[Account]:
    """Fetch the user's accounts."""
    use_case = build_accounts_use_case()
    return use_case.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_accounts(user_id: str) -> Sequence[Account]:
    """Cached wrapper around _fetch_accounts for Streamlit sessions."""
    return _fetch_accounts(user_id)


def _fetch_monthly_summary(user_id: str, month: str) -> MonthlySummary:
    """Fetch the monthly summary for the user."""
    use_case = build_monthly_summary_use_case()
    return use_case.execute(user_id, month)


@st.cache_data(show_spinner=False)
def _load_monthly_summary(user_id: str, month: str) -> MonthlySummary:
    """Cached wrapper around _fetch_monthly_summary."""
    return _fetch_monthly_summary(user_id, month)


def _fetch_net_worth_series(
    user_id: str,
    start_date: date,
    end_date: date,
    interval: str,
) -> list[NetWorthPoint]:
    """Fetch the net worth series for the user."""
    use_case = build_net_worth_series_use_case()
    return use_case.execute(user_id, start_date, end_date, interval=interval)


@st.cache_data(show_spinner=False)
def _load_net_worth_series(
    user_id: str,
    start_date: date,
    end_date: date,
    interval: str,
) -> list[NetWorthPoint]:
    """Cached wrapper around _fetch_net_worth_series."""
    return _fetch_net_worth_series(user_id, start_date, end_date, interval)


def _format_amount(value: Decimal) -> str:
    """Format amounts for display."""
    return f"{value:,.2f}"


def _format_signed(value: Decimal) -> str:
    """Format signed amounts for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _get_period_start(
    period: str,
    today: date,
) -> date:
    """Return the start date for the selected net worth period."""
    if period == "MTD":
        return date(today.year, today.month, 1)
    if period == "QTD":
        quarter = (today.month - 1) // 3
        start_month = quarter * 3 + 1
        return date(today.year, start_month, 1)
    if period == "Last 12 Months":
        return today - timedelta(days=365)
    return date(today.year, 1, 1)


def _prepare_breakdown_chart_data(
    summary: MonthlySummary,
) -> list[dict[str, str | float]]:
    """Prepare bar chart data for the expense breakdown.

    Expenses are plotted as positive magnitudes, keeping the summary order
    (largest expense first).
    """
    return [
        {
            "category": item.category_name,
            "amount": float(abs(item.total)),
            "amount_label": _format_amount(item.total),
        }
        for item in summary.expense_breakdown
    ]


def _prepare_net_worth_chart_data(
    points: Sequence[NetWorthPoint],
) -> list[dict[str, str | float]]:
    """Prepare line chart data for the net worth series."""
    data: list[dict[str, str | float]] = []
    for point in points:
        payload = point.to_dict()
        data.append(
            {
                "date": payload["date"],
                "net_worth": float(point.net_worth),
                "net_worth_label": _format_amount(point.net_worth),
            }
        )
    return data


def _render_breakdown_chart(summary: MonthlySummary) -> None:
    """Render a horizontal bar chart of expenses by category."""
    if not summary.expense_breakdown:
        st.info("No expenses recorded for this month.")
        return
    data = _prepare_breakdown_chart_data(summary)
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusEnd=4,
        color="#e76f51",
    ).encode(
        x=alt.X("amount:Q", title="Spent"),
        y=alt.Y("category:N", sort=None, title=None),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.subheader(f"Expenses by Category ({summary.month})")
    st.altair_chart(chart, width="stretch")


def _render_net_worth_chart(
    points: Sequence[NetWorthPoint],
    interval: str,
) -> None:
    """Render the net worth series as a line chart."""
    st.subheader(f"Net Worth by {interval}")
    if not points:
        st.info("No balance snapshots in the selected range.")
        return
    data = _prepare_net_worth_chart_data(points)
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        color="#1b9aaa",
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("net_worth:Q", title="Net worth"),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("net_worth_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_accounts(accounts: Sequence[Account]) -> None:
    """Render the accounts table."""
    st.subheader("Accounts")
    data = [
        {
            "Name": acc.name,
            "Type": acc.account_type or "—",
            "Liability": "Yes" if acc.is_liability else "No",
        }
        for acc in accounts
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)


def _render_dashboard(user_id: str, default_interval: str) -> None:
    """Render the monthly summary and net worth sections."""
    today = date.today()
    month = st.sidebar.text_input(
        "Month (YYYY-MM)",
        value=today.strftime("%Y-%m"),
    )
    try:
        summary = _load_monthly_summary(user_id, month)
    except InvalidArgumentError as exc:
        st.error(str(exc))
        return

    income_col, expenses_col, net_col = st.columns(3)
    income_col.metric("Income", _format_amount(summary.total_income))
    expenses_col.metric("Expenses", _format_amount(summary.total_expenses))
    net_col.metric("Net", _format_signed(summary.net))
    _render_breakdown_chart(summary)

    period = st.sidebar.selectbox(
        "Net worth period",
        ["YTD", "MTD", "QTD", "Last 12 Months"],
    )
    intervals = list(SUPPORTED_INTERVALS)
    interval = st.sidebar.selectbox(
        "Interval",
        intervals,
        index=intervals.index(default_interval),
    )
    points = _load_net_worth_series(
        user_id,
        _get_period_start(period, today),
        today,
        interval,
    )
    _render_net_worth_chart(points, interval)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Tracker", layout="wide")
    st.title("Finance Tracker")

    settings = FinanceSettings.from_env()
    if not settings.user_id:
        st.warning("Set FINANCE_USER_ID to load your data.")
        return

    page = st.sidebar.selectbox("Page", ["Dashboard", "Accounts"])
    get_usage_logger().info(f"Page view: {page}")

    if page == "Dashboard":
        _render_dashboard(settings.user_id, settings.default_interval)
    else:
        accounts = _load_accounts(settings.user_id)
        st.caption(f"{len(accounts)} accounts")
        if not accounts:
            st.warning("No accounts found.")
            return
        _render_accounts(accounts)


if __name__ == "__main__":  # pragma: no cover
    main()
