# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Streamlit dashboard.

Run with ``streamlit run src/sahm/app.py``. The session starts from the
``data`` query parameter when present, otherwise from the default project.
Every widget edit goes through ``apply_change`` and the whole analysis is
recomputed on each rerun.
"""

from __future__ import annotations

import base64
import logging
from typing import Any, List

import pandas as pd
import streamlit as st
from pydantic import ValidationError

from sahm.analysis import analyze, value_projection
from sahm.core import ProjectInputs, apply_change
from sahm.core.primitives import (
    ConstructionQualityEnum,
    ConstructionTypeEnum,
    LandConditionEnum,
)
from sahm.proposal import (
    INITIAL_CONTENT,
    generate_proposal_content,
    suggest_construction_phases,
)
from sahm.sharing import QUERY_PARAMETER, encode_state, inputs_from_query
from sahm.utils import format_compact, format_currency, format_shamsi_date
from sahm.visualization import (
    create_kpi_cards_data,
    create_land_use_chart,
    create_phase_timeline,
    create_scenario_comparison_chart,
    create_value_projection_chart,
    get_label_color,
)

logger = logging.getLogger(__name__)

# Widget bounds matching GrowthRate, whose lower limit is exclusive
GROWTH_RATE_MIN = -99.9
GROWTH_RATE_MAX = 1000.0

NARRATIVE_FIELDS = [
    ("location", "موقعیت"),
    ("access", "دسترسی‌ها"),
    ("location_advantages", "مزایای موقعیت"),
    ("project_vibe", "شعار پروژه"),
    ("project_description", "شرح کلی"),
    ("architecture_style", "معماری و سبک"),
    ("common_amenities", "امکانات مشاعات"),
    ("builder_resume", "رزومه سازنده"),
    ("construction_description", "شرح اجرا"),
    ("facade_description", "شرح نما"),
    ("core_shell_description", "شرح سفت‌کاری"),
    ("foundation_system", "سیستم فونداسیون"),
    ("roof_system", "سیستم سقف"),
    ("hvac_system", "تاسیسات مکانیکی"),
    ("electrical_system", "تاسیسات برقی"),
    ("interior_finishes", "نازک‌کاری"),
]

st.set_page_config(page_title="امکان‌سنجی پروژه", page_icon="🏗️", layout="wide")

# Initialize session_state if it doesn't exist
if "inputs" not in st.session_state:
    st.session_state["inputs"] = inputs_from_query(st.query_params.to_dict())
if "proposal" not in st.session_state:
    st.session_state["proposal"] = INITIAL_CONTENT


def _update(field: str, value: Any) -> None:
    """Apply one edit; an invalid value is reported and the old state kept."""
    state: ProjectInputs = st.session_state["inputs"]
    current = getattr(state, field)
    if isinstance(current, list):
        current = [item.model_dump() for item in current]
    if current == value:
        return
    try:
        st.session_state["inputs"] = apply_change(state, field, value)
    except ValidationError as e:
        st.sidebar.error(f"{field}: {e.errors()[0]['msg']}")


def _records(df: pd.DataFrame) -> List[dict]:
    return [
        # numpy scalars become plain Python values before validation
        {key: getattr(value, "item", lambda: value)() for key, value in row.items() if not pd.isna(value)}
        for row in df.to_dict(orient="records")
    ]


inputs: ProjectInputs = st.session_state["inputs"]

# =============================================================================
# Sidebar form
# =============================================================================

with st.sidebar:
    st.header("مشخصات پروژه")
    _update("project_name", st.text_input("نام پروژه", inputs.project_name))

    with st.expander("زمین و تراکم", expanded=True):
        _update("land_area", st.number_input("متراژ زمین", min_value=1.0, value=inputs.land_area))
        _update(
            "parking_occupancy_percentage",
            st.number_input("سطح اشغال پارکینگ (٪)", 0.0, 100.0, inputs.parking_occupancy_percentage),
        )
        _update(
            "ground_floor_occupancy_percentage",
            st.number_input("سطح اشغال همکف (٪)", 0.0, 100.0, inputs.ground_floor_occupancy_percentage),
        )
        _update(
            "residential_occupancy_percentage",
            st.number_input("سطح اشغال مسکونی (٪)", 0.0, 100.0, inputs.residential_occupancy_percentage),
        )
        _update("floors", int(st.number_input("طبقات مسکونی", min_value=0, value=inputs.floors)))
        _update(
            "underground_floors",
            int(st.number_input("طبقات منفی", min_value=0, value=inputs.underground_floors)),
        )
        _update("blocks", int(st.number_input("تعداد بلوک", min_value=1, value=inputs.blocks)))

    with st.expander("زیربنا"):
        _update("gross_total_area", st.number_input("زیربنای ناخالص", min_value=0.0, value=inputs.gross_total_area))
        _update(
            "net_residential_area",
            st.number_input("مفید مسکونی", min_value=0.0, value=inputs.net_residential_area),
        )
        _update(
            "net_commercial_area",
            st.number_input("مفید تجاری", min_value=0.0, value=inputs.net_commercial_area),
        )

    with st.expander("سازه و کیفیت"):
        structure_types = list(ConstructionTypeEnum)
        _update(
            "construction_type",
            st.selectbox("نوع سازه", structure_types, index=structure_types.index(inputs.construction_type), format_func=lambda e: e.value),
        )
        conditions = list(LandConditionEnum)
        _update(
            "land_condition",
            st.selectbox("شرایط زمین", conditions, index=conditions.index(inputs.land_condition), format_func=lambda e: e.value),
        )
        qualities = list(ConstructionQualityEnum)
        _update(
            "construction_quality",
            st.selectbox("کیفیت ساخت", qualities, index=qualities.index(inputs.construction_quality), format_func=lambda e: e.value),
        )
        _update("facade", st.text_input("نما", inputs.facade))

    with st.expander("فروش و سناریوها"):
        _update("unit_share_size", st.number_input("متراژ هر سهم", min_value=0.1, value=inputs.unit_share_size))
        _update("unit_share_price", st.number_input("قیمت سهم", min_value=0.0, value=inputs.unit_share_price))
        _update(
            "market_price_per_meter",
            st.number_input("قیمت روز بازار هر متر", min_value=0.0, value=inputs.market_price_per_meter),
        )
        _update(
            "pessimistic_market_growth",
            st.number_input(
                "رشد بدبینانه (٪)", GROWTH_RATE_MIN, GROWTH_RATE_MAX, inputs.pessimistic_market_growth,
                key="pessimistic_market_growth",
            ),
        )
        _update(
            "optimistic_market_growth",
            st.number_input(
                "رشد خوش‌بینانه (٪)", GROWTH_RATE_MIN, GROWTH_RATE_MAX, inputs.optimistic_market_growth,
                key="optimistic_market_growth",
            ),
        )
        _update(
            "construction_cost_escalation",
            st.number_input(
                "تورم هزینه ساخت (٪)", GROWTH_RATE_MIN, GROWTH_RATE_MAX, inputs.construction_cost_escalation,
                key="construction_cost_escalation",
            ),
        )
        _update(
            "admin_overhead_percentage",
            st.number_input("بالاسری مدیریت (٪)", 0.0, 100.0, inputs.admin_overhead_percentage),
        )
        _update(
            "sales_commission_percentage",
            st.number_input("کمیسیون فروش (٪)", 0.0, 100.0, inputs.sales_commission_percentage),
        )
        _update("elapsed_months", st.number_input("ماه‌های سپری‌شده", min_value=0.0, value=inputs.elapsed_months))

    with st.expander("ترکیب واحدها"):
        unit_mix_df = pd.DataFrame(
            [band.model_dump() for band in inputs.unit_mix], columns=["size", "percentage"]
        )
        edited_unit_mix = st.data_editor(unit_mix_df, num_rows="dynamic", key="unit_mix_editor")
        _update("unit_mix", _records(edited_unit_mix))

    with st.expander("توضیحات پروژه"):
        for field, label in NARRATIVE_FIELDS:
            _update(field, st.text_area(label, getattr(inputs, field), key=f"text_{field}"))

inputs = st.session_state["inputs"]
result = analyze(inputs)
st.query_params[QUERY_PARAMETER] = encode_state(inputs)

# =============================================================================
# Main view
# =============================================================================

st.title(inputs.project_name or "امکان‌سنجی پروژه")
st.caption(format_shamsi_date())

kpis = create_kpi_cards_data(
    annual_roi_percent=result.realistic.annual_roi_percent,
    buyer_profit=result.realistic.buyer_profit,
    total_cost_to_buyer=result.metrics.total_cost_to_buyer,
    label=result.label,
    progress_percentage=result.progress.progress_percentage,
)
for column, kpi in zip(st.columns(len(kpis)), kpis):
    column.metric(kpi["label"], kpi["value"], help=kpi["caption"])

st.markdown(
    f"<span style='color:{get_label_color(result.label)};font-weight:bold'>"
    f"ارزیابی: {result.label.persian_label}</span>",
    unsafe_allow_html=True,
)

if not result.is_density_consistent:
    occupancy = result.metrics.occupancy
    st.warning(
        f"زیربنای اعلام‌شده ({format_currency(occupancy.declared_gross_area)} متر) با زیربنای "
        f"حاصل از سطح اشغال ({format_currency(occupancy.computed_gross_area)} متر) همخوانی ندارد."
    )

dashboard_tab, schedule_tab, reports_tab, proposal_tab = st.tabs(
    ["داشبورد", "برنامه ساخت و پرداخت", "گزارش‌ها", "پروپوزال"]
)

with dashboard_tab:
    left, right = st.columns(2)
    left.plotly_chart(
        create_scenario_comparison_chart(result.scenarios, result.threshold_rate),
        use_container_width=True,
    )
    right.plotly_chart(create_land_use_chart(result.metrics.areas), use_container_width=True)
    projection = value_projection(inputs, months_step=result.settings.projection_step_months)
    st.plotly_chart(create_value_projection_chart(projection), use_container_width=True)

with schedule_tab:
    st.plotly_chart(create_phase_timeline(result.progress), use_container_width=True)

    phases_df = pd.DataFrame([p.model_dump() for p in inputs.construction_phases])
    edited_phases = st.data_editor(phases_df, num_rows="dynamic", key="phases_editor")
    _update("construction_phases", _records(edited_phases))

    if st.button("پیشنهاد فازها با هوش مصنوعی"):
        with st.spinner("در حال دریافت پیشنهاد..."):
            suggested = suggest_construction_phases(inputs)
        if suggested:
            _update("construction_phases", suggested)
            st.rerun()
        else:
            st.error("پیشنهادی دریافت نشد.")

    installments_df = pd.DataFrame([i.model_dump() for i in inputs.installments])
    edited_installments = st.data_editor(installments_df, num_rows="dynamic", key="installments_editor")
    _update("installments", _records(edited_installments))

with reports_tab:
    st.subheader("مقایسه سناریوها")
    st.dataframe(result.reporting.scenario_table(formatted=True), use_container_width=True)
    st.subheader("کنترل تراکم")
    st.dataframe(result.reporting.density_check(formatted=True), use_container_width=True)
    st.subheader("هزینه‌ها")
    st.dataframe(result.reporting.cost_breakdown(formatted=True), use_container_width=True)
    st.subheader("اقساط")
    st.dataframe(result.reporting.installment_schedule(formatted=True), use_container_width=True)

with proposal_tab:
    if st.button("تولید پروپوزال"):
        with st.spinner("در حال نگارش پروپوزال..."):
            st.session_state["proposal"] = generate_proposal_content(inputs)

    content = st.session_state["proposal"]
    for title, text in [
        ("خلاصه مدیریتی", content.executive_summary),
        ("معماری", content.architectural_deep_dive),
        ("موقعیت و دسترسی", content.location_and_access_analysis),
        ("مدل مالی", content.financial_model_and_profitability),
        ("ارزش پیشنهادی", content.investor_value_proposition),
        ("ریسک‌ها", content.risk_and_mitigation),
        ("تحلیل سرمایه‌گذار", content.investor_analysis.text),
        ("تحلیل تعاونی", content.cooperative_analysis.text),
    ]:
        if text:
            st.subheader(title)
            st.write(text)
    if content.has_image:
        st.image(base64.b64decode(content.conceptual_image))

    st.download_button(
        "دانلود PDF",
        data=result.reporting.pdf(content),
        file_name="feasibility.pdf",
        mime="application/pdf",
    )

st.caption(f"قیمت تمام‌شده هر متر: {format_compact(result.metrics.total_cost_per_meter_with_overhead)} تومان")
