# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Proposal content produced by the generative-AI writer.

The calculators never read this; it is narrative text and image payloads
handed straight to the proposal view and the PDF export.
"""

from __future__ import annotations

from ..core.primitives import Model

UNAVAILABLE_TEXT = "اطلاعات در دسترس نیست."
GENERATION_ERROR_TEXT = "خطا در تولید محتوا. لطفا مجددا تلاش کنید."


class AnalysisSection(Model):
    """A narrative section addressed to one audience."""

    text: str = ""


class ProposalContent(Model):
    """
    Narrative sections of the investment proposal.

    Image fields hold base64-encoded image bytes, or an empty string when no
    image is available.
    """

    executive_summary: str = ""
    architectural_deep_dive: str = ""
    location_and_access_analysis: str = ""
    financial_model_and_profitability: str = ""
    investor_value_proposition: str = ""
    risk_and_mitigation: str = ""
    conceptual_image: str = ""
    conceptual_image_prompt: str = ""
    investor_analysis: AnalysisSection = AnalysisSection()
    cooperative_analysis: AnalysisSection = AnalysisSection()

    @property
    def has_image(self) -> bool:
        return bool(self.conceptual_image)


def placeholder_content() -> ProposalContent:
    """Static content returned whenever generation fails."""
    return ProposalContent(
        executive_summary=GENERATION_ERROR_TEXT,
        architectural_deep_dive=UNAVAILABLE_TEXT,
        location_and_access_analysis=UNAVAILABLE_TEXT,
        financial_model_and_profitability=UNAVAILABLE_TEXT,
        investor_value_proposition=UNAVAILABLE_TEXT,
        risk_and_mitigation=UNAVAILABLE_TEXT,
        conceptual_image="",
        conceptual_image_prompt="",
        investor_analysis=AnalysisSection(text=UNAVAILABLE_TEXT),
        cooperative_analysis=AnalysisSection(text=UNAVAILABLE_TEXT),
    )


INITIAL_CONTENT = ProposalContent(
    executive_summary=(
        "پروژه در یکی از بهترین نقاط منطقه ۵ تهران واقع شده است. سازه شامل طبقات منفی "
        "پارکینگ و تاسیسات، یک طبقه همکف پودیوم و بلوک‌های مسکونی متصل به هم بر روی "
        "پودیوم می‌باشد."
    ),
    location_and_access_analysis=(
        "منطقه ۵ تهران به دلیل بافت مدرن، خیابان‌کشی اصولی و دسترسی به شریان‌های اصلی "
        "غرب تهران، یکی از پرتقاضاترین مناطق برای سکونت و سرمایه‌گذاری است."
    ),
    financial_model_and_profitability=(
        "با توجه به قیمت زمین در این منطقه و تراکم مفید پروژه، ارزش افزوده سهام پس از "
        "تکمیل اسکلت و سفت‌کاری جهش قابل توجهی خواهد داشت."
    ),
    architectural_deep_dive=(
        "معماری پروژه بر اساس اتصال بلوک‌ها بر روی یک پودیوم یکپارچه طراحی شده است و "
        "لابی با سقف بلند، فضایی هتلینگ ایجاد می‌کند."
    ),
    risk_and_mitigation=(
        "هزینه ساخت به‌صورت علی‌الحساب بوده و تغییرات نرخ تورم و مصالح در مجمع عمومی "
        "سالانه بررسی و لحاظ می‌گردد."
    ),
)
