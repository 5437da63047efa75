# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Generative-AI collaborators backed by Google Gemini.

Both entry points take a snapshot of ``ProjectInputs`` and never raise: any
failure (missing API key, network error, timeout, unparseable response) is
logged and replaced by static placeholder content or an empty list. The
calculators do not depend on anything produced here.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import List, Optional

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from ..analysis.metrics import calculate_project_metrics
from ..analysis.scenario import compute_scenarios
from ..core.inputs import ConstructionPhase, ProjectInputs
from ..core.primitives import ProposalSettings
from ..utils.formatting import format_currency
from .content import AnalysisSection, ProposalContent, placeholder_content

logger = logging.getLogger(__name__)


class ProposalGenerationError(Exception):
    """Raised inside this module when a model response cannot be used."""


class _ProposalTextResponse(BaseModel):
    """Response schema requested from the text model."""

    executive_summary: str
    architectural_deep_dive: str
    location_and_access_analysis: str
    financial_model_and_profitability: str
    investor_value_proposition: str
    risk_and_mitigation: str
    investor_analysis: str
    cooperative_analysis: str
    conceptual_image_prompt: str


class _PhaseSuggestion(BaseModel):
    name: str
    duration_months: float
    cost_per_meter: float


def create_client(settings: ProposalSettings) -> genai.Client:
    """
    Build a Gemini client with the configured timeout.

    Raises:
        ProposalGenerationError: If no API key is configured
    """
    api_key = settings.resolve_api_key()
    if not api_key:
        raise ProposalGenerationError("GEMINI_API_KEY is not set")
    return genai.Client(
        api_key=api_key,
        http_options=types.HttpOptions(timeout=int(settings.timeout_seconds * 1000)),
    )


def build_proposal_prompt(inputs: ProjectInputs) -> str:
    """Persian prompt describing the project, its payment terms and scenarios."""
    metrics = calculate_project_metrics(inputs)
    scenarios = compute_scenarios(inputs)
    realistic = scenarios.realistic
    installments = "\n".join(
        f"    - {i.name}: {format_currency(i.amount)} تومان (ماه {i.due_month:g})"
        for i in inputs.installments
    )
    phases = "\n".join(
        f"    - {p.name}: {p.duration_months:g} ماه، متری {format_currency(p.cost_per_meter)} تومان"
        for p in inputs.construction_phases
    )
    return f"""
    به عنوان یک مشاور ارشد سرمایه‌گذاری مسکن و مدیر پروژه حرفه‌ای، یک پروپوزال جامع و دقیق بنویس.

    اطلاعات فنی و فیزیکی پروژه:
    - نام پروژه: {inputs.project_name}
    - موقعیت: {inputs.location} (دسترسی‌ها: {inputs.access})
    - مزایای موقعیت: {inputs.location_advantages}
    - متراژ زمین: {inputs.land_area:g} متر مربع
    - سطح اشغال پارکینگ: {inputs.parking_occupancy_percentage:g}٪ در {inputs.underground_floors} طبقه منفی
    - سطح اشغال همکف: {inputs.ground_floor_occupancy_percentage:g}٪
    - سطح اشغال طبقات مسکونی: {inputs.residential_occupancy_percentage:g}٪ در {inputs.floors} طبقه
    - زیربنای کل (ناخالص): {inputs.gross_total_area:g} متر مربع | مفید مسکونی: {inputs.net_residential_area:g} | تجاری: {inputs.net_commercial_area:g}
    - تعداد بلوک: {inputs.blocks} | نوع سازه: {inputs.construction_type.value} | شرایط زمین: {inputs.land_condition.value}
    - نما: {inputs.facade} | کیفیت ساخت: {inputs.construction_quality.value}
    - تعداد تقریبی واحدها: {metrics.estimated_unit_count} با متوسط متراژ {metrics.average_unit_size:.0f} متر

    توضیحات توصیفی:
    - شرح کلی: {inputs.project_description}
    - معماری و سبک: {inputs.architecture_style}
    - امکانات مشاعات: {inputs.common_amenities}
    - رزومه سازنده: {inputs.builder_resume}
    - سازه و فونداسیون: {inputs.foundation_system} | سقف: {inputs.roof_system}
    - تاسیسات: {inputs.hvac_system} | برق: {inputs.electrical_system} | نازک‌کاری: {inputs.interior_finishes}

    فازهای ساخت:
{phases}

    شرایط فروش سهم {inputs.unit_share_size:g} متری:
{installments}
    - قیمت روز بازار هر متر: {format_currency(inputs.market_price_per_meter)} تومان
    - قیمت تمام‌شده هر متر با بالاسری: {format_currency(metrics.total_cost_per_meter_with_overhead)} تومان

    سناریوهای رشد بازار: بدبینانه {inputs.pessimistic_market_growth:g}٪ - خوش‌بینانه {inputs.optimistic_market_growth:g}٪
    در سناریوی محتمل، سود خالص خریدار {format_currency(realistic.buyer_profit)} تومان و بازدهی سالانه {realistic.annual_roi_percent:.1f}٪ است.
    تورم هزینه ساخت: {inputs.construction_cost_escalation:g}٪

    دستورالعمل نگارش:
    1. لحن باید حرفه‌ای، ترغیب‌کننده و بر پایه اصول اقتصاد مهندسی باشد.
    2. شرایط پرداخت اقساطی را به عنوان شرایطی منعطف و جذاب توضیح بده.
    3. علی‌الحساب بودن هزینه ساخت و نقش مجمع عمومی تعاونی در مدیریت هزینه‌ها را شفاف توضیح بده.
    4. بخش investor_analysis برای خریدار سهم و بخش cooperative_analysis برای تعاونی نوشته شود.
    5. در conceptual_image_prompt یک توصیف انگلیسی کوتاه از نمای معماری پروژه برای تولید تصویر بنویس.

    خروجی JSON باشد.
    """


def _generate_text(client: genai.Client, prompt: str, settings: ProposalSettings) -> _ProposalTextResponse:
    response = client.models.generate_content(
        model=settings.text_model,
        contents=prompt,
        config=types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=_ProposalTextResponse,
        ),
    )
    if not response.text:
        raise ProposalGenerationError("No response text")
    try:
        return _ProposalTextResponse.model_validate_json(response.text)
    except ValidationError as e:
        raise ProposalGenerationError(f"Unexpected response shape: {e}") from e


def _generate_image(client: genai.Client, prompt: str, settings: ProposalSettings) -> str:
    """Base64 image for ``prompt``; empty string when the image model fails."""
    if not prompt or not settings.generate_image:
        return ""
    try:
        response = client.models.generate_images(
            model=settings.image_model,
            prompt=prompt,
            config=types.GenerateImagesConfig(number_of_images=1),
        )
        image_bytes = response.generated_images[0].image.image_bytes
    except Exception as e:
        logger.warning(f"Conceptual image generation failed: {e}")
        return ""
    return base64.b64encode(image_bytes).decode("ascii") if image_bytes else ""


def generate_proposal_content(
    inputs: ProjectInputs,
    client: Optional[genai.Client] = None,
    settings: Optional[ProposalSettings] = None,
) -> ProposalContent:
    """
    Generate the narrative proposal for ``inputs``.

    Args:
        inputs: Snapshot of the project parameters
        client: Gemini client; built from ``settings`` when omitted
        settings: Model names, timeout and API key

    Returns:
        Generated content, or ``placeholder_content()`` on any failure. An
        image failure alone keeps the text and leaves the image empty.
    """
    settings = settings or ProposalSettings()
    try:
        client = client or create_client(settings)
        text = _generate_text(client, build_proposal_prompt(inputs), settings)
    except Exception as e:
        logger.warning(f"Proposal generation failed: {e}")
        return placeholder_content()

    image = _generate_image(client, text.conceptual_image_prompt, settings)
    return ProposalContent(
        executive_summary=text.executive_summary,
        architectural_deep_dive=text.architectural_deep_dive,
        location_and_access_analysis=text.location_and_access_analysis,
        financial_model_and_profitability=text.financial_model_and_profitability,
        investor_value_proposition=text.investor_value_proposition,
        risk_and_mitigation=text.risk_and_mitigation,
        conceptual_image=image,
        conceptual_image_prompt=text.conceptual_image_prompt,
        investor_analysis=AnalysisSection(text=text.investor_analysis),
        cooperative_analysis=AnalysisSection(text=text.cooperative_analysis),
    )


def build_phase_prompt(inputs: ProjectInputs) -> str:
    return f"""
    برای یک پروژه ساختمانی با مشخصات زیر، فازهای اجرایی ساخت را پیشنهاد بده.
    برای هر فاز نام فارسی، مدت به ماه (duration_months) و هزینه ساخت هر متر مربع به تومان (cost_per_meter) را بده.

    - زیربنای ناخالص: {inputs.gross_total_area:g} متر مربع
    - تعداد طبقات: {inputs.floors} | طبقات منفی: {inputs.underground_floors} | بلوک‌ها: {inputs.blocks}
    - نوع سازه: {inputs.construction_type.value} | شرایط زمین: {inputs.land_condition.value}
    - کیفیت ساخت: {inputs.construction_quality.value}

    خروجی یک آرایه JSON باشد.
    """


def suggest_construction_phases(
    inputs: ProjectInputs,
    client: Optional[genai.Client] = None,
    settings: Optional[ProposalSettings] = None,
) -> List[ConstructionPhase]:
    """
    Ask the model for a construction schedule matching the project structure.

    Returns:
        Suggested phases numbered from 1, or an empty list on any failure
    """
    settings = settings or ProposalSettings()
    try:
        client = client or create_client(settings)
        response = client.models.generate_content(
            model=settings.text_model,
            contents=build_phase_prompt(inputs),
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=list[_PhaseSuggestion],
            ),
        )
        if not response.text:
            raise ProposalGenerationError("No response text")
        suggestions = [
            _PhaseSuggestion.model_validate(item)
            for item in _parse_json_list(response.text)
        ]
        return [
            ConstructionPhase(
                id=index,
                name=s.name,
                duration_months=s.duration_months,
                cost_per_meter=s.cost_per_meter,
            )
            for index, s in enumerate(suggestions, start=1)
        ]
    except Exception as e:
        logger.warning(f"Phase suggestion failed: {e}")
        return []


def _parse_json_list(text: str) -> list:
    data = json.loads(text)
    if not isinstance(data, list):
        raise ProposalGenerationError("Expected a JSON array of phases")
    return data
