"""GET /v1/content/* - static copy for the landing and explanation pages"""

from dataclasses import asdict
from fastapi import APIRouter

from altscore_gateway.api.v1.schemas import ExplanationContentResponse, LandingContentResponse
from altscore_gateway.domain import content

router = APIRouter()


@router.get("/content/landing", response_model=LandingContentResponse)
def get_landing_content():
    return LandingContentResponse(
        headline=content.HERO_HEADLINE,
        tagline=content.HERO_TAGLINE,
        subheadline=content.HERO_SUBHEADLINE,
        features=[asdict(f) for f in content.FEATURES],
        benefits=list(content.BENEFITS),
        data_points=[asdict(p) for p in content.HERO_DATA_POINTS],
    )


@router.get("/content/explanation", response_model=ExplanationContentResponse)
def get_explanation_content():
    """
    How-it-works page data.

    Feature importance is illustrative mock data, not computed from the
    score engine.
    """
    return ExplanationContentResponse(
        feature_importance=[asdict(f) for f in content.FEATURE_IMPORTANCE],
        risk_distribution=[asdict(r) for r in content.RISK_DISTRIBUTION],
        improvement_tips=[asdict(t) for t in content.IMPROVEMENT_TIPS],
    )
