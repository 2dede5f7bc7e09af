from .model import (
    AnimationState,
    BoundingBox,
    BuildingInsights,
    FinancialInputs,
    FinancialProjection,
    InstallationComparison,
    PanelConfiguration,
    PanelPlacement,
    PanelPolygon,
    RoofSegmentStats,
)

__all__ = [
    "AnimationState",
    "BoundingBox",
    "BuildingInsights",
    "FinancialInputs",
    "FinancialProjection",
    "InstallationComparison",
    "PanelConfiguration",
    "PanelPlacement",
    "PanelPolygon",
    "RoofSegmentStats",
]
