"""
Pydantic models for the competition filter controls
"""
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


class TierFilter(str, Enum):
    """Manual competition tier selection"""
    ALL = "All"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH_RISK = "HighRisk"


class FilterState(BaseModel):
    """Current state of the smart filter panel"""
    smart_mode: bool = Field(False, description="Hide High competition postings, overriding manual controls")
    hide_very_high: bool = Field(False, description="Hide High competition postings")
    tier_filter: TierFilter = Field(TierFilter.ALL, description="Keep only one competition tier")

    model_config = ConfigDict(frozen=True)
