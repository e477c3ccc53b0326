from typing import Literal

from pydantic import BaseModel, field_serializer


class SpeciesRead(BaseModel):
    id: str
    common_name: str
    botanical_name: str
    water_frequency_days: int
    water_amount: Literal["little", "moderate", "much"]
    fertilize_frequency_days: int
    fertilize_months: frozenset[int]
    humidity: Literal["low", "medium", "high"]
    light: Literal["low", "medium", "bright", "direct"]
    repot_frequency_years: int
    care_tips: list[str] = []

    model_config = {"from_attributes": True}

    @field_serializer("fertilize_months")
    def serialize_months(self, months: frozenset[int]) -> list[int]:
        return sorted(months)
