from dataclasses import dataclass, field
from typing import Literal

WaterAmount = Literal["little", "moderate", "much"]
Humidity = Literal["low", "medium", "high"]
Light = Literal["low", "medium", "bright", "direct"]


@dataclass(frozen=True)
class Species:
    id: str
    common_name: str
    botanical_name: str
    water_frequency_days: int
    water_amount: WaterAmount
    fertilize_frequency_days: int
    fertilize_months: frozenset[int]   # 1–12
    humidity: Humidity
    light: Light = "medium"
    repot_frequency_years: int = 2
    care_tips: tuple[str, ...] = field(default_factory=tuple)
