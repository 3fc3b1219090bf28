#file: envmonitor/models.py

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

REQUIRED_COLUMNS = ["Date", "Temperature", "CO2", "Water_Quality", "Air_Quality"]
NUMERIC_COLUMNS = ["Temperature", "CO2", "Water_Quality", "Air_Quality"]


class Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: Optional[str] = Field(None, alias="Date", description="Observation date, used verbatim as a label")
    temperature: Optional[float] = Field(None, alias="Temperature", description="Temperature (°C)")
    co2: Optional[float] = Field(None, alias="CO2", description="CO2 concentration (ppm)")
    water_quality: Optional[float] = Field(None, alias="Water_Quality", description="Water quality (%)")
    air_quality: Optional[float] = Field(None, alias="Air_Quality", description="Air quality index")


class Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float = Field(..., description="Mean temperature (°C), one decimal place")
    co2: int = Field(..., description="Mean CO2 concentration (ppm)")
    water_quality: int = Field(..., description="Mean water quality (%)")
    air_quality: int = Field(..., description="Mean air quality index")

    def display(self) -> Dict[str, str]:
        """Labelled display text for the four statistic cards."""
        return {
            "Temperature": f"{self.temperature:.1f} °C",
            "CO₂": f"{self.co2} ppm",
            "Water Quality": f"{self.water_quality} %",
            "Air Quality": f"{self.air_quality}",
        }


class Diagnostic(BaseModel):
    row: Optional[int] = Field(None, description="0-based data row index, when known")
    column: Optional[str] = None
    code: str
    message: str


@dataclass(frozen=True)
class ParseResult:
    frame: pd.DataFrame
    diagnostics: Tuple[Diagnostic, ...] = field(default_factory=tuple)


def _nullable(frame: pd.DataFrame) -> pd.DataFrame:
    frame = frame.astype(object)
    return frame.where(frame.notna(), None)


def to_records(frame: pd.DataFrame) -> List[Record]:
    """Typed view of a dataset, one Record per row in source order."""
    rows = _nullable(frame.reindex(columns=REQUIRED_COLUMNS)).to_dict(orient="records")
    return [Record.model_validate(row) for row in rows]


def series(frame: pd.DataFrame, column: str) -> List[Any]:
    """One column as a plain list, None where the value is missing."""
    return _nullable(frame[[column]])[column].tolist()
