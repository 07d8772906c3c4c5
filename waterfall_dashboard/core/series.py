"""
Series data structures for waterfall chart visualization.

These dataclasses define the schema for the ordered line items that
feed the waterfall layout, and for saving them to and loading them from
JSON.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "waterfall-series.json"


@dataclass(frozen=True)
class WaterfallItem:
    """A single line item of a waterfall chart.

    Attributes
    ----------
    label : str
        Display name of the bar.
    value : float
        Signed change relative to the running total, or the absolute
        checkpoint value when ``is_total`` is set.
    is_total : bool
        Marks a checkpoint bar drawn from zero.
    color : str, optional
        CSS color for the bar; defaults depend on the sign of ``value``.
    tooltip : str, optional
        Extra text shown when hovering the bar.
    """

    label: str
    value: float
    is_total: bool = False
    color: Optional[str] = None
    tooltip: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "value": self.value,
            "is_total": self.is_total,
            "color": self.color,
            "tooltip": self.tooltip,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WaterfallItem":
        return cls(
            label=data["label"],
            value=data["value"],
            is_total=bool(data.get("is_total", False)),
            color=data.get("color"),
            tooltip=data.get("tooltip"),
        )


@dataclass
class WaterfallSeries:
    """An ordered, titled list of waterfall items.

    Attributes
    ----------
    items : List[WaterfallItem]
        Line items in display order.
    title : str
        Chart title.
    subtitle : str
        Secondary heading shown under the title.
    schema_version : str
        Version of the serialized format.
    """

    items: List[WaterfallItem] = field(default_factory=list)
    title: str = ""
    subtitle: str = ""
    schema_version: str = "1.0.0"

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "title": self.title,
            "subtitle": self.subtitle,
            "items": [i.to_dict() for i in self.items],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WaterfallSeries":
        return cls(
            items=[WaterfallItem.from_dict(i) for i in data.get("items", [])],
            title=data.get("title", ""),
            subtitle=data.get("subtitle", ""),
            schema_version=data.get("schema_version", "1.0.0"),
        )

    def validate(self, strict: bool = False) -> bool:
        """Validate the series against the bundled JSON schema.

        Parameters
        ----------
        strict : bool
            If True, raise ``jsonschema.ValidationError`` on failure.
            If False, return bool.

        Returns
        -------
        bool
            True if valid, False otherwise.
        """
        import jsonschema

        with open(SCHEMA_PATH) as f:
            schema = json.load(f)
        try:
            jsonschema.validate(self.to_dict(), schema)
        except jsonschema.ValidationError:
            if strict:
                raise
            return False
        return True

    def to_json(self, path: Union[str, Path]) -> None:
        """Save series to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "WaterfallSeries":
        """Load series from JSON file."""
        with open(path) as f:
            return cls.from_dict(json.load(f))

    @property
    def deltas(self) -> List[WaterfallItem]:
        """Items that change the running total."""
        return [i for i in self.items if not i.is_total]

    @property
    def totals(self) -> List[WaterfallItem]:
        """Checkpoint items drawn from zero."""
        return [i for i in self.items if i.is_total]
