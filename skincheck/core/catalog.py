"""
Metric Catalog

Static table of the seven scored skin dimensions. Declaration order is
significant: it breaks score ties and fixes the radar layout.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class MetricDefinition:
    """One scored skin-health dimension."""
    key: str
    label: str
    weight: float  # 0-1, multiplier in the health index
    color: str     # presentation token
    description: str = ""

    def to_dict(self) -> Dict[str, object]:
        """Serialize to dictionary."""
        return {
            "key": self.key,
            "label": self.label,
            "weight": self.weight,
            "color": self.color,
            "description": self.description,
        }


METRIC_CATALOG: Tuple[MetricDefinition, ...] = (
    MetricDefinition(
        "hydration", "Hydration", 0.18, "sky",
        "Water content of the stratum corneum",
    ),
    MetricDefinition(
        "barrier", "Barrier", 0.18, "indigo",
        "Integrity of the lipid barrier against irritants and water loss",
    ),
    MetricDefinition(
        "texture", "Texture", 0.14, "violet",
        "Surface smoothness and fine-line visibility",
    ),
    MetricDefinition(
        "pigment", "Pigment", 0.12, "amber",
        "Evenness of tone; spots and post-inflammatory marks",
    ),
    MetricDefinition(
        "redness", "Redness", 0.14, "rose",
        "Visible redness and reactivity",
    ),
    MetricDefinition(
        "sebum", "Sebum balance", 0.12, "emerald",
        "Balance of oil production across the face",
    ),
    MetricDefinition(
        "pores", "Pores", 0.12, "teal",
        "Pore size and congestion",
    ),
)

# Starting score per metric before any answer is applied
BASELINE_SCORES: Mapping[str, int] = MappingProxyType({
    "hydration": 72,
    "barrier": 75,
    "texture": 70,
    "pigment": 68,
    "redness": 78,
    "sebum": 74,
    "pores": 66,
})


def _index_catalog(catalog: Tuple[MetricDefinition, ...]) -> Mapping[str, MetricDefinition]:
    by_key: Dict[str, MetricDefinition] = {}
    for metric in catalog:
        if metric.key in by_key:
            raise ValueError(f"Duplicate metric key in catalog: {metric.key}")
        by_key[metric.key] = metric
    return MappingProxyType(by_key)


METRICS_BY_KEY: Mapping[str, MetricDefinition] = _index_catalog(METRIC_CATALOG)

METRIC_KEYS: Tuple[str, ...] = tuple(m.key for m in METRIC_CATALOG)


def get_metric(key: str) -> MetricDefinition:
    """Look up a metric definition by key (KeyError if unknown)."""
    return METRICS_BY_KEY[key]


def total_weight() -> float:
    """Sum of catalog weights. Not enforced to be exactly 1."""
    return sum(m.weight for m in METRIC_CATALOG)
