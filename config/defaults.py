"""LawPulse — All default threshold values and configuration constants.

All tuneable values live here. Never hard-code magic numbers in source files.
Import constants from this module; override via DashboardConfig at runtime.
"""

# ── Dataset shape ──────────────────────────────────────────────────────────────
# Categories shown on the KPI cards, in display order
KPI_CATEGORIES: tuple = ("privacy", "child", "safety", "finance")

# Aggregate category key; excluded from cross-domain sums to avoid double counting
AGGREGATE_CATEGORY: str = "all"

# Channel keys inside a category bucket
NEWS_CHANNEL: str = "news"
SOCIAL_CHANNEL: str = "addsocial"

# Timeline granularities
DAILY: str = "daily_timeline"
WEEKLY: str = "weekly_timeline"
MONTHLY: str = "monthly_timeline"
GRANULARITIES: tuple = (DAILY, WEEKLY, MONTHLY)

# ── Date window ────────────────────────────────────────────────────────────────
# Number of most recent dataset days used when no explicit window is given
DEFAULT_WINDOW_DAYS: int = 14

# ── KPI ────────────────────────────────────────────────────────────────────────
# Day-detail label when the leading mid-category has no sub-categories
NO_SUB_LABEL: str = "(소분류 없음)"

# ── Ranking ────────────────────────────────────────────────────────────────────
# Number of laws kept in the ranked list
RANKING_TOP_N: int = 5

# Bucket for leaves without a related law
UNKNOWN_LAW: str = "(관련법 미상)"

# ── Relation graph ─────────────────────────────────────────────────────────────
# Entities (mid-categories) kept in the graph
GRAPH_TOP_ENTITIES: int = 5

# Incidents kept per entity
GRAPH_TOP_INCIDENTS: int = 10

# Output range of the square-root incident size scale
GRAPH_NODE_SIZE_MIN: float = 8.0
GRAPH_NODE_SIZE_MAX: float = 36.0

# Evidence texts sampled per stance per incident
GRAPH_SAMPLES_PER_STANCE: int = 2

# ── Stances ────────────────────────────────────────────────────────────────────
STANCES: tuple = ("strengthen", "loosen", "disagree")

# Source-data labels for each normalized stance
STANCE_LABELS: dict = {
    "strengthen": "개정강화",
    "loosen": "폐지약화",
    "disagree": "현상유지",
}

# ── Heatmap ────────────────────────────────────────────────────────────────────
# Timeline used when the heatmap is built without a date window
HEATMAP_GRANULARITY: str = WEEKLY

# ── Input and logging ──────────────────────────────────────────────────────────
DATASET_PATH: str = "data/data.json"

DEFAULT_LOG_LEVEL: str = "INFO"
