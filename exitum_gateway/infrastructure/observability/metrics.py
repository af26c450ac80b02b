"""Prometheus metrics for calculator usage, lead capture and generation performance"""

from prometheus_client import Counter, Histogram

# Calculator metrics
calculation_counter = Counter(
    "exitum_calculation_total",
    "Total calculator runs",
    ["calculator", "outcome"],  # court_fee | bond_npv | bond_restructuring; ok | invalid
)

restructuring_outcome_counter = Counter(
    "exitum_restructuring_outcome",
    "Restructuring comparisons by direction of NPV change",
    ["direction"],  # gain | loss | unchanged | undefined
)

# Lead metrics
lead_counter = Counter(
    "exitum_leads_total",
    "Leads captured",
    ["source"],  # form | chat
)

# Back-office metrics
backup_counter = Counter(
    "exitum_backup_total",
    "Backup exports and restores",
    ["operation"],  # export | restore
)

# Chat metrics
chat_reply_counter = Counter(
    "exitum_chat_replies_total",
    "Chat replies served",
    ["outcome"],  # generated | empty | fallback
)

generation_latency_histogram = Histogram(
    "generation_latency_seconds",
    "Text generation API response time",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 20.0],
)

generation_failure_counter = Counter(
    "generation_failures_total",
    "Failed text generation API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(calculator: str, ok: bool = True) -> None:
    calculation_counter.labels(calculator=calculator, outcome="ok" if ok else "invalid").inc()


def record_restructuring(delta: int, delta_percent: float | None) -> None:
    """Record which way restructuring moved value for the bondholder"""
    if delta_percent is None:
        direction = "undefined"
    elif delta > 0:
        direction = "gain"
    elif delta < 0:
        direction = "loss"
    else:
        direction = "unchanged"

    restructuring_outcome_counter.labels(direction=direction).inc()
