"""Prometheus metrics for monitoring round outcomes and game completion"""

from prometheus_client import Counter, Histogram

# Round metrics
rounds_evaluated_counter = Counter(
    "pb_rounds_evaluated_total",
    "Total rounds evaluated",
    ["round", "tier"],  # round 1-4 | excellent, modest, minor_loss, heavy_loss
)

satisfaction_histogram = Histogram(
    "pb_round_satisfaction_score",
    "Client satisfaction per evaluated round",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Game metrics
games_started_counter = Counter(
    "pb_games_started_total",
    "Games started",
    ["character"],
)

games_completed_counter = Counter(
    "pb_games_completed_total",
    "Games that reached the ending",
    ["outcome"],  # profit | loss
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_round(round_id: int, tier: str, satisfaction_score: int) -> None:
    """Record one evaluated round"""
    rounds_evaluated_counter.labels(round=str(round_id), tier=tier).inc()
    satisfaction_histogram.observe(satisfaction_score)


def record_game_completed(profit: int) -> None:
    outcome = "profit" if profit >= 0 else "loss"
    games_completed_counter.labels(outcome=outcome).inc()
