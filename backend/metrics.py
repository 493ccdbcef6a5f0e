"""
Prometheus Metrics
==================
Counters exported on the /metrics endpoint.
"""

from prometheus_client import Counter

TOKEN_QUOTES = Counter(
    "token_quotes_total",
    "Custom amount token quotes served",
    ["currency", "rounded"],
)

CONTACT_SUBMISSIONS = Counter(
    "contact_submissions_total",
    "Contact form submissions by outcome",
    ["outcome"],
)
