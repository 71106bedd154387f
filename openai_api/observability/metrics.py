from prometheus_client import Counter, Histogram


requests_total = Counter(
    "openai_requests_total",
    "Total requests sent to the OpenAI API",
    ["endpoint", "outcome"],
)

request_latency = Histogram(
    "openai_request_latency_seconds",
    "Round-trip latency of OpenAI API requests",
    ["endpoint"],
    buckets=(0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0),
)

tokens_total = Counter(
    "openai_tokens_total",
    "Total tokens reported by the OpenAI API",
    ["endpoint", "direction"],
)
