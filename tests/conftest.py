"""
Pytest Configuration

Global test configuration, fixtures, and utilities for the
interview answer evaluator test suite.
"""

import json
import logging
import logging.handlers
import tempfile
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Add src to Python path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from interview_eval.core.config import AppConfig, LoggingConfig, set_config


ENV_OVERRIDES = ('LOG_LEVEL', 'DEBUG', 'ENVIRONMENT', 'SOURCE_CHECK_TIMEOUT')


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep environment overrides from leaking into configuration tests."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_config(temp_dir):
    """Provide test configuration and install it as the global instance."""
    config = AppConfig(
        name="Test Interview Eval",
        version="test",
        debug=True,
        logging=LoggingConfig(
            level="DEBUG",
            file=str(temp_dir / "test.log")
        ),
    )
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def reference_answer() -> str:
    """A reference answer for a system design question."""
    return (
        "A scalable web service splits the monolith into microservices behind a load balancer. "
        "Each service is stateless so it can scale horizontally, while a Redis cache absorbs hot "
        "reads and protects the PostgreSQL database. Kubernetes schedules the Docker containers, "
        "restarts unhealthy pods and autoscales on CPU and latency metrics. Monitoring and alerting "
        "on error rates, throughput and latency make regressions visible before users notice them."
    )


@pytest.fixture
def strong_answer() -> str:
    """A detailed answer covering microservices, scalability and a load balancer."""
    return (
        "I would split the monolith into microservices so each team can deploy independently. "
        "Scalability comes from running stateless services behind a load balancer that spreads "
        "traffic across healthy instances. We would add caching for hot reads, queue background "
        "work, monitor latency and error rates, and autoscale every service based on observed "
        "demand during peak traffic windows."
    )


@pytest.fixture
def sample_questions_data() -> List[Dict[str, Any]]:
    """Question catalog entries as exported by the content pipeline."""
    return [
        {
            "id": "sd-1",
            "question": "How would you design a URL shortener?",
            "answer": "Use a key generation service, a NoSQL store for mappings and a cache for hot links.",
            "channel": "system-design",
            "difficulty": "intermediate",
            "voiceKeywords": ["hashing", "cache", "database"],
            "voiceSuitable": True,
        },
        {
            "id": "beh-1",
            "question": "Tell me about a conflict with a teammate.",
            "answer": (
                "Describe the situation, the disagreement about priorities, how you listened to the "
                "other point of view, the compromise you reached and what the team learned from it."
            ),
            "channel": "behavioral",
        },
        {
            "id": "fe-1",
            "question": "What is the virtual DOM?",
            "answer": "A lightweight copy of the DOM used to batch updates.",
            "channel": "frontend",
        },
        {
            "id": "sre-1",
            "question": "How do you define an SLO?",
            "answer": (
                "Pick a user-facing indicator such as availability or latency, set a target over a "
                "rolling window and derive an error budget that guides release decisions."
            ),
            "channel": "sre",
            "voiceSuitable": False,
        },
    ]


@pytest.fixture
def catalog_file(temp_dir, sample_questions_data) -> Path:
    path = temp_dir / "questions.json"
    path.write_text(json.dumps(sample_questions_data), encoding="utf-8")
    return path


@pytest.fixture
def sample_blog_data() -> Dict[str, Any]:
    """A blog post that passes every quality check."""
    return {
        "title": "Caching Explained",
        "introduction": (
            "Caching stores the results of expensive work so later requests can be served quickly. "
            "This article explains how a cache cuts latency and protects the database under heavy load."
        ),
        "sections": [
            {
                "heading": "Why Caching Matters",
                "content": (
                    "Every read that reaches the primary database adds latency and consumes connection "
                    "capacity [1]. However, most workloads read the same small set of records again and "
                    "again [2]. A cache keeps those hot records in memory, so repeated reads finish in "
                    "well under a millisecond. As a result, the database handles fewer queries and stays "
                    "responsive during traffic spikes."
                ),
            },
            {
                "heading": "Common Caching Strategies",
                "content": (
                    "The cache-aside pattern loads data on a miss and writes it into the cache for later "
                    "reads [3]. For example, a product page can keep its rendered details for five minutes. "
                    "Write-through caching updates the cache and the database together, which keeps both "
                    "copies consistent [4]. Therefore, the right strategy depends on how stale the data is "
                    "allowed to become."
                ),
            },
            {
                "heading": "Invalidation and Expiry",
                "content": (
                    "Stale entries are the main risk of any caching layer [5]. In addition, a time-to-live "
                    "value bounds how long an entry can survive without a refresh. Event-driven "
                    "invalidation removes entries as soon as the source record changes [6]. Moreover, "
                    "careful key design and monitoring of the hit ratio keep the system predictable in "
                    "production."
                ),
            },
        ],
        "conclusion": (
            "Caching is one of the simplest ways to improve latency and reduce database load. "
            "A well chosen strategy, sensible expiry and good monitoring keep cached data fresh and useful."
        ),
        "tags": ["performance"],
        "sources": [
            {"title": f"Caching reference {i}", "url": f"https://example.com/caching/{i}"}
            for i in range(1, 9)
        ],
        "realWorldExample": {
            "company": "Netflix",
            "scenario": "Netflix serves personalized home pages from an in-memory cache layer in front of its data stores.",
            "lesson": "Cache what is read often and rebuild it cheaply on a miss.",
        },
        "diagram": "client -> load balancer -> app server -> cache -> database (on miss)",
        "glossary": [{"term": "TTL", "definition": "How long a cache entry stays valid."}],
        "quickReference": ["Use cache-aside for read-heavy data", "Set a TTL", "Track the hit ratio"],
    }


@pytest.fixture
def blog_file(temp_dir, sample_blog_data) -> Path:
    path = temp_dir / "post.json"
    path.write_text(json.dumps(sample_blog_data), encoding="utf-8")
    return path


@pytest.fixture
def reset_logging():
    """Remove the handlers installed by setup_logging after the test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)
