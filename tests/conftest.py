"""
Pytest Configuration and Shared Fixtures for clubshared Tests

Provides known-good request payloads and small helpers.
"""
import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
import ulid


# =============================================================================
# Sample Payload Fixtures
# =============================================================================

@pytest.fixture
def register_payload():
    return {
        "email": "jane.doe@club.org",
        "password": "Sunflower42",
        "firstName": "Jane",
        "lastName": "Doe",
    }


@pytest.fixture
def event_payload():
    return {
        "title": "Spring Fair",
        "description": "Annual spring fair at the county grounds.",
        "startTime": "2025-04-01T10:00:00Z",
        "endTime": "2025-04-01T14:00:00Z",
        "location": "County Fairgrounds",
        "visibility": "PUBLIC",
        "publishToGoogleCalendar": True,
    }


@pytest.fixture
def blog_payload():
    return {
        "title": "Looking back at the fair",
        "content": "The spring fair drew more families than ever this year, and our members ran three booths.",
        "excerpt": "A look back at this year's fair.",
        "visibility": "MEMBER_ONLY",
        "featuredImageUrl": "https://cdn.club.org/fair.jpg",
        "publishedAt": "2025-04-03",
    }


@pytest.fixture
def sponsor_payload():
    return {
        "name": "Valley Feed & Seed",
        "logoUrl": "https://cdn.club.org/sponsors/valley.png",
        "websiteUrl": "https://valleyfeed.example.org",
        "description": "Supporting local youth since 1962.",
        "orderIndex": 2,
    }


@pytest.fixture
def testimonial_payload():
    return {
        "authorName": "Sam Rivera",
        "authorRole": "Parent",
        "content": "The club gave my kids confidence and great friends.",
        "orderIndex": 0,
    }


@pytest.fixture
def now():
    return datetime(2025, 4, 1, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# Test Utilities
# =============================================================================

class TestHelpers:
    """Helper methods for tests"""

    @staticmethod
    def generate_id():
        """Generate test record id"""
        return str(ulid.new())

    @staticmethod
    def write_payload(directory: Path, data, name: str = "payload.json") -> Path:
        """Write a JSON payload file for the command-line tools"""
        path = directory / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path


@pytest.fixture
def helpers():
    """Provide test helper methods"""
    return TestHelpers()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line(
        "markers",
        "unit: Unit tests (pure, no external services)"
    )
