from datetime import datetime, timezone

from app.core.logger import mask_email, sanitize_dict
from app.core.security import session_expires_at


def test_sanitize_redacts_credentials_and_masks_emails():
    data = {
        "admin_email": "admin@example.com",
        "password": "hunter2",
        "nested": {"session_token": "abc", "board": 7},
        "emails": ["bob@example.com"],
    }
    assert sanitize_dict(data) == {
        "admin_email": "a***@example.com",
        "password": "***REDACTED***",
        "nested": {"session_token": "***REDACTED***", "board": 7},
        "emails": ["b***@example.com"],
    }


def test_mask_email_without_domain():
    assert mask_email("not-an-address") == "***"


def test_session_expiry_counts_hours_from_now():
    opened = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert session_expires_at(72, now=opened) == datetime(2024, 1, 4, tzinfo=timezone.utc)
