from datetime import datetime, timedelta

from backend.app.models import Project
from backend.app.services.publishing import apply_publish_state


def _project(**kw):
    return Project(slug="villa", title="Villa", is_published=kw.get("is_published", False), published_at=kw.get("published_at"))


def test_publish_stamps_published_at():
    p = _project()
    now = datetime(2024, 5, 1, 12, 0)
    apply_publish_state(p, True, now=now)
    assert p.is_published is True
    assert p.published_at == now
    assert p.updated_at == now


def test_publish_twice_keeps_first_stamp():
    first = datetime(2024, 5, 1, 12, 0)
    p = _project(is_published=True, published_at=first)
    apply_publish_state(p, True, now=first + timedelta(days=3))
    assert p.published_at == first


def test_published_without_stamp_gets_one():
    p = _project(is_published=True, published_at=None)
    now = datetime(2024, 5, 2)
    apply_publish_state(p, True, now=now)
    assert p.published_at == now


def test_unpublish_clears_stamp():
    p = _project(is_published=True, published_at=datetime(2024, 1, 1))
    apply_publish_state(p, False)
    assert p.is_published is False
    assert p.published_at is None
