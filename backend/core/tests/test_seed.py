from io import StringIO

import pytest
from django.core.management import call_command

from core.models import Experience, Project, Skill
from core.storage import get_storage

pytestmark = pytest.mark.django_db


def test_seed_populates_empty_database():
    out = StringIO()
    call_command("seed_portfolio", stdout=out)
    assert Project.objects.count() == 5
    assert Skill.objects.count() == 8
    assert Experience.objects.count() == 1
    assert "Seeded 5 projects" in out.getvalue()

    django_backend = [p for p in get_storage().projects.list() if p["title"] == "Django Backend Systems"][0]
    assert django_backend["techStack"] == ["Python", "Django", "PostgreSQL"]


def test_seed_skips_when_projects_exist():
    call_command("seed_portfolio", stdout=StringIO())
    out = StringIO()
    call_command("seed_portfolio", stdout=out)
    assert Project.objects.count() == 5
    assert "skipping seed" in out.getvalue()


def test_seed_force():
    call_command("seed_portfolio", stdout=StringIO())
    call_command("seed_portfolio", "--force", stdout=StringIO())
    assert Project.objects.count() == 10


def test_seeded_skills_visible_through_cached_list():
    storage = get_storage()
    assert storage.skills.list() == []
    call_command("seed_portfolio", stdout=StringIO())
    assert len(storage.skills.list()) == 8
