import pytest

from core.errors import ValidationFailed
from core.serializers import validate_insert, validate_update


def _fields(exc_info):
    return {e["field"] for e in exc_info.value.errors}


def test_project_insert_maps_api_names_to_columns(project_payload):
    data = validate_insert("project", project_payload)
    assert data["tech_stack"] == ["A", "B"]
    assert data["image_url"] == "https://x/y.png"
    assert "imageUrl" not in data


def test_project_tech_stack_defaults_to_empty_list(project_payload):
    del project_payload["techStack"]
    assert validate_insert("project", project_payload)["tech_stack"] == []


def test_every_violation_is_reported():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_insert("project", {"title": "", "imageUrl": "nope", "techStack": ["ok", "x" * 101]})
    assert {"title", "description", "imageUrl", "category", "techStack.1"} <= _fields(exc_info)


@pytest.mark.parametrize("value", ["", None])
def test_optional_urls_treat_empty_as_absent(project_payload, value):
    project_payload["githubUrl"] = value
    project_payload["liveUrl"] = value
    data = validate_insert("project", project_payload)
    assert data["github_url"] is None
    assert data["live_url"] is None


def test_optional_url_rejects_malformed_value(project_payload):
    project_payload["liveUrl"] = "not a url"
    with pytest.raises(ValidationFailed) as exc_info:
        validate_insert("project", project_payload)
    assert _fields(exc_info) == {"liveUrl"}


@pytest.mark.parametrize("url", ["https://x/y.png", "http://localhost:5173/img.png", "https://cdn.example.com/a.png"])
def test_image_url_accepts_hosts_with_or_without_tld(project_payload, url):
    project_payload["imageUrl"] = url
    assert validate_insert("project", project_payload)["image_url"] == url


@pytest.mark.parametrize("url", ["y.png", "ftp://x/y.png", "https:///y.png", "https://x/a b.png", "http://[x"])
def test_image_url_rejects_malformed_values(project_payload, url):
    project_payload["imageUrl"] = url
    with pytest.raises(ValidationFailed) as exc_info:
        validate_insert("project", project_payload)
    assert _fields(exc_info) == {"imageUrl"}


def test_narrative_fields_pass_through(project_payload):
    project_payload.update(motivation="m", challenges="c", learnings="l", systemDesign="s")
    data = validate_insert("project", project_payload)
    assert (data["motivation"], data["challenges"], data["learnings"], data["system_design"]) == ("m", "c", "l", "s")


def test_length_limits(project_payload):
    project_payload["title"] = "t" * 256
    project_payload["learnings"] = "l" * 5001
    with pytest.raises(ValidationFailed) as exc_info:
        validate_insert("project", project_payload)
    assert _fields(exc_info) == {"title", "learnings"}


def test_skill_icon_defaults_to_code():
    data = validate_insert("skill", {"name": "Rust", "category": "Languages"})
    assert data == {"name": "Rust", "category": "Languages", "icon": "Code"}


def test_experience_type_defaults():
    data = validate_insert("experience", {
        "role": "Intern", "organization": "Acme", "period": "2023", "description": "Did things",
    })
    assert data["type"] == "Experience"


def test_message_rejects_bad_email():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_insert("message", {"name": "A", "email": "not-an-email", "message": "hi"})
    assert _fields(exc_info) == {"email"}


def test_message_over_limit_is_rejected():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_insert("message", {"name": "A", "email": "a@b.co", "message": "m" * 5001})
    assert _fields(exc_info) == {"message"}


def test_message_subject_defaults_to_empty():
    data = validate_insert("message", {"name": "A", "email": "a@b.co", "message": "hi"})
    assert data["subject"] == ""


def test_update_accepts_empty_payload_without_defaults():
    assert validate_update("project", {}) == {}
    assert validate_update("skill", {}) == {}


def test_update_keeps_field_constraints():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_update("skill", {"name": ""})
    assert _fields(exc_info) == {"name"}


def test_update_only_returns_supplied_fields():
    assert validate_update("project", {"techStack": ["Go"]}) == {"tech_stack": ["Go"]}


def test_non_object_body_is_a_validation_error():
    with pytest.raises(ValidationFailed) as exc_info:
        validate_insert("skill", ["not", "a", "dict"])
    assert _fields(exc_info) == {"body"}


def test_unknown_kind():
    with pytest.raises(ValueError):
        validate_insert("widget", {})
