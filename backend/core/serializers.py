"""
Insert/update payload validation for the four portfolio records.

Serializer field names are the API (camelCase) names; `source` points at the
model attribute, so `validated_data` comes back keyed the way storage expects.
"""
from urllib.parse import urlsplit

from rest_framework import serializers
from rest_framework.settings import api_settings

from .errors import ValidationFailed
from .models import DEFAULT_EXPERIENCE_TYPE, DEFAULT_SKILL_ICON

TEXT_MAX = 5000
URL_MAX = 500


def check_url(value):
    # http(s) scheme plus a host; single-label hosts such as "https://x/y.png" pass
    try:
        parts = urlsplit(value)
    except ValueError:
        raise serializers.ValidationError("Enter a valid URL.") from None
    if parts.scheme not in ("http", "https") or not parts.hostname or any(c.isspace() for c in value):
        raise serializers.ValidationError("Enter a valid URL.")


def _source(source):
    # DRF refuses a source equal to the field name
    return {"source": source} if source else {}


def _optional_text(source=None):
    return serializers.CharField(
        max_length=TEXT_MAX, required=False, allow_null=True, allow_blank=True, **_source(source)
    )


def _url(source, **kwargs):
    return serializers.CharField(max_length=URL_MAX, validators=[check_url], source=source, **kwargs)


def _optional_url(source):
    return _url(source, required=False, allow_null=True, allow_blank=True)


class ProjectSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(max_length=TEXT_MAX)
    techStack = serializers.ListField(
        source="tech_stack",
        child=serializers.CharField(max_length=100),
        default=list,
    )
    imageUrl = _url("image_url")
    githubUrl = _optional_url("github_url")
    liveUrl = _optional_url("live_url")
    category = serializers.CharField(max_length=100)
    problemStatement = _optional_text("problem_statement")
    motivation = _optional_text()
    systemDesign = _optional_text("system_design")
    challenges = _optional_text()
    learnings = _optional_text()

    # "" means "no link"
    def validate_githubUrl(self, value):
        return value or None

    def validate_liveUrl(self, value):
        return value or None


class SkillSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    category = serializers.CharField(max_length=100)
    icon = serializers.CharField(max_length=100, allow_blank=True, default=DEFAULT_SKILL_ICON)

    def validate_icon(self, value):
        return value or DEFAULT_SKILL_ICON


class ExperienceSerializer(serializers.Serializer):
    role = serializers.CharField(max_length=255)
    organization = serializers.CharField(max_length=255)
    period = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=TEXT_MAX)
    type = serializers.CharField(max_length=50, allow_blank=True, default=DEFAULT_EXPERIENCE_TYPE)

    def validate_type(self, value):
        return value or DEFAULT_EXPERIENCE_TYPE


class ContactMessageSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=255)
    subject = serializers.CharField(max_length=500, allow_blank=True, default="")
    message = serializers.CharField(max_length=TEXT_MAX)


SERIALIZERS = {
    "project": ProjectSerializer,
    "skill": SkillSerializer,
    "experience": ExperienceSerializer,
    "message": ContactMessageSerializer,
}


def flatten_errors(detail, prefix=""):
    """Turn DRF's nested error detail into [{"field", "message"}, ...].

    List item errors come back keyed by index, so `techStack.1` names the
    second entry of the tech stack.
    """
    flat = []
    if isinstance(detail, dict):
        for key, value in detail.items():
            name = str(key)
            if name == api_settings.NON_FIELD_ERRORS_KEY and not prefix:
                name = "body"
            flat.extend(flatten_errors(value, f"{prefix}.{name}" if prefix else name))
    elif isinstance(detail, list):
        for item in detail:
            if isinstance(item, (dict, list)):
                flat.extend(flatten_errors(item, prefix))
            else:
                flat.append({"field": prefix, "message": str(item)})
    else:
        flat.append({"field": prefix, "message": str(detail)})
    return flat


def _serializer_for(kind):
    try:
        return SERIALIZERS[kind]
    except KeyError:
        raise ValueError(f"Unknown entity kind: {kind!r}") from None


def validate_insert(kind, payload) -> dict:
    """Validate a full insert payload; raise ValidationFailed listing every violation."""
    serializer = _serializer_for(kind)(data=payload)
    if not serializer.is_valid():
        raise ValidationFailed(flatten_errors(serializer.errors))
    return dict(serializer.validated_data)


def validate_update(kind, payload) -> dict:
    """Same constraints as validate_insert, but every field is optional.

    Only the fields present in `payload` come back; defaults are not applied.
    """
    serializer = _serializer_for(kind)(data=payload, partial=True)
    if not serializer.is_valid():
        raise ValidationFailed(flatten_errors(serializer.errors))
    return dict(serializer.validated_data)
