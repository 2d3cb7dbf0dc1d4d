"""
Data access for the portfolio tables.

Each repository owns CRUD for one model and a `transform` step that turns a
stored row into the fully populated API shape. Every read goes through
`transform`; nothing else hands rows to callers.
"""
import logging
from functools import lru_cache

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from .cache import SnapshotCache
from .codecs import decode_tech_stack, encode_tech_stack
from .errors import (
    CREATE_FAILED,
    DELETE_FAILED,
    FETCH_FAILED,
    UPDATE_FAILED,
    NotFoundError,
    StorageFault,
    ValidationFailed,
)
from .models import DEFAULT_EXPERIENCE_TYPE, DEFAULT_SKILL_ICON, Experience, Message, Project, Skill

logger = logging.getLogger(__name__)

# BigAutoField range; ids outside it cannot match a row
MAX_ID = 2 ** 63 - 1


def addressable(pk) -> bool:
    return -MAX_ID - 1 <= pk <= MAX_ID


class Repository:
    model = None
    label = "record"
    # (model attribute, API field name) pairs that must be non-blank on create
    required_fields = ()

    def __init__(self, cache: SnapshotCache = None):
        self.cache = cache

    # ── READ ──────────────────────────────────────────────

    def list(self) -> list:
        if self.cache is not None:
            snapshot = self.cache.get()
            if snapshot is not None:
                return snapshot

        try:
            rows = [self.transform(obj) for obj in self.model.objects.all()]
        except DatabaseError as e:
            raise self._fault(FETCH_FAILED, f"Failed to fetch {self.label}s", e) from e

        if self.cache is not None:
            self.cache.set(rows)
        return rows

    def get_by_id(self, pk: int):
        """Return the transformed row, or None when no row has this id."""
        if not addressable(pk):
            return None
        try:
            obj = self.model.objects.filter(pk=pk).first()
        except DatabaseError as e:
            raise self._fault(FETCH_FAILED, f"Failed to fetch {self.label} #{pk}", e) from e
        return self.transform(obj) if obj is not None else None

    # ── CREATE ────────────────────────────────────────────

    def create(self, payload: dict) -> dict:
        self._check_required(payload)
        values = self.to_storage(payload)
        try:
            obj = self.model.objects.create(**values)
        except DatabaseError as e:
            raise self._fault(CREATE_FAILED, f"Failed to create {self.label}", e) from e

        self.invalidate()
        logger.info(f"Created {self.label} #{obj.pk}")
        return self.transform(obj)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, pk: int) -> None:
        if not addressable(pk):
            raise NotFoundError(f"{self.label.capitalize()} not found")
        try:
            deleted, _ = self.model.objects.filter(pk=pk).delete()
        except DatabaseError as e:
            raise self._fault(DELETE_FAILED, f"Failed to delete {self.label} #{pk}", e) from e
        if not deleted:
            raise NotFoundError(f"{self.label.capitalize()} not found")

        self.invalidate()
        logger.info(f"Deleted {self.label} #{pk}")

    # ── HELPERS ───────────────────────────────────────────

    def invalidate(self) -> None:
        if self.cache is not None:
            self.cache.invalidate()

    def to_storage(self, payload: dict, partial: bool = False) -> dict:
        """Map a validated payload onto column values."""
        return dict(payload)

    def transform(self, obj) -> dict:
        raise NotImplementedError

    def _check_required(self, payload):
        errors = []
        for attr, field in self.required_fields:
            value = payload.get(attr)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors.append({"field": field, "message": "This field is required."})
        if errors:
            raise ValidationFailed(errors)

    def _fault(self, kind, message, exc):
        logger.error(f"{message}: {exc}")
        return StorageFault(message, kind=kind)


class EditableRepository(Repository):
    """Repository whose rows may be changed after creation."""

    def update(self, pk: int, payload: dict) -> dict:
        """Apply only the supplied fields to row `pk` and return the new row."""
        if not addressable(pk):
            raise NotFoundError(f"{self.label.capitalize()} not found")
        values = self.to_storage(payload, partial=True)
        try:
            if values:
                updated = self.model.objects.filter(pk=pk).update(**values)
            else:
                updated = self.model.objects.filter(pk=pk).count()
            obj = self.model.objects.filter(pk=pk).first() if updated else None
        except DatabaseError as e:
            raise self._fault(UPDATE_FAILED, f"Failed to update {self.label} #{pk}", e) from e
        if obj is None:
            raise NotFoundError(f"{self.label.capitalize()} not found")

        self.invalidate()
        logger.info(f"Updated {self.label} #{pk} ({', '.join(sorted(values)) or 'no fields'})")
        return self.transform(obj)


class ProjectRepository(EditableRepository):
    model = Project
    label = "project"
    required_fields = (
        ("title", "title"),
        ("description", "description"),
        ("image_url", "imageUrl"),
        ("category", "category"),
    )

    def to_storage(self, payload, partial=False):
        values = dict(payload)
        if "tech_stack" in values or not partial:
            values["tech_stack"] = encode_tech_stack(values.get("tech_stack") or [])
        return values

    def transform(self, obj):
        return {
            "id": obj.id,
            "title": obj.title or "",
            "description": obj.description or "",
            "techStack": decode_tech_stack(obj.tech_stack),
            "imageUrl": obj.image_url or "",
            "githubUrl": obj.github_url or None,
            "liveUrl": obj.live_url or None,
            "category": obj.category or "",
            "problemStatement": obj.problem_statement or "",
            "motivation": obj.motivation or "",
            "systemDesign": obj.system_design or "",
            "challenges": obj.challenges or "",
            "learnings": obj.learnings or "",
        }


class SkillRepository(EditableRepository):
    model = Skill
    label = "skill"
    required_fields = (("name", "name"), ("category", "category"))

    def transform(self, obj):
        return {
            "id": obj.id,
            "name": obj.name or "",
            "category": obj.category or "",
            "icon": obj.icon or DEFAULT_SKILL_ICON,
        }


class ExperienceRepository(EditableRepository):
    model = Experience
    label = "experience"
    required_fields = (
        ("role", "role"),
        ("organization", "organization"),
        ("period", "period"),
        ("description", "description"),
    )

    def transform(self, obj):
        return {
            "id": obj.id,
            "role": obj.role or "",
            "organization": obj.organization or "",
            "period": obj.period or "",
            "description": obj.description or "",
            "type": obj.type or DEFAULT_EXPERIENCE_TYPE,
        }


class MessageRepository(Repository):
    """Contact form submissions. Append-only: there is no update."""

    model = Message
    label = "message"
    required_fields = (("name", "name"), ("email", "email"), ("message", "message"))

    def to_storage(self, payload, partial=False):
        values = {}
        for attr in ("name", "email", "subject", "message"):
            value = (payload.get(attr) or "").strip()
            if attr == "email":
                value = value.lower()
            values[attr] = value[: Message._meta.get_field(attr).max_length]
        values["created_at"] = timezone.now()
        return values

    def transform(self, obj):
        return {
            "id": obj.id,
            "name": obj.name or "",
            "email": obj.email or "",
            "subject": obj.subject or "",
            "message": obj.message or "",
            "createdAt": obj.created_at.isoformat() if obj.created_at else None,
        }


class PortfolioStorage:
    """The four repositories; skills and experiences get a list cache each."""

    def __init__(self, cache_ttl: float = 300):
        self.projects = ProjectRepository()
        self.skills = SkillRepository(cache=SnapshotCache("portfolio:skills", cache_ttl))
        self.experiences = ExperienceRepository(cache=SnapshotCache("portfolio:experiences", cache_ttl))
        self.messages = MessageRepository()

    def for_kind(self, kind: str) -> Repository:
        return {
            "project": self.projects,
            "skill": self.skills,
            "experience": self.experiences,
            "message": self.messages,
        }[kind]


@lru_cache(maxsize=None)
def get_storage() -> PortfolioStorage:
    return PortfolioStorage(cache_ttl=settings.PORTFOLIO_CACHE_TTL)
