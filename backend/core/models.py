from django.db import models
from django.utils import timezone

DEFAULT_SKILL_ICON = "Code"
DEFAULT_EXPERIENCE_TYPE = "Experience"


class Project(models.Model):
    title = models.CharField(max_length=255)
    description = models.TextField(max_length=5000)
    tech_stack = models.TextField(default="[]")  # JSON-encoded list, see core.codecs
    image_url = models.URLField(max_length=500)
    github_url = models.URLField(max_length=500, null=True, blank=True)
    live_url = models.URLField(max_length=500, null=True, blank=True)
    category = models.CharField(max_length=100)
    problem_statement = models.TextField(max_length=5000, null=True, blank=True)
    motivation = models.TextField(max_length=5000, null=True, blank=True)
    system_design = models.TextField(max_length=5000, null=True, blank=True)
    challenges = models.TextField(max_length=5000, null=True, blank=True)
    learnings = models.TextField(max_length=5000, null=True, blank=True)

    class Meta:
        db_table = "projects"
        ordering = ["id"]

    def __str__(self):
        return self.title


class Skill(models.Model):
    name = models.CharField(max_length=100)
    category = models.CharField(max_length=100)
    icon = models.CharField(max_length=100, default=DEFAULT_SKILL_ICON)  # lucide icon name

    class Meta:
        db_table = "skills"
        ordering = ["id"]

    def __str__(self):
        return self.name


class Experience(models.Model):
    role = models.CharField(max_length=255)
    organization = models.CharField(max_length=255)
    period = models.CharField(max_length=100)  # e.g. "2024 – 2028"
    description = models.TextField(max_length=5000)
    type = models.CharField(max_length=50, default=DEFAULT_EXPERIENCE_TYPE)

    class Meta:
        db_table = "experiences"
        ordering = ["id"]

    def __str__(self):
        return f"{self.role} at {self.organization}"


class Message(models.Model):
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255)
    subject = models.CharField(max_length=500, blank=True, default="")
    message = models.TextField(max_length=5000)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = "messages"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Message from {self.name}"
