import logging
import re

from django.conf import settings
from django.core.mail import send_mail
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from .errors import BadRequestError, NotFoundError
from .serializers import validate_insert, validate_update
from .storage import get_storage

logger = logging.getLogger(__name__)

API_NAME = "Portfolio API"
API_VERSION = "1.0.0"


ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_id(raw, label):
    # ASCII digits with an optional minus; "1_0", " 12 " and "+3" are rejected
    if not isinstance(raw, str) or not ID_PATTERN.fullmatch(raw):
        raise BadRequestError(f"Invalid {label} ID")
    try:
        return int(raw)
    except ValueError:  # past int()'s digit limit
        raise BadRequestError(f"Invalid {label} ID") from None


# Generic record views

class RecordListView(APIView):
    """GET lists every row, POST validates and creates one."""

    kind = None

    def get_repository(self):
        return get_storage().for_kind(self.kind)

    def get(self, request):
        return Response(self.get_repository().list())

    def post(self, request):
        payload = validate_insert(self.kind, request.data)
        record = self.get_repository().create(payload)
        return Response(record, status=status.HTTP_201_CREATED)


class RecordDetailView(APIView):
    kind = None

    def get_repository(self):
        return get_storage().for_kind(self.kind)

    def get(self, request, pk):
        record = self.get_repository().get_by_id(parse_id(pk, self.kind))
        if record is None:
            raise NotFoundError(f"{self.kind.capitalize()} not found")
        return Response(record)

    def delete(self, request, pk):
        self.get_repository().delete(parse_id(pk, self.kind))
        return Response(status=status.HTTP_204_NO_CONTENT)


class EditableRecordDetailView(RecordDetailView):
    def put(self, request, pk):
        record_id = parse_id(pk, self.kind)
        payload = validate_update(self.kind, request.data)
        return Response(self.get_repository().update(record_id, payload))


# Projects

class ProjectListView(RecordListView):
    kind = "project"


class ProjectDetailView(EditableRecordDetailView):
    kind = "project"


# Skills

class SkillListView(RecordListView):
    kind = "skill"


class SkillDetailView(EditableRecordDetailView):
    kind = "skill"


# Experiences

class ExperienceListView(RecordListView):
    kind = "experience"


class ExperienceDetailView(EditableRecordDetailView):
    kind = "experience"


# Messages (contact form)

class MessageListView(RecordListView):
    kind = "message"
    throttle_scope = "contact"

    def get_throttles(self):
        # only the public contact form is rate limited
        if self.request.method == "POST":
            return [ScopedRateThrottle()]
        return []

    def post(self, request):
        payload = validate_insert(self.kind, request.data)
        record = self.get_repository().create(payload)
        logger.info(f"New message from: {record['name']} ({record['email']})")
        notify_new_message(record)
        return Response(
            {
                "success": True,
                "message": "Message sent successfully! We'll get back to you soon.",
                "data": record,
            },
            status=status.HTTP_201_CREATED,
        )


class MessageDetailView(RecordDetailView):
    kind = "message"


def notify_new_message(record):
    receiver = settings.CONTACT_RECEIVER_EMAIL
    if not receiver:
        return
    send_mail(
        subject=f"Portfolio Contact from {record['name']}",
        message=f"From: {record['name']} <{record['email']}>\n"
                f"Subject: {record['subject'] or '(none)'}\n\n{record['message']}",
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[receiver],
        fail_silently=True,
    )


# Service info

class ApiIndexView(APIView):
    def get(self, request):
        return Response({
            "name": API_NAME,
            "version": API_VERSION,
            "endpoints": {
                "projects": "/api/projects",
                "skills": "/api/skills",
                "experiences": "/api/experiences",
                "messages": "/api/messages",
            },
        })


class HealthView(APIView):
    def get(self, request):
        return Response({
            "ok": True,
            "timestamp": timezone.now().isoformat(),
            "environment": settings.PORTFOLIO_ENV,
        })
