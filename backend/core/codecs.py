import json
import logging

logger = logging.getLogger(__name__)


def encode_tech_stack(items) -> str:
    """Serialize a tech stack list into its storage column form."""
    return json.dumps(list(items or []))


def decode_tech_stack(raw) -> list:
    """Parse a stored tech stack back into a list of strings.

    Reads are total: anything that is not a JSON array of strings decodes
    to an empty list instead of raising.
    """
    if isinstance(raw, list):
        value = raw
    else:
        if not raw:
            return []
        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Unparsable tech_stack value {raw!r}, using []")
            return []

    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        logger.warning(f"tech_stack is not a list of strings: {raw!r}, using []")
        return []
    return list(value)
