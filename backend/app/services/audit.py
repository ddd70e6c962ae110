import json
import logging


def log_event(
    action: str,
    entity_type: str,
    entity_id: int | None = None,
    details: dict | None = None,
):
    logging.info(
        "%s %s=%s %s",
        action,
        entity_type,
        entity_id,
        json.dumps(details or {}, default=str, sort_keys=True),
    )
