import logging

audit_logger = logging.getLogger("audit")


#Record a single admin action without interrupting the main request flow
def log_action(
    actor_type: str,
    actor_id: str | None,
    action: str,
    details: str | None = None,
):
    try:
        audit_logger.info(
            "%s actor=%s:%s%s",
            action,
            actor_type,
            actor_id or "-",
            f" {details}" if details else "",
        )
    except Exception:
        #Never allow audit logging failures to break application logic
        pass
