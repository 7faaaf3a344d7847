"""Notification endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobboard.api.deps import require_context
from jobboard.api.schemas import NotificationListResponse, NotificationResponse
from jobboard.db import get_db
from jobboard.services import notifications as notification_service
from jobboard.session import AppContext

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
def list_notifications(
    unread_only: bool = False,
    limit: int = Query(default=50, ge=1, le=200),
    context: AppContext = Depends(require_context),
    db: Session = Depends(get_db),
):
    user_id = context.identity.id
    notifications = notification_service.list_notifications(db, user_id, unread_only=unread_only, limit=limit)
    return NotificationListResponse(
        notifications=[NotificationResponse.model_validate(n) for n in notifications],
        unread=notification_service.unread_count(db, user_id),
    )


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_read(
    notification_id: str,
    context: AppContext = Depends(require_context),
    db: Session = Depends(get_db),
):
    notification = notification_service.mark_read(db, context.identity.id, notification_id)
    return NotificationResponse.model_validate(notification)


@router.post("/read-all")
def mark_all_read(
    context: AppContext = Depends(require_context),
    db: Session = Depends(get_db),
):
    updated = notification_service.mark_all_read(db, context.identity.id)
    return {"updated": updated}
