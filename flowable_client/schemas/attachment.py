"""Content item (task attachment) schemas."""

from flowable_client.schemas.base import FlowableModel


class Attachment(FlowableModel):
    """Content item stored by the engine's content service."""

    id: str
    name: str | None = None
    mime_type: str | None = None
    task_id: str | None = None
    process_instance_id: str | None = None
    content_store_id: str | None = None
    content_store_name: str | None = None
    content_available: bool = False
    created: str | None = None
    created_by: str | None = None
    last_modified: str | None = None
    last_modified_by: str | None = None
    url: str | None = None
