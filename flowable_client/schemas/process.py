"""Process instance schemas."""

from datetime import datetime

from flowable_client.schemas.base import FlowableModel
from flowable_client.schemas.user import UserInfo
from flowable_client.shared.utils.datetime import parse_flowable_datetime


class Process(FlowableModel):
    """Process instance record (runtime or historic).

    ``started_by`` is filled by identity enrichment from ``start_user_id``;
    the engine does not return it.
    """

    id: str
    name: str | None = None
    url: str | None = None
    business_key: str | None = None
    suspended: bool | None = None
    process_definition_id: str | None = None
    process_definition_url: str | None = None
    activity_id: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    start_user_id: str | None = None
    started_by: UserInfo | None = None

    @property
    def is_finished(self) -> bool:
        return bool(self.end_time)

    @property
    def started_at(self) -> datetime | None:
        return parse_flowable_datetime(self.start_time)

    @property
    def ended_at(self) -> datetime | None:
        return parse_flowable_datetime(self.end_time)
