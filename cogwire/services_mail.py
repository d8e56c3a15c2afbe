"""Operation catalogue for the mail, calendar, people and messaging services."""

from __future__ import annotations

from cogwire.schema import (
    Feature,
    Field,
    Operation,
    Service,
    Struct,
    ValueType,
    flag,
    many,
    nested,
    optional,
    required,
)

_U32 = ValueType.U32
_DESTRUCTIVE = Feature.DESTRUCTIVE_PERMANENT


def _op(name: str, *fields: Field, feature: Feature | None = None) -> Operation:
    return Operation(name, Struct(name, fields), feature)


_COMPOSE = Struct(
    "Compose",
    (
        required("to"),
        optional("cc"),
        optional("bcc"),
        required("subject"),
        optional("body"),
        optional("body_html"),
        optional("body_file"),
        optional("reply_to_message_id"),
        flag("quote"),
        flag("track"),
        flag("track_split"),
    ),
)

_GMAIL = Service(
    "gmail",
    (
        _op("search", required("query"), optional("max", _U32)),
        _op(
            "messages_search",
            required("query"),
            optional("max", _U32),
            flag("include_body"),
        ),
        _op("thread_get", required("thread_id"), flag("download")),
        _op("get", required("message_id"), optional("format")),
        _op("send", nested("compose", _COMPOSE)),
        _op("attachment", required("message_id"), required("attachment_id")),
        _op("drafts_list"),
        _op("drafts_create", required("subject"), required("body"), required("to")),
        _op("drafts_send", required("draft_id")),
        _op("drafts_update", required("draft_id"), optional("subject"), optional("body")),
        _op("labels_list"),
        _op("labels_get", required("label_id")),
        _op("labels_create", required("name")),
        _op("labels_delete", required("label_id"), feature=_DESTRUCTIVE),
        _op("trash", required("message_id")),
        _op(
            "thread_modify",
            required("thread_id"),
            many("add_labels"),
            many("remove_labels"),
        ),
        _op(
            "batch_modify",
            many("message_ids"),
            many("add_labels"),
            many("remove_labels"),
        ),
        _op("batch_delete", many("message_ids"), feature=_DESTRUCTIVE),
        _op("filters_list"),
        _op(
            "filters_create",
            optional("from"),
            optional("to"),
            optional("subject"),
            optional("query"),
            many("add_label_ids"),
            many("remove_label_ids"),
            optional("forward"),
        ),
        _op("filters_delete", required("filter_id"), feature=_DESTRUCTIVE),
        _op("auto_forward_get"),
        _op("auto_forward_enable", required("email")),
        _op("auto_forward_disable"),
        _op("vacation_get"),
        _op("vacation_enable", required("subject"), required("message")),
        _op("vacation_disable"),
        _op("delegates_list"),
        _op("delegates_add", required("email")),
        _op("delegates_remove", required("email")),
        _op("send_as_list"),
        _op("send_as_create", required("email")),
        _op("watch_start", required("topic"), optional("label")),
        _op("history", required("since_history_id")),
        _op("url", required("thread_id")),
    ),
)

_CALENDAR = Service(
    "calendar",
    (
        _op("calendars"),
        _op(
            "events",
            optional("calendar_id"),
            flag("today"),
            flag("tomorrow"),
            flag("week"),
            optional("days", _U32),
            optional("from"),
            optional("to"),
            flag("all"),
            many("calendars"),
            optional("week_start"),
        ),
        _op("event_get", required("calendar_id"), required("event_id")),
        _op(
            "search",
            required("query"),
            flag("today"),
            flag("tomorrow"),
            optional("days", _U32),
            optional("from"),
            optional("to"),
            optional("max", _U32),
        ),
        _op(
            "create",
            optional("calendar_id"),
            required("summary"),
            required("from"),
            required("to"),
            many("attendees"),
            optional("location"),
            optional("send_updates"),
            optional("rrule"),
            many("reminders"),
            optional("event_type"),
            flag("all_day"),
            optional("working_location_type"),
            optional("working_office_label"),
        ),
        _op(
            "update",
            required("calendar_id"),
            required("event_id"),
            optional("summary"),
            optional("from"),
            optional("to"),
            optional("send_updates"),
            optional("add_attendee"),
        ),
        _op(
            "delete",
            required("calendar_id"),
            required("event_id"),
            optional("send_updates"),
            feature=_DESTRUCTIVE,
        ),
        _op(
            "respond",
            required("calendar_id"),
            required("event_id"),
            required("status"),
            optional("send_updates"),
        ),
        _op(
            "propose_times",
            required("calendar_id"),
            required("event_id"),
            flag("open"),
            flag("decline"),
            optional("comment"),
        ),
        _op("free_busy", many("calendars"), optional("from"), optional("to")),
        _op("conflicts", many("calendars"), flag("today")),
        _op(
            "team",
            required("group_email"),
            flag("today"),
            flag("week"),
            flag("freebusy"),
            optional("query"),
        ),
        _op("colors"),
        _op("acl", required("calendar_id")),
        _op("users"),
    ),
)

_CONTACTS = Service(
    "contacts",
    (
        _op("list", optional("max", _U32)),
        _op("search", required("query"), optional("max", _U32)),
        _op("get", required("resource_name")),
        _op(
            "create",
            required("given"),
            optional("family"),
            optional("email"),
            optional("phone"),
        ),
        _op(
            "update",
            required("resource_name"),
            optional("given"),
            optional("family"),
            optional("email"),
            optional("phone"),
            optional("birthday"),
            optional("notes"),
            optional("from_file"),
        ),
        _op("delete", required("resource_name"), feature=_DESTRUCTIVE),
        _op("other_list", optional("max", _U32)),
        _op("other_search", required("query"), optional("max", _U32)),
        _op("directory_list", optional("max", _U32)),
        _op("directory_search", required("query"), optional("max", _U32)),
    ),
)

_TASKS = Service(
    "tasks",
    (
        _op("task_lists", optional("max", _U32)),
        _op("task_list_create", required("title")),
        _op("list", required("tasklist_id"), optional("max", _U32)),
        _op("get", required("tasklist_id"), required("task_id")),
        _op(
            "add",
            required("tasklist_id"),
            required("title"),
            optional("due"),
            optional("repeat"),
            optional("repeat_count", _U32),
            optional("repeat_until"),
        ),
        _op("update", required("tasklist_id"), required("task_id"), optional("title")),
        _op("done", required("tasklist_id"), required("task_id")),
        _op("undo", required("tasklist_id"), required("task_id")),
        _op("delete", required("tasklist_id"), required("task_id"), feature=_DESTRUCTIVE),
        _op("clear", required("tasklist_id"), feature=_DESTRUCTIVE),
    ),
)

_PEOPLE = Service(
    "people",
    (
        _op("me"),
        _op("get", required("resource_name")),
        _op("search", required("query"), optional("max", _U32)),
        _op("relations", required("resource_name"), optional("relation_type")),
    ),
)

_CHAT = Service(
    "chat",
    (
        _op("spaces_list"),
        _op("spaces_find", required("name")),
        _op("spaces_create", required("name"), many("members")),
        _op(
            "messages_list",
            required("space_id"),
            optional("max", _U32),
            optional("thread_id"),
            flag("unread"),
        ),
        _op(
            "messages_send",
            required("space_id"),
            required("text"),
            optional("thread_id"),
        ),
        _op("threads_list", required("space_id")),
        _op("dm_space", required("email")),
        _op("dm_send", required("email"), required("text")),
    ),
)

_GROUPS = Service(
    "groups",
    (
        _op("list"),
        _op("members", required("group_email")),
    ),
)


def mail_services() -> tuple[Service, ...]:
    """Return the mail, calendar, contacts, tasks, people, chat and groups services."""
    return (_GMAIL, _CALENDAR, _CONTACTS, _TASKS, _PEOPLE, _CHAT, _GROUPS)