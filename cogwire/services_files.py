"""Operation catalogue for the file, document, classroom and assistant services."""

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
    optional,
    required,
)

_U32 = ValueType.U32
_U64 = ValueType.U64
_JSON = ValueType.JSON
_DESTRUCTIVE = Feature.DESTRUCTIVE_PERMANENT


def _op(name: str, *fields: Field, feature: Feature | None = None) -> Operation:
    return Operation(name, Struct(name, fields), feature)


_DRIVE = Service(
    "drive",
    (
        _op("list", optional("max", _U32), optional("parent"), flag("no_all_drives")),
        _op(
            "search",
            required("query"),
            optional("max", _U32),
            flag("no_all_drives"),
            optional("raw_query"),
        ),
        _op("get", required("file_id")),
        _op(
            "upload",
            required("file_path"),
            optional("parent"),
            flag("replace"),
            flag("convert"),
            optional("convert_to"),
            optional("name"),
        ),
        _op("download", required("file_id"), optional("format"), optional("out")),
        _op("copy", required("file_id"), optional("name")),
        _op("mkdir", required("name"), optional("parent")),
        _op("rename", required("file_id"), required("name")),
        _op("move", required("file_id"), required("parent")),
        _op("trash", required("file_id")),
        _op("permanent_delete", required("file_id"), feature=_DESTRUCTIVE),
        _op("empty_trash", feature=_DESTRUCTIVE),
        _op(
            "share",
            required("file_id"),
            optional("share_to"),
            optional("email"),
            optional("domain"),
            optional("role"),
        ),
        _op("unshare", required("file_id"), required("permission_id")),
        _op("permissions", required("file_id")),
        _op("drives", optional("max", _U32)),
        _op("batch_trash", many("file_ids")),
        _op("url", required("file_id")),
    ),
)

_DOCS = Service(
    "docs",
    (
        _op("info", required("doc_id")),
        _op(
            "cat",
            required("doc_id"),
            optional("max_bytes", _U64),
            optional("tab"),
            flag("all_tabs"),
        ),
        _op("create", required("title"), optional("file")),
        _op("copy", required("doc_id"), optional("name")),
        _op("export", required("doc_id"), optional("format"), optional("out")),
        _op(
            "write",
            required("doc_id"),
            flag("replace"),
            flag("markdown"),
            optional("file"),
        ),
        _op("find_replace", required("doc_id"), required("find"), required("replace_with")),
        _op("sed", required("doc_id"), required("expression")),
        _op("list_tabs", required("doc_id")),
    ),
)

_SHEETS = Service(
    "sheets",
    (
        _op("metadata", required("spreadsheet_id")),
        _op("get", required("spreadsheet_id"), required("range")),
        _op("create", required("title"), many("sheets")),
        _op(
            "update",
            required("spreadsheet_id"),
            required("range"),
            many("values"),
            optional("values_json"),
            optional("copy_validation_from"),
        ),
        _op(
            "append",
            required("spreadsheet_id"),
            required("range"),
            many("values"),
            optional("copy_validation_from"),
        ),
        _op("clear", required("spreadsheet_id"), required("range")),
        _op(
            "format",
            required("spreadsheet_id"),
            required("range"),
            required("format_json"),
            optional("format_fields"),
        ),
        _op(
            "insert",
            required("spreadsheet_id"),
            required("sheet_name"),
            required("dimension"),
            required("index", _U32),
            required("count", _U32),
            flag("after"),
        ),
        _op("notes", required("spreadsheet_id"), required("range")),
        _op("export", required("spreadsheet_id"), optional("format"), optional("out")),
        _op("copy", required("spreadsheet_id"), optional("name")),
    ),
)

_SLIDES = Service(
    "slides",
    (
        _op("info", required("presentation_id")),
        _op("create", required("title")),
        _op("create_from_markdown", required("title"), required("content_file")),
        _op("copy", required("presentation_id"), optional("name")),
        _op("export", required("presentation_id"), optional("format"), optional("out")),
        _op("list_slides", required("presentation_id")),
        _op(
            "add_slide",
            required("presentation_id"),
            required("image_path"),
            optional("notes"),
        ),
        _op(
            "update_notes",
            required("presentation_id"),
            required("slide_id"),
            required("notes"),
        ),
        _op(
            "replace_slide",
            required("presentation_id"),
            required("slide_id"),
            required("image_path"),
            optional("notes"),
        ),
        _op(
            "delete_slide",
            required("presentation_id"),
            required("slide_id"),
            feature=_DESTRUCTIVE,
        ),
    ),
)

_FORMS = Service(
    "forms",
    (
        _op("get", required("form_id")),
        _op("create", required("title"), optional("description")),
        _op("responses_list", required("form_id"), optional("max", _U32)),
        _op("responses_get", required("form_id"), required("response_id")),
    ),
)

_KEEP = Service(
    "keep",
    (
        _op("list", optional("account")),
        _op("get", required("note_id"), optional("account")),
        _op("search", required("query"), optional("account")),
        _op("attachment", required("attachment_name"), optional("account")),
    ),
)

_APPSCRIPT = Service(
    "appscript",
    (
        _op("get", required("script_id")),
        _op("content", required("script_id")),
        _op("create", required("title"), optional("parent_id")),
        _op(
            "run",
            required("script_id"),
            required("function"),
            many("params", _JSON),
            flag("dev_mode"),
        ),
    ),
)

_CLASSROOM = Service(
    "classroom",
    (
        _op("courses_list", optional("role")),
        _op("courses_get", required("course_id")),
        _op("courses_create", required("name")),
        _op("courses_update", required("course_id"), optional("name")),
        _op("courses_archive", required("course_id")),
        _op("courses_unarchive", required("course_id")),
        _op("courses_delete", required("course_id"), feature=_DESTRUCTIVE),
        _op("courses_url", required("course_id")),
        _op("roster", required("course_id"), flag("students_only")),
        _op("students_add", required("course_id"), required("user_id")),
        _op("teachers_add", required("course_id"), required("user_id")),
        _op("coursework_list", required("course_id")),
        _op("coursework_get", required("course_id"), required("coursework_id")),
        _op(
            "coursework_create",
            required("course_id"),
            required("title"),
            optional("work_type"),
            optional("state"),
        ),
        _op(
            "coursework_update",
            required("course_id"),
            required("coursework_id"),
            optional("title"),
        ),
        _op("submissions_list", required("course_id"), required("coursework_id")),
        _op(
            "submissions_get",
            required("course_id"),
            required("coursework_id"),
            required("submission_id"),
        ),
        _op(
            "submissions_grade",
            required("course_id"),
            required("coursework_id"),
            required("submission_id"),
            required("grade"),
        ),
        _op(
            "submissions_return",
            required("course_id"),
            required("coursework_id"),
            required("submission_id"),
        ),
        _op(
            "submissions_turn_in",
            required("course_id"),
            required("coursework_id"),
            required("submission_id"),
        ),
        _op(
            "submissions_reclaim",
            required("course_id"),
            required("coursework_id"),
            required("submission_id"),
        ),
        _op("announcements_list", required("course_id")),
        _op("announcements_create", required("course_id"), required("text")),
        _op(
            "announcements_update",
            required("course_id"),
            required("announcement_id"),
            required("text"),
        ),
        _op("topics_list", required("course_id")),
        _op("topics_create", required("course_id"), required("name")),
        _op(
            "topics_update",
            required("course_id"),
            required("topic_id"),
            required("name"),
        ),
        _op("invitations_list"),
        _op(
            "invitations_create",
            required("course_id"),
            required("user_id"),
            optional("role"),
        ),
        _op("invitations_accept", required("invitation_id")),
        _op("guardians_list", required("student_id")),
        _op("guardians_get", required("student_id"), required("guardian_id")),
        _op("guardians_delete", required("student_id"), required("guardian_id")),
        _op("guardian_invitations_list", required("student_id")),
        _op("guardian_invitations_create", required("student_id"), required("email")),
        _op("profile_get", required("user_id")),
    ),
)

_GEMINI = Service(
    "gemini",
    (
        _op("list_conversations", optional("max", _U32), feature=Feature.GEMINI_WEB),
        _op("get_conversation", required("conversation_id"), feature=Feature.GEMINI_WEB),
        _op(
            "search_conversations",
            required("query"),
            optional("max", _U32),
            feature=Feature.GEMINI_WEB,
        ),
    ),
)

_NOTEBOOKLM = Service(
    "notebooklm",
    (
        _op("list", optional("max", _U32), feature=Feature.NOTEBOOKLM),
        _op("get", required("notebook_id"), feature=Feature.NOTEBOOKLM),
    ),
)


def file_services() -> tuple[Service, ...]:
    """Return the drive, docs, sheets, slides, forms, keep, appscript,
    classroom, gemini and notebooklm services.

    Every gemini and notebooklm operation needs its feature enabled.
    """
    return (
        _DRIVE,
        _DOCS,
        _SHEETS,
        _SLIDES,
        _FORMS,
        _KEEP,
        _APPSCRIPT,
        _CLASSROOM,
        _GEMINI,
        _NOTEBOOKLM,
    )