import pytest

from cogwire.schema import Feature, SchemaError
from cogwire.services_files import file_services


def _service(name):
    return {s.name: s for s in file_services()}[name]


def test_service_names_in_order():
    names = [s.name for s in file_services()]
    assert names == [
        "drive",
        "docs",
        "sheets",
        "slides",
        "forms",
        "keep",
        "appscript",
        "classroom",
        "gemini",
        "notebooklm",
    ]


def test_operation_names_are_unique_per_service():
    for service in file_services():
        names = [op.name for op in service.operations]
        assert len(names) == len(set(names))


@pytest.mark.parametrize(
    "service, op",
    [
        ("docs", "find_replace"),
        ("docs", "list_tabs"),
        ("slides", "create_from_markdown"),
        ("forms", "responses_get"),
        ("classroom", "submissions_turn_in"),
        ("classroom", "guardian_invitations_create"),
        ("drive", "batch_trash"),
    ],
)
def test_snake_case_operations_exist(service, op):
    assert _service(service).operation(op).name == op


@pytest.mark.parametrize(
    "service, op",
    [
        ("drive", "permanent_delete"),
        ("drive", "empty_trash"),
        ("slides", "delete_slide"),
        ("classroom", "courses_delete"),
    ],
)
def test_destructive_operations_need_feature(service, op):
    svc = _service(service)
    with pytest.raises(SchemaError):
        svc.operation(op)
    assert svc.operation(op, [Feature.DESTRUCTIVE_PERMANENT]).feature is Feature.DESTRUCTIVE_PERMANENT


def test_gemini_requires_gemini_feature():
    gemini = _service("gemini")
    with pytest.raises(SchemaError):
        gemini.operation("list_conversations")
    with pytest.raises(SchemaError):
        gemini.operation("list_conversations", [Feature.NOTEBOOKLM])
    op = gemini.operation("list_conversations", [Feature.GEMINI_WEB])
    assert op.feature is Feature.GEMINI_WEB


def test_notebooklm_requires_notebooklm_feature():
    nb = _service("notebooklm")
    with pytest.raises(SchemaError):
        nb.load("get", {"notebook_id": "n1"})
    loaded = nb.load("get", {"notebook_id": "n1"}, [Feature.NOTEBOOKLM])
    assert loaded == {"notebook_id": "n1"}


def test_drive_list_defaults():
    loaded = _service("drive").load("list", {})
    assert loaded == {"max": None, "parent": None, "no_all_drives": False}


def test_drive_list_dump_omits_empty_optionals():
    dumped = _service("drive").dump("list", {})
    assert dumped == {"no_all_drives": False}


def test_drive_batch_trash_defaults_to_empty_list():
    assert _service("drive").dump("batch_trash", {}) == {"file_ids": []}


def test_drive_upload_round_trip():
    drive = _service("drive")
    params = {"file_path": "/tmp/report.pdf", "convert": True, "name": "Report"}
    dumped = drive.dump("upload", params)
    assert dumped["file_path"] == "/tmp/report.pdf"
    assert dumped["convert"] is True
    assert "parent" not in dumped
    assert drive.load("upload", dumped) == drive.load("upload", params)


def test_missing_required_field_raises():
    with pytest.raises(SchemaError, match="file_id"):
        _service("drive").load("get", {})


def test_unknown_operation_raises():
    with pytest.raises(SchemaError, match="unknown variant"):
        _service("docs").operation("nonexistent")


def test_docs_cat_accepts_large_max_bytes():
    docs = _service("docs")
    big = 2**40
    assert docs.load("cat", {"doc_id": "d", "max_bytes": big})["max_bytes"] == big


def test_sheets_insert_requires_unsigned_index():
    sheets = _service("sheets")
    params = {
        "spreadsheet_id": "s",
        "sheet_name": "Sheet1",
        "dimension": "ROWS",
        "index": -1,
        "count": 2,
    }
    with pytest.raises(SchemaError, match="index"):
        sheets.load("insert", params)
    params["index"] = 0
    loaded = sheets.load("insert", params)
    assert loaded["after"] is False
    assert loaded["count"] == 2


def test_sheets_insert_count_required():
    params = {"spreadsheet_id": "s", "sheet_name": "A", "dimension": "ROWS", "index": 1}
    with pytest.raises(SchemaError, match="count"):
        _service("sheets").load("insert", params)


def test_appscript_run_params_accept_any_json():
    appscript = _service("appscript")
    params = {
        "script_id": "abc",
        "function": "main",
        "params": [1, "two", {"three": [3]}, None],
    }
    dumped = appscript.dump("run", params)
    assert dumped["params"] == [1, "two", {"three": [3]}, None]
    assert dumped["dev_mode"] is False


def test_appscript_run_params_must_be_list():
    with pytest.raises(SchemaError, match="params"):
        _service("appscript").load("run", {"script_id": "a", "function": "f", "params": 5})


def test_classroom_grade_is_string():
    classroom = _service("classroom")
    base = {"course_id": "c", "coursework_id": "w", "submission_id": "s"}
    with pytest.raises(SchemaError, match="grade"):
        classroom.load("submissions_grade", {**base, "grade": 90})
    loaded = classroom.load("submissions_grade", {**base, "grade": "90"})
    assert loaded["grade"] == "90"


def test_classroom_invitations_list_takes_nothing():
    assert _service("classroom").dump("invitations_list", {"extra": 1}) == {}


def test_keep_account_optional_round_trip():
    keep = _service("keep")
    dumped = keep.dump("search", {"query": "groceries", "account": "user@example.com"})
    assert dumped == {"query": "groceries", "account": "user@example.com"}
    assert keep.dump("search", {"query": "groceries"}) == {"query": "groceries"}


def test_forms_responses_list_max_type_checked():
    with pytest.raises(SchemaError, match="max"):
        _service("forms").load("responses_list", {"form_id": "f", "max": "ten"})


def test_dump_includes_gated_operations():
    dumped = _service("slides").dump(
        "delete_slide", {"presentation_id": "p", "slide_id": "s"}
    )
    assert dumped == {"presentation_id": "p", "slide_id": "s"}