from unittest.mock import patch

from core.logger import logger
from domain.entities import Task
from internal.cli.main import main, run


def capture_errors():
    messages = []
    handler_id = logger.add(messages.append, level="ERROR")
    return messages, handler_id


def test_main_prints_sample_tasks(capsys):
    assert main() == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Task list:"
    assert out[1:] == ["- Walk the dog ", "- Do homework ", "- Cook dinner "]
    assert all(line.startswith("- ") for line in out[1:])
    assert not any("(Completed)" in line for line in out)


def test_run_leaves_sample_tasks_in_service(service, capsys):
    run(service)

    assert service.get_all_tasks() == [
        Task("Walk the dog", False),
        Task("Do homework", False),
        Task("Cook dinner", False),
    ]
    assert len(capsys.readouterr().out.splitlines()) == 4


def test_output_ignores_environment(monkeypatch, capsys):
    monkeypatch.setenv("SAMPLE_TASKS", "[]")
    monkeypatch.setenv("TASK_LIST_HEADER", "Tasks:")
    monkeypatch.setenv("COMPLETED_MARKER", "[x]")

    assert main() == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["Task list:", "- Walk the dog ", "- Do homework ", "- Cook dinner "]


def test_each_run_starts_with_empty_repository(capsys):
    assert main() == 0
    assert main() == 0

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 8


def test_unexpected_error_exits_with_status_one(capsys):
    messages, handler_id = capture_errors()
    try:
        with patch("internal.cli.main.run", side_effect=RuntimeError("boom")):
            assert main() == 1
    finally:
        logger.remove(handler_id)

    assert capsys.readouterr().out == ""
    assert any("boom" in str(m) for m in messages)


def test_invalid_environment_value_is_logged_and_exits_with_status_one(
    monkeypatch, capsys
):
    monkeypatch.setenv("DEBUG", "verbose")

    messages, handler_id = capture_errors()
    try:
        assert main() == 1
    finally:
        logger.remove(handler_id)

    assert capsys.readouterr().out == ""
    assert any("Task list run failed" in str(m) for m in messages)
    assert any("boolean" in str(m) for m in messages)
