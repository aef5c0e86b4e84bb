import pytest

from helixkit.guards import Cleanup, Operation


def test_cleanup_runs_on_exit():
    calls = []
    with Cleanup(lambda: calls.append("done")):
        assert calls == []
    assert calls == ["done"]


def test_cleanup_runs_on_exception():
    calls = []
    with pytest.raises(RuntimeError):
        with Cleanup(lambda: calls.append("done")):
            raise RuntimeError("boom")
    assert calls == ["done"]


def test_operation_runs_immediately_and_undoes():
    log = []
    with Operation(lambda: log.append("do"), lambda: log.append("undo")):
        assert log == ["do"]
    assert log == ["do", "undo"]


def test_committed_operation_is_not_undone():
    log = []
    with Operation(lambda: log.append("do"), lambda: log.append("undo")) as op:
        op.commit()
    assert log == ["do"]


def test_undo_runs_once():
    log = []
    op = Operation(lambda: log.append("do"), lambda: log.append("undo"))
    op.undo()
    op.undo()
    with op:
        pass
    assert log == ["do", "undo"]


def test_failed_operation_records_no_undo():
    log = []

    def fail():
        raise ValueError("failed")

    with pytest.raises(ValueError):
        Operation(fail, lambda: log.append("undo"))
    assert log == []


def test_operations_undo_in_reverse_on_exception():
    log = []
    with pytest.raises(RuntimeError):
        with Operation(lambda: log.append("a"), lambda: log.append("undo a")):
            with Operation(lambda: log.append("b"), lambda: log.append("undo b")):
                raise RuntimeError("boom")
    assert log == ["a", "b", "undo b", "undo a"]