import subprocess

import pytest

from golings import screen

DONE_BODY = "package main\n\nfunc main() {}\n"
PENDING_BODY = "// I AM NOT DONE\npackage main\n\nfunc main() {}\n"


class FakeProcesses:
    def __init__(self, outcomes=None, clear_code=0):
        self.outcomes = outcomes or {}
        self.clear_code = clear_code
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if cmd[0] == "go":
            for path, (code, out, err) in self.outcomes.items():
                if cmd[-1].endswith(path):
                    return subprocess.CompletedProcess(cmd, code, out, err)
            return subprocess.CompletedProcess(cmd, 0, "", "")
        return subprocess.CompletedProcess(cmd, self.clear_code, "", "")


def make_course(root, entries):
    blocks = []
    for name, body in entries:
        (root / name).mkdir()
        (root / name / "main.go").write_text(body)
        blocks.append(
            f'[[exercises]]\nname = "{name}"\npath = "{name}/main.go"\n'
            f'mode = "compile"\nhint = "hint for {name}"\n'
        )
    info = root / "info.toml"
    info.write_text("\n".join(blocks))
    return str(info)


@pytest.fixture
def course(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return make_course(tmp_path, [("done1", DONE_BODY), ("pending1", PENDING_BODY)])


def test_clear_screen_uses_clear_on_unix(monkeypatch, capsys):
    fake = FakeProcesses()
    monkeypatch.setattr(subprocess, "run", fake)
    monkeypatch.setattr("platform.system", lambda: "Linux")
    screen.clear_screen()
    assert fake.calls == [["clear"]]
    assert "Clear terminal command error" not in capsys.readouterr().out


def test_clear_screen_uses_cls_on_windows(monkeypatch, capsys):
    fake = FakeProcesses()
    monkeypatch.setattr(subprocess, "run", fake)
    monkeypatch.setattr("platform.system", lambda: "Windows")
    screen.clear_screen()
    assert fake.calls == [["cmd", "/c", "cls"]]
    assert "Clear terminal command error" not in capsys.readouterr().out


def test_clear_screen_reports_failure(monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeProcesses(clear_code=1))
    screen.clear_screen()
    assert "Clear terminal command error" in capsys.readouterr().out


def test_clear_screen_reports_missing_command(monkeypatch, capsys):
    def missing(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(subprocess, "run", missing)
    screen.clear_screen()
    assert "Clear terminal command error" in capsys.readouterr().out


def test_print_hint_shows_next_pending_hint(course, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeProcesses())
    screen.print_hint(course)
    out = capsys.readouterr().out
    assert "hint for pending1" in out
    assert "hint for done1" not in out


def test_print_hint_without_pending(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    info = make_course(tmp_path, [("done1", DONE_BODY)])
    monkeypatch.setattr(subprocess, "run", FakeProcesses())
    screen.print_hint(info)
    assert "Failed to find next exercises" in capsys.readouterr().out


def test_print_list_shows_all_exercises(course, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeProcesses())
    screen.print_list(course)
    out = capsys.readouterr().out
    assert "done1" in out and "pending1" in out
    assert "Done" in out and "Pending" in out


def test_print_list_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "run", FakeProcesses())
    screen.print_list(str(tmp_path / "info404.toml"))
    assert "Failed to list exercises" in capsys.readouterr().out


def test_run_next_exercise_pending_but_compiles(course, monkeypatch, capsys):
    fake = FakeProcesses({"pending1/main.go": (0, "program output", "")})
    monkeypatch.setattr(subprocess, "run", fake)
    result = screen.run_next_exercise(course)
    out = capsys.readouterr().out
    assert result.exercise.name == "pending1"
    assert "Progress: 1/2 (50.00%)" in out
    assert "program output" in out
    assert "exercise is still pending" in out
    assert ["go", "run", "./pending1/main.go"] in fake.calls


def test_run_next_exercise_compile_failure(course, monkeypatch, capsys):
    fake = FakeProcesses({"pending1/main.go": (1, "", "syntax trouble")})
    monkeypatch.setattr(subprocess, "run", fake)
    result = screen.run_next_exercise(course)
    out = capsys.readouterr().out
    assert result.succeeded() is False
    assert "Failed to compile the exercise pending1/main.go" in out
    assert "syntax trouble" in out
    assert "`golings hint pending1`" in out
    assert "Congratulations!" not in out


def test_run_next_exercise_all_done(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    info = make_course(tmp_path, [("done1", DONE_BODY)])
    monkeypatch.setattr(subprocess, "run", FakeProcesses())
    assert screen.run_next_exercise(info) is None
    assert "Failed to find next exercises" in capsys.readouterr().out