import json

import pytest
import uvicorn

from campus import main as campus_main
from campus.core.decorators import TutoringSupportDecorator
from campus.core.exceptions import ConfigurationError
from campus.core.factories import BasicStudentFactory
from campus.core.university import University
from campus.main import CampusPlatform, load_config


def test_platform_defaults_to_process_wide_university():
    platform = CampusPlatform()
    assert platform.university is University.get_instance()
    assert isinstance(platform.student_factory, BasicStudentFactory)
    assert platform.config["rest_port"] == 8000


def test_platform_accepts_injected_university():
    university = University()
    platform = CampusPlatform({"rest_port": 9000}, university=university)
    assert platform.university is university
    assert platform.config["rest_port"] == 9000
    assert platform.config["rest_host"] == "0.0.0.0"


def test_run_demo(capsys):
    university = University()
    platform = CampusPlatform(university=university)

    assert platform.run_demo() is True

    out = capsys.readouterr().out
    assert "Factory Pattern: Created a BasicStudent using BasicStudentFactory." in out
    assert "University now has 1 students." in out
    assert "Can tutored student take 'Advanced Quantum Mechanics'? true" in out

    [student] = university.get_students()
    assert isinstance(student, TutoringSupportDecorator)
    assert student.get_categories() == ["Math", "Physics"]
    assert student.has_test_to_skip_levels() is True


def test_run_demo_uses_configured_course(capsys):
    platform = CampusPlatform({"demo_course": "Organic Chemistry"}, university=University())
    platform.run_demo()
    assert "'Organic Chemistry'? true" in capsys.readouterr().out


def test_stop_platform_when_not_running(capsys):
    CampusPlatform(university=University()).stop_platform()
    assert "Platform not running" in capsys.readouterr().out


def test_start_rest_server_keeps_explicit_port_zero(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, host, port, log_level: calls.append((host, port)))
    platform = CampusPlatform({"rest_port": 8123}, university=University())

    platform.start_rest_server(host="127.0.0.1", port=0)
    platform._rest_thread.join(timeout=5)

    assert calls == [("127.0.0.1", 0)]


def test_start_rest_server_falls_back_to_config(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, host, port, log_level: calls.append((host, port)))
    platform = CampusPlatform({"rest_host": "127.0.0.1", "rest_port": 8123}, university=University())

    platform.start_rest_server()
    platform._rest_thread.join(timeout=5)

    assert calls == [("127.0.0.1", 8123)]


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rest_port": 8888}))
    assert load_config(str(path)) == {"rest_port": 8888}


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_load_config_rejects_bad_files(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.json"))


def test_main_runs_walkthrough_by_default(monkeypatch, capsys):
    monkeypatch.setattr(CampusPlatform, "start_platform",
                        lambda self, *args: pytest.fail("server must not start without --serve"))

    campus_main.main([])

    out = capsys.readouterr().out
    assert "University now has 1 students." in out
    assert "'Advanced Quantum Mechanics'? true" in out
    assert len(University.get_instance().get_students()) == 1


def test_main_walkthrough_reads_config(capsys, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"demo_course": "Topology"}))

    campus_main.main(["--config", str(path)])

    assert "'Topology'? true" in capsys.readouterr().out


def test_main_serve_starts_platform(monkeypatch):
    started = []

    def fake_start(self, *args):
        started.append(self.config["rest_port"])
        raise KeyboardInterrupt

    monkeypatch.setattr(CampusPlatform, "start_platform", fake_start)
    monkeypatch.setattr(CampusPlatform, "run_demo",
                        lambda self: pytest.fail("walkthrough must not run with --serve"))

    campus_main.main(["--serve", "--rest-port", "0"])

    assert started == [0]
    assert University.get_instance().get_students() == []
