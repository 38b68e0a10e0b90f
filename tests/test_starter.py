from unittest import mock

import pytest

from wutils.starter import build_command, main


@pytest.mark.parametrize(
    "script, expected",
    [
        ("run.bat", ["cmd", "/C", "start", "run.bat"]),
        ("tool.exe", ["cmd", "/C", "start", "tool.exe"]),
        ("job.sh", ["cmd", "/C", "start", "bash", "-c", "job.sh"]),
        ("setup.ps1", ["powershell", "setup.ps1"]),
        ("build.cmd", ["cmd", "/c", "build.cmd"]),
    ],
)
def test_build_command(script, expected):
    assert build_command(script) == expected


@pytest.mark.parametrize("script", ["notes.txt", "noextension", "RUN.BAT"])
def test_build_command_unknown(script):
    assert build_command(script) is None


@mock.patch("wutils.starter.subprocess.Popen")
def test_main_starts_script(popen, capsys):
    assert main(["dir/job.sh"]) == 0
    popen.assert_called_once_with(build_command("dir/job.sh"))
    assert "dir/job.sh" in capsys.readouterr().err


@mock.patch("wutils.starter.subprocess.Popen")
def test_main_unknown_extension(popen, capsys):
    assert main(["notes.txt"]) == 0
    assert popen.call_count == 0
    assert "Unknown file extension" in capsys.readouterr().err


@mock.patch("wutils.starter.subprocess.Popen")
def test_main_without_arguments(popen):
    assert main([]) == 0
    assert popen.call_count == 0


@mock.patch("wutils.starter.subprocess.Popen", side_effect=FileNotFoundError("no cmd here"))
def test_main_reports_start_failure(popen, capsys):
    assert main(["run.bat"]) == 0
    assert "no cmd here" in capsys.readouterr().err