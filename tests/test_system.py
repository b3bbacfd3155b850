import datetime as dt
import os
import pwd
import re

from desktools.status import system

_BINARY_PREFIXES = {"", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"}


def _split_human(value):
    number, prefix = value.split(" ", 1)
    return float(number), prefix


def test_datetime_literal_text():
    assert system.datetime("plain text") == "plain text"


def test_datetime_empty_is_none():
    assert system.datetime("") is None


def test_datetime_year_is_current_year():
    assert system.datetime("%Y") == str(dt.date.today().year)


def test_disk_total_format(tmp_path):
    number, prefix = _split_human(system.disk_total(tmp_path))
    assert prefix in _BINARY_PREFIXES
    assert 0 <= number < 1024


def test_disk_perc_in_range(tmp_path):
    perc = int(system.disk_perc(tmp_path))
    assert 0 <= perc <= 100


def test_disk_used_and_free_format(tmp_path):
    for value in (system.disk_used(tmp_path), system.disk_free(tmp_path)):
        number, prefix = _split_human(value)
        assert prefix in _BINARY_PREFIXES
        assert 0 <= number < 1024
        assert len(value.split(" ")[0].split(".")[1]) == 1


def test_disk_missing_path(tmp_path):
    missing = tmp_path / "nope"
    assert system.disk_free(missing) is None
    assert system.disk_perc(missing) is None
    assert system.disk_total(missing) is None
    assert system.disk_used(missing) is None


def test_num_files_counts_entries(tmp_path):
    names = ["a", "b", ".hidden"]
    for name in names:
        (tmp_path / name).write_text("x")
    (tmp_path / "sub").mkdir()
    assert system.num_files(tmp_path) == str(len(names) + 1)


def test_num_files_empty(tmp_path):
    assert system.num_files(tmp_path) == str(len([]))


def test_num_files_missing(tmp_path):
    assert system.num_files(tmp_path / "missing") is None


def test_entropy_from_file(tmp_path):
    path = tmp_path / "entropy_avail"
    path.write_text("256\n")
    assert system.entropy(path) == "256"


def test_entropy_missing(tmp_path):
    assert system.entropy(tmp_path / "missing") is None


def test_run_command_first_line():
    assert system.run_command("echo hello") == "hello"


def test_run_command_only_first_line():
    assert system.run_command("printf 'first\\nsecond\\n'") == "first"


def test_run_command_no_output():
    assert system.run_command("true") is None


def test_uptime_format():
    result = system.uptime()
    found = re.fullmatch(r"(\d+)h (\d+)m", result)
    assert found
    assert int(found.group(2)) < 60


def test_load_avg_format():
    parts = system.load_avg().split(" ")
    assert len(parts) == 3
    assert all(float(part) >= 0 for part in parts)
    assert [len(part.split(".")[1]) for part in parts] == [2, 2, 2]


def test_username_matches_uid():
    assert pwd.getpwnam(system.username()).pw_uid == int(system.uid())


def test_gid_is_process_gid():
    assert int(system.gid()) == os.getgid()


def test_hostname_non_empty():
    assert len(system.hostname()) > 0


def test_kernel_release_matches_uname():
    assert system.kernel_release() == os.uname().release