from dining.cli import main


def test_invalid_arguments(capsys):
    assert main(["x"]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Error: Invalid argument"
    assert lines[1].startswith("Usage: ")
    assert "[number_of_times_each_philosopher_must_eat]" in lines[1]


def test_zero_philosophers_rejected(capsys):
    assert main(["0", "100", "10", "10"]) == 1
    assert "Error: Invalid argument" in capsys.readouterr().out


def test_single_philosopher_run(capsys):
    assert main(["1", "50", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" 1 died")


def test_run_until_fed(capsys):
    assert main(["2", "1000", "20", "20", "2"]) == 0
    out = capsys.readouterr().out
    assert "died" not in out
    assert out.count("is eating") >= 4