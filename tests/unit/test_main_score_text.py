# tests/unit/test_main_score_text.py

from src.main_score_text import main


def test_main_prints_score_label_and_bucket(capsys):
    assert main(["Analyst upgrade", "Crash and sell-off"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "+3\tbullish\tstrongBullish\tAnalyst upgrade",
        "-6\tbearish\tstrongBearish\tCrash and sell-off",
    ]
