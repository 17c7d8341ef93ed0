from floppy.highscores import HighScoreLedger


def test_missing_file_gives_empty_ledger(tmp_path):
    ledger = HighScoreLedger(tmp_path / "nope.txt")
    assert ledger.load() == ()
    assert ledger.best == 0


def test_empty_file_then_records(tmp_path):
    path = tmp_path / "highscores.txt"
    path.write_text("")
    ledger = HighScoreLedger(path)
    ledger.load()
    ledger.record(2500)
    ledger.record(1800)
    ledger.record(3000)
    assert ledger.scores == (3000, 2500, 1800)
    assert ledger.best == 3000


def test_load_sorts_and_keeps_top_five(tmp_path):
    path = tmp_path / "highscores.txt"
    path.write_text("100\n700\n300\n900\n200\n500\n")
    ledger = HighScoreLedger(path)
    assert ledger.load() == (900, 700, 500, 300, 200)


def test_load_skips_corrupt_entries(tmp_path):
    path = tmp_path / "highscores.txt"
    path.write_text("400\nbanana\n\n1200\n3.5\n")
    ledger = HighScoreLedger(path)
    assert ledger.load() == (1200, 400)


def test_record_keeps_ledger_sorted_and_bounded(ledger):
    for score in [5, 90, 30, 30, 1000, 0, 70, 45, 30]:
        ledger.record(score)
        scores = ledger.scores
        assert len(scores) <= 5
        assert list(scores) == sorted(scores, reverse=True)
    assert ledger.scores == (1000, 90, 70, 45, 30)


def test_save_overwrites_one_per_line(ledger):
    ledger.path.write_text("1\n2\n3\n4\n5\n6\n7\n")
    ledger.record(4600)
    ledger.record(200)
    assert ledger.save()
    assert ledger.path.read_text() == "4600\n200\n"

    again = HighScoreLedger(ledger.path)
    assert again.load() == (4600, 200)


def test_save_failure_is_not_fatal(tmp_path):
    ledger = HighScoreLedger(tmp_path)   # a directory cannot be written as a file
    ledger.record(100)
    assert ledger.save() is False
    assert ledger.scores == (100,)
