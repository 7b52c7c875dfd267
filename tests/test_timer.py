from partition_generator.helper.timer import Timer


def test_timer(capsys):
    with Timer("block") as t:
        pass
    out = capsys.readouterr().out
    assert out.startswith("block : ")
    assert out.rstrip().endswith(" seconds")
    assert t.time >= 0.0


def test_timer_items(capsys):
    with Timer("count", fmt="%.2f") as t:
        t.items = 42
    out = capsys.readouterr().out
    assert "(42 items, " in out
    assert "us/item)" in out
