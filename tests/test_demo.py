from demos.battle_demo import main


def test_battle_demo_runs(capsys):
    assert main(["--seed", "3", "--enemy", "weak"]) == 0

    out = capsys.readouterr().out
    assert "Battle started: Naruto vs Bandit (weak)" in out
    assert "[Round 1]" in out
    assert "Battle Over! Winner:" in out
