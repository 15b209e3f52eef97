"""CLI smoke tests in headless mode."""
import main


def test_headless_run_prints_sorted_result(capsys) -> None:
    code = main.main(["--headless", "--values", "5, 2, 8, 1, 9", "-a", "insertion", "--pace", "0"])
    out = capsys.readouterr().out

    assert code == 0
    assert out.splitlines()[0].startswith("Insertion Sort")
    assert "Recommendation: Insertion Sort" in out
    assert "1 2 5 8 9  SORTED" in out
    assert "Swaps: 4" in out


def test_headless_random_with_seed(capsys) -> None:
    assert main.main(["--headless", "--seed", "4", "-a", "merge", "--pace", "0"]) == 0
    assert "SORTED" in capsys.readouterr().out


def test_invalid_values_exit_code(capsys) -> None:
    assert main.main(["--headless", "--values", "5, two, 8"]) == 2
    assert "valid numbers" in capsys.readouterr().err
