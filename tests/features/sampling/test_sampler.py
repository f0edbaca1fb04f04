"""
Summary: Verify uniform file/line draws, blank-line retries and read failures.
Why: Sampling policy is the heart of the quiz distribution.
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from codequiz.config.settings import MAX_BLANK_LINE_RETRIES
from codequiz.errors import RoundReadError
from codequiz.features.sampling import Sampler


def test_same_seed_gives_same_round(make_tree) -> None:
    root = make_tree({f"f{index}.txt": "\n".join(f"line {n}" for n in range(50)) for index in range(8)})
    files = sorted(root.iterdir())

    first = Sampler(files).draw(1234)
    second = Sampler(files).draw(1234)

    assert (first.path, first.line_number, first.line) == (
        second.path,
        second.line_number,
        second.line,
    )


def test_draw_follows_seed_offsets(make_tree) -> None:
    """File draw uses the seed, line draw uses seed + 1."""

    root = make_tree({f"f{index}.txt": "x\n" * 20 for index in range(5)})
    files = sorted(root.iterdir())

    quiz_round = Sampler(files).draw(77)

    reference = random.Random(77)
    assert quiz_round.path == reference.choice(tuple(files))
    reference.seed(78)
    assert quiz_round.line_number == reference.randint(1, 20)
    assert quiz_round.seed == 77
    assert quiz_round.blank_retries == 0


def test_target_line_within_file_bounds(make_tree) -> None:
    root = make_tree({"short.txt": "a\nb\n", "long.txt": "".join(f"{n}\n" for n in range(300))})
    files = sorted(root.iterdir())
    sampler = Sampler(files)

    for seed in range(200):
        quiz_round = sampler.draw(seed)
        assert 1 <= quiz_round.line_number <= quiz_round.total_lines
        assert quiz_round.total_lines == (2 if quiz_round.path.name == "short.txt" else 300)


def test_files_are_drawn_uniformly_not_by_length(make_tree) -> None:
    root = make_tree({"tiny.txt": "t\n", "huge.txt": "h\n" * 1000})
    files = sorted(root.iterdir())
    sampler = Sampler(files)

    tiny = sum(1 for seed in range(0, 4000, 2) if sampler.draw(seed).path.name == "tiny.txt")

    assert 800 < tiny < 1200


def test_blank_retry_finds_only_non_blank_line(make_tree) -> None:
    """Line 5 is the only non-blank line of a short file."""

    root = make_tree({"sparse.txt": "\n \n\t\n\nfound\n\n"})
    sampler = Sampler([root / "sparse.txt"])

    hits = 0
    for seed in range(0, 600, 3):
        quiz_round = sampler.draw(seed)
        assert quiz_round.blank_retries <= MAX_BLANK_LINE_RETRIES
        if quiz_round.line_number == 5:
            assert quiz_round.line == "found"
            hits += 1
        else:
            assert quiz_round.blank_retries == MAX_BLANK_LINE_RETRIES
            assert quiz_round.is_blank

    assert hits > 0


def test_all_blank_file_keeps_last_draw(make_tree) -> None:
    root = make_tree({"blank.txt": "\n   \n\t\n"})
    quiz_round = Sampler([root / "blank.txt"]).draw(5)

    assert quiz_round.is_blank
    assert quiz_round.blank_retries == MAX_BLANK_LINE_RETRIES
    assert 1 <= quiz_round.line_number <= 3


def test_retry_cap_is_configurable(make_tree) -> None:
    root = make_tree({"blank.txt": "\n\n"})
    quiz_round = Sampler([root / "blank.txt"], max_blank_retries=0).draw(9)

    assert quiz_round.blank_retries == 0


def test_unreadable_file_raises_round_error(make_tree, mocker: MockerFixture) -> None:
    root = make_tree({"a.txt": "a\n"})
    _ = mocker.patch(
        "codequiz.features.sampling.sampler.read_lines",
        side_effect=PermissionError(13, "Permission denied"),
    )

    with pytest.raises(RoundReadError) as excinfo:
        _ = Sampler([root / "a.txt"]).draw(1)

    assert excinfo.value.path == root / "a.txt"
    assert excinfo.value.reason == "Permission denied"


def test_vanished_file_raises_round_error(tmp_path: Path) -> None:
    with pytest.raises(RoundReadError):
        _ = Sampler([tmp_path / "gone.txt"]).draw(1)


def test_empty_file_raises_round_error(make_tree) -> None:
    root = make_tree({"empty.txt": ""})

    with pytest.raises(RoundReadError, match="no lines"):
        _ = Sampler([root / "empty.txt"]).draw(1)


def test_requires_files() -> None:
    with pytest.raises(ValueError):
        _ = Sampler([])
