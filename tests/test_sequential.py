import numpy as np
import pytest
from PIL import Image

from imgsharpen.kernel import apply_sharpening_filter
from imgsharpen.sequential import main, run_sequential
from imgsharpen.workspace import InputDirectoryError, load_image


@pytest.fixture
def populate(tmp_path):
    source = tmp_path / "input"
    source.mkdir()

    def write(*names):
        for seed, name in enumerate(names):
            pixels = np.random.default_rng(seed).integers(
                0, 256, size=(6, 7, 3), dtype=np.uint8
            )
            Image.fromarray(pixels).save(source / name)
        return source, tmp_path / "output"

    return write


@pytest.mark.parametrize(
    ("names", "extras", "limit", "expected"),
    [
        (["a.png", "b.png"], {}, 100, ["a.png", "b.png"]),
        (["a.png", "b.png", "c.png"], {}, 2, ["a.png", "b.png"]),
        (["a.png"], {"notes.txt": b"not an image"}, 100, ["a.png"]),
        (["good.png"], {"bad.png": b"garbage"}, 100, ["good.png"]),
    ],
    ids=["all", "limited", "non-image-ignored", "unreadable-skipped"],
)
def test_written_files_are_sharpened(populate, names, extras, limit, expected):
    source, target = populate(*names)
    for name, data in extras.items():
        (source / name).write_bytes(data)

    report = run_sequential(source, target, limit)

    assert report.file_count == len(expected)
    assert sorted(p.name for p in target.iterdir()) == expected
    for name in expected:
        wanted = apply_sharpening_filter(load_image(source / name))
        assert np.array_equal(load_image(target / name), wanted)


def test_stale_output_is_removed(populate):
    source, target = populate("a.png")
    target.mkdir()
    (target / "old.txt").write_text("stale")

    run_sequential(source, target, 100)

    assert [p.name for p in target.iterdir()] == ["a.png"]


def test_missing_input_raises(tmp_path):
    with pytest.raises(InputDirectoryError):
        run_sequential(tmp_path / "absent", tmp_path / "output", 10)


def test_timings_are_consistent(populate):
    report = run_sequential(*populate("a.png"), 100)

    assert 0.0 <= report.sharpen_time <= report.total_time


def test_main_reports_counts(populate, capsys):
    source, target = populate("a.png")

    status = main([str(source), str(target), "100"])

    out = capsys.readouterr().out
    assert status == 0
    assert "Processed 1 files:" in out
    assert "- max_images: 100" in out
    assert (target / "a.png").exists()


def test_main_missing_input_fails(tmp_path, capsys):
    status = main([str(tmp_path / "absent"), str(tmp_path / "output"), "5"])

    out = capsys.readouterr().out
    assert status == 1
    assert "Error: Input directory does not exist" in out