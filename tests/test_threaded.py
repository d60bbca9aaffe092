import numpy as np
import pytest
from PIL import Image

from imgsharpen.kernel import apply_sharpening_filter
from imgsharpen.threaded import main, run_threaded
from imgsharpen.workspace import InputDirectoryError, load_image


def _fill(folder, names):
    rng = np.random.default_rng(11)
    for name in names:
        Image.fromarray(rng.integers(0, 256, size=(5, 8, 3), dtype=np.uint8)).save(
            folder / name
        )


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "in").mkdir()
    return tmp_path / "in", tmp_path / "out"


@pytest.mark.parametrize("num_threads", [1, 3])
def test_outputs_match_filter(tree, num_threads):
    source, target = tree
    names = [f"img{i}.png" for i in range(5)]
    _fill(source, names)

    report = run_threaded(source, target, num_threads, 100)

    assert report.file_count == len(names)
    for name in names:
        wanted = apply_sharpening_filter(load_image(source / name))
        assert np.array_equal(load_image(target / name), wanted)


def test_worker_times_sum_to_total(tree):
    source, target = tree
    _fill(source, [f"img{i}.png" for i in range(4)])

    report = run_threaded(source, target, 2, 100)

    assert len(report.worker_sharpen_times) == 2
    assert all(t >= 0.0 for t in report.worker_sharpen_times)
    assert sum(report.worker_sharpen_times) == pytest.approx(report.sharpen_time)


@pytest.mark.parametrize(
    ("names", "garbage", "limit", "count", "outputs"),
    [
        (["a.png", "b.png", "c.png"], [], 1, 1, ["a.png"]),
        (["good.png"], ["bad.png"], 100, 2, ["good.png"]),
    ],
    ids=["limited", "unreadable-counted"],
)
def test_counts_and_outputs(tree, names, garbage, limit, count, outputs):
    source, target = tree
    _fill(source, names)
    for name in garbage:
        (source / name).write_bytes(b"garbage")

    report = run_threaded(source, target, 2, limit)

    assert report.file_count == count
    assert sorted(p.name for p in target.iterdir()) == outputs


def test_stale_output_is_removed(tree):
    source, target = tree
    _fill(source, ["a.png"])
    (target / "stale").mkdir(parents=True)

    run_threaded(source, target, 1, 100)

    assert [p.name for p in target.iterdir()] == ["a.png"]


@pytest.mark.parametrize(
    ("input_exists", "threads", "error"),
    [(False, 2, InputDirectoryError), (True, 0, ValueError)],
    ids=["missing-input", "zero-threads"],
)
def test_invalid_runs_raise(tree, input_exists, threads, error):
    source, target = tree
    if not input_exists:
        source = source.parent / "absent"
    with pytest.raises(error):
        run_threaded(source, target, threads, 10)


def test_main_reports_each_thread(tree, capsys):
    source, target = tree
    _fill(source, [f"img{i}.png" for i in range(3)])

    status = main([str(source), str(target), "2", "100"])

    out = capsys.readouterr().out
    assert status == 0
    assert "Processed 3 files:" in out
    assert "- num_of_threads: 2" in out
    for index in range(2):
        assert f"  - thread {index} sharpen time:" in out


def test_main_missing_input_reports_error(tmp_path, capsys):
    status = main([str(tmp_path / "absent"), str(tmp_path / "output"), "2", "5"])

    out = capsys.readouterr().out
    assert status == 0
    assert "Error: Input directory does not exist" in out
    assert not (tmp_path / "output").exists()