# imgsharpen

Sharpen every `.png` and `.jpg` image in a directory with the 3x3 kernel

```
 0 -1  0
-1  5 -1
 0 -1  0
```

Each result is clamped to 0–255 per channel. The one-pixel border keeps its original values. Each run reports how many files it processed, how long the whole run took, and how much of that time went on filtering.

The same job comes in three forms, so you can compare them:

- **sequential**: processes one image after another. Each output keeps the name of its input file.
- **threaded**: hands images out one at a time to a pool of threads as each thread becomes free. Each output keeps the name of its input file. Sharpen time is reported for each thread.
- **distributed**: deals the images round-robin to a number of workers. Worker `r` takes files `r`, `r + n`, `r + 2n`, and so on. The results are gathered in worker order and written as `processed_0.jpg`, `processed_1.jpg`, and so on. Sharpen time is reported for each worker.

Input files are taken from the top level of the input directory only. Their names must end in `.png` or `.jpg`, in lower case. They are sorted by path before the `MAX_IMAGES` limit is applied. A negative limit keeps all of them. Images are read as 8-bit RGB.

## Installation

```
pip install .
```

## Command-line use

```
imgsharpen-sequential INPUT_DIR OUTPUT_DIR MAX_IMAGES
imgsharpen-threaded INPUT_DIR OUTPUT_DIR NUM_THREADS MAX_IMAGES
imgsharpen-distributed [-n NUM_PROCESSES] INPUT_DIR OUTPUT_DIR MAX_IMAGES
```

`NUM_THREADS` and `-n/--processes` must be positive. `--processes` defaults to 2.

Example:

```
imgsharpen-threaded ./input ./output 4 100
```

Each command empties the output directory before it writes anything, or creates it if it does not exist.

How each command handles errors:

- **Missing input directory.** Every command prints an error.
  - `imgsharpen-sequential` exits with status 1.
  - `imgsharpen-threaded` exits with status 0.
  - `imgsharpen-distributed` exits with status 1.
- **`imgsharpen-sequential`:** an image that cannot be read is reported and skipped. An image that cannot be written is reported but still counted.
- **`imgsharpen-threaded`:** every listed file is counted, even one that fails to load or save.
- **`imgsharpen-distributed`:** any image that cannot be read or written stops the run with exit status 1.

## Library use

```python
from imgsharpen.kernel import apply_sharpening_filter
from imgsharpen.workspace import load_image, save_image, list_images, prepare_output_dir
from imgsharpen.sequential import run_sequential
from imgsharpen.threaded import run_threaded
from imgsharpen.distributed import run_distributed

image = load_image("input/photo.png")
save_image("photo_sharp.png", apply_sharpening_filter(image))

report = run_sequential("input", "output", 100)
report = run_threaded("input", "output", 4, 100)
report = run_distributed("input", "output", 2, 100)
print(report.file_count, report.total_time, report.sharpen_time, report.worker_sharpen_times)
```

`apply_sharpening_filter` accepts a `uint8` array of shape `(height, width)` or `(height, width, channels)`:

- It returns a new array of the same shape and leaves its input unchanged.
- Images narrower or shorter than 3 pixels are returned as an unchanged copy.
- Any other number of dimensions, or any other dtype, raises `ValueError`.

Module `imgsharpen.workspace` provides the following:

- `list_images(input_dir, max_images)`
- `prepare_output_dir(output_dir)`
- `load_image(path)` and `save_image(path, image)`. These raise `OSError` when a file cannot be read or written. When saving, the file format follows the file's suffix.
- `RunReport`, a dataclass with these fields:
  - `file_count`
  - `total_time`
  - `sharpen_time`
  - `worker_sharpen_times`, one entry per thread or worker
- `InputDirectoryError`, a subclass of `FileNotFoundError`. It is raised when the input directory does not exist or is not a directory.

`run_threaded` and `run_distributed` raise `ValueError` when the thread or worker count is below 1.

## Limitations

The distributed runner does not start separate operating-system processes and does not spread work across machines. Its workers are threads in a single Python process. It copies the round-robin split and the gathering of results, but not true multi-process execution.

## Running the tests

```
pip install ".[test]"
pytest
```