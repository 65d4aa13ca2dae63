# renderer/raytracer.py
import queue
import sys
import threading
import time
from collections import namedtuple
from typing import Optional, TextIO
import numpy as np
from penumbra.renderer.shading import shade
from penumbra.renderer.image_io import write_image

# Render defaults
MAX_DEPTH = 10
WORKER_COUNT = 8

PixelTask = namedtuple("PixelTask", ["x", "y", "direction"])
PixelResult = namedtuple("PixelResult", ["x", "y", "color"])

class WorkerFailure:
    """Published on the results channel when a worker's shading call raised."""
    def __init__(self, task: PixelTask, error: BaseException):
        self.task = task
        self.error = error

class ProgressReporter:
    """
    Prints a progress line each time the number of collected pixels crosses
    a new whole percent of the total.
    """
    def __init__(self, total: int, stream: Optional[TextIO] = None):
        self.total = total
        self.stream = stream if stream is not None else sys.stderr
        self.start_time = time.perf_counter()
        self.last_percent = 0

    def elapsed(self) -> float:
        return time.perf_counter() - self.start_time

    def update(self, count: int):
        percent = count * 100 // self.total
        if percent > self.last_percent:
            self.last_percent = percent
            print(f"{percent}% done, {self.elapsed():.2f} s elapsed", file=self.stream)

    def finish(self):
        print(f"Rendered in {self.elapsed():.2f} s", file=self.stream)

def make_tasks(camera, width: int, height: int) -> "queue.Queue[PixelTask]":
    """
    Builds the full task queue, one task per pixel in raster order.
    """
    tasks = queue.Queue()
    for y in range(height):
        for x in range(width):
            tasks.put(PixelTask(x, y, camera.direction_for_pixel(x, y, width, height)))
    return tasks

def render_worker(scene, tasks: queue.Queue, results, max_depth: int,
                  stop: Optional[threading.Event] = None):
    """
    Shades tasks until the queue is empty or `stop` is set. Each result
    carries its own pixel coordinates, so results may be published in any
    order. A failing task sets `stop` so the other workers quit early.
    """
    while stop is None or not stop.is_set():
        try:
            task = tasks.get_nowait()
        except queue.Empty:
            return
        try:
            color = shade(scene, scene.camera.get_ray(task.direction), max_depth)
        except Exception as e:
            if stop is not None:
                stop.set()
            results.put(WorkerFailure(task, e))
            return
        results.put(PixelResult(task.x, task.y, color))

def collect(results, width: int, height: int,
            progress: Optional[ProgressReporter] = None) -> np.ndarray:
    """
    Drains exactly width * height results into a row-major (height, width, 3)
    float buffer. A WorkerFailure aborts the collection by re-raising the
    worker's exception.
    """
    buffer = np.zeros((height, width, 3), dtype=np.float64)
    total = width * height
    for count in range(1, total + 1):
        result = results.get()
        if isinstance(result, WorkerFailure):
            raise RuntimeError(
                f"Worker failed on pixel ({result.task.x}, {result.task.y})") from result.error
        buffer[result.y, result.x] = result.color.to_tuple()
        if progress is not None:
            progress.update(count)
    return buffer

class Renderer:
    """
    Renders a scene with a fixed pool of worker threads.

    The calling thread fills the task queue, starts the workers and then
    acts as the single collector; only it ever touches the pixel buffer.
    """
    def __init__(self, width: int, height: int, workers: int = WORKER_COUNT,
                 max_depth: int = MAX_DEPTH, stream: Optional[TextIO] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Resolution must be positive, got {width}x{height}")
        if workers <= 0:
            raise ValueError(f"Worker count must be positive, got {workers}")
        if max_depth < 0:
            raise ValueError(f"Max depth must be non-negative, got {max_depth}")
        self.width = width
        self.height = height
        self.workers = workers
        self.max_depth = max_depth
        self.stream = stream if stream is not None else sys.stderr

    def render(self, scene) -> np.ndarray:
        """
        Renders every pixel of `scene` and returns a (height, width, 3) buffer
        of colors in [0, 1].
        """
        scene.freeze()
        print("\n=== Rendering ===", file=self.stream)
        print(f"Resolution: {self.width}x{self.height}", file=self.stream)
        print(f"Workers: {self.workers}, max depth: {self.max_depth}", file=self.stream)
        print(f"Scene: {len(scene.objects)} objects, {len(scene.lights)} lights", file=self.stream)

        progress = ProgressReporter(self.width * self.height, self.stream)
        tasks = make_tasks(scene.camera, self.width, self.height)
        results = queue.SimpleQueue()
        stop = threading.Event()

        threads = [
            threading.Thread(target=render_worker,
                             args=(scene, tasks, results, self.max_depth, stop),
                             name=f"render-worker-{i}", daemon=True)
            for i in range(self.workers)
        ]
        for thread in threads:
            thread.start()

        try:
            buffer = collect(results, self.width, self.height, progress)
        except BaseException:
            stop.set()
            raise
        finally:
            # Workers exit on the empty queue or after their current pixel
            # once stop is set.
            for thread in threads:
                thread.join()

        progress.finish()
        return buffer

    def render_to_file(self, scene, path: str) -> np.ndarray:
        buffer = self.render(scene)
        write_image(buffer, path)
        print(f"Image written to {path}", file=self.stream)
        return buffer
