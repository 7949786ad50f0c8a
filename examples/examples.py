"""Examples demonstrating single, nested and spinning progress indicators"""

import sys
import time
import random

from tickbar import (
    progress,
    Bar,
    BarWidget,
    LineLayout,
    Spinner,
)


def example_0():
    print("=== Example 0: Single bar with a fixed width ===")

    total = 100
    bar = Bar(total, columns=100, description="[TASK0]")
    bar.init()  # not always necessary
    for i in range(total):
        time.sleep(0.01)
        bar += 1
    bar.close()
    print("done!")


def example_1():
    print("=== Example 1: Nested bars stacked on their own rows ===")

    with Bar(4, description="[TASK1]") as bar1:
        bar2 = Bar(8, description="[TASK2]", stack=True)
        bar3 = Bar(16, description="[TASK3]", stack=True)

        bar1.enable_recalc_console_width(10)  # check console width every 10 ticks

        bar1.init()
        for i in range(4):
            bar2.init()
            for j in range(8):
                bar3.init()
                for k in range(16):
                    time.sleep(0.01)
                    bar3.tick()
                time.sleep(0.05)
                bar2.tick()
            time.sleep(0.1)
            bar1.tick()
    print("done!")


def example_2():
    print("=== Example 2: Wrapping an iterable ===")

    for item in progress(range(1, 200 + 1), description="Processing items"):
        time.sleep(0.01)


def example_3():
    print("=== Example 3: Messages and warnings between frames ===")

    with Bar(50, description="Downloading") as bar:
        for i in range(1, 50 + 1):
            time.sleep(0.03)
            if i % 10 == 0:
                bar.write(f"Checkpoint {i}\n")
            if i == 25:
                bar.warn("Slow mirror, retrying\n")
            bar.tick()


def example_4():
    print("=== Example 4: Custom glyphs, no time statistics ===")

    layout = LineLayout(BarWidget(char_start_bracket='[', char_end_bracket=']', char_complete='#', char_incomplete='.'))
    with Bar(60, description="ASCII", layout=layout, time_measurement=False, leave=False) as bar:
        for i in range(60):
            time.sleep(0.02)
            bar.tick()
    print("cleared on completion")


def example_5():
    print("=== Example 5: Spinner ===")

    spinner = Spinner("Waiting for the build", interval=0.1)
    spinner.start()
    for i in range(1, 5 + 1):
        time.sleep(random.uniform(0.2, 0.5))
        spinner.write(f"Step {i} finished\n")
    spinner.warn("Cache miss\n")
    time.sleep(0.5)
    spinner.ok()

    spinner = Spinner("Uploading artifacts", interval=0.1)
    with spinner:
        time.sleep(1)
    spinner.err()


if __name__ == "__main__":
    import logging

    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    for i in range(0, 5 + 1):
        if i != 0:
            time.sleep(1)
        globals()[f"example_{i}"]()
