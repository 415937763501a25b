import logging

import numpy as np

from cableray import PointMassRobot, Ray, evaluate_ray
from cableray.logging_utils import debug_log_call, summarize


def test_summarize_reduces_large_arrays():
    values = np.arange(100.0)
    values[3] = np.nan

    text = summarize(values)

    assert "shape=(100,)" in text
    assert "max=99" in text
    assert "non_finite=1" in text


def test_summarize_small_arrays_and_sequences():
    assert "values=[1.0, 2.0]" in summarize(np.array([1.0, 2.0]))
    assert summarize([(0.0, 1.0)] * 8).endswith("... (+2)]")


def test_debug_log_call_traces_entry_and_exit(caplog):
    logger = logging.getLogger("cableray.tests.trace")

    @debug_log_call(logger)
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="cableray.tests.trace"):
        assert add(1, b=2) == 3

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "kwargs={b=2}" in message for message in messages)
    assert any(message.endswith("-> 3") for message in messages)


def test_evaluation_logs_summary_line(caplog):
    robot = PointMassRobot([(0.0, 0.0), (4.0, 0.0), (2.0, 3.0)])

    with caplog.at_level(logging.INFO, logger="cableray.workspace.conditions"):
        evaluate_ray(robot, Ray(0, (1.0, 3.0), (1.0,)))

    assert any("fully restrained" in record.getMessage() for record in caplog.records)
