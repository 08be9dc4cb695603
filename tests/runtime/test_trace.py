"""Tests for trace sinks."""

from __future__ import annotations

import logging

from podracer.runtime.trace import LoggingTraceSink, NullTraceSink, TraceEvent


def _event(**kwargs) -> TraceEvent:
    defaults = dict(
        tick=3,
        pod=1,
        position=(100.0, 200.0),
        velocity=(10.0, 0.0),
        checkpoint=(1000, 0),
        checkpoint_index=2,
        aim_reason="lead",
        target=(1000, 20),
        distance=905.5,
        heading_error=4.0,
        curvature=None,
        speed=10.0,
        thrust=100,
        boost=False,
    )
    defaults.update(kwargs)
    return TraceEvent(**defaults)


def test_null_sink_records_events():
    sink = NullTraceSink()
    sink.emit(_event())
    sink.emit(_event(tick=4))
    assert [e.tick for e in sink.events] == [3, 4]


def test_logging_sink_writes_debug_record(caplog):
    caplog.set_level(logging.DEBUG, logger="podracer.runtime.trace")
    LoggingTraceSink().emit(_event(boost=True, curvature=-35.3))

    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert "tick=3 pod=1" in message
    assert "curve=-35.3" in message
    assert "thrust=BOOST" in message


def test_logging_sink_silent_above_debug(caplog):
    caplog.set_level(logging.INFO, logger="podracer.runtime.trace")
    LoggingTraceSink().emit(_event())
    assert caplog.records == []


def test_event_to_dict():
    data = _event().to_dict()
    assert data["aim_reason"] == "lead"
    assert data["target"] == (1000, 20)
