"""Tests for producer module."""

import threading

import pytest

from threaded_generator.config import GeneratorConfig
from threaded_generator.errors import IllegalReuseError
from threaded_generator.handoff import HandoffChannel
from threaded_generator.producer import ProducerExecutionContext


def test_start_does_no_work_before_demand():
    """Test that the routine does not run until an item is requested."""
    calls = []
    context = ProducerExecutionContext(lambda y: calls.append(y), HandoffChannel())

    context.start()
    context.thread.join(0.1)

    assert context.is_alive()
    assert calls == []
    context.cancel()
    assert not context.is_alive()
    assert calls == []


def test_start_twice_raises():
    """Test that starting the same context twice is an error."""
    context = ProducerExecutionContext(lambda y: None, HandoffChannel())
    context.start()
    try:
        with pytest.raises(IllegalReuseError):
            context.start()
    finally:
        context.cancel()


def test_cancel_before_start():
    """Test that cancel() is safe before start and prevents a later start."""
    context = ProducerExecutionContext(lambda y: None, HandoffChannel())

    context.cancel()

    assert not context.started
    with pytest.raises(IllegalReuseError):
        context.start()


def test_normal_return_finishes_channel():
    """Test that a routine returning normally marks the channel finished."""
    channel = HandoffChannel()
    context = ProducerExecutionContext(lambda y: None, channel)
    context.start()

    channel.item_requested.set()
    channel.item_available.wait()
    context.cancel()

    assert channel.finished
    assert channel.failure is None
    assert not channel.has_value


def test_failure_is_captured():
    """Test that an exception raised by the routine is stored on the channel."""
    error = KeyError("missing")

    def failing(y):
        raise error

    channel = HandoffChannel()
    context = ProducerExecutionContext(failing, channel)
    context.start()
    channel.item_requested.set()
    channel.item_available.wait()
    context.cancel()

    assert channel.finished
    assert channel.failure is error


def test_cancel_while_suspended_in_publish():
    """Test that cancel() terminates a producer blocked in publish()."""
    channel = HandoffChannel()
    published = []

    def forever(y):
        n = 0
        while True:
            published.append(n)
            y.publish(n)
            n += 1

    context = ProducerExecutionContext(forever, channel)
    context.start()
    channel.item_requested.set()
    channel.item_available.wait()

    context.cancel()

    assert not context.is_alive()
    assert published == [0]
    assert channel.failure is None


def test_cancel_is_idempotent():
    """Test that cancel() may be called repeatedly."""
    context = ProducerExecutionContext(lambda y: None, HandoffChannel())
    context.start()

    context.cancel()
    context.cancel()

    assert not context.is_alive()


def test_thread_uses_config():
    """Test that the thread name prefix and daemon flag come from config."""
    config = GeneratorConfig(thread_name_prefix="producer-test", daemon=False)
    context = ProducerExecutionContext(lambda y: None, HandoffChannel(), config)
    context.start()
    try:
        assert context.thread.name.startswith("producer-test-")
        assert not context.thread.daemon
    finally:
        context.cancel()


def test_cancel_from_producer_thread_does_not_join():
    """Test that a routine cancelling its own context does not deadlock."""
    channel = HandoffChannel()
    holder = []

    def self_cancelling(y):
        holder[0].cancel()
        y.publish("never seen")

    context = ProducerExecutionContext(self_cancelling, channel)
    holder.append(context)
    context.start()
    channel.item_requested.set()
    context.thread.join(5)

    assert not context.is_alive()
    assert channel.finished
    assert not channel.has_value
    assert threading.current_thread() is not context.thread
