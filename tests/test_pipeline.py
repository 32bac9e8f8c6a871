"""
Unit Tests for the Transform Pipeline and entry points
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging
from unittest.mock import MagicMock, patch

import polars as pl
import pytest
from pydantic import ValidationError
from src.main import main, run_checkpoint_cycle, run_transform
from src.orchestration.checkpoint import (
    CheckpointCoordinator,
    CheckpointException,
    LifecycleState,
)
from src.orchestration.pipeline import TransformPipeline, checkpoint_aware_transforms
from src.transformation.registry import (
    TransformRegistry,
    UnknownTransformError,
    create_default_registry,
)
from src.transformation.transformers import Reverse, Uppercase


def test_pipeline_registers_checkpoint_aware_transforms():
    registry = create_default_registry()
    coordinator = CheckpointCoordinator()

    TransformPipeline(registry, coordinator)

    assert coordinator.resources == (registry.get("uppercase"),)


def test_pipeline_registers_through_injected_coordinator():
    coordinator = MagicMock()
    registry = create_default_registry()

    TransformPipeline(registry, coordinator)

    coordinator.register.assert_called_once_with(registry.get("uppercase"))


def test_checkpoint_aware_transforms_filters_registry():
    registry = TransformRegistry()
    registry.register("reverse", Reverse())
    assert checkpoint_aware_transforms(registry) == []

    upper = Uppercase()
    registry.register("upper", upper)
    assert checkpoint_aware_transforms(registry) == [upper]


def test_run_returns_result():
    pipeline = TransformPipeline()

    result = pipeline.run("Uppercase", "straße")

    assert result.transform == "uppercase"
    assert result.output_text == "STRASSE"
    assert result.input_length == 6
    assert result.output_length == 7


def test_run_unknown_transform():
    with pytest.raises(UnknownTransformError):
        TransformPipeline().run("rot13", "abc")


def test_run_rejects_missing_text():
    with pytest.raises(ValidationError):
        TransformPipeline().run("reverse", None)


def test_run_batch_default_output_column():
    pipeline = TransformPipeline()
    df = pl.DataFrame({"text": ["abc", None]})

    result = pipeline.run_batch(df, "Reverse")

    assert result.columns == ["text", "text_reverse"]
    assert result["text_reverse"].to_list() == ["cba", None]


def test_apply_unchanged_across_checkpoint_cycle():
    pipeline = TransformPipeline()
    inputs = ["", "abc", "AbC123", "ß"]
    before = [pipeline.run("uppercase", t).output_text for t in inputs]

    pipeline.checkpoint()
    assert pipeline.get_status()["lifecycle_state"] == "checkpointed"
    pipeline.restore()

    assert [pipeline.run("uppercase", t).output_text for t in inputs] == before


def test_run_transform():
    assert run_transform("reverse", "ab") == "ba"
    assert run_transform("uppercase", "abc") == "ABC"


def test_run_checkpoint_cycle_status(caplog):
    caplog.set_level(logging.INFO)
    status = run_checkpoint_cycle()

    assert status["lifecycle_state"] == LifecycleState.RUNNING.value
    assert status["transforms"] == ["reverse", "uppercase"]
    assert status["checkpoint_resources"] == ["Uppercase()"]
    messages = [r.getMessage() for r in caplog.records]
    assert messages.count("Before checkpoint") == 1
    assert messages.count("After restore") == 1


@patch("src.coreutils.logging.setup_logging")
def test_main_run_command(mock_setup_logging, capsys):
    with patch.object(sys, "argv", ["main.py", "run", "--transform", "reverse", "abc"]):
        main()

    assert capsys.readouterr().out.strip() == "cba"
    mock_setup_logging.assert_called_once()


@patch("src.coreutils.logging.setup_logging")
def test_main_list_command(mock_setup_logging, capsys):
    with patch.object(sys, "argv", ["main.py", "list"]):
        main()

    assert capsys.readouterr().out.split() == ["reverse", "uppercase"]


class Shout:
    """Transform with apply() only, no name attribute"""

    def apply(self, text):
        return text + "!"


def test_run_batch_with_nameless_transform():
    registry = create_default_registry()
    registry.register("shout", Shout())
    pipeline = TransformPipeline(registry)
    df = pl.DataFrame({"text": ["a", "b"]})

    assert pipeline.run("shout", "a").output_text == "a!"
    result = pipeline.run_batch(df, "shout")

    assert result["text_shout"].to_list() == ["a!", "b!"]


class FailingBeforeCheckpoint:
    def before_checkpoint(self, context):
        raise RuntimeError("cannot snapshot")

    def after_restore(self, context):
        pass


def test_checkpoint_cycle_restores_after_failed_hook(caplog):
    caplog.set_level(logging.INFO)
    pipeline = TransformPipeline()
    pipeline.coordinator.register(FailingBeforeCheckpoint())

    with pytest.raises(CheckpointException):
        run_checkpoint_cycle(pipeline)

    assert pipeline.get_status()["lifecycle_state"] == "running"
    messages = [r.getMessage() for r in caplog.records]
    assert messages.count("Before checkpoint") == 1
    assert messages.count("After restore") == 1

    # The next cycle is not blocked by the previous failure
    with pytest.raises(CheckpointException):
        pipeline.checkpoint()
    assert pipeline.coordinator.state == LifecycleState.CHECKPOINTED
