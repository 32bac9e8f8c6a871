"""
Main Entry Point - Text Transforms

Provides simple interfaces to run a transform or drive a checkpoint/restore
cycle against the default pipeline.
"""

import sys
import os
from typing import Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.orchestration.checkpoint import LifecycleState
from src.orchestration.pipeline import TransformPipeline
import logging

logger = logging.getLogger(__name__)


def run_transform(
    name: str, text: str, pipeline: Optional[TransformPipeline] = None
) -> str:
    """
    Run a single transform

    Args:
        name: "reverse", "uppercase" or any name registered on the pipeline
        text: Input text

    Returns:
        str: Transformed text
    """
    pipeline = pipeline or TransformPipeline()
    logger.info(f"🚀 Running {name} transform")
    return pipeline.run(name, text).output_text


def run_checkpoint_cycle(pipeline: Optional[TransformPipeline] = None) -> dict:
    """
    Notify registered components of a checkpoint, then of a restore

    Returns:
        dict: Pipeline status after the restore
    """
    pipeline = pipeline or TransformPipeline()

    try:
        try:
            pipeline.checkpoint()
        finally:
            # Restore runs even when a before_checkpoint hook failed
            if pipeline.coordinator.state is LifecycleState.CHECKPOINTED:
                pipeline.restore()
    except Exception as e:
        logger.error(f"❌ Checkpoint cycle failed: {e}")
        raise

    logger.info("✅ Checkpoint cycle completed")
    return pipeline.get_status()


def main():
    """Main entry point"""
    import argparse
    from src.coreutils.logging import setup_logging

    parser = argparse.ArgumentParser(description="Text Transforms")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Apply a transform to text")
    run_parser.add_argument("--transform", required=True, help="Transform name")
    run_parser.add_argument("text", help="Input text")

    subparsers.add_parser("checkpoint-cycle", help="Simulate checkpoint and restore")
    subparsers.add_parser("list", help="List available transforms")

    args = parser.parse_args()
    setup_logging()

    pipeline = TransformPipeline()

    if args.command == "run":
        print(run_transform(args.transform, args.text, pipeline))

    elif args.command == "checkpoint-cycle":
        status = run_checkpoint_cycle(pipeline)
        print(f"✅ Checkpoint cycle completed: {status}")

    elif args.command == "list":
        for name in pipeline.registry.names():
            print(name)


if __name__ == "__main__":
    main()
