"""
Orchestration Layer - Workflow Coordination

This layer wires transforms to the checkpoint/restore lifecycle.
- Coordinator for checkpoint/restore notifications
- Pipeline composing registry lookups and transform runs
- No text logic of its own
"""
