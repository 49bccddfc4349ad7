"""Testing generators – Hypothesis strategies for loader inputs."""
from redis_dataloader.testing.generators.strategies import key_batch_strategy

__all__ = ["key_batch_strategy"]
