"""Application layer – cache primitives and the batched loader."""
