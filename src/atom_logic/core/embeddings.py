"""
Atom Embedding Table

Mathematical basis:
    Every atom slot i owns a row e_i ∈ R^d of a single table E ∈ R^(capacity×d).
    Rows are seeded uniformly:
        E[i, k] ~ U(-1, 1)

Slot i is bound to the i-th atom inserted into the AtomSpace, so nodes and
links share one numbering. Rows are never freed individually; the whole
table is released when the store is freed.

The seed is not fixed, so callers must not rely on the initial values.
"""

import torch
import torch.nn as nn
import numpy as np
from typing import Sequence, Union


class AtomEmbedding(nn.Module):
    """
    Fixed-size embedding table, one row per atom slot.

    Supports:
        - Lookup by slot index (single or batched)
        - Raw float read/write of a single slot
    """

    def __init__(
        self,
        capacity: int,
        embedding_dim: int,
        device: torch.device = None,
    ):
        super().__init__()
        self.capacity = capacity
        self.embedding_dim = embedding_dim

        # Rows are storage, not trainable parameters
        self.weight = nn.Parameter(
            torch.empty(capacity, embedding_dim, device=device),
            requires_grad=False,
        )
        self._init_weights()

    def _init_weights(self):
        """Uniform initialization over [-1, 1]."""
        nn.init.uniform_(self.weight, -1.0, 1.0)

    def forward(self, indices: torch.Tensor) -> torch.Tensor:
        """
        Look up embeddings for given slots.

        Args:
            indices: [batch_size] slot indices

        Returns:
            embeddings: [batch_size, d]
        """
        return nn.functional.embedding(indices, self.weight)

    def read(self, index: int) -> np.ndarray:
        """
        Copy one slot out as raw floats.

        Args:
            index: Slot index

        Returns:
            [d] float32 array (detached copy)
        """
        self._check_index(index)
        return self.weight[index].detach().cpu().numpy().copy()

    def write(self, index: int, values: Union[Sequence[float], np.ndarray, torch.Tensor]):
        """
        Overwrite one slot with raw floats.

        Args:
            index: Slot index
            values: d floats
        """
        self._check_index(index)
        row = torch.as_tensor(np.asarray(values, dtype=np.float32)).flatten()
        if row.shape[0] != self.embedding_dim:
            raise ValueError(
                f"Embedding width mismatch: expected {self.embedding_dim}, got {row.shape[0]}"
            )
        with torch.no_grad():
            self.weight[index].copy_(row.to(self.weight.device))

    def _check_index(self, index: int):
        if not 0 <= index < self.capacity:
            raise IndexError(f"Embedding slot {index} out of range [0, {self.capacity})")
