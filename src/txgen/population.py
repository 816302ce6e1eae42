"""Client population model: mint a new client id or reuse an existing one."""

from __future__ import annotations

from dataclasses import dataclass

from txgen.random_source import RandomSource


@dataclass
class ClientPopulation:
    """
    Growing set of client ids. max_client_id is the highest id introduced so far
    (0 before any client is minted, so the first new id is 1); client_id is the
    id handed out most recently.
    """

    max_client_id: int = 0
    client_id: int = 0
    p_new: float = 0.75

    def next_client_id(self, rng: RandomSource) -> int:
        """New id max_client_id + 1 with probability p_new, else uniform over [0, max_client_id)."""
        if rng.random() < self.p_new:
            self.max_client_id += 1
            self.client_id = self.max_client_id
        elif self.max_client_id > 0:
            self.client_id = rng.randrange(self.max_client_id)
        else:
            # Nothing minted yet: [0, 0) is empty, fall back to id 0.
            self.client_id = 0
        return self.client_id
