from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable

from swot_web.domain.models import Variant


@dataclass
class VariantAssigner:
    """
    Stateless 50/50 coin flip. There is no server-side table of who got what:
    a client that wants a sticky variant keeps the value and replays it.
    """
    random_source: Callable[[], float] = field(default=random.random)

    def assign(self) -> Variant:
        return Variant.A if self.random_source() < 0.5 else Variant.B
