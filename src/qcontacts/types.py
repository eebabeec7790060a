"""Type definitions for qcontacts."""

from __future__ import annotations

import numpy as np
from jaxtyping import Float, Int, Shaped

# Per-contact columns
ContactValues = Float[np.ndarray, "num_contacts"]  # NaN where unset
ContactNumbers = Int[np.ndarray, "num_contacts"]
ContactNames = Shaped[np.ndarray, "num_contacts"]

ContactTable = dict[str, np.ndarray]
