from __future__ import annotations

from .numeric import (
    ElementType,
    INT,
    FLOAT,
    FLOAT32,
    element_type,
)
from .vector import (
    Vector2,
    Vector2i,
    Vector2d,
    Vector2f,
    vector_type,
)
from .config import Config
