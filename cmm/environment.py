from typing import Dict, Optional, Tuple

from cmm.values import Value


class Environment:
    """Flat mapping from variable names to values.

    A program runs against a single environment; blocks, ``if`` and
    ``while`` do not open new scopes.
    """
    def __init__(self):
        # a name may be bound to None when its right-hand side had no value
        self.values: Dict[str, Optional[Value]] = {}

    def get(self, name: str) -> Tuple[Optional[Value], bool]:
        if name in self.values:
            return self.values[name], True
        return None, False

    def set(self, name: str, value: Optional[Value]):
        self.values[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __repr__(self) -> str:
        inner = ', '.join(
            f"{k}={'nil' if v is None else v.inspect()}" for k, v in self.values.items()
        )
        return f"Environment({inner})"
