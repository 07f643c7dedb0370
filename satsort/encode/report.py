from typing import Dict

from pydantic import BaseModel, Field

FAMILIES = ("input", "channel", "permutation", "order")

class EncodingReport(BaseModel):
    """Size of one generated sorting formula."""
    num_lines: int = Field(ge=0)
    width: int = Field(ge=0)
    num_vars: int = Field(default=0, ge=0)
    num_clauses: int = Field(default=0, ge=0)
    num_commanders: int = Field(default=0, ge=0)
    clauses_by_family: Dict[str, int] = Field(default_factory=lambda: {f: 0 for f in FAMILIES})

    def summary(self) -> str:
        parts = ", ".join(f"{k}={v}" for k, v in self.clauses_by_family.items())
        return (f"{self.num_lines} lines of {self.width} bits: "
                f"{self.num_vars} variables, {self.num_clauses} clauses ({parts})")
