from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Transaction:
    id: int                 # epoch milliseconds at creation
    amount: float
    type: str               # 'income' | 'expense'
    category: str           # free text; see models.category for known labels
    date: str               # 'YYYY-MM-DD'
    color: str              # resolved once at creation

    def to_dict(self) -> dict:
        return asdict(self)
