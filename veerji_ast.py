from dataclasses import dataclass, field

class Statement:
    """Base of every Veerji statement kind."""

@dataclass
class PrintStatement(Statement):
    value: str

@dataclass
class Program:
    statements: list = field(default_factory=list)

    def append(self, statement):
        if not isinstance(statement, Statement):
            raise TypeError(f"Not a statement: {type(statement).__name__}")
        self.statements.append(statement)

    @property
    def count(self):
        return len(self.statements)

    def __len__(self):
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)
